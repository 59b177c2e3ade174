"""Shared type aliases for the core and domain layers."""
from typing import Literal

Outcome = Literal["wizard", "boss"]
TextDisplayMode = Literal["instant", "step"]

__all__ = ["Outcome", "TextDisplayMode"]
