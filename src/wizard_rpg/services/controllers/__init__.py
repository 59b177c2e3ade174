"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .battle_controller import BattleController, BattleEvent

__all__ = [
    "BattleController",
    "BattleEvent",
]
