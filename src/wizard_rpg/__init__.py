"""Deterministic wizard versus boss battle simulation."""

__version__ = "0.1.0"
