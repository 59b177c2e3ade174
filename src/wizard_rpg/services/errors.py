"""Service-layer exceptions."""
from __future__ import annotations

from wizard_rpg.domain.spells import Spell


class BattleError(Exception):
    """Base class for recoverable battle failures."""


class SpellUnavailableError(BattleError):
    """Raised when the chosen spell is not currently castable."""

    def __init__(self, spell: Spell) -> None:
        super().__init__(f"Cannot cast {spell.display_name} right now.")
        self.spell = spell
