"""Spell catalog: costs and display names."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class SpellDef:
    """Static data for a castable spell."""

    name: str
    mana_cost: int


class Spell(Enum):
    """Spells available to the wizard."""

    MAGIC_MISSILE = "magic_missile"
    DRAIN = "drain"
    SHIELD = "shield"
    POISON = "poison"
    RECHARGE = "recharge"

    @property
    def cost(self) -> int:
        return _SPELL_DEFS[self].mana_cost

    @property
    def display_name(self) -> str:
        return _SPELL_DEFS[self].name


_SPELL_DEFS: Dict[Spell, SpellDef] = {
    Spell.MAGIC_MISSILE: SpellDef(name="Magic Missile", mana_cost=53),
    Spell.DRAIN: SpellDef(name="Drain", mana_cost=73),
    Spell.SHIELD: SpellDef(name="Shield", mana_cost=113),
    Spell.POISON: SpellDef(name="Poison", mana_cost=173),
    Spell.RECHARGE: SpellDef(name="Recharge", mana_cost=229),
}

# Order of the spell menu presented to the player.
SPELL_ORDER: Tuple[Spell, ...] = (
    Spell.MAGIC_MISSILE,
    Spell.DRAIN,
    Spell.POISON,
    Spell.SHIELD,
    Spell.RECHARGE,
)


def get_spell_def(spell: Spell) -> SpellDef:
    """Return the static definition for ``spell``."""
    return _SPELL_DEFS[spell]


__all__ = ["Spell", "SpellDef", "SPELL_ORDER", "get_spell_def"]
