"""Timed effect constants and the pure rules derived from them."""
from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Optional

from wizard_rpg.domain.spells import Spell

if TYPE_CHECKING:
    from wizard_rpg.domain.battle_models import Boss, Wizard

SHIELD_DURATION = 6
SHIELD_ARMOR = 7
POISON_DURATION = 6
POISON_DAMAGE = 3
RECHARGE_DURATION = 5
RECHARGE_MANA = 101

MAGIC_MISSILE_DAMAGE = 4
DRAIN_AMOUNT = 2
HARD_MODE_DRAIN = 1
MINIMUM_BOSS_DAMAGE = 1


def compute_boss_damage(damage: int, armor: int) -> int:
    """Return the hitpoints a boss hit removes through the given armor."""
    return max(MINIMUM_BOSS_DAMAGE, damage - armor)


def _slot_free(timer: Optional[int]) -> bool:
    # An effect on its last tick expires before the next cast lands.
    return timer is None or timer == 1


def legal_spells(wizard: Wizard, boss: Boss) -> FrozenSet[Spell]:
    """
    Return the spells the wizard may cast given the current state.

    A spell needs enough mana. Shield, Poison and Recharge additionally need
    their effect to be absent or on its final tick.
    """

    exclusive_timers = {
        Spell.SHIELD: wizard.shielded,
        Spell.POISON: boss.poisoned,
        Spell.RECHARGE: wizard.recharging,
    }
    legal = set()
    for spell in Spell:
        if wizard.mana < spell.cost:
            continue
        if spell in exclusive_timers and not _slot_free(exclusive_timers[spell]):
            continue
        legal.add(spell)
    return frozenset(legal)
