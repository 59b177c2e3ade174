"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List

from wizard_rpg.core.types import Outcome
from wizard_rpg.domain.effects import (
    DRAIN_AMOUNT,
    MAGIC_MISSILE_DAMAGE,
    POISON_DAMAGE,
    POISON_DURATION,
    RECHARGE_DURATION,
    RECHARGE_MANA,
    SHIELD_ARMOR,
    SHIELD_DURATION,
    compute_boss_damage,
    legal_spells,
)
from wizard_rpg.domain.spells import Spell

DEFAULT_WIZARD_HITPOINTS = 50
DEFAULT_WIZARD_MANA = 500
DEFAULT_BOSS_HITPOINTS = 55
DEFAULT_BOSS_DAMAGE = 8


@dataclass(slots=True)
class Boss:
    """The monster opposing the wizard."""

    hitpoints: int = DEFAULT_BOSS_HITPOINTS
    damage: int = DEFAULT_BOSS_DAMAGE
    poisoned: int | None = None  # turns of poison left

    def attack(self, wizard: Wizard) -> int:
        dealt = compute_boss_damage(self.damage, wizard.armor)
        wizard.hitpoints -= dealt
        return dealt

    def apply_effect(self) -> None:
        if self.poisoned is not None:
            self.hitpoints -= POISON_DAMAGE
            self.poisoned -= 1
            if self.poisoned == 0:
                self.poisoned = None


@dataclass(slots=True)
class Wizard:
    """
    The player-controlled spellcaster.

    Cast primitives assume the spell was already checked against
    ``possible_spells``. Re-applying an active shield, poison or recharge is
    a caller bug and fails an assertion.
    """

    hitpoints: int = DEFAULT_WIZARD_HITPOINTS
    mana: int = DEFAULT_WIZARD_MANA
    armor: int = 0
    shielded: int | None = None
    recharging: int | None = None
    possible_spells: FrozenSet[Spell] = frozenset()

    def cast(self, spell: Spell, boss: Boss) -> None:
        if spell is Spell.MAGIC_MISSILE:
            self.cast_magic_missile(boss)
        elif spell is Spell.DRAIN:
            self.cast_drain(boss)
        elif spell is Spell.SHIELD:
            self.cast_shield()
        elif spell is Spell.POISON:
            self.cast_poison(boss)
        elif spell is Spell.RECHARGE:
            self.cast_recharge()
        else:
            raise ValueError(f"Unknown spell: {spell!r}")

    def cast_magic_missile(self, boss: Boss) -> None:
        self.mana -= Spell.MAGIC_MISSILE.cost
        boss.hitpoints -= MAGIC_MISSILE_DAMAGE

    def cast_drain(self, boss: Boss) -> None:
        self.mana -= Spell.DRAIN.cost
        boss.hitpoints -= DRAIN_AMOUNT
        self.hitpoints += DRAIN_AMOUNT

    def cast_shield(self) -> None:
        self.mana -= Spell.SHIELD.cost
        assert self.shielded is None, "Cannot shield with an existing shield"
        self.shielded = SHIELD_DURATION
        self.armor = SHIELD_ARMOR

    def cast_poison(self, boss: Boss) -> None:
        self.mana -= Spell.POISON.cost
        assert boss.poisoned is None, "Cannot poison with an existing poison"
        boss.poisoned = POISON_DURATION

    def cast_recharge(self) -> None:
        self.mana -= Spell.RECHARGE.cost
        assert self.recharging is None, "Cannot recharge while already recharging"
        self.recharging = RECHARGE_DURATION

    def apply_effect(self) -> None:
        if self.shielded is not None:
            self.shielded -= 1
            if self.shielded == 0:
                self.shielded = None
                self.armor = 0
        if self.recharging is not None:
            self.mana += RECHARGE_MANA
            self.recharging -= 1
            if self.recharging == 0:
                self.recharging = None

    def update_possible_spells(self, boss: Boss) -> None:
        self.possible_spells = legal_spells(self, boss)

    def can_cast(self, spell: Spell) -> bool:
        return spell in self.possible_spells


@dataclass(slots=True)
class BattleState:
    """Tracks the state of an ongoing battle."""

    wizard: Wizard
    boss: Boss
    hard_mode: bool = False
    mana_used: int = 0
    spells_used: List[Spell] = field(default_factory=list)
    outcome: Outcome | None = None

    @property
    def is_over(self) -> bool:
        return self.outcome is not None
