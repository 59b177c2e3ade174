from __future__ import annotations

import pytest

from wizard_rpg.domain.battle_models import BattleState, Boss, Wizard
from wizard_rpg.domain.spells import Spell


def test_default_combatant_stats() -> None:
    wizard = Wizard()
    boss = Boss()

    assert (wizard.hitpoints, wizard.mana, wizard.armor) == (50, 500, 0)
    assert wizard.shielded is None and wizard.recharging is None
    assert (boss.hitpoints, boss.damage, boss.poisoned) == (55, 8, None)


def test_magic_missile_spends_mana_and_hits_boss() -> None:
    wizard = Wizard(mana=100)
    boss = Boss(hitpoints=10)

    wizard.cast_magic_missile(boss)

    assert wizard.mana == 47
    assert boss.hitpoints == 6


def test_drain_moves_hitpoints_from_boss_to_wizard() -> None:
    wizard = Wizard(hitpoints=10, mana=100)
    boss = Boss(hitpoints=10)

    wizard.cast_drain(boss)

    assert wizard.mana == 27
    assert wizard.hitpoints == 12
    assert boss.hitpoints == 8


def test_shield_sets_timer_and_armor() -> None:
    wizard = Wizard(mana=200)

    wizard.cast_shield()

    assert wizard.mana == 87
    assert wizard.shielded == 6
    assert wizard.armor == 7


def test_shield_expires_after_six_ticks() -> None:
    wizard = Wizard(mana=200)
    wizard.cast_shield()

    for _ in range(5):
        wizard.apply_effect()
    assert wizard.shielded == 1
    assert wizard.armor == 7

    wizard.apply_effect()
    assert wizard.shielded is None
    assert wizard.armor == 0


def test_recharge_adds_mana_for_five_ticks() -> None:
    wizard = Wizard(mana=229)
    wizard.cast_recharge()
    assert wizard.mana == 0
    assert wizard.recharging == 5

    for tick in range(1, 5):
        wizard.apply_effect()
        assert wizard.mana == 101 * tick
    assert wizard.recharging == 1

    wizard.apply_effect()
    assert wizard.mana == 505
    assert wizard.recharging is None

    wizard.apply_effect()
    assert wizard.mana == 505


def test_recharge_tick_ignores_current_mana() -> None:
    wizard = Wizard(mana=-50, recharging=3)

    wizard.apply_effect()

    assert wizard.mana == 51
    assert wizard.recharging == 2


def test_poison_ticks_three_damage_for_six_turns() -> None:
    wizard = Wizard(mana=200)
    boss = Boss(hitpoints=20)
    wizard.cast_poison(boss)
    assert wizard.mana == 27
    assert boss.poisoned == 6

    for tick in range(1, 7):
        boss.apply_effect()
        assert boss.hitpoints == 20 - 3 * tick
    assert boss.poisoned is None

    boss.apply_effect()
    assert boss.hitpoints == 2


def test_shield_on_shield_is_an_assertion_failure() -> None:
    wizard = Wizard(mana=500, shielded=3, armor=7)

    with pytest.raises(AssertionError):
        wizard.cast_shield()


def test_poison_on_poison_is_an_assertion_failure() -> None:
    wizard = Wizard(mana=500)
    boss = Boss(poisoned=4)

    with pytest.raises(AssertionError):
        wizard.cast_poison(boss)
    assert boss.poisoned == 4


def test_recharge_on_recharge_is_an_assertion_failure() -> None:
    wizard = Wizard(mana=500, recharging=2)

    with pytest.raises(AssertionError):
        wizard.cast_recharge()


def test_boss_attack_without_armor_deals_full_damage() -> None:
    wizard = Wizard(hitpoints=10)
    boss = Boss(damage=8)

    dealt = boss.attack(wizard)

    assert dealt == 8
    assert wizard.hitpoints == 2


@pytest.mark.parametrize("damage", [8, 7, 3])
def test_boss_attack_against_shield_deals_at_least_one(damage: int) -> None:
    wizard = Wizard(hitpoints=10, armor=7, shielded=4)
    boss = Boss(damage=damage)

    dealt = boss.attack(wizard)

    assert dealt == max(1, damage - 7)
    assert wizard.hitpoints == 10 - dealt


def test_hitpoints_are_not_clamped() -> None:
    wizard = Wizard(hitpoints=3)

    Boss(damage=8).attack(wizard)

    assert wizard.hitpoints == -5


def test_cast_dispatches_to_matching_primitive() -> None:
    wizard = Wizard(hitpoints=10, mana=500)
    boss = Boss(hitpoints=30)

    wizard.cast(Spell.DRAIN, boss)
    wizard.cast(Spell.POISON, boss)

    assert wizard.hitpoints == 12
    assert boss.hitpoints == 28
    assert boss.poisoned == 6
    assert wizard.mana == 500 - 73 - 173


def test_update_possible_spells_caches_legal_set() -> None:
    wizard = Wizard(mana=100)
    boss = Boss()

    wizard.update_possible_spells(boss)

    assert wizard.possible_spells == frozenset({Spell.MAGIC_MISSILE, Spell.DRAIN})
    assert wizard.can_cast(Spell.DRAIN)
    assert not wizard.can_cast(Spell.SHIELD)


def test_battle_state_tracks_outcome() -> None:
    battle_state = BattleState(wizard=Wizard(), boss=Boss())

    assert battle_state.is_over is False
    battle_state.outcome = "boss"
    assert battle_state.is_over is True
