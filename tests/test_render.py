"""Tests for CLI rendering utilities."""
from __future__ import annotations

from typing import List

from wizard_rpg.domain.spells import Spell
from wizard_rpg.presentation.cli.render import (
    STEP_DELAY_SECONDS,
    format_boss_panel,
    format_event,
    format_wizard_panel,
    render_events,
    render_spell_menu,
)
from wizard_rpg.services.battle_service import BattleService
from wizard_rpg.services.controllers.battle_controller import (
    BattleResolvedEvent,
    BossAttackEvent,
    ShieldFadedEvent,
    SpellCastEvent,
    SpellRejectedEvent,
    TurnStartedEvent,
)


def test_format_turn_headers() -> None:
    assert format_event(TurnStartedEvent(actor="wizard")) == ["Wizard's turn:"]
    assert format_event(TurnStartedEvent(actor="boss")) == ["Boss' turn:"]


def test_format_boss_attack_full_and_resisted() -> None:
    full = BossAttackEvent(damage=8, hitpoints_before=50, hitpoints_after=42, resisted=False)
    resisted = BossAttackEvent(damage=1, hitpoints_before=42, hitpoints_after=41, resisted=True)

    assert format_event(full) == ["Boss attacks", "Wizard receives 8 damage (50 -> 42)"]
    assert format_event(resisted) == ["Boss attacks", "Wizard resists attack (42 -> 41)"]


def test_format_shield_fade_shows_signed_difference() -> None:
    event = ShieldFadedEvent(armor_before=7, armor_after=0)

    assert format_event(event) == ["Wizard's shield fades -7 armor (7 -> 0)"]


def test_format_cast_rejection_and_outcomes() -> None:
    assert format_event(SpellCastEvent(spell=Spell.MAGIC_MISSILE)) == ["Wizard casts Magic Missile"]
    assert format_event(SpellRejectedEvent(spell=Spell.POISON)) == ["You cannot cast that spell!"]
    assert format_event(BattleResolvedEvent(outcome="wizard")) == ["Glory! Magic has defeated the enemy!"]
    assert format_event(BattleResolvedEvent(outcome="boss")) == ["Grief... Evil has consumed the wizard..."]


def test_render_events_instant_mode_never_sleeps(capsys) -> None:
    delays: List[float] = []

    render_events([SpellCastEvent(spell=Spell.DRAIN)], mode="instant", sleep=delays.append)

    assert capsys.readouterr().out == "Wizard casts Drain\n"
    assert delays == []


def test_render_events_step_mode_pauses_per_line(capsys) -> None:
    delays: List[float] = []
    events = [
        TurnStartedEvent(actor="boss"),
        BossAttackEvent(damage=8, hitpoints_before=50, hitpoints_after=42, resisted=False),
    ]

    render_events(events, mode="step", sleep=delays.append)

    output = capsys.readouterr().out
    assert output.splitlines() == ["", "Boss' turn:", "Boss attacks", "Wizard receives 8 damage (50 -> 42)"]
    assert delays == [STEP_DELAY_SECONDS] * 3


def test_panels_list_effects_and_history() -> None:
    service = BattleService()
    battle_state = service.start_battle()
    service.wizard_turn_cast_spell(battle_state, Spell.SHIELD)
    battle_state.boss.poisoned = 4
    view = service.get_battle_view(battle_state)

    wizard_lines = format_wizard_panel(view)
    boss_lines = format_boss_panel(view)

    assert "Armor: 7" in wizard_lines
    assert "Total Mana Used: 113" in wizard_lines
    assert "- Shielded: 6 turns left" in wizard_lines
    assert "1. Shield (-113 mana)" in wizard_lines
    assert "- Poisoned: 4 turns left" in boss_lines


def test_render_spell_menu_marks_unavailable(capsys) -> None:
    render_spell_menu([(Spell.MAGIC_MISSILE, True), (Spell.RECHARGE, False)])

    output = capsys.readouterr().out
    assert "1. Magic Missile: 53 Mana\n" in output
    assert "2. Recharge: 229 Mana (unavailable)" in output
