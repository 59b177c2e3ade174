"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import time
from typing import Callable, Iterable, List, Sequence

from wizard_rpg.core.types import Outcome, TextDisplayMode
from wizard_rpg.domain.spells import Spell
from wizard_rpg.services.battle_service import BattleView
from wizard_rpg.services.controllers.battle_controller import (
    ArmorGainedEvent,
    BattleEvent,
    BattleResolvedEvent,
    BossAttackEvent,
    BossDamagedEvent,
    HitpointsRegeneratedEvent,
    ManaRechargedEvent,
    ManaSpentEvent,
    PoisonDamageEvent,
    SelfDamageEvent,
    ShieldFadedEvent,
    SpellCastEvent,
    SpellRejectedEvent,
    TurnStartedEvent,
)

STEP_DELAY_SECONDS = 0.4

_OUTCOME_BANNERS = {
    "wizard": "Glory! Magic has defeated the enemy!",
    "boss": "Grief... Evil has consumed the wizard...",
}


def debug_enabled() -> bool:
    """Return True only when WIZARD_RPG_DEBUG is explicitly set to '1'."""
    return os.getenv("WIZARD_RPG_DEBUG") == "1"


def outcome_banner(outcome: Outcome) -> str:
    return _OUTCOME_BANNERS[outcome]


def format_event(event: BattleEvent) -> List[str]:
    """Return the display lines for a single battle event."""
    if isinstance(event, TurnStartedEvent):
        return ["Wizard's turn:" if event.actor == "wizard" else "Boss' turn:"]
    if isinstance(event, SelfDamageEvent):
        return [f"Wizard's magic fades (hitpoints: {event.hitpoints_before} -> {event.hitpoints_after})"]
    if isinstance(event, ShieldFadedEvent):
        diff = event.armor_after - event.armor_before
        return [f"Wizard's shield fades {diff} armor ({event.armor_before} -> {event.armor_after})"]
    if isinstance(event, ManaRechargedEvent):
        return [f"Wizard recharges {event.amount} mana ({event.mana_before} -> {event.mana_after})"]
    if isinstance(event, PoisonDamageEvent):
        return [f"Boss poisoned for {event.damage} damage ({event.hitpoints_before} -> {event.hitpoints_after})"]
    if isinstance(event, SpellCastEvent):
        return [f"Wizard casts {event.spell.display_name}"]
    if isinstance(event, HitpointsRegeneratedEvent):
        return [
            f"Wizard regenerates {event.amount} hitpoints ({event.hitpoints_before} -> {event.hitpoints_after})"
        ]
    if isinstance(event, ArmorGainedEvent):
        return [f"Wizard shields for +{event.amount} armor ({event.armor_before} -> {event.armor_after})"]
    if isinstance(event, ManaSpentEvent):
        return [f"Wizard uses {event.amount} mana ({event.mana_before} -> {event.mana_after})"]
    if isinstance(event, BossDamagedEvent):
        return [f"Boss receives {event.damage} damage ({event.hitpoints_before} -> {event.hitpoints_after})"]
    if isinstance(event, BossAttackEvent):
        if event.resisted:
            detail = f"Wizard resists attack ({event.hitpoints_before} -> {event.hitpoints_after})"
        else:
            detail = f"Wizard receives {event.damage} damage ({event.hitpoints_before} -> {event.hitpoints_after})"
        return ["Boss attacks", detail]
    if isinstance(event, SpellRejectedEvent):
        return ["You cannot cast that spell!"]
    if isinstance(event, BattleResolvedEvent):
        return [outcome_banner(event.outcome)]
    return [str(event)]


def render_events(
    events: Sequence[BattleEvent],
    *,
    mode: TextDisplayMode = "instant",
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Print events, pausing between lines in step mode."""
    for event in events:
        if isinstance(event, TurnStartedEvent):
            print()
        for line in format_event(event):
            print(line)
            if mode == "step":
                sleep(STEP_DELAY_SECONDS)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_wizard_panel(view: BattleView) -> List[str]:
    wizard = view.wizard
    lines = [
        f"Hitpoints: {wizard.hitpoints}",
        f"Armor: {wizard.armor}",
        f"Mana: {wizard.mana}",
        f"Total Mana Used: {view.mana_used}",
        "Effects:",
    ]
    if wizard.shielded is not None:
        lines.append(f"- Shielded: {wizard.shielded} turns left")
    if wizard.recharging is not None:
        lines.append(f"- Recharging: {wizard.recharging} turns left")
    lines.append("Spells Used:")
    for idx, spell in enumerate(view.spells_used, start=1):
        lines.append(f"{idx}. {spell.display_name} (-{spell.cost} mana)")
    return lines


def format_boss_panel(view: BattleView) -> List[str]:
    boss = view.boss
    lines = [
        f"Hitpoints: {boss.hitpoints}",
        "Armor: (ignored)",
        f"Damage: {boss.damage}",
        "Effects:",
    ]
    if boss.poisoned is not None:
        lines.append(f"- Poisoned: {boss.poisoned} turns left")
    return lines


def render_battle_view(view: BattleView) -> None:
    title = "Wizard RPG (hard)" if view.hard_mode else "Wizard RPG"
    render_heading(title)
    print("Wizard:")
    render_panel_lines(format_wizard_panel(view))
    print("Boss:")
    render_panel_lines(format_boss_panel(view))


def render_spell_menu(options: Sequence[tuple[Spell, bool]]) -> None:
    """Display the numbered spell menu, marking spells that cannot be cast."""
    render_heading("Spells")
    for idx, (spell, castable) in enumerate(options, start=1):
        suffix = "" if castable else " (unavailable)"
        print(f"{idx}. {spell.display_name}: {spell.cost} Mana{suffix}")


def render_panel_lines(lines: Iterable[str]) -> None:
    """Print indented panel lines."""
    for line in lines:
        print(f"  {line}")
