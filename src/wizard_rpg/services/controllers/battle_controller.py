"""UI-agnostic battle controller that separates state progression from rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Tuple

from wizard_rpg.core.types import Outcome
from wizard_rpg.domain.battle_models import BattleState
from wizard_rpg.domain.spells import SPELL_ORDER, Spell
from wizard_rpg.services.battle_service import BattleService, BattleView
from wizard_rpg.services.errors import SpellUnavailableError

Actor = Literal["wizard", "boss"]


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class TurnStartedEvent(BattleEvent):
    actor: Actor


@dataclass(slots=True)
class SelfDamageEvent(BattleEvent):
    hitpoints_before: int
    hitpoints_after: int


@dataclass(slots=True)
class ShieldFadedEvent(BattleEvent):
    armor_before: int
    armor_after: int


@dataclass(slots=True)
class ManaRechargedEvent(BattleEvent):
    amount: int
    mana_before: int
    mana_after: int


@dataclass(slots=True)
class PoisonDamageEvent(BattleEvent):
    damage: int
    hitpoints_before: int
    hitpoints_after: int


@dataclass(slots=True)
class SpellCastEvent(BattleEvent):
    spell: Spell


@dataclass(slots=True)
class HitpointsRegeneratedEvent(BattleEvent):
    amount: int
    hitpoints_before: int
    hitpoints_after: int


@dataclass(slots=True)
class ArmorGainedEvent(BattleEvent):
    amount: int
    armor_before: int
    armor_after: int


@dataclass(slots=True)
class ManaSpentEvent(BattleEvent):
    amount: int
    mana_before: int
    mana_after: int


@dataclass(slots=True)
class BossDamagedEvent(BattleEvent):
    damage: int
    hitpoints_before: int
    hitpoints_after: int


@dataclass(slots=True)
class BossAttackEvent(BattleEvent):
    damage: int
    hitpoints_before: int
    hitpoints_after: int
    resisted: bool


@dataclass(slots=True)
class SpellRejectedEvent(BattleEvent):
    spell: Spell


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class _Snapshot:
    wizard_hitpoints: int
    wizard_armor: int
    wizard_mana: int
    boss_hitpoints: int

    @classmethod
    def take(cls, battle_state: BattleState) -> "_Snapshot":
        return cls(
            wizard_hitpoints=battle_state.wizard.hitpoints,
            wizard_armor=battle_state.wizard.armor,
            wizard_mana=battle_state.wizard.mana,
            boss_hitpoints=battle_state.boss.hitpoints,
        )


class BattleController:
    """
    UI-agnostic controller for battle state progression.

    This controller drives BattleService through the fine-grained turn
    transitions and reports what changed as structured events.
    It does NOT handle rendering, formatting, or input prompts.

    A battle is opened with ``begin`` (the wizard's first effect phase) and
    advanced with ``play_round``: the wizard's cast, the boss's turn, then
    the wizard's next effect phase.
    """

    def __init__(self, battle_service: BattleService) -> None:
        self._service = battle_service

    def get_battle_view(self, battle_state: BattleState) -> BattleView:
        """Return structured view of current battle state for rendering."""
        return self._service.get_battle_view(battle_state)

    def available_spells(self, battle_state: BattleState) -> List[Tuple[Spell, bool]]:
        """Return every spell in menu order with whether it can be cast now."""
        return [(spell, battle_state.wizard.can_cast(spell)) for spell in SPELL_ORDER]

    def begin(self, battle_state: BattleState) -> List[BattleEvent]:
        """Run the opening wizard effect phase."""
        return self._wizard_effects(battle_state)

    def play_round(self, battle_state: BattleState, spell: Spell) -> List[BattleEvent]:
        """
        Cast ``spell`` and play out the rest of the round.

        Returns a single SpellRejectedEvent when the spell cannot be cast,
        and no events once the battle is over.
        """
        if battle_state.is_over:
            return []
        if not battle_state.wizard.can_cast(spell):
            return [SpellRejectedEvent(spell=spell)]

        events = self._wizard_cast(battle_state, spell)
        events.extend(self._boss_effects(battle_state))
        events.extend(self._boss_attack(battle_state))
        events.extend(self._wizard_effects(battle_state))
        return events

    # -----------------------
    # Phases
    # -----------------------
    def _wizard_effects(self, battle_state: BattleState) -> List[BattleEvent]:
        if battle_state.is_over:
            return []
        before = _Snapshot.take(battle_state)
        events: List[BattleEvent] = [TurnStartedEvent(actor="wizard")]
        outcome = self._service.wizard_turn_apply_effects(battle_state)
        after = _Snapshot.take(battle_state)

        if after.wizard_hitpoints < before.wizard_hitpoints:
            events.append(
                SelfDamageEvent(hitpoints_before=before.wizard_hitpoints, hitpoints_after=after.wizard_hitpoints)
            )
        events.extend(self._effect_events(before, after))
        return self._finish(events, outcome)

    def _wizard_cast(self, battle_state: BattleState, spell: Spell) -> List[BattleEvent]:
        before = _Snapshot.take(battle_state)
        events: List[BattleEvent] = [SpellCastEvent(spell=spell)]
        try:
            outcome = self._service.wizard_turn_cast_spell(battle_state, spell)
        except SpellUnavailableError:
            return [SpellRejectedEvent(spell=spell)]
        after = _Snapshot.take(battle_state)

        if after.wizard_hitpoints > before.wizard_hitpoints:
            events.append(
                HitpointsRegeneratedEvent(
                    amount=after.wizard_hitpoints - before.wizard_hitpoints,
                    hitpoints_before=before.wizard_hitpoints,
                    hitpoints_after=after.wizard_hitpoints,
                )
            )
        if after.wizard_armor > before.wizard_armor:
            events.append(
                ArmorGainedEvent(
                    amount=after.wizard_armor - before.wizard_armor,
                    armor_before=before.wizard_armor,
                    armor_after=after.wizard_armor,
                )
            )
        if after.wizard_mana < before.wizard_mana:
            events.append(
                ManaSpentEvent(
                    amount=before.wizard_mana - after.wizard_mana,
                    mana_before=before.wizard_mana,
                    mana_after=after.wizard_mana,
                )
            )
        if after.boss_hitpoints < before.boss_hitpoints:
            events.append(
                BossDamagedEvent(
                    damage=before.boss_hitpoints - after.boss_hitpoints,
                    hitpoints_before=before.boss_hitpoints,
                    hitpoints_after=after.boss_hitpoints,
                )
            )
        return self._finish(events, outcome)

    def _boss_effects(self, battle_state: BattleState) -> List[BattleEvent]:
        if battle_state.is_over:
            return []
        before = _Snapshot.take(battle_state)
        events: List[BattleEvent] = [TurnStartedEvent(actor="boss")]
        outcome = self._service.boss_turn_apply_effects(battle_state)
        after = _Snapshot.take(battle_state)
        events.extend(self._effect_events(before, after))
        return self._finish(events, outcome)

    def _boss_attack(self, battle_state: BattleState) -> List[BattleEvent]:
        if battle_state.is_over:
            return []
        before = _Snapshot.take(battle_state)
        outcome = self._service.boss_turn_attack(battle_state)
        after = _Snapshot.take(battle_state)
        damage = before.wizard_hitpoints - after.wizard_hitpoints
        events: List[BattleEvent] = [
            BossAttackEvent(
                damage=damage,
                hitpoints_before=before.wizard_hitpoints,
                hitpoints_after=after.wizard_hitpoints,
                resisted=damage != battle_state.boss.damage,
            )
        ]
        return self._finish(events, outcome)

    # -----------------------
    # Helpers
    # -----------------------
    def _effect_events(self, before: _Snapshot, after: _Snapshot) -> List[BattleEvent]:
        events: List[BattleEvent] = []
        if after.wizard_armor < before.wizard_armor:
            events.append(ShieldFadedEvent(armor_before=before.wizard_armor, armor_after=after.wizard_armor))
        if after.wizard_mana > before.wizard_mana:
            events.append(
                ManaRechargedEvent(
                    amount=after.wizard_mana - before.wizard_mana,
                    mana_before=before.wizard_mana,
                    mana_after=after.wizard_mana,
                )
            )
        if after.boss_hitpoints < before.boss_hitpoints:
            events.append(
                PoisonDamageEvent(
                    damage=before.boss_hitpoints - after.boss_hitpoints,
                    hitpoints_before=before.boss_hitpoints,
                    hitpoints_after=after.boss_hitpoints,
                )
            )
        return events

    def _finish(self, events: List[BattleEvent], outcome: Outcome | None) -> List[BattleEvent]:
        if outcome is not None:
            events.append(BattleResolvedEvent(outcome=outcome))
        return events
