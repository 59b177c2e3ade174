"""Battle service handling deterministic wizard versus boss combat."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from wizard_rpg.core.types import Outcome
from wizard_rpg.domain.battle_models import (
    DEFAULT_BOSS_DAMAGE,
    DEFAULT_BOSS_HITPOINTS,
    DEFAULT_WIZARD_HITPOINTS,
    DEFAULT_WIZARD_MANA,
    BattleState,
    Boss,
    Wizard,
)
from wizard_rpg.domain.effects import HARD_MODE_DRAIN
from wizard_rpg.domain.spells import SPELL_ORDER, Spell
from wizard_rpg.services.errors import SpellUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WizardView:
    hitpoints: int
    armor: int
    mana: int
    shielded: int | None
    recharging: int | None
    possible_spells: Tuple[Spell, ...]


@dataclass(frozen=True, slots=True)
class BossView:
    hitpoints: int
    damage: int
    poisoned: int | None


@dataclass(frozen=True, slots=True)
class BattleView:
    """Presentation view for the current battle state."""

    wizard: WizardView
    boss: BossView
    hard_mode: bool
    mana_used: int
    spells_used: Tuple[Spell, ...]
    outcome: Outcome | None


class BattleService:
    """
    Deterministic battle orchestrator.

    The service owns sequencing, legality checks and outcome detection while
    the combatant models perform the individual mutations. Two grains of
    operation are exposed:

    - fine-grained: ``wizard_turn_apply_effects``, ``wizard_turn_cast_spell``,
      ``boss_turn_apply_effects`` and ``boss_turn_attack``
    - coarse: ``wizard_turn`` and ``boss_turn``

    Every transition returns the outcome it produced, or ``None`` while the
    battle is undecided. Once an outcome is recorded, transitions stop
    mutating state and simply return it.
    """

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(
        self,
        *,
        wizard_hitpoints: int = DEFAULT_WIZARD_HITPOINTS,
        wizard_mana: int = DEFAULT_WIZARD_MANA,
        boss_hitpoints: int = DEFAULT_BOSS_HITPOINTS,
        boss_damage: int = DEFAULT_BOSS_DAMAGE,
        hard_mode: bool = False,
    ) -> BattleState:
        """Create a fresh battle with the given (or default) stats."""
        wizard = Wizard(hitpoints=wizard_hitpoints, mana=wizard_mana)
        boss = Boss(hitpoints=boss_hitpoints, damage=boss_damage)
        wizard.update_possible_spells(boss)
        logger.debug(
            "Battle started: wizard hp=%d mana=%d, boss hp=%d damage=%d, hard_mode=%s",
            wizard_hitpoints,
            wizard_mana,
            boss_hitpoints,
            boss_damage,
            hard_mode,
        )
        return BattleState(wizard=wizard, boss=boss, hard_mode=hard_mode)

    def get_battle_view(self, battle_state: BattleState) -> BattleView:
        """Return structured information for rendering."""
        wizard = battle_state.wizard
        boss = battle_state.boss
        return BattleView(
            wizard=WizardView(
                hitpoints=wizard.hitpoints,
                armor=wizard.armor,
                mana=wizard.mana,
                shielded=wizard.shielded,
                recharging=wizard.recharging,
                possible_spells=tuple(spell for spell in SPELL_ORDER if wizard.can_cast(spell)),
            ),
            boss=BossView(hitpoints=boss.hitpoints, damage=boss.damage, poisoned=boss.poisoned),
            hard_mode=battle_state.hard_mode,
            mana_used=battle_state.mana_used,
            spells_used=tuple(battle_state.spells_used),
            outcome=battle_state.outcome,
        )

    # -----------------------
    # Wizard Turn
    # -----------------------
    def wizard_turn_apply_effects(self, battle_state: BattleState) -> Outcome | None:
        """Apply hard-mode drain, then both sides' ongoing effects."""
        if battle_state.is_over:
            return battle_state.outcome
        if self._apply_hard_mode_drain(battle_state):
            return battle_state.outcome
        self._apply_effects(battle_state)
        return self._check_boss_defeated(battle_state)

    def wizard_turn_cast_spell(self, battle_state: BattleState, spell: Spell) -> Outcome | None:
        """
        Cast ``spell`` for the wizard.

        Raises SpellUnavailableError without touching the battle when the
        spell is outside the wizard's legal set.
        """
        if battle_state.is_over:
            return battle_state.outcome
        self._ensure_castable(battle_state, spell)
        self._cast(battle_state, spell)
        return self._check_boss_defeated(battle_state)

    def wizard_turn(self, battle_state: BattleState, spell: Spell) -> Outcome | None:
        """Run a whole wizard turn: drain, effects and the cast, stopping at the first outcome."""
        if battle_state.is_over:
            return battle_state.outcome
        self._ensure_castable(battle_state, spell)
        if self._apply_hard_mode_drain(battle_state):
            return battle_state.outcome
        self._apply_effects(battle_state)
        if self._check_boss_defeated(battle_state):
            return battle_state.outcome
        self._cast(battle_state, spell)
        return self._check_boss_defeated(battle_state)

    # -----------------------
    # Boss Turn
    # -----------------------
    def boss_turn_apply_effects(self, battle_state: BattleState) -> Outcome | None:
        if battle_state.is_over:
            return battle_state.outcome
        self._apply_effects(battle_state)
        return self._check_boss_defeated(battle_state)

    def boss_turn_attack(self, battle_state: BattleState) -> Outcome | None:
        if battle_state.is_over:
            return battle_state.outcome
        return self._attack(battle_state)

    def boss_turn(self, battle_state: BattleState) -> Outcome | None:
        """Run a whole boss turn: effects, then the attack."""
        if battle_state.is_over:
            return battle_state.outcome
        self._apply_effects(battle_state)
        if self._check_boss_defeated(battle_state):
            return battle_state.outcome
        return self._attack(battle_state)

    # -----------------------
    # Helpers
    # -----------------------
    def _ensure_castable(self, battle_state: BattleState, spell: Spell) -> None:
        if not battle_state.wizard.can_cast(spell):
            logger.debug("Rejected %s (mana=%d)", spell.display_name, battle_state.wizard.mana)
            raise SpellUnavailableError(spell)

    def _apply_hard_mode_drain(self, battle_state: BattleState) -> bool:
        """Return True when the drain defeated the wizard."""
        if not battle_state.hard_mode:
            return False
        battle_state.wizard.hitpoints -= HARD_MODE_DRAIN
        return self._check_wizard_defeated(battle_state) is not None

    def _apply_effects(self, battle_state: BattleState) -> None:
        battle_state.wizard.apply_effect()
        battle_state.boss.apply_effect()
        logger.debug(
            "Effects applied: shielded=%s recharging=%s poisoned=%s",
            battle_state.wizard.shielded,
            battle_state.wizard.recharging,
            battle_state.boss.poisoned,
        )

    def _cast(self, battle_state: BattleState, spell: Spell) -> None:
        battle_state.wizard.cast(spell, battle_state.boss)
        battle_state.mana_used += spell.cost
        battle_state.spells_used.append(spell)
        battle_state.wizard.update_possible_spells(battle_state.boss)
        logger.debug("Wizard cast %s (mana used=%d)", spell.display_name, battle_state.mana_used)

    def _attack(self, battle_state: BattleState) -> Outcome | None:
        dealt = battle_state.boss.attack(battle_state.wizard)
        logger.debug("Boss attacked for %d damage", dealt)
        if self._check_wizard_defeated(battle_state):
            return battle_state.outcome
        battle_state.wizard.update_possible_spells(battle_state.boss)
        return None

    def _check_boss_defeated(self, battle_state: BattleState) -> Outcome | None:
        if battle_state.boss.hitpoints <= 0:
            return self._resolve(battle_state, "wizard")
        return None

    def _check_wizard_defeated(self, battle_state: BattleState) -> Outcome | None:
        if battle_state.wizard.hitpoints <= 0:
            return self._resolve(battle_state, "boss")
        return None

    def _resolve(self, battle_state: BattleState, outcome: Outcome) -> Outcome:
        battle_state.outcome = outcome
        logger.info(
            "Battle resolved in favour of the %s after %d spells (mana used=%d)",
            outcome,
            len(battle_state.spells_used),
            battle_state.mana_used,
        )
        return outcome
