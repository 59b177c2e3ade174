"""Console-driven UI loop for Wizard RPG."""
from __future__ import annotations

import argparse
import logging
from typing import List, Sequence, Tuple

from wizard_rpg.core.types import Outcome, TextDisplayMode
from wizard_rpg.domain.battle_models import BattleState
from wizard_rpg.domain.spells import Spell
from wizard_rpg.presentation.cli.config import load_config, save_config
from wizard_rpg.presentation.cli.render import (
    debug_enabled,
    render_battle_view,
    render_events,
    render_spell_menu,
)
from wizard_rpg.services.battle_service import BattleService
from wizard_rpg.services.controllers.battle_controller import BattleController

logger = logging.getLogger(__name__)

_QUIT_INPUTS = {"q", "quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wizard-rpg", description="Wizard versus boss battle")
    parser.add_argument(
        "--hard",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Toggle hard difficulty (default: from config)",
    )
    parser.add_argument(
        "--text-mode",
        choices=("instant", "step"),
        default=None,
        help="How battle events are revealed (default: from config)",
    )
    parser.add_argument("--remember", action="store_true", help="Save these options as the new defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or debug_enabled() else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive CLI session."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = load_config()
    hard_mode = bool(config["hard_mode"]) if args.hard is None else args.hard
    text_mode: TextDisplayMode = args.text_mode or config["text_display_mode"]
    if args.remember:
        save_config({"text_display_mode": text_mode, "hard_mode": hard_mode})
    logger.debug("Starting battle (hard_mode=%s, text_mode=%s)", hard_mode, text_mode)

    service = BattleService()
    controller = BattleController(service)
    battle_state = service.start_battle(hard_mode=hard_mode)
    print("=== Wizard RPG ===")
    outcome = run_battle_loop(controller, battle_state, text_mode=text_mode)
    if outcome is None:
        print("The wizard flees the battle.")
    print("Goodbye!")
    return 0


def run_battle_loop(
    controller: BattleController, battle_state: BattleState, *, text_mode: TextDisplayMode = "instant"
) -> Outcome | None:
    """Run the battle until it resolves or the player quits."""
    render_events(controller.begin(battle_state), mode=text_mode)
    while not battle_state.is_over:
        render_battle_view(controller.get_battle_view(battle_state))
        options = controller.available_spells(battle_state)
        render_spell_menu(options)
        spell = _prompt_spell(options)
        if spell is None:
            return None
        render_events(controller.play_round(battle_state, spell), mode=text_mode)
    render_battle_view(controller.get_battle_view(battle_state))
    return battle_state.outcome


def _prompt_spell(options: List[Tuple[Spell, bool]]) -> Spell | None:
    while True:
        raw = input("Cast which spell? (q to quit): ").strip().lower()
        if raw in _QUIT_INPUTS:
            return None
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < len(options):
            return options[index][0]
        print(f"Please enter a value between 1 and {len(options)}.")
