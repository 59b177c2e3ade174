"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from wizard_rpg.core.types import TextDisplayMode

logger = logging.getLogger(__name__)

_DEFAULT_TEXT_MODE: TextDisplayMode = "instant"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "WizardRPG"
        return Path.home() / "WizardRPG"
    return Path.home() / ".config" / "wizard_rpg"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_text_mode(value: object) -> TextDisplayMode:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _defaults() -> Dict[str, Any]:
    return {"text_display_mode": _DEFAULT_TEXT_MODE, "hard_mode": False}


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config at %s: %s", config_path, exc)
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "hard_mode": raw.get("hard_mode") is True,
    }


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "text_display_mode": _normalize_text_mode(config.get("text_display_mode")),
        "hard_mode": config.get("hard_mode") is True,
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
