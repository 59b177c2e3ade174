"""Service layer exports."""

from .errors import BattleError, SpellUnavailableError
from .battle_service import BattleService, BattleView, BossView, WizardView

__all__ = [
    "BattleError",
    "SpellUnavailableError",
    "BattleService",
    "BattleView",
    "BossView",
    "WizardView",
]
