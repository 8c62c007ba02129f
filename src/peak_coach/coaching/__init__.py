"""Rule-based and advanced coaching."""

from .advanced import (
    AdvancedCoach,
    LLMAdvancedCoach,
    UnavailableAdvancedCoach,
    build_advanced_coach,
)
from .builder import DEFAULT_FILLER_ACTIONS, MessageBuilder, pad_action_items
from .rules import RuleBasedCoach
from .service import CoachService

__all__ = [
    "AdvancedCoach",
    "LLMAdvancedCoach",
    "UnavailableAdvancedCoach",
    "build_advanced_coach",
    "DEFAULT_FILLER_ACTIONS",
    "MessageBuilder",
    "pad_action_items",
    "RuleBasedCoach",
    "CoachService",
]
