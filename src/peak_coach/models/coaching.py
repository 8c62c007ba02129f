"""Coaching message and advanced-coach context models."""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import Field

from .base import ValueModel, utc_now
from .biometrics import BiometricSnapshot
from .logs import DailyLogSummary
from .readiness import ReadinessScore


MAX_ACTION_ITEMS = 3


class MessageType(str, Enum):
    MORNING_BRIEFING = "morning_briefing"
    CHECK_IN = "check_in"
    COACH_RESPONSE = "coach_response"


class MessageSource(str, Enum):
    """Which coach produced the message."""
    RULE_BASED = "rule_based"
    ADVANCED_MODEL = "advanced_model"


class CoachingMessage(ValueModel):
    """Text produced for the user, with up to three ordered action items."""

    type: MessageType
    content: str
    action_items: Tuple[str, ...] = Field(default=(), max_length=MAX_ACTION_ITEMS)
    source: MessageSource = MessageSource.RULE_BASED
    timestamp: datetime = Field(default_factory=utc_now)


class ConversationRole(str, Enum):
    USER = "user"
    COACH = "coach"


class ConversationTurn(ValueModel):
    role: ConversationRole
    content: str


class CoachingContext(ValueModel):
    """Everything the advanced coach is given to generate one message."""

    message_type: MessageType
    readiness: ReadinessScore
    snapshot: BiometricSnapshot
    log_summary: DailyLogSummary
    query: Optional[str] = None
    history: Tuple[ConversationTurn, ...] = ()
