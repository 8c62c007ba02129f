"""Value models for Peak Coach."""

from .biometrics import (
    BASELINE_WINDOW_DAYS,
    BaselineData,
    BiometricSnapshot,
    DailyMetrics,
    HeartRateSample,
    HrvData,
    SleepData,
    SleepStage,
    SleepStageType,
)
from .readiness import ReadinessLabel, ReadinessScore
from .logs import (
    CAFFEINE_LIMIT_MG,
    CaffeineEntry,
    DailyLogSummary,
    LogEntry,
    MedicationEntry,
    SupplementEntry,
    WaterEntry,
)
from .coaching import (
    MAX_ACTION_ITEMS,
    CoachingContext,
    CoachingMessage,
    ConversationRole,
    ConversationTurn,
    MessageSource,
    MessageType,
)

__all__ = [
    # Biometrics
    "BASELINE_WINDOW_DAYS",
    "BaselineData",
    "BiometricSnapshot",
    "DailyMetrics",
    "HeartRateSample",
    "HrvData",
    "SleepData",
    "SleepStage",
    "SleepStageType",
    # Readiness
    "ReadinessLabel",
    "ReadinessScore",
    # Logs
    "CAFFEINE_LIMIT_MG",
    "CaffeineEntry",
    "DailyLogSummary",
    "LogEntry",
    "MedicationEntry",
    "SupplementEntry",
    "WaterEntry",
    # Coaching
    "MAX_ACTION_ITEMS",
    "CoachingContext",
    "CoachingMessage",
    "ConversationRole",
    "ConversationTurn",
    "MessageSource",
    "MessageType",
]
