"""Daily readiness scoring and coaching from wearable biometrics."""

from .baselines import aggregate_baseline, calculate_average
from .readiness import score_readiness
from .logs import summarize_logs
from .coaching import (
    CoachService,
    LLMAdvancedCoach,
    RuleBasedCoach,
    UnavailableAdvancedCoach,
    build_advanced_coach,
)
from .providers import DayRecord, StaticDataProvider
from .models import (
    BaselineData,
    BiometricSnapshot,
    CoachingMessage,
    DailyLogSummary,
    DailyMetrics,
    ReadinessLabel,
    ReadinessScore,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Scoring
    "aggregate_baseline",
    "calculate_average",
    "score_readiness",
    "summarize_logs",
    # Coaching
    "CoachService",
    "LLMAdvancedCoach",
    "RuleBasedCoach",
    "UnavailableAdvancedCoach",
    "build_advanced_coach",
    # Providers
    "DayRecord",
    "StaticDataProvider",
    # Models
    "BaselineData",
    "BiometricSnapshot",
    "CoachingMessage",
    "DailyLogSummary",
    "DailyMetrics",
    "ReadinessLabel",
    "ReadinessScore",
]
