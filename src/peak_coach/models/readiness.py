"""Readiness score model."""

from datetime import datetime
from enum import Enum

from pydantic import Field, model_validator

from .base import ValueModel, utc_now


MIN_SCORE = 1
MAX_SCORE = 10


class ReadinessLabel(str, Enum):
    """Readiness category, derived only from the integer score."""
    PEAK = "peak"          # 9-10
    HIGH = "high"          # 7-8
    MODERATE = "moderate"  # 5-6
    LOW = "low"            # 3-4
    RECOVERY = "recovery"  # 1-2

    @classmethod
    def from_score(cls, score: int) -> "ReadinessLabel":
        """Map a 1-10 score onto its label band."""
        if score >= 9:
            return cls.PEAK
        if score >= 7:
            return cls.HIGH
        if score >= 5:
            return cls.MODERATE
        if score >= 3:
            return cls.LOW
        return cls.RECOVERY


class ReadinessScore(ValueModel):
    """Composite 1-10 readiness with its four 0-1 components."""

    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    label: ReadinessLabel
    hrv_score: float = Field(..., ge=0, le=1)
    sleep_score: float = Field(..., ge=0, le=1)
    rhr_score: float = Field(..., ge=0, le=1)
    activity_score: float = Field(..., ge=0, le=1)
    timestamp: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def _check_label(self) -> "ReadinessScore":
        if self.label != ReadinessLabel.from_score(self.score):
            raise ValueError(f"label {self.label.value} does not match score {self.score}")
        return self
