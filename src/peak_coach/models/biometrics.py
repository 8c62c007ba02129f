"""Biometric snapshot and rolling baseline models."""

from datetime import date as date_type, datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import Field, model_validator

from .base import ValueModel, utc_now


# Number of trailing days a baseline covers
BASELINE_WINDOW_DAYS = 7


class SleepStageType(str, Enum):
    """Sleep stage reported by the wearable."""
    AWAKE = "awake"
    LIGHT = "light"
    DEEP = "deep"
    REM = "rem"
    UNKNOWN = "unknown"


class HrvData(ValueModel):
    """Overnight heart rate variability reading."""

    sdnn: float = Field(..., ge=0, description="SDNN in milliseconds")
    rmssd: Optional[float] = Field(None, ge=0, description="RMSSD in milliseconds")
    timestamp: datetime = Field(default_factory=utc_now)


class SleepStage(ValueModel):
    """A block of time spent in one sleep stage."""

    type: SleepStageType
    duration_minutes: int = Field(..., ge=0)


class SleepData(ValueModel):
    """Last night's sleep session."""

    duration_minutes: int = Field(..., ge=0, description="Total sleep duration")
    stages: Tuple[SleepStage, ...] = ()
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def _check_window(self) -> "SleepData":
        if self.end_time < self.start_time:
            raise ValueError("sleep end_time must not precede start_time")

        window_minutes = (self.end_time - self.start_time).total_seconds() / 60
        if self.duration_minutes > window_minutes:
            raise ValueError(
                f"duration_minutes ({self.duration_minutes}) exceeds the "
                f"{window_minutes:.0f} minutes between start_time and end_time"
            )

        # Awake time may sit outside the sleep total but never outside the window
        asleep = sum(s.duration_minutes for s in self.stages if s.type != SleepStageType.AWAKE)
        if asleep > self.duration_minutes:
            raise ValueError(
                f"sleep stages total {asleep} minutes, more than duration_minutes "
                f"({self.duration_minutes})"
            )
        staged = sum(s.duration_minutes for s in self.stages)
        if staged > window_minutes:
            raise ValueError(
                f"sleep stages total {staged} minutes, more than the "
                f"{window_minutes:.0f} minute session"
            )
        return self

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60.0

    def _stage_minutes(self, stage_type: SleepStageType) -> int:
        return sum(s.duration_minutes for s in self.stages if s.type == stage_type)

    @property
    def deep_minutes(self) -> int:
        return self._stage_minutes(SleepStageType.DEEP)

    @property
    def rem_minutes(self) -> int:
        return self._stage_minutes(SleepStageType.REM)

    @property
    def light_minutes(self) -> int:
        return self._stage_minutes(SleepStageType.LIGHT)

    @property
    def awake_minutes(self) -> int:
        return self._stage_minutes(SleepStageType.AWAKE)


class HeartRateSample(ValueModel):
    """Single heart rate reading."""

    bpm: int = Field(..., gt=0)
    timestamp: datetime


class BiometricSnapshot(ValueModel):
    """
    Today's readings from the wearable.

    Every reading is independently optional. A missing reading means
    "unknown" and is never the same as zero.
    """

    timestamp: datetime = Field(default_factory=utc_now)
    hrv: Optional[HrvData] = None
    resting_heart_rate: Optional[int] = Field(None, gt=0, description="Resting HR in bpm")
    sleep: Optional[SleepData] = None
    spo2: Optional[float] = Field(None, ge=0, le=100, description="Blood oxygen percentage")
    steps: Optional[int] = Field(None, ge=0)
    heart_rate_samples: Tuple[HeartRateSample, ...] = ()


class DailyMetrics(ValueModel):
    """One historical day's readings, input to the baseline aggregator."""

    date: date_type
    hrv: Optional[float] = Field(None, ge=0, description="HRV in milliseconds")
    resting_hr: Optional[float] = Field(None, gt=0, description="Resting HR in bpm")
    sleep_hours: Optional[float] = Field(None, ge=0, le=24)
    steps: Optional[int] = Field(None, ge=0)


class BaselineData(ValueModel):
    """
    Rolling averages over the trailing window (today excluded).

    An average of 0 means no samples contributed and must be read as
    "unknown" rather than as a real biometric value.
    """

    avg_hrv: float = Field(..., ge=0, description="ms")
    avg_resting_hr: float = Field(..., ge=0, description="bpm")
    avg_sleep_hours: float = Field(..., ge=0)
    avg_daily_steps: int = Field(..., ge=0)
    sample_days: int = Field(..., ge=0, le=BASELINE_WINDOW_DAYS)

    @classmethod
    def empty(cls) -> "BaselineData":
        """Baseline with no history at all."""
        return cls(
            avg_hrv=0.0,
            avg_resting_hr=0.0,
            avg_sleep_hours=0.0,
            avg_daily_steps=0,
            sample_days=0,
        )
