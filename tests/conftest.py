"""Shared fixtures for Peak Coach tests."""

from datetime import datetime, timedelta, timezone

import pytest

from peak_coach.config import Settings
from peak_coach.models import (
    BaselineData,
    BiometricSnapshot,
    DailyLogSummary,
    HrvData,
    ReadinessLabel,
    ReadinessScore,
    SleepData,
    SleepStage,
    SleepStageType,
)


NOW = datetime(2026, 10, 19, 7, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_sleep():
    """Build a night of sleep ending at 07:00 UTC."""
    def _make(minutes: int, deep: int = 0, rem: int = 0, light: int = 0, awake: int = 0) -> SleepData:
        stages = []
        for stage_type, stage_minutes in (
            (SleepStageType.DEEP, deep),
            (SleepStageType.REM, rem),
            (SleepStageType.LIGHT, light),
            (SleepStageType.AWAKE, awake),
        ):
            if stage_minutes:
                stages.append(SleepStage(type=stage_type, duration_minutes=stage_minutes))
        return SleepData(
            duration_minutes=minutes,
            stages=tuple(stages),
            start_time=NOW - timedelta(minutes=minutes),
            end_time=NOW,
        )
    return _make


@pytest.fixture
def make_snapshot():
    """Build a snapshot; every reading defaults to missing."""
    def _make(hrv=None, rhr=None, sleep=None, steps=None, spo2=None) -> BiometricSnapshot:
        return BiometricSnapshot(
            timestamp=NOW,
            hrv=HrvData(sdnn=hrv, timestamp=NOW) if hrv is not None else None,
            resting_heart_rate=rhr,
            sleep=sleep,
            steps=steps,
            spo2=spo2,
        )
    return _make


@pytest.fixture
def make_readiness():
    """Build a readiness score with neutral components."""
    def _make(score: int) -> ReadinessScore:
        return ReadinessScore(
            score=score,
            label=ReadinessLabel.from_score(score),
            hrv_score=0.5,
            sleep_score=0.5,
            rhr_score=0.5,
            activity_score=0.5,
            timestamp=NOW,
        )
    return _make


@pytest.fixture
def baseline():
    """A typical 7-day baseline."""
    return BaselineData(
        avg_hrv=60.0,
        avg_resting_hr=60.0,
        avg_sleep_hours=7.5,
        avg_daily_steps=10000,
        sample_days=7,
    )


@pytest.fixture
def log_summary():
    """A quiet morning: one glass of water, one coffee."""
    return DailyLogSummary(water_ml=250, caffeine_mg=95)


@pytest.fixture
def settings():
    """Settings that ignore the environment's .env file."""
    return Settings(_env_file=None, openai_api_key="", advanced_coach_enabled=False)
