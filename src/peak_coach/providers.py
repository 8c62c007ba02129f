"""
Data provider interfaces.

Acquiring snapshots, history and logs belongs to the caller. The coach
service only sees these protocols; StaticDataProvider serves one fixed day,
for the CLI and for tests.
"""

from datetime import date as date_type
from typing import List, Optional, Protocol, runtime_checkable

from pydantic import Field, model_validator

from .baselines import aggregate_baseline
from .logs import summarize_logs
from .models import (
    BaselineData,
    BiometricSnapshot,
    DailyLogSummary,
    DailyMetrics,
    LogEntry,
)
from .models.base import ValueModel


@runtime_checkable
class SnapshotProvider(Protocol):
    def get_today_snapshot(self) -> BiometricSnapshot:
        ...


@runtime_checkable
class BaselineProvider(Protocol):
    def get_baseline(self) -> BaselineData:
        ...


@runtime_checkable
class DailyLogProvider(Protocol):
    def get_daily_summary(self) -> DailyLogSummary:
        ...


class DayRecord(ValueModel):
    """
    One day's input data.

    The baseline comes from `baseline` if given, otherwise it is aggregated
    from `history`. The log summary likewise comes from `log_summary` or is
    totalled from `logs`.
    """

    date: Optional[date_type] = None
    snapshot: BiometricSnapshot = Field(default_factory=BiometricSnapshot)
    history: List[DailyMetrics] = Field(default_factory=list)
    baseline: Optional[BaselineData] = None
    logs: List[LogEntry] = Field(default_factory=list)
    log_summary: Optional[DailyLogSummary] = None

    @model_validator(mode="after")
    def _check_sources(self) -> "DayRecord":
        if self.baseline is not None and self.history:
            raise ValueError("give either baseline or history, not both")
        if self.log_summary is not None and self.logs:
            raise ValueError("give either log_summary or logs, not both")
        return self


class StaticDataProvider:
    """Serves a single DayRecord through all three provider interfaces."""

    def __init__(self, day: DayRecord) -> None:
        self.day = day

    def get_today_snapshot(self) -> BiometricSnapshot:
        return self.day.snapshot

    def get_baseline(self) -> BaselineData:
        if self.day.baseline is not None:
            return self.day.baseline
        today = self.day.date or self.day.snapshot.timestamp.date()
        return aggregate_baseline(self.day.history, today=today)

    def get_daily_summary(self) -> DailyLogSummary:
        if self.day.log_summary is not None:
            return self.day.log_summary
        return summarize_logs(self.day.logs)
