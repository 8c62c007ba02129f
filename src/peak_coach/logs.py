"""Daily totals from user-logged wellness entries."""

from typing import Iterable

from .models import (
    CaffeineEntry,
    DailyLogSummary,
    LogEntry,
    MedicationEntry,
    SupplementEntry,
    WaterEntry,
)


def summarize_logs(entries: Iterable[LogEntry]) -> DailyLogSummary:
    """Total one day's log entries.

    Supplement and medication names keep the order they were logged in.
    """
    water_ml = 0
    caffeine_mg = 0
    supplements = []
    medications = []

    for entry in entries:
        if isinstance(entry, WaterEntry):
            water_ml += entry.amount_ml
        elif isinstance(entry, CaffeineEntry):
            caffeine_mg += entry.amount_mg
        elif isinstance(entry, SupplementEntry):
            supplements.append(entry.name)
        elif isinstance(entry, MedicationEntry):
            medications.append(entry.name)

    return DailyLogSummary(
        water_ml=water_ml,
        caffeine_mg=caffeine_mg,
        supplements=tuple(supplements),
        medications=tuple(medications),
    )
