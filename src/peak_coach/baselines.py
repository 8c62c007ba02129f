"""Personal baseline calculations.

Today's readings are judged against *your* trailing 7-day average, not a
population "normal".

Key concepts:
- One arithmetic mean per metric, each computed independently so a gap in
  one metric never affects another
- A metric with no samples averages to 0.0, which downstream code reads
  as "unknown"
- sample_days counts the days with an HRV sample (capped at the window),
  even when other metrics cover more or fewer days
"""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from .exceptions import ValidationError
from .models import BASELINE_WINDOW_DAYS, BaselineData, DailyMetrics


logger = logging.getLogger(__name__)


def calculate_average(values: Sequence[Optional[float]]) -> float:
    """Calculate the arithmetic mean of the values that are present.

    Args:
        values: Samples for one metric (may contain None)

    Returns:
        Mean of the non-None values, or 0.0 if there are none
    """
    valid_values = [v for v in values if v is not None]

    if not valid_values:
        return 0.0

    return sum(valid_values) / len(valid_values)


def select_window(
    days: Iterable[DailyMetrics],
    today: date,
    window_days: int = BASELINE_WINDOW_DAYS,
) -> List[DailyMetrics]:
    """Keep the days inside the trailing window, most recent first.

    Today and any later date are excluded.

    Raises:
        ValidationError: If the same date appears more than once
    """
    start = today - timedelta(days=window_days)
    seen = set()
    selected = []

    for day in days:
        if day.date in seen:
            raise ValidationError(
                f"Duplicate history entry for {day.date.isoformat()}",
                field="date",
            )
        seen.add(day.date)
        if start <= day.date < today:
            selected.append(day)

    selected.sort(key=lambda d: d.date, reverse=True)
    return selected


def aggregate_baseline(
    days: Iterable[DailyMetrics],
    today: Optional[date] = None,
) -> BaselineData:
    """Reduce trailing history into a 7-day rolling baseline.

    Args:
        days: Historical per-day readings, in any order
        today: Reference date, excluded from the window (defaults to today)

    Returns:
        BaselineData; all zeros with sample_days=0 when there is no history
    """
    today = today or date.today()
    window = select_window(days, today)

    hrv_values = [d.hrv for d in window]
    rhr_values = [d.resting_hr for d in window]
    sleep_values = [d.sleep_hours for d in window]
    step_values = [d.steps for d in window]

    # HRV coverage stands in for overall coverage
    hrv_days = sum(1 for v in hrv_values if v is not None)

    baseline = BaselineData(
        avg_hrv=calculate_average(hrv_values),
        avg_resting_hr=calculate_average(rhr_values),
        avg_sleep_hours=calculate_average(sleep_values),
        avg_daily_steps=int(calculate_average(step_values)),
        sample_days=min(hrv_days, BASELINE_WINDOW_DAYS),
    )

    logger.debug(
        f"Baseline for {today.isoformat()}: {len(window)} days in window, "
        f"{baseline.sample_days} with HRV"
    )
    return baseline
