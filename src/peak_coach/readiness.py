"""
Readiness Score Calculation

Combines today's snapshot and the personal baseline into a 1-10 score:
- HRV vs 7-day baseline        -> weight 40%
- Sleep duration + quality     -> weight 30%
- Resting HR vs baseline       -> weight 20%
- Activity vs usual step count -> weight 10%

Each component is a 0-1 sub-score. Missing readings and unknown baselines
map to fixed neutral values, so every input produces a score.
"""

import logging
import math

from .exceptions import ValidationError
from .models import (
    BaselineData,
    BiometricSnapshot,
    ReadinessLabel,
    ReadinessScore,
    SleepData,
)
from .models.readiness import MAX_SCORE, MIN_SCORE


logger = logging.getLogger(__name__)


DEFAULT_TARGET_SLEEP_HOURS = 7.5

WEIGHTS = {
    'hrv': 0.40,
    'sleep': 0.30,
    'rhr': 0.20,
    'activity': 0.10,
}

NEUTRAL_SCORE = 0.5
MISSING_SLEEP_SCORE = 0.4

# Guards the truncation against float error, e.g. 2.9999999999999996
_SCORE_EPSILON = 1e-9


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(high, max(low, value))


def calculate_hrv_score(snapshot: BiometricSnapshot, baseline: BaselineData) -> float:
    """
    HRV sub-score from today's SDNN relative to the baseline average.

    >= 100% of baseline -> 1.0
    85% of baseline     -> 0.7
    70% of baseline     -> 0.4
    50% of baseline     -> 0.0

    Linear between those points and continuous at each of them.
    """
    if snapshot.hrv is None or baseline.avg_hrv <= 0:
        return NEUTRAL_SCORE

    ratio = snapshot.hrv.sdnn / baseline.avg_hrv

    if ratio >= 1.0:
        score = 1.0
    elif ratio >= 0.85:
        score = 0.7 + (ratio - 0.85) / 0.15 * 0.3
    elif ratio >= 0.70:
        score = 0.4 + (ratio - 0.70) / 0.15 * 0.3
    elif ratio >= 0.50:
        score = (ratio - 0.50) / 0.20 * 0.4
    else:
        score = 0.0

    return _clamp(score)


def sleep_quality_ratio(sleep: SleepData) -> float:
    """Share of the night spent in deep or REM sleep."""
    if sleep.duration_minutes <= 0:
        return 0.0
    return (sleep.deep_minutes + sleep.rem_minutes) / sleep.duration_minutes


def calculate_sleep_score(
    snapshot: BiometricSnapshot,
    target_sleep_hours: float = DEFAULT_TARGET_SLEEP_HOURS,
) -> float:
    """
    Sleep sub-score: duration against target, plus a deep/REM quality bonus.

    Duration contributes up to 0.8. Deep + REM >= 40% of the night adds 0.2,
    >= 25% adds 0.1. Missing sleep scores 0.4.
    """
    sleep = snapshot.sleep
    if sleep is None:
        return MISSING_SLEEP_SCORE

    duration_score = min(1.0, sleep.duration_hours / target_sleep_hours)

    quality_ratio = sleep_quality_ratio(sleep)
    if quality_ratio >= 0.40:
        quality_bonus = 0.2
    elif quality_ratio >= 0.25:
        quality_bonus = 0.1
    else:
        quality_bonus = 0.0

    return _clamp(duration_score * 0.8 + quality_bonus)


def calculate_rhr_score(snapshot: BiometricSnapshot, baseline: BaselineData) -> float:
    """
    Resting HR sub-score: lower than baseline is better.

    <= 90% of baseline -> 1.0, 100% -> 0.7, >= 110% -> 0.0
    """
    if snapshot.resting_heart_rate is None or baseline.avg_resting_hr <= 0:
        return NEUTRAL_SCORE

    ratio = snapshot.resting_heart_rate / baseline.avg_resting_hr

    if ratio <= 0.90:
        score = 1.0
    elif ratio <= 1.00:
        score = 1.0 - (ratio - 0.90) / 0.10 * 0.3
    elif ratio <= 1.10:
        score = 0.7 - (ratio - 1.00) / 0.10 * 0.7
    else:
        score = 0.0

    return _clamp(score)


def calculate_activity_score(snapshot: BiometricSnapshot, baseline: BaselineData) -> float:
    """
    Activity sub-score from steps vs the usual daily count.

    The bands are deliberately stepped, with no interpolation:
    80-120% -> 1.0, < 50% -> 0.5, > 150% -> 0.7, anything else -> 0.75
    """
    if snapshot.steps is None or baseline.avg_daily_steps <= 0:
        return NEUTRAL_SCORE

    ratio = snapshot.steps / baseline.avg_daily_steps

    if 0.8 <= ratio <= 1.2:
        return 1.0
    if ratio < 0.5:
        return 0.5
    if ratio > 1.5:
        return 0.7
    return 0.75


def calculate_composite(
    hrv_score: float,
    sleep_score: float,
    rhr_score: float,
    activity_score: float,
) -> float:
    """Weighted sum of the four sub-scores, in [0, 1]."""
    return (
        hrv_score * WEIGHTS['hrv']
        + sleep_score * WEIGHTS['sleep']
        + rhr_score * WEIGHTS['rhr']
        + activity_score * WEIGHTS['activity']
    )


def composite_to_score(composite: float) -> int:
    """
    Map a 0-1 composite onto the 1-10 integer scale.

    Truncates composite * 9 + 1, so a day has to fully reach a band to be
    labelled with it.
    """
    raw = math.floor(composite * 9 + 1 + _SCORE_EPSILON)
    return int(min(MAX_SCORE, max(MIN_SCORE, raw)))


def score_readiness(
    snapshot: BiometricSnapshot,
    baseline: BaselineData,
    target_sleep_hours: float = DEFAULT_TARGET_SLEEP_HOURS,
) -> ReadinessScore:
    """
    Calculate today's readiness score.

    Args:
        snapshot: Today's biometric readings
        baseline: 7-day rolling baseline
        target_sleep_hours: Personal sleep target

    Returns:
        ReadinessScore with the composite score, label and sub-scores

    Raises:
        ValidationError: If target_sleep_hours is not positive
    """
    if not target_sleep_hours > 0:
        raise ValidationError(
            f"target_sleep_hours must be positive, got {target_sleep_hours}",
            field="target_sleep_hours",
        )

    hrv_score = calculate_hrv_score(snapshot, baseline)
    sleep_score = calculate_sleep_score(snapshot, target_sleep_hours)
    rhr_score = calculate_rhr_score(snapshot, baseline)
    activity_score = calculate_activity_score(snapshot, baseline)

    composite = calculate_composite(hrv_score, sleep_score, rhr_score, activity_score)
    score = composite_to_score(composite)

    logger.debug(
        f"Readiness {score}/10 (composite={composite:.3f}, hrv={hrv_score:.2f}, "
        f"sleep={sleep_score:.2f}, rhr={rhr_score:.2f}, activity={activity_score:.2f})"
    )

    return ReadinessScore(
        score=score,
        label=ReadinessLabel.from_score(score),
        hrv_score=hrv_score,
        sleep_score=sleep_score,
        rhr_score=rhr_score,
        activity_score=activity_score,
        timestamp=snapshot.timestamp,
    )
