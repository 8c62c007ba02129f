"""
Rule-based coach.

Deterministic, offline coaching used whenever the advanced coach is
unavailable. Every entry point is a pure function of its arguments and
returns a CoachingMessage; storing or displaying it is the caller's job.
"""

from typing import Callable, Optional, Sequence, Tuple

from ..exceptions import ValidationError
from ..models import (
    BaselineData,
    BiometricSnapshot,
    CoachingMessage,
    DailyLogSummary,
    MessageType,
    ReadinessLabel,
    ReadinessScore,
)
from ..models.logs import CAFFEINE_LIMIT_MG
from .builder import DEFAULT_FILLER_ACTIONS, MessageBuilder


DAILY_WATER_TARGET_ML = 2000

HEADLINES = {
    ReadinessLabel.PEAK: "You're firing on all cylinders today. Score: {score}/10. Push hard.",
    ReadinessLabel.HIGH: "Strong readiness. Score: {score}/10. Good day to train.",
    ReadinessLabel.MODERATE: "Moderate readiness. Score: {score}/10. Steady, intentional effort.",
    ReadinessLabel.LOW: "Low readiness. Score: {score}/10. Manage energy carefully.",
    ReadinessLabel.RECOVERY: "Recovery day. Score: {score}/10. Your body is asking for rest.",
}

ACTION_RECOVERY_DAY = "Recovery day. Light movement only. Prioritize sleep tonight."
ACTION_CAP_INTENSITY = "Moderate intensity only. No new PRs today."
ACTION_SLEEP_DEFICIT = "Sleep deficit. Delay caffeine 90min after waking. Front-load protein."
ACTION_SHORT_SLEEP = "Add a 20-min nap if possible. Avoid screens after 9pm."
ACTION_ELEVATED_RHR = "Elevated resting HR. Possible illness or stress. Monitor closely."
ACTION_CAFFEINE_CAP = "Caffeine cap reached ({caffeine_mg}mg). Switch to water."

NO_HRV_DATA = "No HRV data logged yet. Wear your device overnight for accurate HRV."
NO_SLEEP_DATA = "No sleep data found. Make sure sleep tracking is enabled on your device."
NO_LOG_DATA = "Nothing logged yet today. Log your {topic} intake to get tracking."

TopicHandler = Callable[[BiometricSnapshot, ReadinessScore, Optional[DailyLogSummary]], str]


class RuleBasedCoach:
    """Generates briefings, check-ins and query answers from fixed rules."""

    def __init__(self, filler_actions: Sequence[str] = DEFAULT_FILLER_ACTIONS) -> None:
        self.filler_actions = tuple(filler_actions)

    # ------------------------------------------------------------------
    # Morning briefing
    # ------------------------------------------------------------------

    def generate_morning_briefing(
        self,
        readiness: ReadinessScore,
        snapshot: BiometricSnapshot,
        baseline: BaselineData,
        log_summary: DailyLogSummary,
    ) -> CoachingMessage:
        """
        Build the morning briefing.

        Content is the headline for the readiness label followed by one
        insight per signal. Action items are exactly three: the ones
        triggered by HRV, sleep, resting HR and caffeine (in that order),
        padded from the filler list.
        """
        builder = MessageBuilder(MessageType.MORNING_BRIEFING, fillers=self.filler_actions)
        builder.add_section(HEADLINES[readiness.label].format(score=readiness.score))

        self._add_hrv_insight(builder, snapshot, baseline)
        self._add_sleep_insight(builder, snapshot)
        self._add_rhr_insight(builder, snapshot, baseline)

        if log_summary.caffeine_over_limit:
            builder.add_action(ACTION_CAFFEINE_CAP.format(caffeine_mg=log_summary.caffeine_mg))

        return builder.build()

    def _add_hrv_insight(
        self,
        builder: MessageBuilder,
        snapshot: BiometricSnapshot,
        baseline: BaselineData,
    ) -> None:
        if snapshot.hrv is None or baseline.avg_hrv <= 0:
            return

        sdnn = snapshot.hrv.sdnn
        ratio = sdnn / baseline.avg_hrv
        if ratio < 0.70:
            builder.add_section(
                f"HRV is {sdnn:.0f}ms, {(1 - ratio) * 100:.0f}% below your baseline."
            )
            builder.add_action(ACTION_RECOVERY_DAY)
        elif ratio < 0.85:
            builder.add_section(f"HRV slightly suppressed at {sdnn:.0f}ms.")
            builder.add_action(ACTION_CAP_INTENSITY)
        else:
            builder.add_section(f"HRV healthy at {sdnn:.0f}ms.")

    def _add_sleep_insight(self, builder: MessageBuilder, snapshot: BiometricSnapshot) -> None:
        sleep = snapshot.sleep
        if sleep is None:
            builder.add_section(
                "No sleep data found. Track your sleep for better insights."
            )
            return

        hours = sleep.duration_hours
        if hours < 6.0:
            builder.add_section(f"Short sleep: {hours:.1f}h logged.")
            builder.add_action(ACTION_SLEEP_DEFICIT)
        elif hours < 7.0:
            builder.add_section(f"Sleep: {hours:.1f}h, slightly under target.")
            builder.add_action(ACTION_SHORT_SLEEP)
        else:
            builder.add_section(f"Sleep: {hours:.1f}h. Well rested.")

    def _add_rhr_insight(
        self,
        builder: MessageBuilder,
        snapshot: BiometricSnapshot,
        baseline: BaselineData,
    ) -> None:
        rhr = snapshot.resting_heart_rate
        if rhr is None or baseline.avg_resting_hr <= 0:
            return

        if rhr / baseline.avg_resting_hr > 1.10:
            builder.add_section(
                f"Resting HR elevated: {rhr}bpm vs baseline {int(baseline.avg_resting_hr)}bpm."
            )
            builder.add_action(ACTION_ELEVATED_RHR)

    # ------------------------------------------------------------------
    # Check-ins
    # ------------------------------------------------------------------

    def generate_check_in(
        self,
        snapshot: BiometricSnapshot,
        log_summary: DailyLogSummary,
        hour_of_day: int,
    ) -> CoachingMessage:
        """
        Build a time-of-day check-in.

        11-13 midday, 14-17 afternoon, 20 onwards evening; other hours get a
        generic nudge.

        Raises:
            ValidationError: If hour_of_day is not in 0-23
        """
        if not 0 <= hour_of_day <= 23:
            raise ValidationError(
                f"hour_of_day must be between 0 and 23, got {hour_of_day}",
                field="hour_of_day",
            )

        builder = MessageBuilder(MessageType.CHECK_IN, separator="\n")
        water_ml = log_summary.water_ml
        caffeine_mg = log_summary.caffeine_mg

        if 11 <= hour_of_day <= 13:
            builder.add_section("Midday check-in.")
            if water_ml < 500:
                builder.add_section("Hydration low. Drink a glass now.")
            if caffeine_mg > 200:
                builder.add_section(f"Limit additional caffeine. You're at {caffeine_mg}mg.")
            builder.add_section("Step away from screens for 5 minutes. Your focus will thank you.")
        elif 14 <= hour_of_day <= 17:
            builder.add_section("Afternoon check-in.")
            builder.add_section("Energy dip is normal here. Try movement, not another coffee.")
            if water_ml < 1000:
                builder.add_section(
                    f"Water target: aim for {DAILY_WATER_TARGET_ML - water_ml}ml more today."
                )
        elif hour_of_day >= 20:
            builder.add_section("Evening wind-down.")
            builder.add_section("Dim lights, cut screens at least 1h before sleep.")
            if caffeine_mg > 100:
                builder.add_section("No more caffeine. It stays in your system for 5-6h.")
            builder.add_section("Tomorrow's readiness starts with tonight's sleep.")
        else:
            builder.add_section("You're doing great. Keep moving forward.")

        return builder.build()

    # ------------------------------------------------------------------
    # Free-text queries
    # ------------------------------------------------------------------

    def respond_to_query(
        self,
        query: str,
        snapshot: BiometricSnapshot,
        readiness: ReadinessScore,
        log_summary: Optional[DailyLogSummary] = None,
    ) -> CoachingMessage:
        """
        Answer a free-text question.

        The query is matched case-insensitively against the topics in
        `query_topics()` and the first match wins. Unmatched queries get a
        reply based on the readiness score.
        """
        lower = query.lower()
        handler = self._generic_response
        for keywords, topic_handler in self.query_topics():
            if any(keyword in lower for keyword in keywords):
                handler = topic_handler
                break

        return CoachingMessage(
            type=MessageType.COACH_RESPONSE,
            content=handler(snapshot, readiness, log_summary),
        )

    def query_topics(self) -> Tuple[Tuple[Tuple[str, ...], TopicHandler], ...]:
        """Topic keywords in match priority order."""
        return (
            (("hrv",), self._hrv_response),
            (("sleep",), self._sleep_response),
            (("caffeine", "coffee"), self._caffeine_response),
            (("water", "hydrat"), self._water_response),
            (("workout", "train", "exercise"), self._workout_response),
            (("recover", "rest"), self._recovery_response),
            (("score", "readiness"), self._score_response),
        )

    def _hrv_response(self, snapshot, readiness, log_summary) -> str:
        if snapshot.hrv is None:
            return NO_HRV_DATA

        if readiness.label in (ReadinessLabel.PEAK, ReadinessLabel.HIGH):
            verdict = "Above your baseline. Your nervous system is well recovered."
        elif readiness.label == ReadinessLabel.MODERATE:
            verdict = "Near baseline. Normal day."
        else:
            verdict = "Below baseline. Your body wants rest more than training."
        return f"Your HRV is {snapshot.hrv.sdnn:.0f}ms. {verdict}"

    def _sleep_response(self, snapshot, readiness, log_summary) -> str:
        sleep = snapshot.sleep
        if sleep is None:
            return NO_SLEEP_DATA

        hours = sleep.duration_hours
        if hours >= 8.0:
            verdict = "Excellent. You're fully charged."
        elif hours >= 7.0:
            verdict = "Solid night. Good foundation for the day."
        elif hours >= 6.0:
            verdict = "Slightly under. Make tonight count."
        else:
            verdict = "Sleep deficit detected. Prioritize recovery."
        return (
            f"Last night: {hours:.1f}h total. "
            f"Deep: {sleep.deep_minutes}min, REM: {sleep.rem_minutes}min. {verdict}"
        )

    def _caffeine_response(self, snapshot, readiness, log_summary) -> str:
        if log_summary is None:
            return NO_LOG_DATA.format(topic="caffeine")

        caffeine_mg = log_summary.caffeine_mg
        if log_summary.caffeine_over_limit:
            advice = f"You're over the {CAFFEINE_LIMIT_MG}mg threshold. Stop here."
        else:
            advice = f"You have {CAFFEINE_LIMIT_MG - caffeine_mg}mg headroom."
        return f"You've had {caffeine_mg}mg caffeine today. {advice}"

    def _water_response(self, snapshot, readiness, log_summary) -> str:
        if log_summary is None:
            return NO_LOG_DATA.format(topic="water")

        return (
            f"You've logged {log_summary.water_ml}ml today "
            f"(~{log_summary.water_glasses} glasses). Target is 2,000-2,500ml."
        )

    def _workout_response(self, snapshot, readiness, log_summary) -> str:
        score = readiness.score
        if score >= 9:
            return "Peak day. Go hard: heavy compound lifts, intense cardio, new PRs. You're ready."
        if score >= 7:
            return "Good training day. 75-85% intensity. Focus on form and progression."
        if score >= 5:
            return "Moderate session. Aerobic work, skill practice, or hypertrophy volume."
        if score >= 3:
            return "Low-intensity only. Walk, yoga, mobility work. No heavy loading."
        return "Rest day. Seriously, movement only if it feels restorative."

    def _recovery_response(self, snapshot, readiness, log_summary) -> str:
        if readiness.score <= 4:
            advice = "Yes, take it easy today. Active recovery only."
        else:
            advice = "You've got enough in the tank for a moderate session."
        return f"Readiness is {readiness.score}/10. {advice}"

    def _score_response(self, snapshot, readiness, log_summary) -> str:
        return (
            f"Your readiness today is {readiness.score}/10 ({readiness.label.value}). "
            f"HRV: {readiness.hrv_score * 100:.0f}% | "
            f"Sleep: {readiness.sleep_score * 100:.0f}% | "
            f"RHR: {readiness.rhr_score * 100:.0f}% | "
            f"Activity: {readiness.activity_score * 100:.0f}%"
        )

    def _generic_response(self, snapshot, readiness, log_summary) -> str:
        score = readiness.score
        if score >= 7:
            advice = "you're in good shape. Stay hydrated and stay consistent."
        elif score >= 5:
            advice = "manage your energy. Don't overcommit today."
        else:
            advice = "recovery is the priority. Rest, hydrate, sleep well tonight."
        return f"Based on your {score}/10 readiness, {advice}"
