"""
Coach Service

Composes the injected providers with the scorer and the two coaches:
1. Reads today's snapshot, the baseline and the log summary
2. Calculates readiness
3. Asks the advanced coach, if one is available
4. Falls back to the rule-based coach when it is not
"""

import logging
from typing import Iterable, Optional

from ..exceptions import AdvancedCoachUnavailableError
from ..models import (
    CoachingContext,
    CoachingMessage,
    ConversationTurn,
    MessageSource,
    MessageType,
    ReadinessScore,
)
from ..providers import BaselineProvider, DailyLogProvider, SnapshotProvider
from ..readiness import DEFAULT_TARGET_SLEEP_HOURS, score_readiness
from .advanced import AdvancedCoach, UnavailableAdvancedCoach
from .rules import RuleBasedCoach


logger = logging.getLogger(__name__)


class CoachService:
    """Readiness and coaching for today, with rule-based fallback."""

    def __init__(
        self,
        snapshot_provider: SnapshotProvider,
        baseline_provider: BaselineProvider,
        log_provider: DailyLogProvider,
        advanced_coach: Optional[AdvancedCoach] = None,
        rule_coach: Optional[RuleBasedCoach] = None,
        target_sleep_hours: float = DEFAULT_TARGET_SLEEP_HOURS,
    ) -> None:
        self.snapshot_provider = snapshot_provider
        self.baseline_provider = baseline_provider
        self.log_provider = log_provider
        self.advanced_coach = advanced_coach or UnavailableAdvancedCoach()
        self.rule_coach = rule_coach or RuleBasedCoach()
        self.target_sleep_hours = target_sleep_hours

    def get_readiness(self) -> ReadinessScore:
        """Score today against the current baseline."""
        return score_readiness(
            self.snapshot_provider.get_today_snapshot(),
            self.baseline_provider.get_baseline(),
            target_sleep_hours=self.target_sleep_hours,
        )

    async def _try_advanced(self, context: CoachingContext) -> Optional[CoachingMessage]:
        """Advanced-coach message, or None when the coach is unavailable."""
        try:
            content = await self.advanced_coach.generate(context)
        except AdvancedCoachUnavailableError as e:
            logger.info(f"Falling back to rule-based coach: {e.message}")
            return None

        return CoachingMessage(
            type=context.message_type,
            content=content,
            source=MessageSource.ADVANCED_MODEL,
        )

    async def morning_briefing(self) -> CoachingMessage:
        snapshot = self.snapshot_provider.get_today_snapshot()
        baseline = self.baseline_provider.get_baseline()
        log_summary = self.log_provider.get_daily_summary()
        readiness = score_readiness(
            snapshot, baseline, target_sleep_hours=self.target_sleep_hours
        )

        context = CoachingContext(
            message_type=MessageType.MORNING_BRIEFING,
            readiness=readiness,
            snapshot=snapshot,
            log_summary=log_summary,
        )
        message = await self._try_advanced(context)
        if message is not None:
            return message

        return self.rule_coach.generate_morning_briefing(
            readiness, snapshot, baseline, log_summary
        )

    async def ask_coach(
        self,
        query: str,
        history: Iterable[ConversationTurn] = (),
    ) -> CoachingMessage:
        snapshot = self.snapshot_provider.get_today_snapshot()
        log_summary = self.log_provider.get_daily_summary()
        # Score the same snapshot that is handed to the coach
        readiness = score_readiness(
            snapshot,
            self.baseline_provider.get_baseline(),
            target_sleep_hours=self.target_sleep_hours,
        )

        context = CoachingContext(
            message_type=MessageType.COACH_RESPONSE,
            readiness=readiness,
            snapshot=snapshot,
            log_summary=log_summary,
            query=query,
            history=tuple(history),
        )
        message = await self._try_advanced(context)
        if message is not None:
            return message

        return self.rule_coach.respond_to_query(query, snapshot, readiness, log_summary)

    def check_in(self, hour_of_day: int) -> CoachingMessage:
        """Check-ins always come from the rule-based coach."""
        return self.rule_coach.generate_check_in(
            self.snapshot_provider.get_today_snapshot(),
            self.log_provider.get_daily_summary(),
            hour_of_day,
        )
