"""
Advanced (generative) coach capability.

The advanced coach is an optional collaborator. Implementations expose an
availability check and a single fallible `generate` call; any reason they
cannot produce text surfaces as AdvancedCoachUnavailableError, which is the
caller's cue to use the rule-based coach instead.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from ..config import Settings, get_settings
from ..exceptions import AdvancedCoachUnavailableError, LLMError
from ..llm.providers import LLMClient
from ..models import CoachingContext, MessageType
from .prompts import COACH_SYSTEM, build_conversation_prompt, build_morning_prompt


logger = logging.getLogger(__name__)


@runtime_checkable
class AdvancedCoach(Protocol):
    """Capability interface for a generative coach."""

    async def check_availability(self) -> bool:
        ...

    async def generate(self, context: CoachingContext) -> str:
        """Return generated text or raise AdvancedCoachUnavailableError."""
        ...


class UnavailableAdvancedCoach:
    """Stub used when no advanced coach is configured."""

    async def check_availability(self) -> bool:
        return False

    async def generate(self, context: CoachingContext) -> str:
        raise AdvancedCoachUnavailableError("No advanced coach configured")


class LLMAdvancedCoach:
    """Advanced coach backed by a chat-completion LLM."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        llm_client: Optional[LLMClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._llm_client = llm_client
        self._available: Optional[bool] = None

    def _get_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = LLMClient(settings=self.settings)
        return self._llm_client

    async def check_availability(self) -> bool:
        """Whether an LLM client can be created. The answer is cached."""
        if self._available is None:
            try:
                self._get_client()
                self._available = True
            except LLMError as e:
                logger.info(f"Advanced coach unavailable: {e.message}")
                self._available = False
        return self._available

    async def generate(self, context: CoachingContext) -> str:
        if not await self.check_availability():
            raise AdvancedCoachUnavailableError()

        if context.message_type == MessageType.COACH_RESPONSE:
            prompt = build_conversation_prompt(context)
        else:
            prompt = build_morning_prompt(context)

        try:
            return await self._get_client().completion(
                system=COACH_SYSTEM,
                user=prompt,
                timeout=self.settings.advanced_coach_timeout_seconds,
            )
        except LLMError as e:
            raise AdvancedCoachUnavailableError(
                message=f"Advanced coach generation failed: {e.message}",
                details={"cause": e.code.value},
            ) from e


def build_advanced_coach(settings: Optional[Settings] = None) -> AdvancedCoach:
    """Pick the advanced coach implementation from configuration."""
    settings = settings or get_settings()
    if settings.advanced_coach_enabled:
        return LLMAdvancedCoach(settings=settings)
    return UnavailableAdvancedCoach()
