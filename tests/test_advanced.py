"""Tests for the advanced coach and its prompts."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from peak_coach.coaching import (
    AdvancedCoach,
    LLMAdvancedCoach,
    UnavailableAdvancedCoach,
    build_advanced_coach,
)
from peak_coach.coaching.prompts import (
    COACH_SYSTEM,
    build_conversation_prompt,
    build_morning_prompt,
    format_biometrics,
    format_history,
)
from peak_coach.config import Settings
from peak_coach.exceptions import (
    AdvancedCoachUnavailableError,
    ErrorCode,
    LLMServiceUnavailableError,
    LLMTimeoutError,
)
from peak_coach.models import (
    CoachingContext,
    ConversationRole,
    ConversationTurn,
    DailyLogSummary,
    MessageType,
)


@pytest.fixture
def context(make_snapshot, make_sleep, make_readiness):
    return CoachingContext(
        message_type=MessageType.MORNING_BRIEFING,
        readiness=make_readiness(7),
        snapshot=make_snapshot(hrv=55.0, rhr=58, sleep=make_sleep(420, deep=60, rem=80)),
        log_summary=DailyLogSummary(
            water_ml=500, caffeine_mg=95, supplements=("Magnesium",),
        ),
    )


@pytest.fixture
def llm_client():
    client = MagicMock()
    client.completion = AsyncMock(return_value="Strong start today.")
    return client


class TestPrompts:
    """Tests for prompt formatting."""

    def test_biometrics_lists_present_readings_only(self, context):
        text = format_biometrics(context)

        assert "Readiness score: 7/10 (high)" in text
        assert "HRV (SDNN): 55.0ms" in text
        assert "Resting HR: 58 bpm" in text
        assert "Sleep: 7.0h total" in text
        assert "Deep: 60min, REM: 80min" in text
        assert "SpO2" not in text
        assert "Steps" not in text

    def test_morning_prompt_includes_log(self, context):
        prompt = build_morning_prompt(context)
        assert "Water: 500ml | Caffeine: 95mg | Supplements: Magnesium" in prompt
        assert "Three concrete action items" in prompt

    def test_history_keeps_last_turns(self):
        turns = [
            ConversationTurn(role=ConversationRole.USER, content=f"q{i}") for i in range(6)
        ]
        text = format_history(turns)
        assert "q0" not in text
        assert "q1" not in text
        assert "User: q5" in text

    def test_empty_history(self):
        assert format_history(()) == ""

    def test_conversation_prompt(self, context):
        query_context = context.model_copy(update={
            "message_type": MessageType.COACH_RESPONSE,
            "query": "Should I lift heavy?",
            "history": (ConversationTurn(role=ConversationRole.COACH, content="Morning!"),),
        })
        prompt = build_conversation_prompt(query_context)
        assert "User: Should I lift heavy?" in prompt
        assert "Coach: Morning!" in prompt


class TestUnavailableAdvancedCoach:
    @pytest.mark.asyncio
    async def test_never_available(self, context):
        coach = UnavailableAdvancedCoach()
        assert await coach.check_availability() is False
        with pytest.raises(AdvancedCoachUnavailableError):
            await coach.generate(context)

    def test_satisfies_protocol(self, settings):
        assert isinstance(UnavailableAdvancedCoach(), AdvancedCoach)
        assert isinstance(LLMAdvancedCoach(settings=settings), AdvancedCoach)


class TestLLMAdvancedCoach:
    """Tests for the LLM-backed coach."""

    @pytest.mark.asyncio
    async def test_morning_generation(self, settings, llm_client, context):
        coach = LLMAdvancedCoach(settings=settings, llm_client=llm_client)

        assert await coach.generate(context) == "Strong start today."
        kwargs = llm_client.completion.call_args.kwargs
        assert kwargs["system"] == COACH_SYSTEM
        assert kwargs["user"] == build_morning_prompt(context)
        assert kwargs["timeout"] == settings.advanced_coach_timeout_seconds

    @pytest.mark.asyncio
    async def test_query_uses_conversation_prompt(self, settings, llm_client, context):
        coach = LLMAdvancedCoach(settings=settings, llm_client=llm_client)
        query_context = context.model_copy(update={
            "message_type": MessageType.COACH_RESPONSE,
            "query": "How's my HRV?",
        })

        await coach.generate(query_context)

        assert llm_client.completion.call_args.kwargs["user"] == build_conversation_prompt(
            query_context
        )

    @pytest.mark.asyncio
    async def test_no_api_key_is_unavailable(self, settings, context):
        coach = LLMAdvancedCoach(settings=settings)

        assert await coach.check_availability() is False
        with pytest.raises(AdvancedCoachUnavailableError):
            await coach.generate(context)

    @pytest.mark.asyncio
    async def test_llm_failure_maps_to_unavailable(self, settings, llm_client, context):
        llm_client.completion.side_effect = LLMTimeoutError()
        coach = LLMAdvancedCoach(settings=settings, llm_client=llm_client)

        with pytest.raises(AdvancedCoachUnavailableError) as exc_info:
            await coach.generate(context)
        assert exc_info.value.details["cause"] == ErrorCode.LLM_TIMEOUT.value

    @pytest.mark.asyncio
    async def test_availability_cached(self, settings, llm_client):
        coach = LLMAdvancedCoach(settings=settings, llm_client=llm_client)
        assert await coach.check_availability() is True
        coach._llm_client = None
        assert await coach.check_availability() is True

    @pytest.mark.asyncio
    async def test_unavailable_service_error(self, settings, llm_client, context):
        llm_client.completion.side_effect = LLMServiceUnavailableError()
        coach = LLMAdvancedCoach(settings=settings, llm_client=llm_client)

        with pytest.raises(AdvancedCoachUnavailableError):
            await coach.generate(context)


class TestBuildAdvancedCoach:
    def test_disabled_gives_stub(self, settings):
        assert isinstance(build_advanced_coach(settings), UnavailableAdvancedCoach)

    def test_enabled_gives_llm_coach(self):
        settings = Settings(_env_file=None, advanced_coach_enabled=True, openai_api_key="sk-test")
        coach = build_advanced_coach(settings)
        assert isinstance(coach, LLMAdvancedCoach)
        assert coach.settings is settings
