"""Tests for the exception hierarchy."""

from peak_coach.exceptions import (
    AdvancedCoachUnavailableError,
    CoachError,
    ErrorCode,
    LLMError,
    LLMRateLimitError,
    LLMResponseInvalidError,
    PeakCoachError,
    ValidationError,
)


class TestPeakCoachError:
    """Tests for the base error."""

    def test_defaults(self):
        error = PeakCoachError("boom")
        assert error.message == "boom"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}
        assert str(error) == "boom"

    def test_repr(self):
        error = PeakCoachError("boom", code=ErrorCode.COACH_ERROR)
        assert repr(error) == "PeakCoachError(code=COACH_ERROR, message='boom')"

    def test_carries_no_api_serializer(self):
        """Errors are reported by the CLI from message and code only."""
        assert not hasattr(PeakCoachError("boom"), "to_dict")


class TestSubclasses:
    def test_validation_error_field(self):
        error = ValidationError("bad hour", field="hour_of_day")
        assert error.code == ErrorCode.VALIDATION_ERROR
        assert error.details == {"field": "hour_of_day"}

    def test_advanced_coach_unavailable_is_coach_error(self):
        error = AdvancedCoachUnavailableError()
        assert isinstance(error, CoachError)
        assert error.code == ErrorCode.ADVANCED_COACH_UNAVAILABLE
        assert error.message == "Advanced coach is not available"

    def test_rate_limit_retry_after(self):
        error = LLMRateLimitError(retry_after=30)
        assert isinstance(error, LLMError)
        assert error.details["retry_after_seconds"] == 30

    def test_invalid_response_preview_truncated(self):
        error = LLMResponseInvalidError(raw_response="x" * 600)
        assert len(error.details["raw_response_preview"]) == 500
