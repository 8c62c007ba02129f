"""
Custom exceptions for Peak Coach.

This module defines the exception hierarchy used across the package. Each
exception carries:
- A descriptive message
- An error code for callers that need to branch on the failure kind
- Optional details for debugging

Missing biometric or log data is never an error. Exceptions are raised for
invalid input and for failures of the advanced (generative) coach.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Coaching errors
    COACH_ERROR = "COACH_ERROR"
    ADVANCED_COACH_UNAVAILABLE = "ADVANCED_COACH_UNAVAILABLE"

    # LLM errors
    LLM_SERVICE_UNAVAILABLE = "LLM_SERVICE_UNAVAILABLE"
    LLM_RATE_LIMITED = "LLM_RATE_LIMITED"
    LLM_RESPONSE_INVALID = "LLM_RESPONSE_INVALID"
    LLM_TIMEOUT = "LLM_TIMEOUT"
    LLM_API_ERROR = "LLM_API_ERROR"


class PeakCoachError(Exception):
    """
    Base exception for all Peak Coach errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(PeakCoachError):
    """Raised when an argument passed to a core function is invalid."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


# ============================================================================
# Coaching Errors
# ============================================================================

class CoachError(PeakCoachError):
    """Base class for coaching errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.COACH_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, code=code, details=details)


class AdvancedCoachUnavailableError(CoachError):
    """
    Raised when the advanced coach cannot produce a message.

    Callers redirect to the rule-based coach on this error and on no other.
    """

    def __init__(
        self,
        message: str = "Advanced coach is not available",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.ADVANCED_COACH_UNAVAILABLE,
            details=details,
        )


# ============================================================================
# LLM Service Errors
# ============================================================================

class LLMError(PeakCoachError):
    """Base class for LLM-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LLM_API_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, code=code, details=details)


class LLMServiceUnavailableError(LLMError):
    """Raised when the LLM service is unavailable."""

    def __init__(
        self,
        message: str = "LLM service is currently unavailable",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.LLM_SERVICE_UNAVAILABLE,
            details=details,
        )


class LLMRateLimitError(LLMError):
    """Raised when LLM rate limits are hit."""

    def __init__(
        self,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if retry_after:
            error_details["retry_after_seconds"] = retry_after
        super().__init__(
            message="LLM service rate limit exceeded. Please try again later.",
            code=ErrorCode.LLM_RATE_LIMITED,
            details=error_details,
        )


class LLMTimeoutError(LLMError):
    """Raised when LLM request times out."""

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if timeout_seconds:
            error_details["timeout_seconds"] = timeout_seconds
        super().__init__(
            message="LLM request timed out",
            code=ErrorCode.LLM_TIMEOUT,
            details=error_details,
        )


class LLMResponseInvalidError(LLMError):
    """Raised when the LLM returns an unusable response."""

    def __init__(
        self,
        message: str = "Failed to parse LLM response",
        raw_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if raw_response:
            error_details["raw_response_preview"] = raw_response[:500]
        super().__init__(
            message=message,
            code=ErrorCode.LLM_RESPONSE_INVALID,
            details=error_details,
        )
