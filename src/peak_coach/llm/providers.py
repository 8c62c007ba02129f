"""
LLM provider for the advanced coach.

This module wraps the OpenAI chat API with:
- Automatic retry with exponential backoff
- Rate limit handling
- Mapping of SDK errors onto the package's LLM exceptions
"""

from typing import Awaitable, Callable, Optional, TypeVar
import asyncio
import logging

from openai import AsyncOpenAI, APIError, APIConnectionError, RateLimitError

from ..config import Settings, get_settings
from ..exceptions import (
    LLMError,
    LLMRateLimitError,
    LLMResponseInvalidError,
    LLMServiceUnavailableError,
    LLMTimeoutError,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryConfig:
    """Configuration for retry behavior."""

    def __init__(
        self,
        max_retries: int = 2,
        base_delay: float = 1.0,
        max_delay: float = 10.0,
        exponential_base: float = 2.0,
        retryable_status_codes: Optional[set[int]] = None,
    ) -> None:
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.retryable_status_codes = retryable_status_codes or {429, 500, 502, 503, 504}

    def get_delay(self, attempt: int) -> float:
        """Calculate delay for a given attempt number."""
        delay = self.base_delay * (self.exponential_base ** attempt)
        return min(delay, self.max_delay)


class LLMClient:
    """
    Chat completion client with retry logic and typed errors.

    Raises LLMServiceUnavailableError at construction when no API key is
    configured, so callers can treat a missing key as "unavailable".
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        api_key: Optional[str] = None,
        retry_config: Optional[RetryConfig] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        settings = settings or get_settings()
        api_key = api_key or settings.openai_api_key

        if client is None and not api_key:
            raise LLMServiceUnavailableError(
                message="OpenAI API key not configured",
                details={"configuration_missing": "openai_api_key"},
            )

        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = settings.llm_model
        self.retry_config = retry_config or RetryConfig()
        self._logger = logger

    async def _execute_with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str = "LLM request",
    ) -> T:
        """
        Execute an operation with retry logic.

        Raises:
            LLMError: On unrecoverable failure
        """
        last_exception: Optional[Exception] = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                return await operation()

            except RateLimitError as e:
                last_exception = e
                if attempt < self.retry_config.max_retries:
                    delay = self.retry_config.get_delay(attempt)
                    self._logger.warning(
                        f"{operation_name} rate limited. "
                        f"Retry {attempt + 1}/{self.retry_config.max_retries} in {delay:.1f}s"
                    )
                    await asyncio.sleep(delay)
                else:
                    raise LLMRateLimitError()

            except APIConnectionError as e:
                last_exception = e
                if attempt < self.retry_config.max_retries:
                    delay = self.retry_config.get_delay(attempt)
                    self._logger.warning(
                        f"{operation_name} connection error. "
                        f"Retry {attempt + 1}/{self.retry_config.max_retries} in {delay:.1f}s: {e}"
                    )
                    await asyncio.sleep(delay)
                else:
                    raise LLMServiceUnavailableError(
                        message=f"Connection to LLM service failed: {e}",
                    )

            except APIError as e:
                last_exception = e
                status = getattr(e, "status_code", 500)

                if status not in self.retry_config.retryable_status_codes:
                    raise LLMError(
                        message=f"LLM API error: {e}",
                        details={"status_code": status},
                    )
                if attempt < self.retry_config.max_retries:
                    delay = self.retry_config.get_delay(attempt)
                    self._logger.warning(
                        f"{operation_name} API error (status {status}). "
                        f"Retry {attempt + 1}/{self.retry_config.max_retries} in {delay:.1f}s"
                    )
                    await asyncio.sleep(delay)
                else:
                    raise LLMServiceUnavailableError(
                        message=f"LLM API error after retries: {e}",
                        details={"status_code": status},
                    )

            except asyncio.TimeoutError:
                raise LLMTimeoutError()

        raise LLMError(message=f"Operation failed after all retries: {last_exception}")

    async def completion(
        self,
        system: str,
        user: str,
        max_tokens: int = 400,
        temperature: float = 0.4,
        timeout: Optional[float] = 30.0,
    ) -> str:
        """
        Get a completion from the LLM.

        Args:
            system: System prompt
            user: User message
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            timeout: Request timeout in seconds

        Returns:
            The assistant's response text

        Raises:
            LLMError: On failure
        """
        async def _make_request() -> str:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": user},
                    ],
                    max_tokens=max_tokens,
                    temperature=temperature,
                ),
                timeout=timeout,
            )
            if not response.choices or response.choices[0].message is None:
                raise LLMResponseInvalidError(message="LLM response has no choices")
            content = response.choices[0].message.content
            if not content or not content.strip():
                raise LLMResponseInvalidError(message="Empty response from LLM")
            return content.strip()

        return await self._execute_with_retry(_make_request, "completion")
