"""LLM integration for the advanced coach."""

from .providers import LLMClient, RetryConfig

__all__ = [
    "LLMClient",
    "RetryConfig",
]
