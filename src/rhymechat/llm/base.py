from abc import ABC, abstractmethod
from typing import Any

from .models import LLMResponse


class LLMProvider(ABC):
    """Abstract base class for completion providers.

    This module hides the design decision of which LLM provider to use.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping provider errors onto ``CompletionError``

    Each request is stateless: one user message in, one assistant message out.

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            reply = await provider.complete("What rhymes with the word 'cat'?")
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier used for every request."""
        pass

    @abstractmethod
    async def chat_completion(self, prompt: str) -> LLMResponse:
        """Send a single user-role prompt and return the full response.

        Args:
            prompt: Non-empty prompt text

        Returns:
            LLMResponse containing the assistant text and metadata

        Raises:
            CompletionError: On transport, auth, rate-limit or malformed-response failures
        """
        pass

    async def complete(self, prompt: str) -> str:
        """Send a single prompt and return only the assistant text."""
        response = await self.chat_completion(prompt)
        return response.content

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            # Suppress harmless cleanup errors from httpx/anyio
            if "Event loop is closed" not in str(e):
                raise
