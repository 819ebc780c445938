import json
from typing import Any

import httpx
import openai
from openai import AsyncOpenAI

from ..base import LLMProvider
from ..errors import MalformedResponseError, NetworkError, classify_openai_error
from ..models import CompletionRequest, LLMResponse

DEFAULT_MODEL = "gpt-4o"


class OpenAIProvider(LLMProvider):
    """OpenAI completion provider.

    Hidden design decisions:
    - OpenAI API client initialization
    - Request construction (one user message, no system prompt, no sampling knobs)
    - Per-request handle scoping
    - Error classification
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key, passed explicitly rather than read from the environment
            model: Model used for every request
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        # A failed request is fatal to the session, never retried
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    async def chat_completion(self, prompt: str) -> LLMResponse:
        """Generate a completion for a single user prompt.

        The request handle is held only for the duration of the call and
        released on exit from the ``async with`` block, whether the call
        succeeded or not.

        Args:
            prompt: Prompt text sent as the only user message

        Returns:
            LLMResponse with the assistant text

        Raises:
            CompletionError: Classified failure of the request
        """
        request = CompletionRequest.for_prompt(prompt, self._model)

        try:
            async with self._client.chat.completions.with_streaming_response.create(
                model=request.model,
                messages=request.to_openai_messages(),
            ) as raw_response:
                completion = await raw_response.parse()
        except openai.OpenAIError as e:
            raise classify_openai_error(e) from e
        # The body is read inside parse(), outside the SDK's own error mapping
        except httpx.TransportError as e:
            raise NetworkError(str(e)) from e
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"response body is not valid JSON: {e}") from e

        choices = getattr(completion, "choices", None)
        if not choices:
            raise MalformedResponseError("response contained no choices")

        message = getattr(choices[0], "message", None)
        if message is None:
            raise MalformedResponseError("first choice carried no message")

        usage = None
        if getattr(completion, "usage", None):
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        return LLMResponse(
            content=message.content or "",
            model=getattr(completion, "model", None) or request.model,
            usage=usage
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
