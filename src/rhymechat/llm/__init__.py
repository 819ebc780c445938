from .base import LLMProvider
from .errors import (
    AuthenticationError,
    CompletionError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
)
from .factory import create_llm_provider
from .models import ChatMessage, CompletionRequest, LLMResponse
from .providers import OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "CompletionRequest",
    "LLMResponse",
    "OpenAIProvider",
    "AuthenticationError",
    "CompletionError",
    "MalformedResponseError",
    "NetworkError",
    "RateLimitError",
]
