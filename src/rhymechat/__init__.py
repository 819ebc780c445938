"""
rhymechat: a terminal chat client that asks a language model for rhymes.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .chat import ChatSession, SessionState
from .llm import (
    ChatMessage,
    CompletionError,
    LLMProvider,
    LLMResponse,
    create_llm_provider,
)

__all__ = [
    "ChatMessage",
    "ChatSession",
    "CompletionError",
    "LLMProvider",
    "LLMResponse",
    "SessionState",
    "create_llm_provider",
]
