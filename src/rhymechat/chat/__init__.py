from .models import SessionState
from .session import (
    PROMPT_TEMPLATE,
    RESPONDER_PREFIX,
    SENDER_PREFIX,
    ChatSession,
    build_prompt,
    format_message,
)

__all__ = [
    "ChatSession",
    "PROMPT_TEMPLATE",
    "RESPONDER_PREFIX",
    "SENDER_PREFIX",
    "SessionState",
    "build_prompt",
    "format_message",
]
