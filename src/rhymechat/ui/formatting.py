"""Text formatting utilities for the TUI.

Hides how transcript lines are styled: only the ``You: `` prefix of a user
line carries the sender colour, while an assistant line is coloured in full.
"""

from collections.abc import Iterable

from rich.text import Text

from ..chat import RESPONDER_PREFIX, SENDER_PREFIX
from ..llm.models import ChatMessage
from .config import RESPONDER_COLOR, SENDER_COLOR


def render_message(message: ChatMessage) -> Text:
    """Render one transcript line."""
    if message.role == "user":
        return Text.assemble((SENDER_PREFIX, SENDER_COLOR), message.content)
    return Text(RESPONDER_PREFIX + message.content, style=RESPONDER_COLOR)


def render_transcript(messages: Iterable[ChatMessage]) -> Text:
    """Render the whole transcript, one message per line."""
    return Text("\n").join(render_message(message) for message in messages)
