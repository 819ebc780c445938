"""Data models for a chat session.

Hides the in-memory representation of the session: the input buffer, the
transcript and the viewport geometry.
"""

from dataclasses import dataclass, field

from ..llm.models import ChatMessage


@dataclass
class SessionState:
    """The entire mutable model for one run of the program."""

    input_buffer: str = ""
    messages: list[ChatMessage] = field(default_factory=list)
    width: int = 0
    height: int = 0
    error: Exception | None = None
    busy: bool = False  # True while a completion request is outstanding

    @property
    def terminated(self) -> bool:
        """A failed completion ends the session."""
        return self.error is not None
