"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Transcript rendering and scrolling
- Input capture, length cap and submission
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Input, RichLog, Static

from ..llm.models import ChatMessage
from .config import (
    INPUT_CHAR_LIMIT,
    INPUT_PLACEHOLDER,
    INPUT_PROMPT,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    WELCOME_TEXT,
    LogLevel,
)
from .formatting import render_transcript


class TranscriptView(VerticalScroll):
    """Scrolling viewport over the rendered transcript."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = Text(WELCOME_TEXT)

    def compose(self):
        yield Static(self._content, id="transcript-content")

    @property
    def plain_text(self) -> str:
        """Text currently shown in the viewport, without styling."""
        return self._content.plain

    def show_messages(self, messages: list[ChatMessage]) -> None:
        """Rebuild the viewport content from the full transcript and scroll to the bottom."""
        self._content = render_transcript(messages)
        self.query_one("#transcript-content", Static).update(self._content)
        self.call_after_refresh(self.scroll_end, animate=False)


class ChatInputBar(Horizontal):
    """Single-line input with a prompt glyph.

    Enter always submits; there is no newline insertion.
    """

    class Submitted(Message):
        """Message sent when user presses enter, even with an empty buffer."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Changed(Message):
        """Message sent whenever the buffered value changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Static(INPUT_PROMPT, id="input-prompt")
        yield Input(
            placeholder=INPUT_PLACEHOLDER,
            max_length=INPUT_CHAR_LIMIT,
            id="chat-input",
        )

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", Input).value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(event.value))

    def clear(self) -> None:
        """Clear the buffered value."""
        self.query_one("#chat-input", Input).clear()

    def set_busy(self, busy: bool) -> None:
        """Disable input while a request is outstanding."""
        text_input = self.query_one("#chat-input", Input)
        text_input.disabled = busy
        if not busy:
            text_input.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown when RHYMECHAT_LOG_LEVEL is set or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "Session": "green",
            "LLM": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        line = Text.from_markup(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] "
        )
        # Message text may contain user input, never parse it as markup
        line.append(message)
        self.write(line)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
