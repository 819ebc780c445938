"""Main Textual TUI application.

Routes terminal events to the chat session and re-renders from its state.
"""

import asyncio

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding

from ..chat import ChatSession, SessionState
from ..llm import CompletionError, LLMProvider
from .config import VIEWPORT_HEIGHT, VIEWPORT_WIDTH, LogLevel
from .styles import APP_CSS
from .widgets import ChatInputBar, DebugPanel, TranscriptView


class RhymeChatApp(App[str]):
    """Textual TUI for the rhyming chat.

    The app's return value is the input buffer at the time the user quit.
    A failed completion exits with return code 1 and leaves the error on
    ``session.state.error``.
    """

    CSS = APP_CSS
    TITLE = "rhymechat"

    BINDINGS = [
        Binding("escape", "quit_chat", "Quit", priority=True),
        Binding("ctrl+c", "quit_chat", "Quit", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(self, llm: LLMProvider, log_level: str | None = None) -> None:
        super().__init__()
        self._llm = llm
        self._log_level = log_level
        self._session = ChatSession(
            llm, SessionState(width=VIEWPORT_WIDTH, height=VIEWPORT_HEIGHT)
        )

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield TranscriptView(id="transcript")
        yield ChatInputBar(id="chat-input-bar")
        yield DebugPanel(id="debug-panel")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        if self._log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            self._trace(LogLevel.INFO, "TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._trace(LogLevel.INFO, "TUI", f"Model: {self._llm.model}")
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _trace(self, level: int, component: str, message: str) -> None:
        """Write to the log panel, if it is mounted yet."""
        for panel in self.query(DebugPanel):
            panel.add_entry(component, message, level)

    def on_resize(self, event: events.Resize) -> None:
        """Record the new geometry; the layout reflows through CSS."""
        self._session.resize(event.size.width, event.size.height)
        self._trace(LogLevel.DEBUG, "TUI", f"Resized to {event.size.width}x{event.size.height}")

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self._session.set_input(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle enter in the input bar."""
        self._session.set_input(event.value)
        prompt = self._session.begin_submission()
        if prompt is None:
            self._trace(LogLevel.DEBUG, "Session", "Submission ignored")
            return

        self._trace(LogLevel.INFO, "Session", f"Sending: {prompt}")
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(True)
        self._request_completion(prompt)

    @work(exclusive=True)
    async def _request_completion(self, prompt: str) -> None:
        """Run the completion request as a background async worker.

        Exactly one request is outstanding: the input bar stays disabled
        until the reply is applied.
        """
        try:
            await self._session.complete_submission(prompt)
        except CompletionError as e:
            self._trace(LogLevel.ERROR, "LLM", str(e))
            self.exit(return_code=1)
            return

        self._trace(LogLevel.INFO, "LLM", f"Received {len(self._session.state.messages[-1].content)} chars")
        transcript = self.query_one("#transcript", TranscriptView)
        transcript.show_messages(self._session.state.messages)

        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.clear()
        input_bar.set_busy(False)

    def action_quit_chat(self) -> None:
        """Quit, handing back the current input buffer.

        An in-flight request is cancelled and its reply dropped.
        """
        self._session.set_input(self.query_one("#chat-input-bar", ChatInputBar).value)
        if self._session.state.busy:
            self.workers.cancel_all()
            self._session.cancel_submission()
        self.exit(self._session.state.input_buffer)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.query_one("#debug-panel", DebugPanel).toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_chat_tui(llm: LLMProvider, log_level: str | None = None) -> RhymeChatApp:
    """Run the Textual TUI until the user quits or a request fails.

    Args:
        llm: Completion provider
        log_level: Log level for panel (debug/info/warning/error), None to hide

    Returns:
        The finished app, for its return value, return code and session state
    """
    app = RhymeChatApp(llm=llm, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await llm.close()
    return app
