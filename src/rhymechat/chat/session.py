"""Chat session controller.

Hides the submission state machine from the terminal UI:

    idle-editing --enter (non-empty)--> awaiting-completion
    awaiting-completion --reply--> idle-editing
    awaiting-completion --error--> terminated

The UI forwards its events here and re-renders from ``state``; nothing in
this module knows about widgets.
"""

from ..llm import CompletionError, LLMProvider
from ..llm.models import ChatMessage
from .models import SessionState

PROMPT_TEMPLATE = "What rhymes with the word '{text}'?"
SENDER_PREFIX = "You: "
RESPONDER_PREFIX = "AI: "


def build_prompt(text: str) -> str:
    """Embed raw user input in the fixed prompt template."""
    return PROMPT_TEMPLATE.format(text=text)


def format_message(message: ChatMessage) -> str:
    """Plain transcript line for a message, e.g. ``You: ...`` or ``AI: ...``."""
    prefix = SENDER_PREFIX if message.role == "user" else RESPONDER_PREFIX
    return prefix + message.content


class ChatSession:
    """Owns the session state and the single outstanding completion request."""

    def __init__(self, client: LLMProvider, state: SessionState | None = None) -> None:
        self._client = client
        self._state = state or SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def set_input(self, text: str) -> None:
        """Mirror the input widget's buffered value."""
        self._state.input_buffer = text

    def resize(self, width: int, height: int) -> None:
        """Record new terminal geometry. Transcript and input are untouched."""
        self._state.width = width
        self._state.height = height

    def begin_submission(self) -> str | None:
        """Start a submission from the current input buffer.

        Returns:
            The prompt to send, or None when nothing should be sent: the
            buffer is empty, a request is already outstanding, or the
            session has terminated.
        """
        if self._state.busy or self._state.terminated:
            return None
        if not self._state.input_buffer:
            return None
        self._state.busy = True
        return build_prompt(self._state.input_buffer)

    def finish_submission(self, prompt: str, reply: str) -> None:
        """Append the exchange to the transcript and clear the input."""
        self._state.messages.append(ChatMessage(role="user", content=prompt))
        self._state.messages.append(ChatMessage(role="assistant", content=reply))
        self._state.input_buffer = ""
        self._state.busy = False

    def fail_submission(self, error: Exception) -> None:
        """Record a fatal completion error. Nothing is appended."""
        self._state.error = error
        self._state.busy = False

    def cancel_submission(self) -> None:
        """Drop an outstanding request without touching transcript or input."""
        self._state.busy = False

    async def submit(self) -> bool:
        """Run one full submission against the completion client.

        Returns:
            True if an exchange was appended, False if the submission was
            ignored (empty input, busy or terminated session).

        Raises:
            CompletionError: The request failed; the session is terminated.
        """
        prompt = self.begin_submission()
        if prompt is None:
            return False
        await self.complete_submission(prompt)
        return True

    async def complete_submission(self, prompt: str) -> None:
        """Send a prompt obtained from ``begin_submission`` and apply the result."""
        try:
            reply = await self._client.complete(prompt)
        except CompletionError as e:
            self.fail_submission(e)
            raise

        self.finish_submission(prompt, reply)

    def transcript_lines(self) -> list[str]:
        """Plain-text transcript, one line per message, in submission order."""
        return [format_message(message) for message in self._state.messages]
