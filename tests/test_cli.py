"""Tests for the command-line entry point."""
from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

from rhymechat.chat import ChatSession, SessionState
from rhymechat.cli import app as cli_module
from rhymechat.llm import NetworkError, OpenAIProvider

runner = CliRunner()


def finished_tui(return_value=None, return_code=0, error=None):
    """Stand-in for a finished RhymeChatApp."""
    session = ChatSession(client=None, state=SessionState(error=error))  # type: ignore[arg-type]
    return SimpleNamespace(return_value=return_value, return_code=return_code, session=session)


@pytest.fixture
def fake_tui(monkeypatch):
    """Replace the TUI runner; returns the list of calls it received."""

    def _install(result):
        calls = []

        async def _run(llm, log_level=None):
            calls.append((llm, log_level))
            return result

        monkeypatch.setattr(cli_module, "run_chat_tui", _run)
        return calls

    return _install


class TestChatCommand:
    """Tests for the single chat command."""

    def test_missing_api_key_exits_with_code_1(self, monkeypatch, fake_tui):
        """Test that no session starts without a credential."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        calls = fake_tui(finished_tui())

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 1
        assert "API key must be set via the 'OPENAI_API_KEY' environment variable" in result.output
        assert calls == []

    def test_quit_prints_input_buffer(self, monkeypatch, fake_tui):
        """Test that the unsent input is the last line of output."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.delenv("RHYMECHAT_LOG_LEVEL", raising=False)
        calls = fake_tui(finished_tui(return_value="hello"))

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "hello"
        llm, log_level = calls[0]
        assert isinstance(llm, OpenAIProvider)
        assert llm.model == "gpt-4o"
        assert log_level is None

    def test_quit_prints_input_verbatim(self, monkeypatch, fake_tui):
        """Test that emoji codes and markup in the buffer are printed as typed."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        buffer = "what about :cat: and :smile: [bold]x[/bold]"
        fake_tui(finished_tui(return_value=buffer))

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == buffer

    def test_completion_error_is_printed_verbatim(self, monkeypatch, fake_tui):
        """Test that the error report does not rewrite emoji codes."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        fake_tui(finished_tui(return_code=1, error=NetworkError("host :smile: unreachable")))

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 1
        assert "host :smile: unreachable" in result.output

    def test_log_level_from_environment(self, monkeypatch, fake_tui):
        """Test that RHYMECHAT_LOG_LEVEL reaches the TUI."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("RHYMECHAT_LOG_LEVEL", "debug")
        calls = fake_tui(finished_tui(return_value=""))

        runner.invoke(cli_module.app, [])

        assert calls[0][1] == "debug"

    def test_completion_error_exits_with_code_1(self, monkeypatch, fake_tui):
        """Test that a failed request is reported and the process fails."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        fake_tui(finished_tui(return_code=1, error=NetworkError("connection refused")))

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 1
        assert "error encountered while making request to OpenAI API" in result.output
        assert "connection refused" in result.output

    def test_unexpected_error_is_reported(self, monkeypatch):
        """Test that a crash in the loop is printed and fails the process."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        async def _crash(llm, log_level=None):
            raise RuntimeError("terminal went away")

        monkeypatch.setattr(cli_module, "run_chat_tui", _crash)

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 1
        assert "Oof: terminal went away" in result.output

    def test_nonzero_return_code_is_propagated(self, monkeypatch, fake_tui):
        """Test that an app that exited abnormally fails the process."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        fake_tui(finished_tui(return_code=2))

        result = runner.invoke(cli_module.app, [])

        assert result.exit_code == 2
