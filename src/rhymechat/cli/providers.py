"""Provider factory functions for CLI.

Centralizes creation of the LLM provider from environment variables.
Hides configuration details from the command implementation.
"""

import os

import typer
from rich.console import Console

from ..llm import LLMProvider, create_llm_provider
from ..ui.config import LOG_LEVEL_ENV_VAR

# Default console for output
_console = Console(emoji=False)

API_KEY_ENV_VAR = "OPENAI_API_KEY"


def require_llm(console: Console | None = None) -> LLMProvider:
    """Create the OpenAI provider, exiting if no credential is configured.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance with the credential passed in explicitly

    Raises:
        typer.Exit: With code 1 if OPENAI_API_KEY is not set

    Environment variables:
        OPENAI_API_KEY: OpenAI API key (required)
    """
    con = console or _console
    api_key = os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        con.print(
            f"API key must be set via the '{API_KEY_ENV_VAR}' environment variable",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=1)

    return create_llm_provider("openai", api_key=api_key)


def get_log_level() -> str | None:
    """Log panel level from RHYMECHAT_LOG_LEVEL, or None to keep the panel hidden."""
    return os.getenv(LOG_LEVEL_ENV_VAR) or None
