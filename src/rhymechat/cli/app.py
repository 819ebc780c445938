"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..ui import run_chat_tui
from .providers import get_log_level, require_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="rhymechat",
    help="Terminal chat that asks a language model what rhymes with your words",
    add_completion=False,
)

# Consoles for rich output
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


@app.command()
def chat():
    """Start an interactive chat session. Press Esc or Ctrl+C to quit."""
    llm = require_llm(console)

    try:
        tui = asyncio.run(run_chat_tui(llm, log_level=get_log_level()))
    except Exception as e:
        err_console.print(f"Oof: {e}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    error = tui.session.state.error
    if error is not None:
        err_console.print(
            f"error encountered while making request to OpenAI API: {error}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=1)

    if tui.return_code:
        raise typer.Exit(code=tui.return_code)

    # Whatever was typed but not sent is the last line of output
    console.print(tui.return_value or "", markup=False, highlight=False, soft_wrap=True)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
