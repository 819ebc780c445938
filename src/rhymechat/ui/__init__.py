"""Terminal UI module for rhymechat.

Provides a Textual-based TUI around a chat session.

Module structure (Parnas principle - each module hides a design decision):
- config.py: Constants (limits, colours, welcome text, log levels)
- formatting.py: Transcript line styling
- widgets.py: Custom widgets (transcript viewport, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- app.py: Application orchestration (event routing)
"""

from .app import RhymeChatApp, run_chat_tui
from .config import LogLevel
from .widgets import ChatInputBar, DebugPanel, TranscriptView

__all__ = [
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "RhymeChatApp",
    "TranscriptView",
    "run_chat_tui",
]
