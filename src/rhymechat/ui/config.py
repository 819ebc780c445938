"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Environment variable that shows the log panel at startup
LOG_LEVEL_ENV_VAR = "RHYMECHAT_LOG_LEVEL"

# Input area configuration
INPUT_CHAR_LIMIT = 280
INPUT_PROMPT = "┃ "
INPUT_PLACEHOLDER = "What rhymes with..."

# Transcript viewport configuration (initial size, before the first resize)
VIEWPORT_WIDTH = 30
VIEWPORT_HEIGHT = 5

WELCOME_TEXT = """Welcome to the chat room!
Type a message and press Enter to send."""

# Transcript line styles (ANSI palette indices)
SENDER_COLOR = "color(12)"
RESPONDER_COLOR = "color(9)"

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
