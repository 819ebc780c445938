"""Error classes raised by completion providers.

Every failure of the remote call surfaces as a ``CompletionError``; callers
treat the whole family as fatal for the session.
"""

import openai


class CompletionError(Exception):
    """Base class for completion request failures."""


class AuthenticationError(CompletionError):
    """The API rejected the credential."""

    def __init__(self, message: str):
        super().__init__(f"Authentication failed: {message}")


class RateLimitError(CompletionError):
    """API rate limit or quota exceeded."""

    def __init__(self, message: str):
        super().__init__(f"Rate limit exceeded: {message}")


class NetworkError(CompletionError):
    """Connection failure or timeout while talking to the API."""

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")


class MalformedResponseError(CompletionError):
    """The API answered but the response carried no usable message."""

    def __init__(self, message: str):
        super().__init__(f"Malformed response: {message}")


def classify_openai_error(error: openai.OpenAIError) -> CompletionError:
    """Map an ``openai`` SDK exception onto the completion error family."""
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthenticationError(str(error))
    if isinstance(error, openai.RateLimitError):
        return RateLimitError(str(error))
    # APITimeoutError is a subclass of APIConnectionError
    if isinstance(error, openai.APIConnectionError):
        return NetworkError(str(error))
    if isinstance(error, openai.APIResponseValidationError):
        return MalformedResponseError(str(error))
    return CompletionError(str(error))
