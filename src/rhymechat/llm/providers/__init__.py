from .openai import DEFAULT_MODEL, OpenAIProvider

__all__ = ["DEFAULT_MODEL", "OpenAIProvider"]
