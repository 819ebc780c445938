from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class ChatMessage(BaseModel):
    """A single message in the transcript or in a completion request."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Content of the message")


class CompletionRequest(BaseModel):
    """A stateless completion request: one model, one user message.

    No conversation history is carried between requests.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(description="Model identifier sent to the provider")
    message: ChatMessage = Field(description="The single user-role message")

    @classmethod
    def for_prompt(cls, prompt: str, model: str) -> "CompletionRequest":
        return cls(model=model, message=ChatMessage(role="user", content=prompt))

    def to_openai_messages(self) -> list[dict[str, str]]:
        return [{"role": self.message.role, "content": self.message.content}]


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated assistant text")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
