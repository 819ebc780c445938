"""Pytest configuration and shared fixtures."""
import asyncio
import json
import os

import httpx
import pytest

from rhymechat.llm import LLMProvider, LLMResponse, OpenAIProvider


class FakeProvider(LLMProvider):
    """In-memory provider that records prompts and replays canned replies."""

    def __init__(
        self,
        replies: list[str] | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ):
        self.replies = list(replies or [])
        self.error = error
        self.gate = gate  # when set, replies wait until the event fires
        self.prompts: list[str] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        content = self.replies.pop(0) if self.replies else "hat, bat, mat"
        return LLMResponse(content=content, model=self.model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def fake_llm_factory():
    """Return the FakeProvider class for tests that need custom replies or errors."""
    return FakeProvider


@pytest.fixture
def fake_llm():
    """A provider that answers every prompt with 'hat, bat, mat'."""
    return FakeProvider()


def completion_payload(content: str | None, model: str = "gpt-4o-2024-08-06") -> dict:
    """Build a Chat Completions response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 14, "completion_tokens": 6, "total_tokens": 20},
    }


@pytest.fixture
def openai_transport():
    """Build an OpenAIProvider wired to an httpx.MockTransport.

    Returns a factory taking a handler ``(httpx.Request) -> httpx.Response``;
    every request the provider sends is recorded on ``provider.requests``.
    """

    def _make(handler):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        provider = OpenAIProvider(
            api_key="test-key",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(_record)),
        )
        provider.requests = requests
        return provider

    return _make


@pytest.fixture
def request_body():
    """Decode the JSON body of a recorded request."""

    def _decode(request: httpx.Request) -> dict:
        return json.loads(request.content)

    return _decode


@pytest.fixture
def payload():
    """Expose the completion payload builder to tests."""
    return completion_payload
