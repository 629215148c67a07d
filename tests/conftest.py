"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from typing import Any, Callable, Dict

import httpx
import pytest

from inbox_sentiment.config import Settings
from inbox_sentiment.mailbox.memory import InMemoryMailbox
from inbox_sentiment.models.mail_models import Message
from inbox_sentiment.sentiment.classifier import ClassifierConfig


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.GROQ_KEY = None
    """
    return Settings(
        APP_NAME="Inbox Sentiment Labeler (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        GROQ_KEY="test-key",
        GROQ_BASE_URL="https://groq.test/openai/v1",
        GROQ_MODEL="llama-3.1-8b-instant",
        MAILBOX_BACKEND="memory",
        ACTIVE_USER_EMAIL="owner@example.com",
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def classifier_config(test_settings: Settings) -> ClassifierConfig:
    """ClassifierConfig with a test API key."""
    return ClassifierConfig.from_settings(test_settings)


@pytest.fixture
def mailbox() -> InMemoryMailbox:
    """Empty in-memory mailbox owned by owner@example.com."""
    return InMemoryMailbox(active_user_email="owner@example.com")


@pytest.fixture
def create_message() -> Callable[..., Message]:
    """Factory fixture to create Message with custom bodies.

    Usage:
        def test_something(create_message):
            message = create_message(plain_body="Hello")
    """
    def _create(plain_body: str = "", body: str = "", message_id: str = "msg-test") -> Message:
        return Message(id=message_id, plain_body=plain_body, body=body)

    return _create


def chat_completion_payload(content: Any) -> Dict[str, Any]:
    """Groq-style success body with the given reply content."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "llama-3.1-8b-instant",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 42, "completion_tokens": 1, "total_tokens": 43},
    }


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses.

    Each entry in `responses` is either an httpx.Response or an exception
    class/instance factory called with the request.
    """

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if callable(response) and not isinstance(response, httpx.Response):
            return response(request)
        return response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def json_body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_groq_reply() -> Callable[[Any], httpx.Response]:
    """Factory for a 200 Groq response with the given content."""
    def _make(content: Any) -> httpx.Response:
        return httpx.Response(200, json=chat_completion_payload(content))

    return _make


@pytest.fixture
def recording_handler() -> type[RecordingHandler]:
    """The RecordingHandler class, for wrapping in httpx.MockTransport.

    Usage:
        def test_something(recording_handler, make_groq_reply):
            handler = recording_handler(make_groq_reply("positive"))
            transport = httpx.MockTransport(handler)
    """
    return RecordingHandler
