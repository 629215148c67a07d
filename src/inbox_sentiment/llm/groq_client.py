"""
Groq client implementation for chat-completion inference.

Talks to the OpenAI-compatible /chat/completions endpoint with a
synchronous httpx Client. One request per call, no retries: the caller
decides what a failure means.
"""

import time
from typing import Optional
import httpx
import structlog
from pydantic import ValidationError

from inbox_sentiment.llm.base_client import BaseChatClient
from inbox_sentiment.llm.exceptions import (
    LLMConnectionError,
    LLMHTTPError,
    LLMMalformedResponseError,
    LLMMissingCredentialError,
    LLMTimeoutError,
)
from inbox_sentiment.models.llm_models import ChatCompletionRequest, ChatCompletionResponse
from inbox_sentiment.monitoring.metrics import llm_latency_seconds


logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"


class GroqClient(BaseChatClient):
    """
    Groq chat-completion client using httpx.

    API Endpoints:
    - POST /chat/completions: single completion, Bearer auth

    The underlying httpx.Client is created lazily and reused across calls.
    Timeouts are the httpx defaults.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize Groq client.

        Args:
            base_url: API root, without the /chat/completions suffix
            api_key: Bearer token
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        super().__init__(base_url, api_key)
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                transport=self._transport,
            )
            logger.debug("Created new httpx Client")
        return self._client

    def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """
        Run a chat completion against Groq.

        POST /chat/completions with payload:
        {
            "model": "llama-3.1-8b-instant",
            "messages": [{"role": "system", ...}, {"role": "user", ...}],
            "temperature": 0
        }

        Response:
        {
            "id": "chatcmpl-...",
            "model": "llama-3.1-8b-instant",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": "positive"}}],
            "usage": {...}
        }
        """
        if not self.api_key:
            raise LLMMissingCredentialError("Groq API key not configured")

        start_time = time.time()

        try:
            client = self._get_client()
            response = client.post(
                "/chat/completions",
                json=request.model_dump(),
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.TimeoutException as e:
            raise LLMTimeoutError(
                f"Request timeout: {e}",
                details={"error_type": type(e).__name__},
            ) from e
        except httpx.HTTPError as e:
            raise LLMConnectionError(
                f"Network error: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        latency_seconds = time.time() - start_time

        if response.status_code != 200:
            llm_latency_seconds.labels(model=request.model, success="false").observe(latency_seconds)
            raise LLMHTTPError(
                response.status_code,
                f"Groq HTTP error {response.status_code}",
                details={"body": response.text[:500]},
            )

        try:
            parsed = ChatCompletionResponse.model_validate(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            llm_latency_seconds.labels(model=request.model, success="false").observe(latency_seconds)
            raise LLMMalformedResponseError(
                "Unexpected Groq response",
                details={
                    "body": response.text[:500],
                    "error_type": type(e).__name__,
                    "errors": e.errors() if isinstance(e, ValidationError) else str(e),
                },
            ) from e

        if not parsed.content:
            llm_latency_seconds.labels(model=request.model, success="false").observe(latency_seconds)
            raise LLMMalformedResponseError(
                "Empty completion content",
                details={"body": response.text[:500]},
            )

        llm_latency_seconds.labels(model=request.model, success="true").observe(latency_seconds)
        logger.debug(
            "Groq completion successful",
            model=parsed.model or request.model,
            latency_ms=int(latency_seconds * 1000),
        )
        return parsed

    def close(self) -> None:
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            self._client.close()
            logger.debug("Closed Groq client connection")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
