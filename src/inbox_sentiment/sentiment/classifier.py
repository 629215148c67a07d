"""
Sentiment classifier.

Maps message text to a SentimentEnum with one chat-completion call. The
classifier never raises: missing credentials, transport failures, non-200
statuses and malformed bodies all resolve to UNPROCESSED, while invalid
input and ambiguous replies resolve to NEUTRAL.
"""

from typing import Any, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from inbox_sentiment.config import Settings
from inbox_sentiment.llm.base_client import BaseChatClient
from inbox_sentiment.llm.exceptions import (
    LLMClientError,
    LLMConnectionError,
    LLMHTTPError,
    LLMMalformedResponseError,
    LLMMissingCredentialError,
    LLMTimeoutError,
)
from inbox_sentiment.llm.groq_client import DEFAULT_BASE_URL, GroqClient
from inbox_sentiment.llm.prompt_builder import SYSTEM_PROMPT, PromptBuilder
from inbox_sentiment.models.enums import SentimentEnum
from inbox_sentiment.monitoring.metrics import classifications_total, classifier_failures_total


logger = structlog.get_logger(__name__)


class ClassifierConfig(BaseModel):
    """Everything the classifier needs, passed in explicitly."""
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(default=None, description="Bearer token; None disables classification")
    base_url: str = DEFAULT_BASE_URL
    model: str = "llama-3.1-8b-instant"
    system_prompt: str = SYSTEM_PROMPT
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClassifierConfig":
        return cls(
            api_key=settings.GROQ_KEY or None,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
        )


def parse_reply(content: str) -> SentimentEnum:
    """
    Map a free-text reply to a sentiment.

    "positive" anywhere in the reply wins over "negative"; anything else,
    including an exact "neutral", is NEUTRAL.

    Examples:
        >>> parse_reply("Positive.")
        <SentimentEnum.POSITIVE: 'positive'>
        >>> parse_reply("ok")
        <SentimentEnum.NEUTRAL: 'neutral'>
    """
    reply = content.strip().lower()
    if "positive" in reply:
        return SentimentEnum.POSITIVE
    if "negative" in reply:
        return SentimentEnum.NEGATIVE
    if reply != "neutral":
        logger.debug("Ambiguous reply resolved to neutral", reply=reply[:100])
    return SentimentEnum.NEUTRAL


def _error_type(error: LLMClientError) -> str:
    # Subclasses before their bases
    if isinstance(error, LLMMissingCredentialError):
        return "missing_credential"
    if isinstance(error, LLMTimeoutError):
        return "timeout"
    if isinstance(error, LLMConnectionError):
        return "transport"
    if isinstance(error, LLMHTTPError):
        return "http_error"
    if isinstance(error, LLMMalformedResponseError):
        return "malformed_response"
    return "llm_error"


class SentimentClassifier:
    """
    Classify message text as positive, neutral, or negative.

    Stateless between calls: nothing is cached and every call issues at
    most one request.
    """

    def __init__(self, config: ClassifierConfig, client: Optional[BaseChatClient] = None):
        """
        Args:
            config: Credential, endpoint and prompt settings
            client: Chat client; defaults to a GroqClient built from config
        """
        self.config = config
        self.client = client or GroqClient(base_url=config.base_url, api_key=config.api_key)
        self.prompt_builder = PromptBuilder(
            model=config.model,
            system_prompt=config.system_prompt,
            temperature=config.temperature,
        )

    def classify(self, text: Any) -> SentimentEnum:
        """
        Classify one normalized message text.

        Args:
            text: Normalized text; anything but a non-empty string is invalid

        Returns:
            SentimentEnum (never raises)
        """
        result = self._classify(text)
        classifications_total.labels(result=result.value).inc()
        return result

    def _classify(self, text: Any) -> SentimentEnum:
        if not self.config.api_key:
            logger.warning("Groq API key not found")
            classifier_failures_total.labels(error_type="missing_credential").inc()
            return SentimentEnum.UNPROCESSED

        if not isinstance(text, str) or not text:
            logger.warning("Invalid email text", text=repr(text)[:100])
            classifier_failures_total.labels(error_type="invalid_input").inc()
            return SentimentEnum.NEUTRAL

        request = self.prompt_builder.build_request(text)
        try:
            response = self.client.complete(request)
        except LLMClientError as e:
            error_type = _error_type(e)
            logger.warning(
                "Classification failed",
                error_type=error_type,
                error=e.message,
                details=e.details,
            )
            classifier_failures_total.labels(error_type=error_type).inc()
            return SentimentEnum.UNPROCESSED

        return parse_reply(response.content or "")

    def close(self) -> None:
        self.client.close()
