"""
Abstract base client for chat-completion inference.

Defines the interface the sentiment classifier talks to. Any
OpenAI-compatible provider can sit behind it without touching the
classifier.
"""

from abc import ABC, abstractmethod
import structlog

from inbox_sentiment.models.llm_models import ChatCompletionRequest, ChatCompletionResponse


logger = structlog.get_logger(__name__)


class BaseChatClient(ABC):
    """
    Abstract base class for chat-completion clients.

    Responsibilities:
    - Send one completion request to the inference server
    - Validate the reply against ChatCompletionResponse
    - Translate transport/HTTP/parse failures into LLMClientError subclasses

    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Mapping replies to sentiment (that's SentimentClassifier's job)
    - Retries (a failed call is final)
    """

    def __init__(self, base_url: str, api_key: str | None = None):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the API (e.g., https://api.groq.com/openai/v1)
            api_key: Bearer token; None means every call fails fast
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key

        logger.info(
            "Initialized chat client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            has_api_key=bool(api_key),
        )

    @abstractmethod
    def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """
        Run a chat completion.

        Args:
            request: Model, messages and sampling parameters

        Returns:
            Validated ChatCompletionResponse with non-empty content

        Raises:
            LLMMissingCredentialError: No API key configured
            LLMConnectionError: Network errors
            LLMTimeoutError: Request exceeded the transport timeout
            LLMHTTPError: Non-200 status
            LLMMalformedResponseError: Undecodable or unexpected body
        """
        pass

    def close(self) -> None:
        """
        Close client connections and cleanup resources.

        Default implementation does nothing.
        """
        logger.debug("Closing chat client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url})"
