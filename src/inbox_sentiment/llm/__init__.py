"""
LLM client abstraction and implementations.

Components:
- BaseChatClient: Abstract base class for chat-completion clients
- GroqClient: Implementation for the Groq OpenAI-compatible API
- PromptBuilder: Builds the fixed sentiment prompt
- text_utils: Message normalization (HTML stripping, truncation)
- exceptions: LLM-specific exceptions
"""

from inbox_sentiment.llm.base_client import BaseChatClient
from inbox_sentiment.llm.groq_client import GroqClient
from inbox_sentiment.llm.prompt_builder import PromptBuilder
from inbox_sentiment.llm.exceptions import (
    LLMClientError,
    LLMConnectionError,
    LLMHTTPError,
    LLMMalformedResponseError,
    LLMMissingCredentialError,
    LLMTimeoutError,
)

__all__ = [
    "BaseChatClient",
    "GroqClient",
    "PromptBuilder",
    "LLMClientError",
    "LLMConnectionError",
    "LLMHTTPError",
    "LLMMalformedResponseError",
    "LLMMissingCredentialError",
    "LLMTimeoutError",
]
