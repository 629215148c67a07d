"""
Prompt builder for sentiment classification requests.

The prompt contract is fixed: a system instruction that restricts the reply
to one word, the message text as the only user turn, and temperature 0 so
the same text gets the same answer from a stable model.
"""

import structlog

from inbox_sentiment.models.llm_models import ChatCompletionRequest, ChatMessage


logger = structlog.get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a sentiment classifier. "
    "Reply with only one word: positive, neutral, or negative."
)


class PromptBuilder:
    """Build ChatCompletionRequest objects for the sentiment classifier."""

    def __init__(
        self,
        model: str,
        system_prompt: str = SYSTEM_PROMPT,
        temperature: float = 0.0,
    ):
        self.model = model
        self.system_prompt = system_prompt
        self.temperature = temperature

    def build_request(self, text: str) -> ChatCompletionRequest:
        """
        Build the two-turn request for one message.

        Args:
            text: Normalized message text (already length-capped)

        Returns:
            ChatCompletionRequest ready to send
        """
        logger.debug("Building sentiment prompt", model=self.model, text_length=len(text))
        return ChatCompletionRequest(
            model=self.model,
            messages=[
                ChatMessage(role="system", content=self.system_prompt),
                ChatMessage(role="user", content=text),
            ],
            temperature=self.temperature,
        )
