"""
LLM-specific data models for the chat-completion request/response cycle.

The response models double as the validation schema for replies: anything
that does not parse into ChatCompletionResponse is a malformed response.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field, ConfigDict


class ChatMessage(BaseModel):
    """One turn of a chat conversation."""
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """
    Request body for an OpenAI-compatible /chat/completions call.

    Serialized as-is into the POST payload.
    """
    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model name/identifier (e.g., 'llama-3.1-8b-instant')")
    messages: list[ChatMessage] = Field(..., min_length=1)
    temperature: float = Field(default=0.0, ge=0.0, le=2.0, description="Sampling temperature")


class ChoiceMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class Choice(BaseModel):
    index: int = 0
    message: ChoiceMessage
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    """
    Expected success shape: {"choices": [{"message": {"content": "..."}}]}.

    Extra provider fields (id, usage, x_groq, ...) are ignored.
    """

    choices: list[Choice] = Field(..., min_length=1)
    model: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        """Content of the first choice, if any."""
        return self.choices[0].message.content
