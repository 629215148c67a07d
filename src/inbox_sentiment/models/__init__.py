"""
Data models for the Inbox Sentiment Labeler.

- enums: SentimentEnum (classification result), SentimentLabel (display names)
- mail_models: Message, Label, CompletionStatus
- llm_models: chat-completion request/response schema
"""

from inbox_sentiment.models.enums import SentimentEnum, SentimentLabel
from inbox_sentiment.models.mail_models import CompletionStatus, Label, Message

__all__ = [
    "SentimentEnum",
    "SentimentLabel",
    "CompletionStatus",
    "Label",
    "Message",
]
