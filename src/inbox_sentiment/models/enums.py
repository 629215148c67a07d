"""
Enumerations for the sentiment labeling data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class SentimentEnum(str, Enum):
    """
    Classification result for a single message.

    Single-label (exactly one value per message). UNPROCESSED is the terminal
    state for credential, transport, or parse failures and is distinct from a
    NEUTRAL judgment.
    """

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    UNPROCESSED = "unprocessed"


class SentimentLabel(str, Enum):
    """
    Mailbox label display names, one per SentimentEnum value.

    Labels are looked up by name, so these strings must never change once
    they exist in a mailbox.
    """

    POSITIVE = "HAPPY TONE 😊"
    NEUTRAL = "NEUTRAL TONE 😐"
    NEGATIVE = "UPSET TONE 😡"
    UNPROCESSED = "UNPROCESSED ⚠️"

    @classmethod
    def for_result(cls, result: SentimentEnum) -> "SentimentLabel":
        """Get the label for a classification result (members share names)."""
        return cls[result.name]
