"""
Text processing utilities for the LLM layer.

Turns a mailbox message into the text sent to the classifier: plain body
first, tag-stripped HTML as fallback, hard length cap.
"""

import re

from inbox_sentiment.models.mail_models import Message

MAX_CLASSIFICATION_CHARS = 2000

# Lossy on purpose: comments, scripts and entities are left as-is
_TAG_PATTERN = re.compile(r"<[^>]*>")


def strip_html_tags(html: str) -> str:
    """
    Remove every <...> tag without inserting whitespace.

    Examples:
        >>> strip_html_tags("<p>Hi</p><p>Bye</p>")
        'HiBye'
    """
    return _TAG_PATTERN.sub("", html)


def truncate(text: str, max_chars: int = MAX_CLASSIFICATION_CHARS) -> str:
    """Keep the first max_chars characters (no word boundary adjustment)."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars]


def normalize(message: Message, max_chars: int = MAX_CLASSIFICATION_CHARS) -> str:
    """
    Extract classification text from a message.

    The plain-text body is used unless it is empty or whitespace-only, in
    which case the HTML body is used with its tags stripped. The result is
    capped at max_chars. Never raises.

    Args:
        message: Message with plain_body and body fields
        max_chars: Length cap

    Returns:
        Text to classify (possibly empty)
    """
    text = message.plain_body or ""
    if not text.strip():
        text = strip_html_tags(message.body or "")
    return truncate(text, max_chars)
