"""
FastAPI dependency injection for the sentiment service.

Provides singleton instances of long-lived resources (mailbox, classifier)
and factory functions for the per-request action objects.
"""

from functools import lru_cache

from fastapi import Depends

from inbox_sentiment.config import Settings, settings
from inbox_sentiment.mailbox.base import MailboxPort
from inbox_sentiment.mailbox.gmail import GmailMailbox
from inbox_sentiment.mailbox.memory import InMemoryMailbox
from inbox_sentiment.sentiment.classifier import ClassifierConfig, SentimentClassifier
from inbox_sentiment.sentiment.pipeline import SentimentPipeline
from inbox_sentiment.sentiment.samples import SampleEmailGenerator


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_mailbox() -> MailboxPort:
    """
    Get the mailbox singleton selected by MAILBOX_BACKEND.

    The in-memory mailbox must be a singleton or its inbox would reset on
    every request.

    Raises:
        ValueError: gmail backend selected without GMAIL_ACCESS_TOKEN
    """
    config = get_settings()
    if config.MAILBOX_BACKEND == "gmail":
        if not config.GMAIL_ACCESS_TOKEN:
            raise ValueError("MAILBOX_BACKEND=gmail requires GMAIL_ACCESS_TOKEN")
        return GmailMailbox(
            access_token=config.GMAIL_ACCESS_TOKEN,
            base_url=config.GMAIL_BASE_URL,
        )
    return InMemoryMailbox(active_user_email=config.ACTIVE_USER_EMAIL)


@lru_cache()
def get_classifier() -> SentimentClassifier:
    """
    Get singleton classifier.

    The underlying httpx client keeps its connection pool between runs.
    """
    return SentimentClassifier(ClassifierConfig.from_settings(get_settings()))


def get_pipeline(
    mailbox: MailboxPort = Depends(get_mailbox),
    classifier: SentimentClassifier = Depends(get_classifier),
) -> SentimentPipeline:
    """
    Create a pipeline for one run.

    Not cached: label resolution happens per run so labels deleted in the
    mailbox between runs are recreated.
    """
    return SentimentPipeline(mailbox=mailbox, classifier=classifier)


def get_sample_generator(
    mailbox: MailboxPort = Depends(get_mailbox),
) -> SampleEmailGenerator:
    return SampleEmailGenerator(mailbox)
