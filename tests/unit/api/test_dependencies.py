"""
Unit tests for API dependency injection.
"""

import pytest

from inbox_sentiment.api import dependencies
from inbox_sentiment.api.dependencies import (
    get_classifier,
    get_mailbox,
    get_pipeline,
    get_sample_generator,
    get_settings,
)
from inbox_sentiment.config import Settings
from inbox_sentiment.mailbox.gmail import GmailMailbox
from inbox_sentiment.mailbox.memory import InMemoryMailbox
from inbox_sentiment.sentiment.classifier import SentimentClassifier
from inbox_sentiment.sentiment.pipeline import SentimentPipeline
from inbox_sentiment.sentiment.samples import SampleEmailGenerator


@pytest.fixture(autouse=True)
def clear_caches():
    """Reset cached singletons around each test."""
    get_mailbox.cache_clear()
    get_classifier.cache_clear()
    yield
    get_mailbox.cache_clear()
    get_classifier.cache_clear()


@pytest.fixture
def use_settings(monkeypatch, test_settings):
    """Make get_settings() return the test settings."""
    monkeypatch.setattr(dependencies, "get_settings", lambda: test_settings)
    return test_settings


def test_get_settings():
    """Test settings singleton."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_get_mailbox_memory_is_singleton(use_settings):
    mailbox1 = get_mailbox()
    mailbox2 = get_mailbox()

    assert mailbox1 is mailbox2
    assert isinstance(mailbox1, InMemoryMailbox)
    assert mailbox1.get_active_user_email() == "owner@example.com"


def test_get_mailbox_gmail(use_settings):
    use_settings.MAILBOX_BACKEND = "gmail"
    use_settings.GMAIL_ACCESS_TOKEN = "token"

    assert isinstance(get_mailbox(), GmailMailbox)


def test_get_mailbox_gmail_without_token_fails(use_settings):
    use_settings.MAILBOX_BACKEND = "gmail"
    use_settings.GMAIL_ACCESS_TOKEN = None

    with pytest.raises(ValueError):
        get_mailbox()


def test_get_classifier_uses_settings(use_settings):
    classifier = get_classifier()

    assert isinstance(classifier, SentimentClassifier)
    assert classifier is get_classifier()
    assert classifier.config.api_key == "test-key"
    assert classifier.config.model == use_settings.GROQ_MODEL


def test_get_pipeline_not_cached(use_settings):
    mailbox = get_mailbox()
    classifier = get_classifier()

    pipeline1 = get_pipeline(mailbox=mailbox, classifier=classifier)
    pipeline2 = get_pipeline(mailbox=mailbox, classifier=classifier)

    assert isinstance(pipeline1, SentimentPipeline)
    assert pipeline1 is not pipeline2
    assert pipeline1.mailbox is mailbox


def test_get_sample_generator(use_settings):
    generator = get_sample_generator(mailbox=get_mailbox())

    assert isinstance(generator, SampleEmailGenerator)
