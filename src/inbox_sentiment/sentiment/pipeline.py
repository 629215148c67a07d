"""
Sentiment labeling pipeline.

Fetches the most recent inbox threads and, for every message, runs
normalize -> classify -> reconcile. Processing is sequential, and runs are
serialized process-wide so two runs never relabel the same thread at once.
A message that cannot be classified is labeled UNPROCESSED and the run
continues.
"""

import threading
import uuid
from collections import Counter
from typing import Callable

import structlog

from inbox_sentiment.llm.text_utils import normalize
from inbox_sentiment.mailbox.base import MailboxPort
from inbox_sentiment.models.enums import SentimentEnum
from inbox_sentiment.models.mail_models import CompletionStatus, Message
from inbox_sentiment.sentiment.classifier import SentimentClassifier
from inbox_sentiment.sentiment.labels import LabelReconciler

logger = structlog.get_logger(__name__)

# Fixed window of most recent inbox threads per run
INBOX_PAGE_SIZE = 2

ANALYSIS_COMPLETE = "Successfully completed sentiment analysis"

# Held for a whole run; API requests execute in a threadpool
_run_lock = threading.Lock()


class SentimentPipeline:
    """Label the most recent inbox threads by message sentiment."""

    def __init__(
        self,
        mailbox: MailboxPort,
        classifier: SentimentClassifier,
        reconciler: LabelReconciler | None = None,
        normalizer: Callable[[Message], str] = normalize,
        page_size: int = INBOX_PAGE_SIZE,
        lock: threading.Lock = _run_lock,
    ):
        self.mailbox = mailbox
        self.classifier = classifier
        self.reconciler = reconciler or LabelReconciler(mailbox)
        self.normalizer = normalizer
        self.page_size = page_size
        self._lock = lock

    def run(self) -> CompletionStatus:
        """
        Process one page of inbox threads.

        A run started while another is in progress waits for it to finish.

        Returns:
            CompletionStatus acknowledging the run. Per-message outcomes are
            visible only through the labels and the logs.

        Raises:
            MailboxError: The mailbox itself failed (not a classification error)
        """
        run_id = uuid.uuid4().hex[:12]
        with self._lock, structlog.contextvars.bound_contextvars(run_id=run_id):
            return self._run()

    def _run(self) -> CompletionStatus:
        log = logger.bind(page_size=self.page_size)
        log.info("Sentiment analysis started")

        label_set = self.reconciler.resolve_labels()
        threads = self.mailbox.get_inbox_threads(0, self.page_size)

        results: Counter[SentimentEnum] = Counter()
        for thread in threads:
            for message in thread.get_messages():
                text = self.normalizer(message)
                result = self.classifier.classify(text)
                self.reconciler.reconcile(thread, result, label_set)
                results[result] += 1
                log.debug(
                    "Message classified",
                    thread_id=thread.id,
                    message_id=message.id,
                    text_length=len(text),
                    result=result.value,
                )

        log.info(
            "Sentiment analysis completed",
            threads=len(threads),
            messages=sum(results.values()),
            results={result.value: count for result, count in results.items()},
        )
        return CompletionStatus(notification=ANALYSIS_COMPLETE)
