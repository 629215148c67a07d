"""
Sentiment label resolution and reconciliation.

A thread carries exactly one sentiment label after reconciliation. The four
labels are resolved by name from the mailbox and created when missing.
"""

from typing import Iterator, Mapping, Optional

import structlog

from inbox_sentiment.mailbox.base import MailboxPort, MailThread
from inbox_sentiment.models.enums import SentimentEnum, SentimentLabel
from inbox_sentiment.models.mail_models import Label
from inbox_sentiment.monitoring.metrics import labels_applied_total

logger = structlog.get_logger(__name__)

DEFAULT_LABEL_NAMES: Mapping[SentimentEnum, str] = {
    result: SentimentLabel.for_result(result).value for result in SentimentEnum
}


class LabelSet:
    """Resolved mailbox labels, one per SentimentEnum value."""

    def __init__(self, labels: Mapping[SentimentEnum, Label]):
        missing = [result.value for result in SentimentEnum if result not in labels]
        if missing:
            raise ValueError(f"LabelSet is missing labels for: {missing}")
        self._labels = dict(labels)

    @classmethod
    def resolve(
        cls,
        mailbox: MailboxPort,
        label_names: Mapping[SentimentEnum, str] = DEFAULT_LABEL_NAMES,
    ) -> "LabelSet":
        """Fetch the four labels by name, creating any that don't exist."""
        labels = {}
        for result in SentimentEnum:
            name = label_names[result]
            label = mailbox.get_label_by_name(name)
            if label is None:
                label = mailbox.create_label(name)
            labels[result] = label
        logger.debug("Sentiment labels resolved", labels=[label.name for label in labels.values()])
        return cls(labels)

    def for_result(self, result: SentimentEnum) -> Label:
        return self._labels[result]

    def __iter__(self) -> Iterator[Label]:
        return iter(self._labels.values())

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._labels.values()


class LabelReconciler:
    """Keep exactly one sentiment label on a thread."""

    def __init__(
        self,
        mailbox: MailboxPort,
        label_names: Mapping[SentimentEnum, str] = DEFAULT_LABEL_NAMES,
    ):
        self.mailbox = mailbox
        self.label_names = dict(label_names)
        self._label_set: Optional[LabelSet] = None

    def resolve_labels(self) -> LabelSet:
        """Resolve the label set once per reconciler and reuse it afterwards."""
        if self._label_set is None:
            self._label_set = LabelSet.resolve(self.mailbox, self.label_names)
        return self._label_set

    def reconcile(
        self,
        thread: MailThread,
        result: SentimentEnum,
        label_set: Optional[LabelSet] = None,
    ) -> None:
        """
        Replace whatever sentiment label the thread has with the one for result.

        The other three labels are removed and the target added in one
        replace_labels call, so re-running converges on one label.

        Args:
            thread: Thread to relabel
            result: Classification result
            label_set: Resolved labels; resolved lazily from the mailbox if omitted
        """
        if label_set is None:
            label_set = self.resolve_labels()
        target = label_set.for_result(result)

        thread.replace_labels(list(label_set), target)

        labels_applied_total.labels(label=result.value).inc()
        logger.debug("Thread labeled", thread_id=thread.id, label=target.name)
