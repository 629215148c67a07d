"""
In-memory mailbox backend.

Used for local runs (MAILBOX_BACKEND=memory) and as the test double for the
pipeline. Threads are kept newest-first like a real inbox.
"""

import itertools
from typing import Iterable, Optional

import structlog

from inbox_sentiment.mailbox.base import MailboxPort, MailThread
from inbox_sentiment.mailbox.exceptions import MailboxError
from inbox_sentiment.models.mail_models import Label, Message

logger = structlog.get_logger(__name__)


class InMemoryThread(MailThread):
    """Thread holding its messages and attached labels in memory."""

    def __init__(self, thread_id: str, messages: list[Message]):
        self._id = thread_id
        self._messages = list(messages)
        self._labels: dict[str, Label] = {}

    @property
    def id(self) -> str:
        return self._id

    def get_messages(self) -> list[Message]:
        return list(self._messages)

    def get_labels(self) -> list[Label]:
        return list(self._labels.values())

    def add_label(self, label: Label) -> None:
        self._labels[label.id] = label

    def remove_label(self, label: Label) -> None:
        self._labels.pop(label.id, None)

    def replace_labels(self, remove: Iterable[Label], add: Label) -> None:
        for label in remove:
            self._labels.pop(label.id, None)
        self._labels[add.id] = add

    def append_message(self, message: Message) -> None:
        self._messages.append(message)

    def __repr__(self) -> str:
        return f"InMemoryThread(id={self._id}, messages={len(self._messages)})"


class InMemoryMailbox(MailboxPort):
    """Mailbox whose inbox, labels and outbox live in process memory."""

    def __init__(self, active_user_email: str = "me@example.com"):
        self.active_user_email = active_user_email
        self._threads: list[InMemoryThread] = []
        self._labels: dict[str, Label] = {}
        self._ids = itertools.count(1)
        self.sent: list[dict] = []

    def add_thread(self, messages: list[Message]) -> InMemoryThread:
        """Deliver a new thread to the top of the inbox."""
        thread = InMemoryThread(f"thread-{next(self._ids)}", messages)
        self._threads.insert(0, thread)
        return thread

    def new_message(self, plain_body: str = "", body: str = "") -> Message:
        """Build a message with a fresh identifier."""
        return Message(id=f"msg-{next(self._ids)}", plain_body=plain_body, body=body)

    def get_inbox_threads(self, offset: int, count: int) -> list[MailThread]:
        return list(self._threads[offset:offset + count])

    def get_label_by_name(self, name: str) -> Optional[Label]:
        return self._labels.get(name)

    def create_label(self, name: str) -> Label:
        if name in self._labels:
            raise MailboxError(f"Label already exists: {name}", details={"name": name})
        label = Label(id=f"Label_{next(self._ids)}", name=name)
        self._labels[name] = label
        logger.info("Label created", label_id=label.id, name=name)
        return label

    def get_active_user_email(self) -> str:
        return self.active_user_email

    def send_email(
        self,
        recipient: str,
        subject: str,
        body: str,
        *,
        name: Optional[str] = None,
        html_body: Optional[str] = None,
    ) -> None:
        self.sent.append(
            {
                "recipient": recipient,
                "subject": subject,
                "body": body,
                "name": name,
                "html_body": html_body,
            }
        )
        if recipient.lower() == self.active_user_email.lower():
            self.add_thread([self.new_message(plain_body=body, body=html_body or body)])
        logger.debug("Message sent", recipient=recipient, subject=subject)
