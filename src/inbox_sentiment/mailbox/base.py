"""
Abstract mailbox ports.

The mailbox owns threads, messages and labels. The sentiment pipeline only
reads message bodies and swaps labels through these interfaces, so any
backend (Gmail, in-memory) can be plugged in.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from inbox_sentiment.models.mail_models import Label, Message


class MailThread(ABC):
    """A conversation in the mailbox."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Thread identifier."""

    @abstractmethod
    def get_messages(self) -> list[Message]:
        """Messages in the thread, oldest first."""

    @abstractmethod
    def get_labels(self) -> list[Label]:
        """User labels currently attached to the thread."""

    @abstractmethod
    def add_label(self, label: Label) -> None:
        """Attach a label. Adding a present label is a no-op."""

    @abstractmethod
    def remove_label(self, label: Label) -> None:
        """Detach a label. Removing an absent label is a no-op."""

    def replace_labels(self, remove: Iterable[Label], add: Label) -> None:
        """
        Detach every label in remove and attach add, as one change.

        The default issues one call per label; backends that can apply a
        set change in a single request should override it.
        """
        for label in remove:
            if label.id != add.id:
                self.remove_label(label)
        self.add_label(add)


class MailboxPort(ABC):
    """Access to the user's mailbox."""

    @abstractmethod
    def get_inbox_threads(self, offset: int, count: int) -> list[MailThread]:
        """
        Get inbox threads, most recent first.

        Args:
            offset: Index of the first thread to return
            count: Maximum number of threads

        Raises:
            MailboxError: Backend unavailable or rejected the request
        """

    @abstractmethod
    def get_label_by_name(self, name: str) -> Optional[Label]:
        """Find a user label by exact display name, or None."""

    @abstractmethod
    def create_label(self, name: str) -> Label:
        """Create a user label and return it."""

    @abstractmethod
    def get_active_user_email(self) -> str:
        """Address of the mailbox owner."""

    @abstractmethod
    def send_email(
        self,
        recipient: str,
        subject: str,
        body: str,
        *,
        name: Optional[str] = None,
        html_body: Optional[str] = None,
    ) -> None:
        """
        Send a message.

        Args:
            recipient: Destination address
            subject: Subject line
            body: Plain-text body
            name: Sender display name
            html_body: Optional HTML alternative
        """

    def close(self) -> None:
        """Release backend connections. Default implementation does nothing."""
