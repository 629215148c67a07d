"""
Mailbox ports and adapters.

- base: MailboxPort / MailThread interfaces
- memory: InMemoryMailbox (local runs, tests)
- gmail: GmailMailbox (Gmail REST API via httpx)
"""

from inbox_sentiment.mailbox.base import MailboxPort, MailThread
from inbox_sentiment.mailbox.exceptions import MailboxError
from inbox_sentiment.mailbox.gmail import GmailMailbox
from inbox_sentiment.mailbox.memory import InMemoryMailbox, InMemoryThread

__all__ = [
    "MailboxPort",
    "MailThread",
    "MailboxError",
    "GmailMailbox",
    "InMemoryMailbox",
    "InMemoryThread",
]
