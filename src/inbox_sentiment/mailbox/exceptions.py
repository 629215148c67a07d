"""
Exceptions raised by mailbox adapters.

Mailbox failures are collaborator faults: unlike classifier failures they
are not absorbed and abort the current run.
"""


class MailboxError(Exception):
    """Base exception for mailbox backend failures."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
