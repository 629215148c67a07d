"""
Sample email generator.

Sends three messages to the mailbox owner so a fresh inbox has something
for the pipeline to label: one positive, one neutral, and one negative
message that only has an HTML body.
"""

from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict

from inbox_sentiment.mailbox.base import MailboxPort
from inbox_sentiment.models.mail_models import CompletionStatus

logger = structlog.get_logger(__name__)

SAMPLES_SENT = "Successfully generated sample emails"


class SampleEmail(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str
    body: str
    name: str
    html_body: Optional[str] = None


SAMPLE_EMAILS: tuple[SampleEmail, ...] = (
    SampleEmail(
        subject="Thank you for amazing service!",
        body="Hi, I really enjoyed working with you. Thank you again!",
        name="Customer A",
    ),
    SampleEmail(
        subject="Request for information",
        body="Hello, I need more information on your recent product launch. Thank you.",
        name="Customer B",
    ),
    SampleEmail(
        subject="Complaint!",
        body="",
        html_body=(
            "<p>Hello, You are late in delivery, again.</p>\n"
            "<p>Please contact me ASAP before I cancel our subscription.</p>"
        ),
        name="Customer C",
    ),
)


class SampleEmailGenerator:
    """Send the fixed sample emails to the active user."""

    def __init__(self, mailbox: MailboxPort, samples: tuple[SampleEmail, ...] = SAMPLE_EMAILS):
        self.mailbox = mailbox
        self.samples = samples

    def generate(self) -> CompletionStatus:
        recipient = self.mailbox.get_active_user_email()
        for sample in self.samples:
            self.mailbox.send_email(
                recipient,
                sample.subject,
                sample.body,
                name=sample.name,
                html_body=sample.html_body,
            )
        logger.info("Sample emails generated", count=len(self.samples))
        return CompletionStatus(notification=SAMPLES_SENT)
