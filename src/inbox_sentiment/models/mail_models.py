"""
Mailbox data models shared by the pipeline and the mailbox adapters.

Messages and labels are owned by the mailbox collaborator; these models are
read-only snapshots handed across the port boundary.
"""

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single message in a thread."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Message identifier assigned by the mailbox")
    plain_body: str = Field(default="", description="text/plain body (may be empty)")
    body: str = Field(default="", description="Raw body, possibly HTML")


class Label(BaseModel):
    """A user label as known to the mailbox."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Label identifier assigned by the mailbox")
    name: str = Field(..., description="Display name (lookup key)")


class CompletionStatus(BaseModel):
    """Acknowledgment returned by a finished action."""

    completed: bool = Field(default=True)
    notification: str = Field(..., description="One-line message for the user")
