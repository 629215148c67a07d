"""
API-specific response models for FastAPI endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ActionResponse(BaseModel):
    """Response for the action endpoints (analyze, samples)."""

    completed: bool = Field(description="Whether the action ran to the end")
    notification: str = Field(
        description="One-line message for the user",
        examples=["Successfully completed sentiment analysis"],
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(description="healthy or degraded", examples=["healthy"])
    version: str
    classifier_configured: bool = Field(
        description="False when no API key is set (every message becomes UNPROCESSED)"
    )
    mailbox_backend: str = Field(examples=["memory", "gmail"])
    timestamp: datetime
