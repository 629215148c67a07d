"""
API routes for the sentiment actions.

Both actions run synchronously: the request returns once every thread in
the page has been labeled (or the samples have been sent).
"""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status

from inbox_sentiment.api.dependencies import (
    get_pipeline,
    get_sample_generator,
    get_settings,
)
from inbox_sentiment.api.models import ActionResponse, HealthResponse
from inbox_sentiment.config import Settings
from inbox_sentiment.sentiment.pipeline import SentimentPipeline
from inbox_sentiment.sentiment.samples import SampleEmailGenerator

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/api/v1/sentiment/analyze",
    response_model=ActionResponse,
    status_code=status.HTTP_200_OK,
    summary="Label recent inbox threads by sentiment",
    description="""
    Classify every message in the most recent inbox threads and attach one of
    HAPPY TONE, NEUTRAL TONE, UPSET TONE or UNPROCESSED to each thread.

    Classification failures do not fail the request; they show up as the
    UNPROCESSED label.
    """,
    responses={
        200: {"description": "Run completed"},
        502: {"description": "Mailbox backend failed"},
    },
)
def analyze_sentiment(
    pipeline: SentimentPipeline = Depends(get_pipeline),
) -> ActionResponse:
    completion = pipeline.run()
    return ActionResponse(**completion.model_dump())


@router.post(
    "/api/v1/samples",
    response_model=ActionResponse,
    status_code=status.HTTP_200_OK,
    summary="Send sample emails to the mailbox owner",
    responses={
        200: {"description": "Samples sent"},
        502: {"description": "Mailbox backend failed"},
    },
)
def generate_sample_emails(
    generator: SampleEmailGenerator = Depends(get_sample_generator),
) -> ActionResponse:
    completion = generator.generate()
    return ActionResponse(**completion.model_dump())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report configuration health.

    No outbound calls are made. A missing API key is reported as degraded
    since runs still complete (with UNPROCESSED labels).
    """
    classifier_configured = bool(settings.GROQ_KEY)
    health_status = "healthy" if classifier_configured else "degraded"

    logger.info("Health check", status=health_status)

    return HealthResponse(
        status=health_status,
        version=settings.APP_VERSION,
        classifier_configured=classifier_configured,
        mailbox_backend=settings.MAILBOX_BACKEND,
        timestamp=datetime.now(timezone.utc),
    )
