"""
FastAPI application entry point for the Inbox Sentiment Labeler.
"""

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from inbox_sentiment.api.dependencies import get_classifier, get_mailbox
from inbox_sentiment.api.error_handlers import EXCEPTION_HANDLERS
from inbox_sentiment.api.middleware import RequestTracingMiddleware
from inbox_sentiment.api.routes import router
from inbox_sentiment.config import settings
from inbox_sentiment.logging_config import configure_logging

# Configure structured logging before the app is built
configure_logging(
    settings.LOG_LEVEL,
    settings.ENVIRONMENT,
    mailbox_backend=settings.MAILBOX_BACKEND,
    model=settings.GROQ_MODEL,
)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Classifies recent inbox messages and labels threads by sentiment",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router)


@app.on_event("startup")
async def startup():
    """Log the effective configuration."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        model=settings.GROQ_MODEL,
        mailbox_backend=settings.MAILBOX_BACKEND,
    )
    if not settings.GROQ_KEY:
        logger.warning("GROQ_KEY not set: every message will be labeled UNPROCESSED")


@app.on_event("shutdown")
async def shutdown():
    """Close HTTP clients held by the cached singletons."""
    if get_classifier.cache_info().currsize:
        get_classifier().close()
    if get_mailbox.cache_info().currsize:
        get_mailbox().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inbox_sentiment.main:app",
        host="0.0.0.0",
        port=8000,
    )
