"""
FastAPI exception handlers for structured error responses.

Classifier failures never reach this layer (they become UNPROCESSED
labels); only mailbox and unexpected errors do.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from inbox_sentiment.mailbox.exceptions import MailboxError

logger = structlog.get_logger(__name__)


async def mailbox_error_handler(request: Request, exc: MailboxError) -> JSONResponse:
    """
    Handle mailbox backend failures.

    Maps to 502 Bad Gateway (upstream mailbox unavailable or rejected the call).
    """
    logger.error("Mailbox error", error=exc.message, details=exc.details)

    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "mailbox_error",
            "message": exc.message,
            "details": exc.details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    MailboxError: mailbox_error_handler,
    Exception: generic_error_handler,
}
