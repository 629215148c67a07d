"""Request tracing for the action endpoints."""

import re
import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Probes and scrapes are logged at debug so runs stand out
QUIET_PATHS = frozenset({"/health", "/metrics"})

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(request: Request) -> str:
    """Reuse the caller's X-Request-ID when it is well formed, else mint one."""
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    if _VALID_REQUEST_ID.match(incoming):
        return incoming
    return uuid.uuid4().hex


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """
    Bind a request id to the structlog context for the duration of a request.

    Pipeline logs emitted while handling the request carry the same
    request_id next to their own run_id, and the id is echoed back in the
    X-Request-ID response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request)
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        start = time.perf_counter()
        with structlog.contextvars.bound_contextvars(
            request_id=request_id, method=request.method, path=path
        ):
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "Request failed",
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                raise

            log(
                "Request handled",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
