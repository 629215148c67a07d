"""Structured logging for the sentiment service.

Every event carries the service context (app, environment, mailbox
backend, classifier model) so a run can be traced without cross-referencing
deployment config. Request and run ids are added per request/run through
structlog contextvars (see api/middleware.py and sentiment/pipeline.py).
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Classification and Gmail calls go through httpx; requests are logged by
# RequestTracingMiddleware instead of uvicorn's access log
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class ServiceContext:
    """Processor adding fixed service fields to every event.

    Keys already present on the event win, so a call site can still log
    e.g. a different model explicitly.
    """

    def __init__(self, **fields: Any):
        self.fields = {key: value for key, value in fields.items() if value is not None}

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in self.fields.items():
            event_dict.setdefault(key, value)
        return event_dict


def _renderer(environment: str) -> Processor:
    if environment.lower() == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    **context: Any,
) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        environment: "production" renders JSON lines, anything else the console format
        **context: Extra service fields bound to every event (mailbox_backend, model)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        ServiceContext(app="inbox-sentiment", environment=environment, **context),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(environment),
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.get_logger(__name__).debug("Logging configured", log_level=log_level)
