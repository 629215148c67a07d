"""
FastAPI API routes and endpoints.

- routes.py: Action endpoints (POST /api/v1/sentiment/analyze, POST /api/v1/samples) and GET /health
- dependencies.py: Dependency injection for mailbox, classifier, pipeline
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request tracing
"""

from inbox_sentiment.api import dependencies, error_handlers, models
from inbox_sentiment.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
