"""
Integration tests for the Inbox Sentiment Labeler.

Test components together without external services:
- Full pipeline (mailbox -> normalize -> Groq client on MockTransport -> labels)
- API endpoints (FastAPI TestClient with dependency overrides)
"""
