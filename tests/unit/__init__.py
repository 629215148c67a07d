"""
Unit tests for the Inbox Sentiment Labeler.

Test individual components in isolation:
- Text normalization (plain/HTML fallback, truncation)
- Groq client (wire payload, error translation) over httpx.MockTransport
- Sentiment classifier (reply mapping, failure states)
- Label reconciler (exclusivity, idempotence, lazy label creation)
- Pipeline and sample generator against the in-memory mailbox
- Gmail mailbox request shapes
"""
