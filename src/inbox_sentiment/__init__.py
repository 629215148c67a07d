"""
Inbox Sentiment Labeler.

Classifies the sentiment of recent inbox messages with an LLM and keeps
exactly one tone label on each thread:
- HAPPY TONE / NEUTRAL TONE / UPSET TONE for classified messages
- UNPROCESSED when classification could not be completed

Architecture: FastAPI trigger surface + sequential pipeline + Groq chat completions
"""

__version__ = "0.1.0"
