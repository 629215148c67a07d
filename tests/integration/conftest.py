"""Integration test fixtures (service checks and prerequisites).

Provides fixtures for checking if external services are available.
Live tests are skipped if the required credentials are not set.
"""

import os

import pytest


@pytest.fixture(scope="session")
def groq_key() -> str:
    """Groq API key from the environment.

    Skips tests if GROQ_KEY is not set.
    """
    key = os.environ.get("GROQ_KEY")
    if not key:
        pytest.skip("GROQ_KEY not set, skipping live Groq tests")
    return key
