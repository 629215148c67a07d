"""
Custom exceptions for the LLM client layer.

These exceptions let the sentiment classifier tell failure modes apart for
logging and metrics before collapsing all of them into UNPROCESSED.
"""


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.

    All LLM-specific exceptions inherit from this to allow catching
    any LLM-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMMissingCredentialError(LLMClientError):
    """
    Raised when a request is attempted without an API key.

    Raised before any network I/O happens.
    """
    pass


class LLMConnectionError(LLMClientError):
    """
    Raised when unable to reach the classification service.

    Includes network errors, DNS failures, refused connections, etc.
    """
    pass


class LLMTimeoutError(LLMConnectionError):
    """
    Raised when the request exceeds the transport timeout.
    """
    pass


class LLMHTTPError(LLMClientError):
    """
    Raised when the service answers with any status other than 200.
    """
    def __init__(self, status_code: int, message: str, details: dict | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class LLMMalformedResponseError(LLMClientError):
    """
    Raised when a 200 response cannot be decoded or does not match the
    expected {"choices": [{"message": {"content": ...}}]} shape, or the
    content is empty.
    """
    pass
