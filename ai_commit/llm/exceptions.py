"""LLM-related exception classes.

Contains all exception classes for chat-completion requests:
- LLMError: Base exception for LLM-related errors
- AuthError: Raised when no API key is configured
- NetworkError: Raised when the request cannot be sent or times out
- HttpStatusError: Raised when the endpoint answers with a non-2xx status
- ParseError: Raised when the response body has an unexpected shape
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class AuthError(LLMError):
    """Raised when the required API key is not set."""

    pass


class NetworkError(LLMError):
    """Raised when the request cannot be sent or times out."""

    pass


class HttpStatusError(LLMError):
    """Raised when the endpoint returns a non-success status code."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"API request failed with status {status_code}.\nResponse: {body}"
        )


class ParseError(LLMError):
    """Raised when the response cannot be parsed into a commit message."""

    pass
