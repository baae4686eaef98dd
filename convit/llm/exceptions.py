"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- TransportError: Raised when the backend call fails
- RequestTimeoutError: Raised when the backend call exceeds its deadline
- EmptyCompletionError: Raised when the backend returns no text
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class TransportError(LLMError):
    """Raised when the request to the backend fails."""

    pass


class RequestTimeoutError(TransportError):
    """Raised when the request to the backend exceeds its deadline."""

    pass


class EmptyCompletionError(LLMError):
    """Raised when the backend returns no usable text."""

    pass
