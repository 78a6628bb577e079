"""Application errors mapped to HTTP responses."""


class ChefError(Exception):
    """Base error with a client-facing message and status code."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ChefError):
    """Client input was rejected."""

    status_code = 400


class UpstreamError(ChefError):
    """The LLM provider call failed."""

    status_code = 500


class QuotaExceededError(ChefError):
    """The LLM provider account has no remaining credit.

    Internal only: the chat service turns it into a billing reply.
    """
