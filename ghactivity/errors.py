"""
Error taxonomy for ghactivity.

Every failure the tool can report is one of a closed set of kinds:

- InvalidUsername: the username failed validation before any request
- NotFound: GitHub answered 404 for the user
- RateLimited: GitHub refused the request because of rate limiting
- NetworkError: the request never completed (DNS, refused, timeout)
- ParseError: the response body is not valid JSON or not a valid feed
- UnexpectedStatus: any other non-2xx response

Errors are immutable once raised and carry only what is needed to
produce a user-facing message.
"""

from typing import Optional
import time

from .exit_codes import (
    CommandError,
    USAGE_ERROR,
    NOT_FOUND,
    AUTH_ERROR,
    NETWORK_ERROR,
    DATA_ERROR,
    API_ERROR,
)


class ActivityError(CommandError):
    """Base class for all ghactivity failures."""


class InvalidUsername(ActivityError):
    """Raised when a username is empty, contains whitespace or is too long."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid username: {reason}", USAGE_ERROR)
        self.reason = reason


class NotFound(ActivityError):
    """Raised when GitHub reports the user does not exist."""

    def __init__(self, username: str):
        super().__init__(f"User '{username}' not found", NOT_FOUND)
        self.username = username


class RateLimited(ActivityError):
    """Raised on HTTP 429, or 403 with an exhausted rate limit."""

    def __init__(self, status: int, reset_time: Optional[int] = None):
        message = "GitHub API rate limit exceeded"
        if reset_time:
            minutes = max(0, (reset_time - int(time.time())) // 60)
            message += f" (resets in {minutes} minutes)"
        super().__init__(message, AUTH_ERROR)
        self.status = status
        self.reset_time = reset_time


class NetworkError(ActivityError):
    """Raised when the request fails at the transport level."""

    def __init__(self, cause: str):
        super().__init__(f"Network error: {cause}", NETWORK_ERROR)
        self.cause = cause


class ParseError(ActivityError):
    """
    Raised when the body cannot be interpreted.

    Attributes:
        message: Human-readable reason, without the offset
        offset: Character offset into the document where the problem was
            found, or None for structural errors found while mapping
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        text = f"Failed to parse response: {message}"
        if offset is not None:
            text += f" at offset {offset}"
        super().__init__(text, DATA_ERROR)
        self.message = message
        self.offset = offset


class UnexpectedStatus(ActivityError):
    """Raised for a non-2xx response not covered by another kind."""

    def __init__(self, code: int):
        super().__init__(f"GitHub API returned unexpected status {code}", API_ERROR)
        self.code = code
