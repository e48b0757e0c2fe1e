"""
GitHub API client infrastructure for ghactivity.

Performs the single request the tool needs, the public events feed of a
user, and translates HTTP outcomes into ActivityError kinds:

- 2xx: body text is returned for parsing
- 404: NotFound
- 429, or 403 with an exhausted rate limit: RateLimited
- other non-2xx: UnexpectedStatus
- transport failures: NetworkError

There is no retry or backoff; one request, one response.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Dict, Mapping

import requests

from ..errors import InvalidUsername, NotFound, RateLimited, NetworkError, UnexpectedStatus

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_USER_AGENT = "github-activity-cli/1.0"
MAX_USERNAME_LENGTH = 39


def validate_username(username: str) -> None:
    """
    Check a username before it is put into a URL.

    Raises:
        InvalidUsername: If the name is empty, has whitespace or is too long
    """
    if not username:
        raise InvalidUsername("Username cannot be empty")
    if any(c.isspace() for c in username):
        raise InvalidUsername("Username cannot contain spaces")
    if len(username) > MAX_USERNAME_LENGTH:
        raise InvalidUsername(f"Username is too long (max {MAX_USERNAME_LENGTH} characters)")


@dataclass
class RateLimitStatus:
    """GitHub API rate limit status."""
    remaining: int
    limit: int
    reset_time: int  # Unix timestamp

    @property
    def minutes_until_reset(self) -> int:
        """Minutes until rate limit resets."""
        now = int(time.time())
        return max(0, (self.reset_time - now) // 60)

    @property
    def is_low(self) -> bool:
        """Check if rate limit is getting low (< 10 remaining)."""
        return self.remaining < 10

    @property
    def is_exhausted(self) -> bool:
        return self.remaining == 0

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional['RateLimitStatus']:
        """Parse X-RateLimit-* headers; None when they are absent or malformed."""
        try:
            remaining = int(headers.get('X-RateLimit-Remaining', -1))
            limit = int(headers.get('X-RateLimit-Limit', -1))
            reset_time = int(headers.get('X-RateLimit-Reset', 0))
        except (ValueError, TypeError):
            return None

        if remaining < 0 or limit < 0:
            return None
        return cls(remaining=remaining, limit=limit, reset_time=reset_time)


class GitHubClient:
    """
    GitHub API client for the public events feed.

    Example:
        client = GitHubClient(token=os.environ.get("GITHUB_TOKEN"))
        body = client.fetch_events_body("torvalds")
    """

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        user_agent: str = DEFAULT_USER_AGENT,
        token: Optional[str] = None,
        timeout: float = 30,
    ):
        """
        Initialize GitHubClient.

        Args:
            api_base: Root URL of the REST API
            user_agent: Value of the required User-Agent header
            token: Optional GitHub token, sent as an Authorization header
            timeout: Request timeout in seconds
        """
        self.api_base = api_base.rstrip('/')
        self.user_agent = user_agent
        self.token = token
        self.timeout = timeout
        self.rate_limit: Optional[RateLimitStatus] = None

    @classmethod
    def from_config(cls, config: Dict) -> 'GitHubClient':
        """Create a client from the 'github' section of the configuration."""
        github = config.get('github', {})
        return cls(
            api_base=github.get('api_base') or DEFAULT_API_BASE,
            user_agent=github.get('user_agent') or DEFAULT_USER_AGENT,
            token=github.get('token') or None,
            timeout=github.get('timeout_seconds', 30),
        )

    def _headers(self) -> Dict[str, str]:
        headers = {
            'Accept': 'application/vnd.github+json',
            'User-Agent': self.user_agent,
        }
        if self.token:
            headers['Authorization'] = f'token {self.token}'
        return headers

    def _update_rate_limit_from_headers(self, headers: Mapping[str, str]) -> Optional[RateLimitStatus]:
        """Update rate limit status from response headers."""
        status = RateLimitStatus.from_headers(headers)
        if status is None:
            return None
        self.rate_limit = status
        if status.is_low:
            logger.warning(
                f"GitHub API rate limit low: {status.remaining}/{status.limit} remaining, "
                f"resets in {status.minutes_until_reset} minutes"
            )
        return status

    def fetch_events_body(self, username: str) -> str:
        """
        Fetch the raw events feed of a user.

        Args:
            username: GitHub login

        Returns:
            Response body text

        Raises:
            InvalidUsername, NotFound, RateLimited, NetworkError,
            UnexpectedStatus
        """
        validate_username(username)
        url = f"{self.api_base}/users/{username}/events"
        logger.debug(f"GET {url}")

        try:
            response = requests.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        logger.debug(f"GitHub API responded {response.status_code} for {url}")
        rate_limit = self._update_rate_limit_from_headers(response.headers)

        if 200 <= response.status_code < 300:
            return response.text

        if response.status_code == 404:
            raise NotFound(username)

        if response.status_code == 429 or (
            response.status_code == 403 and rate_limit is not None and rate_limit.is_exhausted
        ):
            reset_time = rate_limit.reset_time if rate_limit else None
            raise RateLimited(response.status_code, reset_time)

        raise UnexpectedStatus(response.status_code)
