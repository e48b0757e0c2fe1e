"""
Infrastructure layer for ghactivity.

Contains abstractions for external systems:
- GitHubClient: GitHub API access for the public events feed

These provide clean interfaces that can be mocked for testing.
"""

from .github_client import GitHubClient, RateLimitStatus, validate_username

__all__ = [
    'GitHubClient',
    'RateLimitStatus',
    'validate_username',
]
