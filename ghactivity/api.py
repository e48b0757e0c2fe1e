"""
High-level Python API for ghactivity.

Example:
    import ghactivity

    for event in ghactivity.fetch_user_activity("torvalds"):
        print(event.kind, event.repo_name)

    # Or render straight to lines
    for line in ghactivity.render(ghactivity.fetch_user_activity("torvalds")):
        print(line)
"""

from typing import List, Optional
import logging

from .domain import Event
from .infra import GitHubClient, validate_username
from .json_parser import parse
from .mapper import map_events
from .config import load_config

logger = logging.getLogger(__name__)


def fetch_user_activity(username: str, client: Optional[GitHubClient] = None) -> List[Event]:
    """
    Fetch and decode the public events of a user.

    Args:
        username: GitHub login
        client: Client to use; built from the loaded configuration if omitted

    Returns:
        Events in feed order (most recent first)

    Raises:
        ActivityError: Any kind; nothing is returned on failure
    """
    validate_username(username)
    if client is None:
        client = GitHubClient.from_config(load_config())

    body = client.fetch_events_body(username)
    logger.debug(f"Received {len(body)} characters for '{username}'")
    return map_events(parse(body))
