"""
Mapping from parsed JSON to typed feed events.

map_events() walks the top-level array of the events response and builds
one Event per element. It is fail-fast: the first element with a missing
or wrongly shaped required field aborts the whole batch with ParseError.

classify() turns a discriminator plus its payload object into exactly one
EventPayload variant. It never raises; unknown kinds become Other.
"""

from typing import Any, Dict, List
import logging

from .domain.event import (
    Event,
    EventPayload,
    Push,
    IssueComment,
    IssuesOpened,
    Watch,
    Fork,
    CreateBranch,
    CreateRepo,
    CreateTag,
    Other,
)
from .errors import ParseError

logger = logging.getLogger(__name__)

# Discriminators with a dedicated variant (some only for specific payloads)
RECOGNIZED_KINDS = (
    'PushEvent',
    'IssueCommentEvent',
    'IssuesEvent',
    'WatchEvent',
    'ForkEvent',
    'CreateEvent',
)

_CREATE_VARIANTS = {
    'branch': CreateBranch,
    'repository': CreateRepo,
    'tag': CreateTag,
}


def classify(kind: str, payload: Any) -> EventPayload:
    """
    Map a discriminator and its payload object to a payload variant.

    Only the fields each kind needs are inspected: commits for pushes,
    action for issues, ref_type for creates, forkee for forks.

    Args:
        kind: The event's "type" value
        payload: The event's payload; anything but a dict counts as empty

    Returns:
        Exactly one EventPayload variant
    """
    if not isinstance(payload, dict):
        payload = {}

    if kind == 'PushEvent':
        commits = payload.get('commits')
        return Push(commit_count=len(commits) if isinstance(commits, list) else 0)

    if kind == 'IssueCommentEvent':
        return IssueComment()

    if kind == 'IssuesEvent':
        if payload.get('action') == 'opened':
            return IssuesOpened()
        return Other(raw_kind=kind)

    if kind == 'WatchEvent':
        return Watch()

    if kind == 'ForkEvent':
        forkee = payload.get('forkee')
        full_name = forkee.get('full_name') if isinstance(forkee, dict) else None
        return Fork(forkee=full_name if isinstance(full_name, str) else None)

    if kind == 'CreateEvent':
        ref_type = payload.get('ref_type')
        if isinstance(ref_type, str) and ref_type in _CREATE_VARIANTS:
            return _CREATE_VARIANTS[ref_type]()
        return Other(raw_kind=kind)

    return Other(raw_kind=kind)


def map_events(root: Any) -> List[Event]:
    """
    Build typed events from the parsed events response.

    Args:
        root: Parsed JSON document; must be an array of objects

    Returns:
        One Event per array element, in input order

    Raises:
        ParseError: If the root is not an array, an element is not an
            object, or a required field is missing or has the wrong type
    """
    if not isinstance(root, list):
        raise ParseError("expected array at top level")

    events = []
    for index, entry in enumerate(root):
        if not isinstance(entry, dict):
            raise ParseError(f"event {index}: expected object, found {_json_type(entry)}")
        event = _map_event(index, entry)
        logger.debug(f"event {index}: {event}")
        events.append(event)

    logger.debug(f"Mapped {len(events)} events")
    return events


def _map_event(index: int, entry: Dict[str, Any]) -> Event:
    kind = _required_string(index, entry, 'type')
    actor_login = _required_nested_string(index, entry, 'actor', 'login')
    repo_name = _required_nested_string(index, entry, 'repo', 'name')
    created_at = _required_string(index, entry, 'created_at')

    payload = entry.get('payload')
    if payload is None:
        payload = {}

    return Event(
        kind=kind,
        actor_login=actor_login,
        repo_name=repo_name,
        created_at=created_at,
        payload=classify(kind, payload),
    )


def _field_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def _required_nested_string(index: int, obj: Dict[str, Any], parent: str, key: str) -> str:
    """Read obj[parent][key]; a missing parent is reported by the full path."""
    if parent not in obj:
        raise ParseError(f"event {index}: missing required field '{_field_path(parent, key)}'")
    value = obj[parent]
    if not isinstance(value, dict):
        raise ParseError(f"event {index}: field '{parent}' must be an object, found {_json_type(value)}")
    return _required_string(index, value, key, parent)


def _required_string(index: int, obj: Dict[str, Any], key: str, parent: str = '') -> str:
    path = _field_path(parent, key)
    if key not in obj:
        raise ParseError(f"event {index}: missing required field '{path}'")
    value = obj[key]
    if not isinstance(value, str):
        raise ParseError(f"event {index}: field '{path}' must be a string, found {_json_type(value)}")
    return value


def _json_type(value: Any) -> str:
    """Name a parsed value by its JSON type."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    return 'object'
