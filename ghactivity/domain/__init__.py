"""
Domain layer for ghactivity.

Contains pure domain objects with no I/O or side effects:
- Event: One entry of a user's public activity feed
- EventPayload and its variants: What kind of activity the event records
"""

from .event import (
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
    PAYLOAD_VARIANTS,
)

__all__ = [
    'Event',
    'EventPayload',
    'Push',
    'IssueComment',
    'IssuesOpened',
    'Watch',
    'Fork',
    'CreateBranch',
    'CreateRepo',
    'CreateTag',
    'Other',
    'PAYLOAD_VARIANTS',
]
