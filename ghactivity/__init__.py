"""
ghactivity - Recent public GitHub activity of a user, in plain lines.

Quick Start:
    import ghactivity

    # Fetch, decode and classify the feed
    events = ghactivity.fetch_user_activity("torvalds")

    # One descriptive line per event
    for line in ghactivity.render(events):
        print(line)

    # Or run the pipeline on a body you already have
    events = ghactivity.map_events(ghactivity.parse(body))

Pipeline:
    parse       - JSON text -> native values (json_parser)
    map_events  - values -> Event records (mapper)
    classify    - discriminator + payload -> EventPayload variant (mapper)
    render      - Event records -> lines (render)
"""

__version__ = "0.1.0"

# High-level API
from .api import fetch_user_activity

# Pipeline stages
from .json_parser import parse
from .mapper import map_events, classify
from .render import render, format_event

# Domain objects
from .domain import (
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

# Errors
from .errors import (
    ActivityError,
    InvalidUsername,
    NotFound,
    RateLimited,
    NetworkError,
    ParseError,
    UnexpectedStatus,
)

__all__ = [
    # Version
    "__version__",
    # High-level API
    "fetch_user_activity",
    # Pipeline
    "parse",
    "map_events",
    "classify",
    "render",
    "format_event",
    # Domain objects
    "Event",
    "EventPayload",
    "Push",
    "IssueComment",
    "IssuesOpened",
    "Watch",
    "Fork",
    "CreateBranch",
    "CreateRepo",
    "CreateTag",
    "Other",
    # Errors
    "ActivityError",
    "InvalidUsername",
    "NotFound",
    "RateLimited",
    "NetworkError",
    "ParseError",
    "UnexpectedStatus",
]
