"""
Event domain objects for ghactivity.

An Event is one entry of a user's public GitHub feed. Its payload is
exactly one member of a closed set of variants, each carrying only the
data that kind of activity needs for display:

- Push: commits pushed to a branch
- IssueComment: comment on an issue or pull request
- IssuesOpened: a new issue
- Watch: repository starred
- Fork: repository forked
- CreateBranch / CreateRepo / CreateTag: ref or repository created
- Other: anything else, keeping the discriminator as sent

Events and payloads are immutable value objects.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Type


@dataclass(frozen=True)
class EventPayload:
    """Base class for the closed set of payload variants."""


@dataclass(frozen=True)
class Push(EventPayload):
    """Commits pushed; commit_count is 0 when the feed omits the list."""
    commit_count: int = 0


@dataclass(frozen=True)
class IssueComment(EventPayload):
    """Comment on an issue or pull request."""


@dataclass(frozen=True)
class IssuesOpened(EventPayload):
    """Issue opened."""


@dataclass(frozen=True)
class Watch(EventPayload):
    """Repository starred."""


@dataclass(frozen=True)
class Fork(EventPayload):
    """Repository forked; forkee is the new fork's full name when known."""
    forkee: Optional[str] = None


@dataclass(frozen=True)
class CreateBranch(EventPayload):
    """Branch created."""


@dataclass(frozen=True)
class CreateRepo(EventPayload):
    """Repository created."""


@dataclass(frozen=True)
class CreateTag(EventPayload):
    """Tag created."""


@dataclass(frozen=True)
class Other(EventPayload):
    """Catch-all for discriminators with no dedicated variant."""
    raw_kind: str = ''


PAYLOAD_VARIANTS: Tuple[Type[EventPayload], ...] = (
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


@dataclass(frozen=True)
class Event:
    """
    One decoded feed entry.

    Attributes:
        kind: Discriminator from the feed (e.g. "PushEvent")
        actor_login: Login of the user who performed the activity
        repo_name: Repository in "owner/name" form
        created_at: Timestamp exactly as the API sent it
        payload: Kind-specific data
    """

    kind: str
    actor_login: str
    repo_name: str
    created_at: str
    payload: EventPayload

    def __str__(self) -> str:
        return f"{self.kind} in {self.repo_name} at {self.created_at}"
