"""
Rendering functions for ghactivity output.

format_event() and render() are pure: they turn typed events into
descriptive lines and never touch I/O. The print_* helpers put those
lines, headers and tables on the console.
"""

from collections import Counter
from typing import Callable, Dict, List, Sequence, Type

from rich.table import Table
from rich.console import Console
from rich import box
from rich.markup import escape

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

console = Console()


# One rule per payload variant
_FORMATTERS: Dict[Type[EventPayload], Callable[[Event], str]] = {
    Push: lambda e: f"Pushed {e.payload.commit_count} commit(s) to {e.repo_name}",
    IssueComment: lambda e: f"Commented on a pull request/issue in {e.repo_name}",
    IssuesOpened: lambda e: f"Opened an issue in {e.repo_name}",
    Watch: lambda e: f"Starred {e.repo_name}",
    Fork: lambda e: f"Forked {e.repo_name}",
    CreateBranch: lambda e: f"Created a branch in {e.repo_name}",
    CreateRepo: lambda e: f"Created a repository in {e.repo_name}",
    CreateTag: lambda e: f"Created a tag in {e.repo_name}",
    Other: lambda e: f"Performed {e.payload.raw_kind} in {e.repo_name}",
}


def format_event(event: Event) -> str:
    """
    Describe one event in a single line.

    Raises:
        TypeError: If the payload is not one of the known variants
    """
    formatter = _FORMATTERS.get(type(event.payload))
    if formatter is None:
        raise TypeError(f"No rendering rule for payload {type(event.payload).__name__}")
    return formatter(event)


def render(events: Sequence[Event]) -> List[str]:
    """
    Render events as lines, one per event, in input order.

    Args:
        events: Events as returned by the mapper

    Returns:
        List of descriptive lines
    """
    return [format_event(event) for event in events]


def print_header(username: str, event_count: int) -> None:
    """Print the title and event count shown above the activity list."""
    console.print(f"\nRecent activity for '{username}':", markup=False, highlight=False)
    plural = "" if event_count == 1 else "s"
    console.print(f"Found {event_count} event{plural}\n", markup=False, highlight=False)


def print_lines(lines: Sequence[str]) -> None:
    """Print rendered lines as a bulleted list."""
    for line in lines:
        console.print(f"- {line}", markup=False, highlight=False, soft_wrap=True)


def print_no_events(username: str) -> None:
    """Explain an empty feed."""
    console.print(f"[yellow]No recent activity found for user '{escape(username)}'[/yellow]", highlight=False)
    console.print("This could mean:")
    console.print("  - The user has no public activity in the last 90 days")
    console.print("  - The user doesn't exist")
    console.print("  - The user has made their activity private")


def render_stats_table(events: Sequence[Event], title: str = "Activity by event type") -> None:
    """
    Render a per-kind count table.

    Args:
        events: Events to summarize
        title: Table title
    """
    if not events:
        console.print("[yellow]No data to display.[/yellow]")
        return

    counts = Counter(event.kind for event in events)

    table = Table(
        title=escape(title),
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Event type", style="cyan")
    table.add_column("Count", justify="right", style="green")

    for kind, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        table.add_row(escape(kind), str(count))

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(events)} events")
