#!/usr/bin/env python3

import click
import sys
from typing import Optional

from ghactivity import __version__
from ghactivity.api import fetch_user_activity
from ghactivity.config import load_config, configure_logging, logger
from ghactivity.errors import ActivityError
from ghactivity.exit_codes import get_exit_code_for_exception
from ghactivity.infra import GitHubClient
from ghactivity.render import (
    console,
    render,
    print_header,
    print_lines,
    print_no_events,
    render_stats_table,
)


@click.command('ghactivity')
@click.argument('username')
@click.option('--type', '-t', 'event_types', multiple=True,
              help='Only show events of this type (e.g., PushEvent, WatchEvent)')
@click.option('--limit', '-n', type=click.IntRange(min=0),
              help='Maximum events to show (applied after --type)')
@click.option('--stats', is_flag=True,
              help='Show a count per event type instead of the activity list')
@click.option('-v', '--verbose', is_flag=True,
              help='Log requests and parsing details to stderr')
@click.version_option(version=__version__)
def cli(
    username: str,
    event_types: tuple,
    limit: Optional[int],
    stats: bool,
    verbose: bool,
):
    """
    Show the recent public GitHub activity of USERNAME.

    \b
    Examples:
        ghactivity torvalds
        ghactivity torvalds --type PushEvent --limit 5
        ghactivity github --stats
    """
    config = load_config()
    configure_logging(config, verbose)

    console.print(f"Fetching recent activity for '{username}'...", markup=False, highlight=False)

    try:
        events = fetch_user_activity(username, GitHubClient.from_config(config))
    except ActivityError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        click.echo(f"\nError: {e}", err=True)
        sys.exit(get_exit_code_for_exception(e))
    except KeyboardInterrupt as e:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(get_exit_code_for_exception(e))

    if event_types:
        events = [event for event in events if event.kind in event_types]
    if limit is not None:
        events = events[:limit]

    if not events:
        print_no_events(username)
        return

    if stats:
        render_stats_table(events, title=f"Recent activity for '{username}'")
        return

    print_header(username, len(events))
    print_lines(render(events))
    console.print()


def main():
    cli()

if __name__ == "__main__":
    main()
