"""Command-line interface for finding meeting times."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from .busy_times import collect_busy_ranges
from .config import FinderConfig
from .event_csv import export_windows_csv, import_events_csv
from .find_meeting_query import FindMeetingQuery
from .free_windows import find_free_windows
from .models import Event, MeetingRequest
from .schedule_printer import format_busy_for_printing, format_windows_for_printing, print_windows
from .validation import validate_and_report

app = typer.Typer(
    name="meeting-finder",
    help="Find meeting times that work for a group of attendees",
    no_args_is_help=True,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_config() -> FinderConfig:
    try:
        return FinderConfig.from_env()
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)


def _load_events(events_file: Path) -> list[Event]:
    try:
        return import_events_csv(events_file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error reading events: {e}", err=True)
        raise typer.Exit(1)


def _build_request(
    attendees: list[str] | None,
    optional: list[str] | None,
    duration: int,
) -> MeetingRequest:
    try:
        return MeetingRequest(
            attendees=frozenset(attendees or ()),
            duration=duration,
            optional_attendees=frozenset(optional or ()),
        )
    except ValueError as e:
        typer.echo(f"Invalid meeting request: {e}", err=True)
        raise typer.Exit(1)


EventsFileArg = Annotated[
    Path,
    typer.Argument(help="Path to the events CSV (title,start,end,attendees)"),
]
AttendeesOpt = Annotated[
    list[str] | None,
    typer.Option("--attendee", "-a", help="Mandatory attendee (repeat for several)"),
]
VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose/debug logging"),
]


@app.command("find")
def find(
    events_file: EventsFileArg,
    attendees: AttendeesOpt = None,
    optional: Annotated[
        list[str] | None,
        typer.Option("--optional", "-O", help="Optional attendee (repeat for several)"),
    ] = None,
    duration: Annotated[
        int | None,
        typer.Option("--duration", "-d", help="Meeting duration in minutes", min=0),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the windows to this CSV file"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress detailed output"),
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Find every window of the day that works for the requested attendees."""
    config = _load_config()
    setup_logging(verbose=verbose or config.verbose)

    events = _load_events(events_file)
    request = _build_request(
        attendees,
        optional,
        duration if duration is not None else config.default_duration,
    )

    if not quiet:
        typer.echo(f"Found {len(events)} events")
        typer.echo(
            f"Looking for {request.duration} minutes with {len(request.attendees)} mandatory "
            f"and {len(request.optional_attendees)} optional attendee(s)"
        )

    windows = FindMeetingQuery().query(events, request)

    # Sanity check only, a violation is reported but does not fail the command
    is_valid, errors = validate_and_report(windows, events, request)
    if not is_valid:
        for error in errors:
            typer.echo(f"⚠️  Invalid meeting window: {error}", err=True)

    if quiet:
        typer.echo(format_windows_for_printing(windows))
    else:
        print_windows(windows, title=f"{request.duration} minute meeting windows")

    if output is not None:
        export_windows_csv(windows, output)
        typer.echo(f"\nWindows CSV saved to: {output.absolute()}")


@app.command("busy")
def busy(
    events_file: EventsFileArg,
    attendees: AttendeesOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Show when a group of attendees is busy and when they are all free."""
    config = _load_config()
    setup_logging(verbose=verbose or config.verbose)

    events = _load_events(events_file)
    busy_ranges = collect_busy_ranges(frozenset(attendees or ()), events)

    typer.echo("Busy:")
    typer.echo(format_busy_for_printing(busy_ranges))
    typer.echo("\nFree:")
    typer.echo(format_windows_for_printing(find_free_windows(busy_ranges, 0)))


def main() -> None:
    """Entry point for the CLI."""
    app()
