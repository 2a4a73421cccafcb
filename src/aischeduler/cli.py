"""CLI entry point for aischeduler."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from aischeduler import __version__
from aischeduler.events import (
    EventCollection,
    format_error_for_user as format_event_error,
    format_report,
    load_events,
    save_events,
    validate_all,
)
from aischeduler.events.constants import CATEGORIES, EXPORT_FILENAME, REMINDER_OPTIONS
from aischeduler.extract import (
    AnthropicClient,
    ExtractError,
    extract_events,
    format_error_for_user as format_extract_error,
)
from aischeduler.ics import (
    ICSError,
    encode_calendar,
    file_size_estimate,
    format_error_for_user as format_ics_error,
    generate_preview,
    inspect_file,
)
from aischeduler.ics.constants import DEFAULT_FILENAME, PREVIEW_MAX_EVENTS

app = typer.Typer()
events_app = typer.Typer(help="Event list tools (JSON files)")
app.add_typer(events_app, name="events")
ics_app = typer.Typer(help="iCalendar (.ics) export tools")
app.add_typer(ics_app, name="ics")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"aischeduler version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
):
    """Turn extracted schedules into calendar files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _format_error(exc: Exception) -> str:
    if isinstance(exc, ExtractError):
        return format_extract_error(exc)
    if isinstance(exc, ICSError):
        return format_ics_error(exc)
    return format_event_error(exc)


def _fail(exc: Exception) -> None:
    typer.secho(_format_error(exc), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


@app.command("extract")
def extract(
    files: List[Path] = typer.Argument(..., help="Source files (.txt, .md, .json) to scan for events."),
    output: str = typer.Option(EXPORT_FILENAME, "--output", "-o", help="Where to write the extracted events (JSON)."),
    model: Optional[str] = typer.Option(None, "--model", help="Override AISCHEDULER_MODEL for this request."),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Override AISCHEDULER_TIMEOUT for this request (seconds).",
    ),
):
    """Extract events from text files with the Anthropic API."""
    try:
        client = AnthropicClient(model=model, timeout=timeout)
        result = extract_events(files, client=client)
        if result.events:
            save_events(Path(output), result.events)
    except Exception as exc:
        _fail(exc)

    if not result.events:
        typer.secho(
            "No events found in the uploaded files. Try uploading files with clearer event information.",
            fg=typer.colors.YELLOW,
        )
        return

    typer.echo(
        f"✅ Successfully extracted {_plural(result.events_extracted, 'event')} "
        f"from {_plural(result.files_processed, 'file')}!"
    )
    typer.echo(EventCollection(result.events).stats_text())
    typer.echo(str(Path(output)))


@events_app.command("add")
def events_add(
    file: str = typer.Argument(..., help="Events JSON file (created if missing)."),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Event title."),
    date: Optional[str] = typer.Option(None, "--date", help="Event date (YYYY-MM-DD, defaults to today)."),
    start: Optional[str] = typer.Option(None, "--start", help="Start time (HH:MM)."),
    end: Optional[str] = typer.Option(None, "--end", help="End time (HH:MM)."),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help=f"Category ({', '.join(CATEGORIES)}).",
    ),
    description: Optional[str] = typer.Option(None, "--description", help="Event description."),
    reminder: Optional[str] = typer.Option(
        None,
        "--reminder",
        help=f"Reminder minutes ({', '.join(REMINDER_OPTIONS)}).",
    ),
):
    """Add an event to a JSON events file, filling defaults for unset fields."""
    path = Path(file)
    try:
        collection = EventCollection(load_events(path) if path.exists() else [])
        index = collection.add_event(
            {
                "title": title,
                "date": date,
                "startTime": start,
                "endTime": end,
                "category": category,
                "description": description,
                "reminder": reminder,
            }
        )
        save_events(path, collection.events)
    except Exception as exc:
        _fail(exc)

    event = collection.events[index]
    typer.echo(f"✅ Added event {index + 1} | {event.date} {event.start_time}-{event.end_time} | {event.title}")


@events_app.command("validate")
def events_validate(
    file: str = typer.Argument(..., help="Events JSON file."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
):
    """Validate every event and report the invalid ones."""
    try:
        collection = EventCollection(load_events(Path(file)))
        issues = collection.validate_all()
    except Exception as exc:
        _fail(exc)

    if as_json:
        typer.echo(json.dumps([issue.to_dict() for issue in issues], indent=2))
    elif not issues:
        typer.echo(f"✅ No validation errors ({_plural(collection.count, 'event')})")
    else:
        typer.secho("Please fix the following errors:", fg=typer.colors.RED, err=True)
        typer.echo(format_report(issues))
    if issues:
        raise typer.Exit(code=1)


@events_app.command("sort")
def events_sort(
    file: str = typer.Argument(..., help="Events JSON file."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write to this file instead of in place."),
):
    """Sort events by date and start time."""
    try:
        collection = EventCollection(load_events(Path(file)))
        collection.sort()
        target = save_events(Path(output) if output else Path(file), collection.events)
    except Exception as exc:
        _fail(exc)

    typer.echo(f"✅ Sorted {_plural(collection.count, 'event')} into {target}")


@events_app.command("stats")
def events_stats(
    file: str = typer.Argument(..., help="Events JSON file."),
):
    """Show event counts per category."""
    try:
        collection = EventCollection(load_events(Path(file)))
    except Exception as exc:
        _fail(exc)

    if not collection.count:
        typer.echo("No events found.")
        return
    typer.echo(collection.stats_text())
    typer.echo(f"Estimated calendar size: {file_size_estimate(collection.events)}")


@ics_app.command("export")
def ics_export(
    file: str = typer.Argument(..., help="Events JSON file."),
    output: str = typer.Option(DEFAULT_FILENAME, "--output", "-o", help="Calendar file to write."),
    skip_invalid: bool = typer.Option(
        False,
        "--skip-invalid",
        help="Export the valid events and skip the invalid ones instead of failing.",
    ),
):
    """Export events to an .ics calendar file."""
    path = Path(output)
    try:
        events = load_events(Path(file))
        issues = validate_all(events)
    except Exception as exc:
        _fail(exc)

    if issues and not skip_invalid:
        typer.secho("Please fix the following errors:", fg=typer.colors.RED, err=True)
        typer.secho(format_report(issues), err=True)
        raise typer.Exit(code=1)

    try:
        document = encode_calendar(events, filename=path.name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(document.to_bytes())
    except Exception as exc:
        _fail(exc)

    for skipped in document.skipped:
        label = skipped.title or "Untitled"
        typer.secho(f"Skipped event {skipped.index + 1} ({label}): {skipped.reason}", fg=typer.colors.YELLOW, err=True)
    typer.echo(f"✅ Exported {_plural(document.encoded, 'event')} to {path}")


@ics_app.command("preview")
def ics_preview(
    file: str = typer.Argument(..., help="Events JSON file."),
    max_events: int = typer.Option(PREVIEW_MAX_EVENTS, "--max", min=0, help="Number of events to show."),
):
    """Preview the events that would be exported."""
    try:
        events = load_events(Path(file))
    except Exception as exc:
        _fail(exc)

    typer.echo(generate_preview(events, max_events=max_events))


@ics_app.command("inspect")
def ics_inspect(
    file: str = typer.Argument(..., help="Calendar (.ics) file."),
):
    """List the events in an .ics file."""
    try:
        summary = inspect_file(Path(file))
    except Exception as exc:
        _fail(exc)

    if not summary.count:
        typer.echo("No events found.")
        return
    for event in summary.events:
        alarm = " | alarm" if event.alarms else ""
        start = event.start.isoformat() if event.start is not None else "-"
        end = event.end.isoformat() if event.end is not None else "-"
        typer.echo(f"{event.uid} | {start} -> {end} | {event.summary}{alarm}")
    typer.echo(f"Total: {_plural(summary.count, 'event')}")


def cli():
    """Entry point for the CLI."""
    app()
