"""Console rendering of banners, log lines and status messages."""

import json
from typing import Optional, Union

import click

from .formatting import (
    colorize_message,
    detect_log_level,
    format_iso,
    format_log_message,
    format_log_time,
)
from .models import LogEvent, LogStream, MergedLogEvent


def display_banner() -> None:
    """Print the application banner."""
    click.echo()
    click.secho("╔════════════════════════════════════════╗", fg="cyan")
    click.secho("║            CloudWatch Lens             ║", fg="cyan")
    click.secho("║          AWS logs, simplified          ║", fg="cyan")
    click.secho("╚════════════════════════════════════════╝", fg="cyan")
    click.echo()


def display_log(event: Union[LogEvent, MergedLogEvent], json_output: bool = False) -> None:
    """
    Print one log event.

    Merged events carry their stream name, which is shown as provenance.

    Args:
        event: Event to print
        json_output: Emit a JSON object instead of a colorized line
    """
    stream: Optional[str] = getattr(event, "stream", None)

    if json_output:
        record = {}
        if stream is not None:
            record["stream"] = stream
        record.update(
            {
                "ts": event.timestamp,
                "t": format_iso(event.timestamp),
                "message": event.message,
            }
        )
        click.echo(json.dumps(record))
        return

    level = detect_log_level(event.message)
    message = colorize_message(format_log_message(event.message), level)
    time_str = click.style(f"[{format_log_time(event.timestamp)}]", fg="bright_black")

    if stream is not None:
        click.echo(f"{time_str} ({stream}) {message}")
    else:
        click.echo(f"{time_str} {message}")


def display_stream_header(stream: LogStream, err: bool = False) -> None:
    """Print the header separating one stream's events from the next."""
    click.secho(
        f"\n==== Stream: {stream.name} (lastEvent: {format_iso(stream.last_event_time)}) ====\n",
        fg="cyan",
        err=err,
    )


def display_log_separator() -> None:
    """Print a horizontal rule."""
    click.secho(f"\n{'─' * 80}\n", fg="bright_black")


def display_info(message: str, err: bool = False) -> None:
    """Print an informational status line."""
    click.secho(message, fg="yellow", err=err)


def display_success(message: str, err: bool = False) -> None:
    """Print a success status line."""
    click.secho(f"✓ {message}", fg="green", err=err)


def display_error(message: str) -> None:
    """Print an error line to stderr."""
    click.secho(f"✗ {message}", fg="red", err=True)
