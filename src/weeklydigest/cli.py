"""CLI entrypoints for weeklydigest."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import typer

from weeklydigest.config import load_settings
from weeklydigest.digest import WeeklyDigestBuilder
from weeklydigest.logging import configure_logging, get_logger, log_exception
from weeklydigest.sinks import DigestSink, FileSink, LogSink, StdoutSink
from weeklydigest.sources import GraphSourceError, SnapshotGraphSource
from weeklydigest.utils.dates import week_start_yyyymmdd

app = typer.Typer(add_completion=False, help="Export a page together with this week's journals")
logger = get_logger(__name__)


def _parse_day(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(
            f"expected YYYY-MM-DD, got {value!r}", param_hint="--today"
        ) from None


@app.command()
def export(
    page: str = typer.Argument(..., help="Name of the page to export."),
    snapshot: Path | None = typer.Option(
        None,
        "--snapshot",
        "-s",
        help="Graph snapshot JSON (overrides WEEKLYDIGEST_SNAPSHOT_PATH)",
    ),
    output: str = typer.Option("-", "--output", "-o", help="Output file, or '-' for stdout"),
    today: str | None = typer.Option(None, "--today", help="Pretend today is YYYY-MM-DD"),
    to_log: bool = typer.Option(False, "--to-log", help="Write the digest to the log instead"),
) -> None:
    """Export a page with its journal backlog for the current week."""

    settings = load_settings()
    configure_logging(settings.log_level)

    snapshot_path = snapshot or settings.snapshot_path
    if snapshot_path is None:
        raise typer.BadParameter(
            "No snapshot given; pass --snapshot or set WEEKLYDIGEST_SNAPSHOT_PATH.",
            param_hint="--snapshot",
        )
    fixed_day = _parse_day(today)

    try:
        source = SnapshotGraphSource.from_path(snapshot_path)
        builder = WeeklyDigestBuilder(
            source,
            clock=(lambda: fixed_day) if fixed_day else date.today,
            settings=settings.digest_settings(),
        )
        text = builder.build(page)
    except GraphSourceError as e:
        log_exception(logger, "Export failed", page=page, snapshot=str(snapshot_path))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    sink: DigestSink
    if to_log:
        sink = LogSink()
    elif output == "-":
        sink = StdoutSink()
    else:
        sink = FileSink(Path(output))
    sink.emit(text)


@app.command("week-start")
def week_start(
    today: str | None = typer.Option(None, "--today", help="Pretend today is YYYY-MM-DD"),
) -> None:
    """Print the first day of the current week as YYYYMMDD."""

    typer.echo(str(week_start_yyyymmdd(_parse_day(today) or date.today())))


if __name__ == "__main__":
    app()
