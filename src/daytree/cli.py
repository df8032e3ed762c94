"""Command-line interface: drive the date tree operations against a document file."""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from daytree.config import FILE_REGISTRY, WEEK_START, resolve_default_file
from daytree.core.files.router import parse_registry
from daytree.core.refile.engine import RefileEngine
from daytree.core.tree.focus import focus_on_day, focus_on_today, focus_relative
from daytree.core.tree.range_view import show_month, show_range, show_week
from daytree.errors import DaytreeError
from daytree.logging_config import configure_logging
from daytree.models.node import Document, ViewBounds
from daytree.session import Session
from daytree.store import DocumentStore

app = typer.Typer(help="daytree: year/month/day trees in outline files.")

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Document to use instead of the active registered one"),
]
DryRunOption = Annotated[bool, typer.Option("--dry-run", help="Do not write anything")]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]
KeepOption = Annotated[bool, typer.Option("--keep", "-k", help="Keep the original subtree")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


@contextmanager
def _open_document(file: Path | None, *, dry_run: bool) -> Iterator[tuple[Document, Session]]:
    """Resolve the active document, load it, and save it if the block succeeds.

    Domain errors are logged and turned into exit code 1; nothing is saved then.
    """
    session = Session()
    with session.override_file(file):
        path = session.resolve_file(
            parse_registry(FILE_REGISTRY), default_path=resolve_default_file()
        )
    store = DocumentStore(dry_run=dry_run)
    document = store.read(path)
    try:
        yield document, session
    except DaytreeError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    store.write(document)


def _emit_view(document: Document, bounds: ViewBounds, *, output_json: bool) -> None:
    lines = document.slice(bounds)
    if output_json:
        data = {"start": bounds.start + 1, "end": bounds.end, "lines": lines}
        typer.echo(json.dumps(data, indent=2))
    else:
        for line in lines:
            typer.echo(line)


@app.command()
def day(
    date_text: Annotated[
        str | None, typer.Argument(metavar="[DATE]", help="YYYY-MM-DD, today if omitted")
    ] = None,
    file: FileOption = None,
    dry_run: DryRunOption = False,
    output_json: JsonOption = False,
) -> None:
    """Show a day, creating it if needed."""
    with _open_document(file, dry_run=dry_run) as (document, session):
        if date_text is None:
            bounds = focus_on_today(document, session=session)
        else:
            bounds = focus_on_day(document, date_text, session=session)
    _emit_view(document, bounds, output_json=output_json)


@app.command()
def today(
    file: FileOption = None,
    dry_run: DryRunOption = False,
    output_json: JsonOption = False,
) -> None:
    """Show today."""
    with _open_document(file, dry_run=dry_run) as (document, session):
        bounds = focus_on_today(document, session=session)
    _emit_view(document, bounds, output_json=output_json)


@app.command()
def tomorrow(
    file: FileOption = None,
    dry_run: DryRunOption = False,
    output_json: JsonOption = False,
) -> None:
    """Show tomorrow."""
    with _open_document(file, dry_run=dry_run) as (document, session):
        bounds = focus_relative(document, 1, session=session)
    _emit_view(document, bounds, output_json=output_json)


@app.command(name="range")
def range_cmd(
    start: Annotated[str, typer.Argument(help="First day, YYYY-MM-DD")],
    end: Annotated[str, typer.Argument(help="Last day, YYYY-MM-DD")],
    file: FileOption = None,
    dry_run: DryRunOption = False,
    output_json: JsonOption = False,
) -> None:
    """Show every day from START to END, creating missing days."""
    with _open_document(file, dry_run=dry_run) as (document, session):
        bounds = show_range(document, start, end, session=session)
    _emit_view(document, bounds, output_json=output_json)


@app.command()
def week(
    week_start: Annotated[
        int,
        typer.Option("--week-start", min=0, max=6, help="First weekday, 0=Monday ... 6=Sunday"),
    ] = WEEK_START,
    file: FileOption = None,
    dry_run: DryRunOption = False,
    output_json: JsonOption = False,
) -> None:
    """Show the current week."""
    with _open_document(file, dry_run=dry_run) as (document, session):
        bounds = show_week(document, week_start=week_start, session=session)
    _emit_view(document, bounds, output_json=output_json)


@app.command()
def month(
    file: FileOption = None,
    dry_run: DryRunOption = False,
    output_json: JsonOption = False,
) -> None:
    """Show the current month."""
    with _open_document(file, dry_run=dry_run) as (document, session):
        bounds = show_month(document, session=session)
    _emit_view(document, bounds, output_json=output_json)


@app.command()
def refile(
    line: Annotated[int, typer.Argument(help="1-based line inside the subtree to refile")],
    target: Annotated[str, typer.Argument(help="Target day, YYYY-MM-DD")],
    keep: KeepOption = False,
    file: FileOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Move the subtree at LINE under the TARGET day."""
    engine = RefileEngine()
    with _open_document(file, dry_run=dry_run) as (document, session):
        node = engine.refile_one(document, line - 1, target, keep_original=keep, session=session)
    verb = "Copied" if keep else "Moved"
    typer.echo(f"{verb} {node.heading.text!r} to {target}")


@app.command()
def repeat(
    line: Annotated[int, typer.Argument(help="1-based line inside the subtree to copy")],
    start: Annotated[str, typer.Argument(help="First day, YYYY-MM-DD")],
    period: Annotated[str, typer.Option("--period", "-p", help="Step, e.g. 1d, 2w, 1m")] = "1d",
    count: Annotated[int | None, typer.Option("--count", "-n", help="Number of copies")] = None,
    until: Annotated[
        str | None, typer.Option("--until", "-u", help="Last possible day, YYYY-MM-DD")
    ] = None,
    keep: KeepOption = False,
    file: FileOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Copy the subtree at LINE to a series of days starting at START."""
    if (count is None) == (until is None):
        typer.echo("Give exactly one of --count or --until.")
        raise typer.Exit(2)

    engine = RefileEngine()
    with _open_document(file, dry_run=dry_run) as (document, session):
        placed = engine.refile_series(
            document,
            line - 1,
            start,
            period=period,
            count=count,
            until=until,
            keep_original=keep,
            session=session,
        )
    typer.echo(f"Placed {len(placed)} copies: {', '.join(placed) or '-'}")


@app.command()
def files(
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """List registered documents and mark the active one."""
    registry = parse_registry(FILE_REGISTRY)
    session = Session()
    with session.override_file(file):
        active = session.resolve_file(registry, default_path=resolve_default_file())

    entries = [{"name": e.name, "path": str(e.path), "active": e.path == active} for e in registry]
    if not entries:
        entries = [{"name": "default", "path": str(active), "active": True}]

    if output_json:
        typer.echo(json.dumps({"files": entries}, indent=2))
        return
    for entry in entries:
        marker = "*" if entry["active"] else " "
        typer.echo(f"{marker} {entry['name']}: {entry['path']}")
