#!/usr/bin/env python3
"""
guarded-handlers Command Line Interface

Validate declarative route tables and replay JSON-lines events through them
to see which routes fire.

Usage:
    guarded-handlers --help
    guarded-handlers validate routes.yaml
    guarded-handlers route routes.yaml events.jsonl
    cat events.jsonl | guarded-handlers route routes.yaml -

Environment Variables:
    GUARDED_HANDLERS_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    GUARDED_HANDLERS_CATEGORY_FIELD: Event key holding the category
    GUARDED_HANDLERS_ROUTES: Route table used when none is given
"""

import json
import logging
import sys
from typing import Annotated, Any, Iterator, Optional, TextIO

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from guarded_handlers import __version__
from guarded_handlers.config.settings import Settings, get_settings
from guarded_handlers.core.exceptions import ConfigurationError, InvalidEventError
from guarded_handlers.core.utils.logging import resolve_level
from guarded_handlers.routing import RouteTable, Router

console = Console()

logging.basicConfig(
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="guarded-handlers",
    help="Validate route tables and route events through guarded handlers.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    guarded-handlers CLI.
    """
    settings = _load_settings()
    logging.getLogger().setLevel(resolve_level(settings.log_level))
    if verbose:
        logging.getLogger("guarded_handlers").setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1)


def _load_table(routes: Optional[str], settings: Settings) -> RouteTable:
    path = routes or settings.routes_path
    if not path:
        console.print("[red]No route table given and GUARDED_HANDLERS_ROUTES is not set.[/red]")
        raise typer.Exit(code=2)
    try:
        return RouteTable.from_file(path)
    except ConfigurationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=1)


def _build_router(table: RouteTable, settings: Settings) -> Router:
    try:
        return Router(table, settings)
    except ConfigurationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=1)


def _read_events(stream: TextIO) -> Iterator[tuple[int, dict[str, Any]]]:
    for line_no, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            console.print(f"[red]Line {line_no}: invalid JSON ({escape(e.msg)})[/red]")
            raise typer.Exit(code=1)
        if not isinstance(record, dict):
            console.print(f"[red]Line {line_no}: expected a JSON object[/red]")
            raise typer.Exit(code=1)
        yield line_no, record


@app.command()
def validate(
    routes: Annotated[Optional[str], typer.Argument(help="Route table (.yaml, .yml or .json).")] = None,
):
    """Load a route table, compile every guard and list the routes."""
    settings = _load_settings()
    table = _load_table(routes, settings)
    router = _build_router(table, settings)

    summary = Table(show_header=True, header_style="bold cyan")
    summary.add_column("Id", justify="right")
    summary.add_column("Route")
    summary.add_column("Category")
    summary.add_column("Priority", justify="right")
    summary.add_column("Options")

    for route in table.routes:
        halts = route.halts(settings.halt_on_first_match)
        options = [flag for flag, enabled in (("once", route.once), ("halt", halts)) if enabled]
        summary.add_row(
            str(router.route_ids[route.name]),
            escape(route.name),
            escape(route.category) if route.category else "[dim]*[/dim]",
            str(route.priority),
            ", ".join(options) or "-",
        )

    console.print(summary)
    console.print(f"[green]{len(table.routes)} routes OK[/green]")


@app.command()
def route(
    routes: Annotated[str, typer.Argument(help="Route table (.yaml, .yml or .json).")],
    events: Annotated[str, typer.Argument(help="JSON-lines event file, or '-' for stdin.")] = "-",
    category_field: Annotated[
        Optional[str], typer.Option("--category-field", "-f", help="Event key holding the category.")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print one JSON result per event.")] = False,
):
    """Route every event of EVENTS and report the routes that fired."""
    settings = _load_settings()
    if category_field:
        settings = settings.model_copy(update={"category_field": category_field})
    router = _build_router(_load_table(routes, settings), settings)

    if events == "-":
        stream = sys.stdin
    else:
        try:
            stream = open(events, "r", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot read {escape(events)}: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)

    handled = unhandled = 0
    try:
        for line_no, record in _read_events(stream):
            try:
                result = router.route(record)
            except InvalidEventError as e:
                console.print(f"[red]Line {line_no}: {escape(e.message)}[/red]")
                raise typer.Exit(code=1)
            if result.handled:
                handled += 1
            else:
                unhandled += 1

            if as_json:
                typer.echo(json.dumps({"line": line_no, "category": result.category, "fired": result.fired}))
            else:
                fired = escape(", ".join(result.fired)) if result.fired else "[yellow]unhandled[/yellow]"
                console.print(f"{line_no}: [bold]{escape(str(result.category))}[/bold] -> {fired}")
    finally:
        if stream is not sys.stdin:
            stream.close()

    if not as_json:
        console.print(f"[green]{handled} handled[/green], [yellow]{unhandled} unhandled[/yellow]")


@app.command()
def version():
    """Display the installed version."""
    console.print(f"guarded-handlers v[bold cyan]{__version__}[/bold cyan]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
