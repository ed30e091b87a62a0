"""procroute CLI - inspect the kernel IPv4 routing table."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from procroute import __version__
from procroute.cli.display import build_route_table, render_error
from procroute.core.errors import RouteError
from procroute.core.logging_config import setup_logging
from procroute.core.settings import get_settings
from procroute.models.route import Route, default_gateway
from procroute.parser.route_table import load

logger = logging.getLogger("procroute.main")
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="procroute",
    help="Typed reader for /proc/net/route",
    add_completion=False,
    no_args_is_help=True,
)

PathOption = Annotated[
    Path | None,
    typer.Option(
        "--path",
        "-p",
        help="Routing table file (default: PROCROUTE_ROUTE_TABLE_PATH or /proc/net/route)",
    ),
]


def _load_or_exit(path: Path | None) -> list[Route]:
    """Load routes, printing the error and exiting with code 1 on failure."""
    try:
        return load(path)
    except RouteError as e:
        logger.debug(f"Load failed: {e!r}")
        render_error(err_console, e)
        raise typer.Exit(code=1) from e


@app.command()
def show(
    path: PathOption = None,
    as_json: bool = typer.Option(False, "--json", "-j", help="Print routes as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Print every route in the table.

    Examples:
        procroute show
        procroute show --path tests/fixtures/sample --json
    """
    setup_logging(verbose)
    routes = _load_or_exit(path)

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json") for r in routes], indent=2))
        return

    source = path or get_settings().route_table_path
    console.print(build_route_table(routes, title=str(source)))


@app.command()
def gateway(
    path: PathOption = None,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Print the default gateway address."""
    setup_logging(verbose)
    routes = _load_or_exit(path)

    gw = default_gateway(routes)
    if gw is None:
        err_console.print("[yellow]No default gateway[/yellow]")
        raise typer.Exit(code=1)

    typer.echo(str(gw))


@app.command()
def version() -> None:
    """Show procroute version."""
    typer.echo(f"procroute {__version__}")


if __name__ == "__main__":
    app()
