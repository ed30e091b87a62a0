"""procroute CLI Display Components.

Rich-based rendering for the CLI:
- build_route_table: Route list as a Rich Table
- render_error: RouteError panel on stderr
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from procroute.core.errors import RouteError, RouteErrorKind
from procroute.models.route import Route

_KIND_TITLES = {
    RouteErrorKind.IO: "Read Error",
    RouteErrorKind.PARSE: "Parse Error",
    RouteErrorKind.BAD_INPUT: "Bad Input",
}


def build_route_table(routes: Sequence[Route], title: str | None = None) -> Table:
    """Build a Rich table with one row per route."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Iface", style="green", no_wrap=True)
    table.add_column("Destination", no_wrap=True)
    table.add_column("Gateway", no_wrap=True)

    for route in routes:
        destination = str(route.destination)
        if route.is_default:
            destination = f"[bold]{destination}[/bold] (default)"
        gateway = str(route.gateway) if route.has_gateway else "[dim]-[/dim]"
        table.add_row(escape(route.iface), destination, gateway)

    return table


def render_error(console: Console, error: RouteError) -> None:
    """Print a RouteError as a red panel."""
    body = escape(str(error))
    if error.cause is not None:
        body += f"\n[dim]caused by {type(error.cause).__name__}[/dim]"
    console.print(
        Panel(body, title=_KIND_TITLES[error.kind], border_style="red", expand=False)
    )
