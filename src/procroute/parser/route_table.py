"""
Routing table parser - turns /proc/net/route text into Route records.

The table looks like:

    Iface   Destination  Gateway   Flags  RefCnt  Use  Metric  Mask ...
    eno1    00000000     0101A8C0  0003   0       0    100     00000000 ...

The first line is a header and is discarded. Only the first three columns are
read; the rest are ignored. Parsing is all-or-nothing: the first bad line
aborts the load and no partial list is returned.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from procroute.core.errors import RouteBadInputError, RouteError
from procroute.core.settings import get_settings
from procroute.models.route import Route
from procroute.parser.hex_ip import parse_ip

logger = logging.getLogger(__name__)

MIN_COLUMNS = 3

# Unicode White_Space; str.split() also splits on the \x1c-\x1f separators
_WHITESPACE = re.compile(r"[^\S\x1c-\x1f]+")


def parse_line(line: str) -> Route:
    """Parse a single data line of the routing table.

    Args:
        line: Whitespace-separated row (header already removed)

    Returns:
        Route built from the Iface, Destination and Gateway columns

    Raises:
        RouteBadInputError: Fewer than 3 columns, or bad address length
        RouteParseError: Non-hex character in an address column
    """
    cols = [col for col in _WHITESPACE.split(line) if col]
    if len(cols) < MIN_COLUMNS:
        raise RouteBadInputError(
            f"expected at least {MIN_COLUMNS} columns, got {len(cols)}: {line!r}"
        )

    return Route(
        iface=cols[0],
        destination=parse_ip(cols[1]),
        gateway=parse_ip(cols[2]),
    )


def _read_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines, converting read failures into RouteIoError."""
    it = iter(lines)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise RouteError.wrap(e) from e
        yield line


def parse_route_table(lines: Iterable[str], source: str = "<lines>") -> list[Route]:
    """Parse routing table lines into Route records.

    Args:
        lines: Table lines, header first (file object, list, generator...)
        source: Label used in log messages

    Returns:
        Routes in input order, one per non-header line

    Raises:
        RouteIoError: The line source failed
        RouteParseError: Non-hex character in an address column
        RouteBadInputError: Structurally invalid line
    """
    routes: list[Route] = []

    for lineno, line in enumerate(_read_lines(lines), start=1):
        if lineno == 1:
            continue
        try:
            routes.append(parse_line(line))
        except RouteError as e:
            logger.debug(f"{source}:{lineno}: rejected line {line!r} ({e.kind.value})")
            raise

    logger.debug(f"Parsed {len(routes)} routes from {source}")
    return routes


def load(path: str | Path | None = None) -> list[Route]:
    """Read and parse the routing table file.

    Args:
        path: Table location (default: PROCROUTE_ROUTE_TABLE_PATH)

    Returns:
        Parsed routes

    Raises:
        RouteError: On any open, read or parse failure
    """
    table_path = Path(path) if path is not None else get_settings().route_table_path

    try:
        f = open(table_path, encoding="utf-8")
    except OSError as e:
        raise RouteError.wrap(e) from e

    with f:
        return parse_route_table(f, source=str(table_path))
