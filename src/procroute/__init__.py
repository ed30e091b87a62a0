"""procroute - typed reader for the kernel IPv4 routing table."""

__version__ = "0.1.0"

from procroute.core.errors import (
    RouteBadInputError,
    RouteError,
    RouteErrorKind,
    RouteIoError,
    RouteParseError,
)
from procroute.models.route import Route, default_gateway
from procroute.parser import load, parse_ip, parse_line, parse_route_table

__all__ = [
    "Route",
    "RouteBadInputError",
    "RouteError",
    "RouteErrorKind",
    "RouteIoError",
    "RouteParseError",
    "__version__",
    "default_gateway",
    "load",
    "parse_ip",
    "parse_line",
    "parse_route_table",
]
