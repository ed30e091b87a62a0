"""Core infrastructure: settings, logging, errors."""

from procroute.core.errors import (
    RouteBadInputError,
    RouteError,
    RouteErrorKind,
    RouteIoError,
    RouteParseError,
)
from procroute.core.settings import EnvSettings, get_settings

__all__ = [
    "EnvSettings",
    "RouteBadInputError",
    "RouteError",
    "RouteErrorKind",
    "RouteIoError",
    "RouteParseError",
    "get_settings",
]
