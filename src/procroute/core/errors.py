"""Route loading errors.

Every failure while loading the routing table surfaces as exactly one of three
variants, tagged by ``RouteErrorKind``:

- IO: the line source failed (read error, undecodable bytes)
- PARSE: a hex chunk was not a valid base-16 octet
- BAD_INPUT: structural problem (too few columns, wrong octet count)

Lower-level exceptions are converted at the boundary with ``RouteError.wrap``.
"""

from enum import Enum


class RouteErrorKind(str, Enum):
    """Variant tag for RouteError."""

    IO = "io"
    PARSE = "parse"
    BAD_INPUT = "bad_input"


class RouteError(Exception):
    """Base class for all routing table load failures."""

    kind: RouteErrorKind

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """
        Initialize RouteError.

        Args:
            message: Human-readable description
            cause: Underlying exception, if any
        """
        super().__init__(message)
        self.cause = cause

    @classmethod
    def wrap(cls, exc: BaseException) -> "RouteError":
        """Convert a lower-level exception into its RouteError variant.

        Args:
            exc: OSError / UnicodeDecodeError (read failure) or ValueError (hex parse)

        Returns:
            RouteIoError or RouteParseError carrying ``exc`` as cause

        Raises:
            TypeError: If ``exc`` has no RouteError counterpart
        """
        # UnicodeDecodeError is a ValueError, so it must be matched first
        if isinstance(exc, (OSError, UnicodeDecodeError)):
            return RouteIoError(f"failed to read routing table: {exc}", cause=exc)
        if isinstance(exc, ValueError):
            return RouteParseError(f"invalid hex octet: {exc}", cause=exc)
        raise TypeError(f"cannot convert {type(exc).__name__} to RouteError")


class RouteIoError(RouteError):
    """The line source failed to produce the next line."""

    kind = RouteErrorKind.IO


class RouteParseError(RouteError):
    """A hex chunk contained a non-hex character."""

    kind = RouteErrorKind.PARSE


class RouteBadInputError(RouteError):
    """Structural shape violation in a line or address field."""

    kind = RouteErrorKind.BAD_INPUT
