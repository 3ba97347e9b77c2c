"""Error taxonomy for the nearest aircraft finder.

Every failure surfaces as a subclass of :class:`NearestAircraftError` so the
command-line entry point can report it from a single place.
"""

from __future__ import annotations


class NearestAircraftError(Exception):
    """Base exception for all handled failures."""


class InputError(NearestAircraftError):
    """Raised when the coordinate input cannot be read."""


class ParseError(InputError):
    """Raised when the coordinate input is malformed."""


class NetworkError(NearestAircraftError):
    """Raised when the state vector request fails at the transport or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(NearestAircraftError):
    """Raised when the state vector response does not have the expected shape."""


class NoResultsError(NearestAircraftError):
    """Raised when no aircraft with known coordinates is available for ranking."""


__all__ = [
    "InputError",
    "NearestAircraftError",
    "NetworkError",
    "NoResultsError",
    "ParseError",
    "ResponseFormatError",
]
