"""Parse hemisphere-suffixed coordinates such as ``"12.5 N"``."""

from __future__ import annotations

import logging
import math

from nearest_aircraft.errors import ParseError
from nearest_aircraft.models.geo import Point

logger = logging.getLogger("nearest_aircraft.domain.coordinates")

NEGATIVE_HEMISPHERES = frozenset({"S", "W"})
LATITUDE_HEMISPHERES = frozenset({"N", "S"})
LONGITUDE_HEMISPHERES = frozenset({"E", "W"})


def _split_coordinate(line: str) -> tuple[float, str]:
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(
            f"Expected '<number> <hemisphere>' but got {len(tokens)} token(s) in {line!r}"
        )

    raw_magnitude, hemisphere = tokens
    try:
        magnitude = float(raw_magnitude)
    except ValueError as exc:
        raise ParseError(f"Float parse failure on {raw_magnitude!r}") from exc

    if not math.isfinite(magnitude):
        raise ParseError(f"Coordinate magnitude must be finite, got {raw_magnitude!r}")

    return magnitude, hemisphere


def parse_coordinate(line: str) -> float:
    """Convert a single ``"<number> <hemisphere>"`` line into signed degrees.

    ``S`` and ``W`` negate the magnitude; any other letter leaves it positive.
    """

    magnitude, hemisphere = _split_coordinate(line)
    sign = -1.0 if hemisphere in NEGATIVE_HEMISPHERES else 1.0
    return magnitude * sign


def _parse_strict(line: str, allowed: frozenset[str], limit: float, axis: str) -> float:
    magnitude, hemisphere = _split_coordinate(line)
    if hemisphere not in allowed:
        raise ParseError(
            f"{axis} must use one of {'/'.join(sorted(allowed))}, got {hemisphere!r}"
        )
    if not 0.0 <= magnitude <= limit:
        raise ParseError(f"{axis} magnitude {magnitude} is outside [0, {limit:g}]")
    return -magnitude if hemisphere in NEGATIVE_HEMISPHERES else magnitude


def parse_point(text: str, *, strict_hemispheres: bool = False) -> Point:
    """Parse a two-line coordinate block into a :class:`Point`.

    The first line is the latitude and the second the longitude; anything after
    the second line is ignored. By default the hemisphere letters are not
    checked against the line they appear on, so ``"5 S\\n5 S"`` is accepted.
    ``strict_hemispheres`` requires N/S on the first line, E/W on the second and
    magnitudes within the valid range for each axis.
    """

    lines = text.split("\n")
    if len(lines) < 2:
        raise ParseError(
            f"Expected a latitude line and a longitude line, got {len(lines)} line(s)"
        )

    lat_line, lon_line = lines[0], lines[1]
    if strict_hemispheres:
        point = Point(
            latitude=_parse_strict(lat_line, LATITUDE_HEMISPHERES, 90.0, "Latitude"),
            longitude=_parse_strict(lon_line, LONGITUDE_HEMISPHERES, 180.0, "Longitude"),
        )
    else:
        point = Point(
            latitude=parse_coordinate(lat_line),
            longitude=parse_coordinate(lon_line),
        )

    logger.debug("Parsed input coordinates: %s", point)
    return point


__all__ = ["parse_coordinate", "parse_point"]
