"""Great-circle distance ranking of aircraft around a point."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Iterable, Optional

from nearest_aircraft.errors import NoResultsError, ResponseFormatError
from nearest_aircraft.models.air_traffic import AircraftState
from nearest_aircraft.models.geo import Point

logger = logging.getLogger("nearest_aircraft.services.ranking")

EARTH_RADIUS_KM = 6372.8


@dataclass(frozen=True)
class RankedResult:
    """An aircraft paired with its distance from the origin."""

    distance_km: float
    state: AircraftState


@dataclass(frozen=True)
class NearestReport:
    """Outcome of a nearest-aircraft search."""

    located_count: int
    nearest: list[RankedResult]

    @property
    def closest(self) -> RankedResult:
        return self.nearest[0]


def haversine(origin: Point, destination: Point) -> float:
    """Return the great-circle distance in kilometers between two points.

    Uses the chord-length form of the haversine formula.
    """

    d_lon = math.radians(origin.longitude - destination.longitude)
    o_lat = math.radians(origin.latitude)
    d_lat = math.radians(destination.latitude)

    dz = math.sin(o_lat) - math.sin(d_lat)
    dx = math.cos(d_lon) * math.cos(o_lat) - math.cos(d_lat)
    dy = math.sin(d_lon) * math.cos(o_lat)

    half_chord = min(math.sqrt(dx * dx + dy * dy + dz * dz) / 2.0, 1.0)
    return math.asin(half_chord) * 2.0 * EARTH_RADIUS_KM


def rank_states(
    origin: Point, states: Iterable[AircraftState], limit: Optional[int] = None
) -> list[RankedResult]:
    """Rank aircraft with known coordinates by ascending distance from ``origin``.

    States missing either coordinate are dropped. A NaN distance aborts the
    ranking rather than being sorted into an arbitrary position.
    """

    results: list[RankedResult] = []
    for state in states:
        position = state.position
        if position is None:
            continue
        distance = haversine(origin, position)
        if math.isnan(distance):
            raise ResponseFormatError(
                f"Distance to aircraft {state.icao24} is not a number"
            )
        results.append(RankedResult(distance_km=distance, state=state))

    results.sort(key=lambda result: result.distance_km)
    logger.debug("Ranked %s aircraft with known coordinates", len(results))

    if limit is not None:
        return results[:limit]
    return results


def find_nearest(
    origin: Point, states: Iterable[AircraftState], count: int = 1
) -> NearestReport:
    """Return the located aircraft count and the ``count`` closest aircraft."""

    ranked = rank_states(origin, states)
    if not ranked:
        raise NoResultsError("No aircraft with known coordinates were reported.")

    return NearestReport(located_count=len(ranked), nearest=ranked[: max(count, 1)])


__all__ = [
    "EARTH_RADIUS_KM",
    "NearestReport",
    "RankedResult",
    "find_nearest",
    "haversine",
    "rank_states",
]
