"""Service-layer helpers for the nearest aircraft finder."""

from .ranking import (
    EARTH_RADIUS_KM,
    NearestReport,
    RankedResult,
    find_nearest,
    haversine,
    rank_states,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "NearestReport",
    "RankedResult",
    "find_nearest",
    "haversine",
    "rank_states",
]
