"""Data models for the nearest aircraft finder."""

from .air_traffic import AircraftState, StatesResponse
from .geo import Point

__all__ = [
    "AircraftState",
    "Point",
    "StatesResponse",
]
