"""Geographic value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position in signed decimal degrees (south and west negative)."""

    latitude: float
    longitude: float


__all__ = ["Point"]
