"""Domain helpers for coordinate input."""

from .coordinates import parse_coordinate, parse_point

__all__ = ["parse_coordinate", "parse_point"]
