"""Data ingestors for the nearest aircraft finder."""

from .opensky import OpenSkyIngestor, parse_states_response

__all__ = ["OpenSkyIngestor", "parse_states_response"]
