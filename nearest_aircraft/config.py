"""Configuration settings for the nearest aircraft finder."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("nearest_aircraft.config")

DEFAULT_STATES_URL = "https://opensky-network.org/api/states/all"


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


def _get_float(env_var: str, default: float) -> float:
    value = os.getenv(env_var)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", env_var, value, default)
        return default


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    log_level: str = os.getenv("NEAREST_AIRCRAFT_LOG_LEVEL", "WARNING")

    # OpenSky state vectors
    opensky_states_url: str = os.getenv("OPENSKY_STATES_URL", DEFAULT_STATES_URL)
    opensky_timeout: float = _get_float("OPENSKY_TIMEOUT", 10.0)

    # Coordinate input
    strict_hemispheres: bool = _get_bool("NEAREST_AIRCRAFT_STRICT_HEMISPHERES")


settings = Settings()

__all__ = ["settings", "Settings", "DEFAULT_STATES_URL"]
