"""Models for aircraft state vectors reported by the OpenSky Network."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from nearest_aircraft.models.geo import Point

# Positional layout of a state vector in the OpenSky REST response.
# https://openskynetwork.github.io/opensky-api/rest.html#response
STATE_VECTOR_FIELDS = (
    "icao24",
    "callsign",
    "origin_country",
    "time_position",
    "last_contact",
    "longitude",
    "latitude",
    "baro_altitude",
    "on_ground",
    "velocity",
    "true_track",
    "vertical_rate",
    "sensors",
    "geo_altitude",
    "squawk",
    "spi",
    "position_source",
    "category",
)
# "category" is only present for extended requests.
MIN_STATE_VECTOR_LENGTH = len(STATE_VECTOR_FIELDS) - 1


class AircraftState(BaseModel):
    """One aircraft's reported identity, position and motion."""

    icao24: StrictStr = Field(..., description="ICAO 24-bit transponder address in hex")
    callsign: Optional[StrictStr] = Field(
        default=None, description="Callsign with trailing padding removed"
    )
    origin_country: StrictStr = Field(
        ..., description="Country inferred from the ICAO address"
    )
    time_position: Optional[StrictInt] = Field(
        default=None, description="Unix time of the last position update"
    )
    last_contact: StrictInt = Field(
        ..., description="Unix time of the last message received"
    )
    longitude: Optional[StrictFloat] = Field(
        default=None, description="WGS-84 longitude in decimal degrees"
    )
    latitude: Optional[StrictFloat] = Field(
        default=None, description="WGS-84 latitude in decimal degrees"
    )
    baro_altitude: Optional[StrictFloat] = Field(
        default=None, description="Barometric altitude in meters"
    )
    on_ground: StrictBool = Field(
        ..., description="True when the position came from a surface report"
    )
    velocity: Optional[StrictFloat] = Field(
        default=None, description="Ground speed in meters per second"
    )
    true_track: Optional[StrictFloat] = Field(
        default=None, description="Track in degrees clockwise from north"
    )
    vertical_rate: Optional[StrictFloat] = Field(
        default=None, description="Vertical rate in meters per second"
    )
    sensors: Optional[list[StrictInt]] = Field(
        default=None, description="Receiver IDs that contributed to this state"
    )
    geo_altitude: Optional[StrictFloat] = Field(
        default=None, description="Geometric altitude in meters"
    )
    squawk: Optional[StrictStr] = Field(default=None, description="Transponder code")
    spi: StrictBool = Field(..., description="Special purpose indicator")
    position_source: StrictInt = Field(
        ..., description="0 = ADS-B, 1 = ASTERIX, 2 = MLAT, 3 = FLARM"
    )
    category: Optional[StrictInt] = Field(default=None, description="Aircraft category")

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _from_state_vector(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) < MIN_STATE_VECTOR_LENGTH:
                raise ValueError(
                    f"state vector has {len(data)} fields, "
                    f"expected at least {MIN_STATE_VECTOR_LENGTH}"
                )
            return dict(zip(STATE_VECTOR_FIELDS, data))
        return data

    @field_validator("callsign")
    @classmethod
    def _strip_callsign(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator(
        "longitude",
        "latitude",
        "baro_altitude",
        "velocity",
        "true_track",
        "vertical_rate",
        "geo_altitude",
    )
    @classmethod
    def _reject_infinity(cls, value: Optional[float]) -> Optional[float]:
        # Out-of-range literals such as 1e400 decode to inf.
        if value is not None and math.isinf(value):
            raise ValueError("must be a finite number")
        return value

    @property
    def position(self) -> Point | None:
        """Return the aircraft position, or None when either coordinate is unknown."""

        if self.latitude is None or self.longitude is None:
            return None
        return Point(latitude=self.latitude, longitude=self.longitude)


class StatesResponse(BaseModel):
    """Body of a ``states/all`` response."""

    time: Optional[StrictInt] = Field(
        default=None, description="Unix time the states are valid for"
    )
    states: list[AircraftState] = Field(..., description="Reported state vectors")

    model_config = ConfigDict(extra="ignore")

    @field_validator("states", mode="before")
    @classmethod
    def _null_states(cls, value: Any) -> Any:
        # OpenSky encodes "no aircraft" as null.
        return [] if value is None else value


__all__ = [
    "AircraftState",
    "MIN_STATE_VECTOR_LENGTH",
    "STATE_VECTOR_FIELDS",
    "StatesResponse",
]
