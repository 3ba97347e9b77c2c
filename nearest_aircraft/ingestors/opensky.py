"""Fetch every currently reported aircraft state from the OpenSky REST API."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from nearest_aircraft.config import settings
from nearest_aircraft.errors import NetworkError, ResponseFormatError
from nearest_aircraft.models.air_traffic import AircraftState, StatesResponse

logger = logging.getLogger("nearest_aircraft.ingestors.opensky")


def parse_states_response(data: bytes | str) -> StatesResponse:
    """Deserialize a ``states/all`` body.

    Any malformed JSON, missing required field or wrongly typed value rejects
    the whole response.
    """

    try:
        return StatesResponse.model_validate_json(data)
    except ValidationError as exc:
        logger.warning(
            "OpenSky response failed validation with %s error(s)", exc.error_count()
        )
        raise ResponseFormatError(f"Unexpected OpenSky response format: {exc}") from exc


class OpenSkyIngestor:
    """Retrieve all aircraft state vectors with a single blocking request."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.opensky_states_url
        self.timeout = timeout or settings.opensky_timeout
        self.transport = transport

    def get_states(self) -> list[AircraftState]:
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(self.base_url)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error("OpenSky request timed out: %s", exc)
            raise NetworkError(f"Error calling OpenSky API: timed out ({exc})") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "OpenSky returned error: status=%s body=%s",
                exc.response.status_code,
                exc.response.text,
            )
            raise NetworkError(
                f"Error calling OpenSky API: HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.error("OpenSky request failed: %s", exc)
            raise NetworkError(f"Error calling OpenSky API: {exc}") from exc

        payload = parse_states_response(response.content)
        logger.debug(
            "Fetched %s aircraft states (time=%s)", len(payload.states), payload.time
        )
        return payload.states


__all__ = ["OpenSkyIngestor", "parse_states_response"]
