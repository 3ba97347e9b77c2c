import math

import pytest

from nearest_aircraft.errors import NoResultsError, ResponseFormatError
from nearest_aircraft.models.air_traffic import AircraftState
from nearest_aircraft.models.geo import Point
from nearest_aircraft.services.ranking import find_nearest, haversine, rank_states


def _state(icao24: str, lat: float | None, lon: float | None) -> AircraftState:
    return AircraftState(
        icao24=icao24,
        callsign=f"{icao24.upper()} ",
        origin_country="United States",
        last_contact=1714765200,
        latitude=lat,
        longitude=lon,
        on_ground=False,
        spi=False,
        position_source=0,
    )


def test_haversine_nashville_to_los_angeles():
    origin = Point(latitude=36.12, longitude=-86.67)
    destination = Point(latitude=33.94, longitude=-118.4)

    assert (haversine(origin, destination) - 2887.2599506071106) ** 2 < 1e-5


@pytest.mark.parametrize(
    "point",
    [
        Point(latitude=0.0, longitude=0.0),
        Point(latitude=36.12, longitude=-86.67),
        Point(latitude=-89.5, longitude=179.9),
        Point(latitude=90.0, longitude=0.0),
    ],
)
def test_haversine_distance_to_self_is_zero(point):
    assert haversine(point, point) == 0.0


def test_haversine_is_symmetric():
    a = Point(latitude=51.47, longitude=-0.45)
    b = Point(latitude=40.64, longitude=-73.78)

    assert haversine(a, b) == pytest.approx(haversine(b, a))


def test_haversine_antipodes_is_half_circumference():
    distance = haversine(Point(0.0, 0.0), Point(0.0, 180.0))

    assert distance == pytest.approx(math.pi * 6372.8)


def test_rank_states_excludes_unknown_positions_and_sorts():
    origin = Point(latitude=36.12, longitude=-86.67)
    states = [
        _state("far", 33.94, -118.4),
        _state("nolat", None, -86.6),
        _state("near", 36.2, -86.7),
        _state("nolon", 36.1, None),
        _state("none", None, None),
        _state("mid", 39.86, -104.67),
    ]

    ranked = rank_states(origin, states)

    located = [s for s in states if s.latitude is not None and s.longitude is not None]
    assert len(ranked) == len(located) == 3
    assert [r.state.icao24 for r in ranked] == ["near", "mid", "far"]
    assert ranked[0].distance_km < ranked[1].distance_km < ranked[2].distance_km


def test_rank_states_limit():
    origin = Point(latitude=0.0, longitude=0.0)
    states = [_state(f"a{i}", float(i), 0.0) for i in range(5, 0, -1)]

    ranked = rank_states(origin, states, limit=2)

    assert [r.state.icao24 for r in ranked] == ["a1", "a2"]


def test_rank_states_aborts_on_nan_distance():
    origin = Point(latitude=0.0, longitude=0.0)
    states = [_state("ok", 1.0, 1.0), _state("bad", float("nan"), 1.0)]

    with pytest.raises(ResponseFormatError):
        rank_states(origin, states)


def test_find_nearest_reports_closest_and_count():
    origin = Point(latitude=36.12, longitude=-86.67)
    states = [
        _state("far", 33.94, -118.4),
        _state("near", 36.2, -86.7),
        _state("none", None, None),
    ]

    report = find_nearest(origin, states)

    assert report.located_count == 2
    assert len(report.nearest) == 1
    assert report.closest.state.icao24 == "near"


def test_find_nearest_returns_requested_count():
    origin = Point(latitude=0.0, longitude=0.0)
    states = [_state(f"a{i}", float(i), 0.0) for i in range(1, 4)]

    report = find_nearest(origin, states, count=5)

    assert report.located_count == 3
    assert [r.state.icao24 for r in report.nearest] == ["a1", "a2", "a3"]


@pytest.mark.parametrize(
    "states",
    [
        [],
        [_state("nolat", None, 1.0), _state("nolon", 1.0, None)],
    ],
)
def test_find_nearest_raises_when_nothing_is_located(states):
    with pytest.raises(NoResultsError):
        find_nearest(Point(latitude=0.0, longitude=0.0), states)


def test_haversine_near_antipodal_points_stay_in_domain():
    distance = haversine(Point(36.12, -86.67), Point(-36.12, 93.33))

    assert distance == pytest.approx(math.pi * 6372.8)
