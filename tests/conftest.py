"""Shared fixtures for tidal-harmonics tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tidal_harmonics.data.stations import get_station
from tidal_harmonics.domain.harmonics import StationConstituent, TideStation


def make_station(rows: list[tuple[str, float, float]], *, station_id: str = "TEST") -> TideStation:
    """Build a synthetic station from (symbol, amplitude, phase) rows."""
    return TideStation(
        id=station_id,
        name="Synthetic",
        lat=0.0,
        lon=0.0,
        datum="MSL",
        country="XX",
        constituents=tuple(
            StationConstituent(symbol=symbol, amplitude=amplitude, phase=phase)
            for symbol, amplitude, phase in rows
        ),
    )


@pytest.fixture
def station_factory():
    """Callable building synthetic stations from (symbol, amplitude, phase) rows."""
    return make_station


@pytest.fixture
def m2_station() -> TideStation:
    """Single M2 constituent, unit amplitude, zero phase lag."""
    return make_station([("M2", 1.0, 0.0)], station_id="M2-ONLY")


@pytest.fixture
def empty_station() -> TideStation:
    return make_station([], station_id="EMPTY")


@pytest.fixture
def san_francisco() -> TideStation:
    return get_station("9414290")


@pytest.fixture
def epoch() -> datetime:
    return datetime(2000, 1, 1, tzinfo=timezone.utc)
