from __future__ import annotations

import pytest

from tidal_harmonics.data.constituents import CONSTITUENTS
from tidal_harmonics.data.stations import (
    STATIONS,
    find_station,
    get_station,
    list_stations,
    station_options,
)
from tidal_harmonics.errors import StationNotFoundError


def test_repository_has_eleven_unique_stations() -> None:
    ids = [s.id for s in list_stations()]
    assert len(ids) == 11
    assert len(set(ids)) == 11


@pytest.mark.parametrize("station", STATIONS, ids=lambda s: s.id)
def test_station_symbols_exist_in_catalog(station) -> None:
    assert station.constituents
    for c in station.constituents:
        assert c.symbol in CONSTITUENTS
        assert c.amplitude >= 0.0
        assert 0.0 <= c.phase < 360.0


def test_get_station() -> None:
    sf = get_station("9414290")
    assert sf.name == "San Francisco"
    assert sf.label == "San Francisco, CA"
    assert sf.amplitude_of("M2") == pytest.approx(0.577)


def test_get_station_unknown_raises() -> None:
    with pytest.raises(StationNotFoundError) as exc_info:
        get_station("0000000")
    assert exc_info.value.station_id == "0000000"


def test_find_station_returns_none_for_unknown() -> None:
    assert find_station("0000000") is None
    assert find_station("8518750") is get_station("8518750")


def test_station_options_labels() -> None:
    options = dict(station_options())
    assert options["9414290"] == "San Francisco, CA"
    # Stations without a state are labelled by name alone
    assert options["UK-0113"] == get_station("UK-0113").name
