"""Static reference data: the constituent catalog and the station repository."""

from tidal_harmonics.data.constituents import (
    CONSTITUENTS,
    constituents_by_family,
    get_constituent,
    symbols_in_families,
)
from tidal_harmonics.data.stations import (
    STATIONS,
    find_station,
    get_station,
    list_stations,
    station_options,
)

__all__ = [
    "CONSTITUENTS",
    "get_constituent",
    "constituents_by_family",
    "symbols_in_families",
    "STATIONS",
    "find_station",
    "get_station",
    "list_stations",
    "station_options",
]
