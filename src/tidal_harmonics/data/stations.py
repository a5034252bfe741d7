"""Station repository.

Sample tide stations with harmonic constants from NOAA CO-OPS
(https://tidesandcurrents.noaa.gov/harcon.html) and national agencies.
Amplitudes are in meters, phases are Greenwich phase lags in degrees.

The repository owns the station list; lookups hand out the same immutable
``TideStation`` instances.
"""

from __future__ import annotations

from tidal_harmonics.domain.harmonics import StationConstituent, TideStation
from tidal_harmonics.errors import StationNotFoundError

# (symbol, amplitude_m, phase_deg)
_Row = tuple[str, float, float]


def _station(
    *,
    id: str,
    name: str,
    country: str,
    lat: float,
    lon: float,
    timezone: str,
    datum: str,
    constituents: list[_Row],
    state: str | None = None,
    harmonic_epoch: str = "1983-2001",
) -> TideStation:
    return TideStation(
        id=id,
        name=name,
        state=state,
        country=country,
        lat=lat,
        lon=lon,
        timezone=timezone,
        datum=datum,
        harmonic_epoch=harmonic_epoch,
        constituents=tuple(
            StationConstituent(symbol=symbol, amplitude=amplitude, phase=phase)
            for symbol, amplitude, phase in constituents
        ),
    )


STATIONS: tuple[TideStation, ...] = (
    _station(
        id="9414290",
        name="San Francisco",
        state="CA",
        country="US",
        lat=37.8067,
        lon=-122.465,
        timezone="America/Los_Angeles",
        datum="MLLW",
        constituents=[
            ("M2", 0.577, 187.5),
            ("S2", 0.133, 205.7),
            ("N2", 0.136, 166.9),
            ("K1", 0.368, 213.0),
            ("O1", 0.226, 198.0),
            ("K2", 0.039, 199.5),
            ("P1", 0.115, 210.4),
            ("Q1", 0.044, 186.6),
            ("M4", 0.023, 246.2),
            ("MS4", 0.008, 277.1),
            ("Mf", 0.015, 245.3),
            ("Mm", 0.008, 134.2),
        ],
    ),
    _station(
        id="8518750",
        name="The Battery, New York",
        state="NY",
        country="US",
        lat=40.7006,
        lon=-74.0142,
        timezone="America/New_York",
        datum="MLLW",
        constituents=[
            ("M2", 0.671, 355.5),
            ("S2", 0.146, 25.0),
            ("N2", 0.159, 335.3),
            ("K1", 0.102, 110.2),
            ("O1", 0.056, 93.5),
            ("K2", 0.042, 21.1),
            ("P1", 0.033, 109.0),
            ("Q1", 0.011, 85.0),
            ("M4", 0.046, 190.5),
            ("MS4", 0.026, 220.3),
            ("Mf", 0.018, 265.0),
            ("Mm", 0.012, 156.0),
        ],
    ),
    _station(
        id="8443970",
        name="Boston",
        state="MA",
        country="US",
        lat=42.3539,
        lon=-71.0503,
        timezone="America/New_York",
        datum="MLLW",
        constituents=[
            ("M2", 1.407, 110.8),
            ("S2", 0.225, 137.5),
            ("N2", 0.313, 88.3),
            ("K1", 0.137, 185.0),
            ("O1", 0.108, 172.3),
            ("K2", 0.065, 132.5),
            ("P1", 0.044, 183.2),
            ("Q1", 0.021, 162.0),
            ("M4", 0.045, 320.0),
            ("MS4", 0.019, 355.0),
        ],
    ),
    _station(
        id="9410660",
        name="Los Angeles",
        state="CA",
        country="US",
        lat=33.7199,
        lon=-118.2729,
        timezone="America/Los_Angeles",
        datum="MLLW",
        constituents=[
            ("M2", 0.521, 141.7),
            ("S2", 0.161, 142.2),
            ("N2", 0.120, 124.5),
            ("K1", 0.329, 195.8),
            ("O1", 0.217, 183.6),
            ("K2", 0.046, 139.0),
            ("P1", 0.106, 193.0),
            ("Q1", 0.041, 172.0),
            ("M4", 0.007, 85.0),
            ("MS4", 0.003, 115.0),
        ],
    ),
    _station(
        id="8658120",
        name="Wilmington",
        state="NC",
        country="US",
        lat=34.2275,
        lon=-77.9536,
        timezone="America/New_York",
        datum="MLLW",
        constituents=[
            ("M2", 0.585, 28.5),
            ("S2", 0.094, 46.0),
            ("N2", 0.128, 8.3),
            ("K1", 0.168, 182.5),
            ("O1", 0.156, 180.2),
            ("K2", 0.028, 42.5),
            ("P1", 0.054, 180.0),
            ("Q1", 0.030, 170.0),
            ("M4", 0.024, 130.0),
            ("MS4", 0.010, 155.0),
        ],
    ),
    # Mixed, mainly semidiurnal (strong diurnal inequality)
    _station(
        id="9447130",
        name="Seattle",
        state="WA",
        country="US",
        lat=47.6026,
        lon=-122.3393,
        timezone="America/Los_Angeles",
        datum="MLLW",
        constituents=[
            ("M2", 1.076, 27.5),
            ("S2", 0.276, 57.8),
            ("N2", 0.228, 7.0),
            ("K1", 0.856, 260.5),
            ("O1", 0.498, 242.3),
            ("K2", 0.078, 50.5),
            ("P1", 0.267, 257.2),
            ("Q1", 0.093, 230.0),
            ("M4", 0.012, 145.0),
            ("MS4", 0.005, 180.0),
            ("Mf", 0.022, 268.0),
            ("Mm", 0.012, 155.0),
        ],
    ),
    # Semidiurnal with very large range
    _station(
        id="9455920",
        name="Anchorage",
        state="AK",
        country="US",
        lat=61.2381,
        lon=-149.8894,
        timezone="America/Anchorage",
        datum="MLLW",
        constituents=[
            ("M2", 3.652, 6.8),
            ("S2", 0.983, 35.2),
            ("N2", 0.752, 346.0),
            ("K1", 0.672, 270.5),
            ("O1", 0.408, 253.0),
            ("K2", 0.276, 28.0),
            ("P1", 0.216, 267.5),
            ("Q1", 0.078, 240.0),
            ("M4", 0.198, 115.0),
            ("MS4", 0.095, 145.0),
            ("MN4", 0.085, 85.0),
            ("M6", 0.045, 220.0),
        ],
    ),
    # Mixed, tending diurnal (Gulf of Mexico)
    _station(
        id="8729840",
        name="Pensacola",
        state="FL",
        country="US",
        lat=30.4044,
        lon=-87.2108,
        timezone="America/Chicago",
        datum="MLLW",
        constituents=[
            ("M2", 0.076, 355.0),
            ("S2", 0.018, 25.0),
            ("N2", 0.018, 335.0),
            ("K1", 0.234, 15.5),
            ("O1", 0.220, 355.0),
            ("K2", 0.005, 20.0),
            ("P1", 0.075, 12.0),
            ("Q1", 0.042, 340.0),
            ("Mf", 0.018, 275.0),
            ("Mm", 0.010, 165.0),
        ],
    ),
    _station(
        id="1612340",
        name="Honolulu",
        state="HI",
        country="US",
        lat=21.3067,
        lon=-157.867,
        timezone="Pacific/Honolulu",
        datum="MLLW",
        constituents=[
            ("M2", 0.192, 222.5),
            ("S2", 0.067, 244.0),
            ("N2", 0.045, 202.0),
            ("K1", 0.141, 75.0),
            ("O1", 0.091, 54.0),
            ("K2", 0.019, 237.0),
            ("P1", 0.044, 72.0),
            ("Q1", 0.017, 42.0),
            ("M4", 0.003, 85.0),
        ],
    ),
    # Thames estuary
    _station(
        id="UK-0113",
        name="London Bridge",
        country="UK",
        lat=51.5074,
        lon=-0.0761,
        timezone="Europe/London",
        datum="ODN",
        constituents=[
            ("M2", 2.183, 356.0),
            ("S2", 0.689, 44.5),
            ("N2", 0.422, 336.0),
            ("K1", 0.156, 52.0),
            ("O1", 0.098, 328.0),
            ("K2", 0.195, 39.0),
            ("P1", 0.052, 48.0),
            ("M4", 0.312, 165.0),
            ("MS4", 0.198, 210.0),
            ("MN4", 0.125, 145.0),
            ("M6", 0.089, 75.0),
        ],
    ),
    # Bay of Fundy, the world's highest tides
    _station(
        id="CA-0665",
        name="Burntcoat Head",
        state="NS",
        country="Canada",
        lat=45.3089,
        lon=-63.7853,
        timezone="America/Halifax",
        datum="MLLW",
        constituents=[
            ("M2", 5.650, 100.5),
            ("S2", 0.920, 135.0),
            ("N2", 1.180, 78.0),
            ("K1", 0.158, 178.0),
            ("O1", 0.098, 165.0),
            ("K2", 0.255, 125.0),
            ("P1", 0.052, 175.0),
            ("M4", 0.485, 295.0),
            ("MS4", 0.185, 345.0),
            ("MN4", 0.225, 265.0),
            ("M6", 0.145, 85.0),
        ],
    ),
)

_BY_ID: dict[str, TideStation] = {s.id: s for s in STATIONS}


def list_stations() -> tuple[TideStation, ...]:
    return STATIONS


def find_station(station_id: str) -> TideStation | None:
    """Look up a station; returns None when the id is unknown."""
    return _BY_ID.get(station_id)


def get_station(station_id: str) -> TideStation:
    """Look up a station by id.

    Raises:
        StationNotFoundError: If no station has this id.
    """
    station = _BY_ID.get(station_id)
    if station is None:
        raise StationNotFoundError(station_id)
    return station


def station_options() -> list[tuple[str, str]]:
    """``(id, label)`` pairs for station pickers."""
    return [(s.id, s.label) for s in STATIONS]
