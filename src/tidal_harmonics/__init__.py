"""tidal-harmonics: harmonic tide prediction and a low-precision ephemeris.

Typical use::

    from datetime import datetime, timezone
    import tidal_harmonics as th

    station = th.get_station("9414290")
    when = datetime(2024, 3, 1, tzinfo=timezone.utc)
    th.predict_tide(station, when)
"""

from tidal_harmonics.compute import (
    HARMONIC_EPOCH,
    constituent_contributions,
    ebb_flood_durations,
    find_extremes,
    find_next_lunar_apsis,
    find_next_moon_phases,
    find_next_seasons,
    form_factor,
    get_lunar_phase,
    get_moon_position,
    get_sun_position,
    get_tidal_range,
    get_upcoming_tidal_events,
    lunar_node_longitude,
    nodal_amplitude_factors,
    nodal_factors,
    predict_tide,
    predict_tide_from_constituents,
    predict_tide_series,
    recommended_step_minutes,
    rule_of_twelfths,
    spring_neap_indicator,
    tidal_type,
)
from tidal_harmonics.data import (
    CONSTITUENTS,
    find_station,
    get_constituent,
    get_station,
    list_stations,
    station_options,
)
from tidal_harmonics.domain import (
    ApsisEvent,
    ApsisType,
    CelestialPosition,
    Constituent,
    ConstituentFamily,
    ExtremeType,
    MoonPhase,
    MoonPhaseEvent,
    SeasonEvent,
    SeasonType,
    StationConstituent,
    TidalRange,
    TidalType,
    TideExtreme,
    TidePoint,
    TideStation,
)
from tidal_harmonics.errors import (
    ErrorEnvelope,
    ErrorType,
    InvalidInputError,
    StationNotFoundError,
    TidalHarmonicsError,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Data
    "CONSTITUENTS",
    "get_constituent",
    "get_station",
    "find_station",
    "list_stations",
    "station_options",
    # Models
    "Constituent",
    "ConstituentFamily",
    "StationConstituent",
    "TideStation",
    "TidePoint",
    "TideExtreme",
    "ExtremeType",
    "TidalRange",
    "TidalType",
    "CelestialPosition",
    "MoonPhase",
    "MoonPhaseEvent",
    "ApsisType",
    "ApsisEvent",
    "SeasonType",
    "SeasonEvent",
    # Engines
    "HARMONIC_EPOCH",
    "predict_tide",
    "predict_tide_from_constituents",
    "predict_tide_series",
    "constituent_contributions",
    "recommended_step_minutes",
    "find_extremes",
    "get_tidal_range",
    "lunar_node_longitude",
    "nodal_factors",
    "nodal_amplitude_factors",
    "spring_neap_indicator",
    "get_sun_position",
    "get_moon_position",
    "get_lunar_phase",
    "find_next_moon_phases",
    "find_next_lunar_apsis",
    "find_next_seasons",
    "get_upcoming_tidal_events",
    "form_factor",
    "tidal_type",
    "rule_of_twelfths",
    "ebb_flood_durations",
    # Errors
    "ErrorType",
    "ErrorEnvelope",
    "TidalHarmonicsError",
    "InvalidInputError",
    "StationNotFoundError",
]
