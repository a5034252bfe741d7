"""Pure-compute engines: harmonic synthesis, extremes, ephemeris and analysis.

No I/O happens here; every function is a deterministic function of its
arguments.
"""

from tidal_harmonics.compute.analysis import (
    ebb_flood_durations,
    form_factor,
    rule_of_twelfths,
    tidal_type,
)
from tidal_harmonics.compute.astronomical import (
    astronomical_arguments,
    equilibrium_argument,
    lunar_node_longitude,
    nodal_amplitude_factors,
    nodal_factors,
    normalize_angle,
    spring_neap_indicator,
)
from tidal_harmonics.compute.ephemeris import (
    find_next_lunar_apsis,
    find_next_moon_phases,
    find_next_seasons,
    get_lunar_phase,
    get_moon_position,
    get_sun_position,
    get_upcoming_tidal_events,
    moon_ecliptic,
    sun_ecliptic,
)
from tidal_harmonics.compute.extremes import find_extremes
from tidal_harmonics.compute.harmonics import (
    constituent_contributions,
    predict_tide,
    predict_tide_from_constituents,
    predict_tide_series,
    recommended_step_minutes,
)
from tidal_harmonics.compute.julian import HARMONIC_EPOCH, julian_centuries, julian_day
from tidal_harmonics.compute.ranges import get_tidal_range

__all__ = [
    # Synthesis
    "HARMONIC_EPOCH",
    "predict_tide",
    "predict_tide_from_constituents",
    "predict_tide_series",
    "constituent_contributions",
    "recommended_step_minutes",
    # Extremes and ranges
    "find_extremes",
    "get_tidal_range",
    # Nodal and astronomical arguments
    "normalize_angle",
    "astronomical_arguments",
    "equilibrium_argument",
    "lunar_node_longitude",
    "nodal_factors",
    "nodal_amplitude_factors",
    "spring_neap_indicator",
    # Ephemeris
    "julian_day",
    "julian_centuries",
    "sun_ecliptic",
    "moon_ecliptic",
    "get_sun_position",
    "get_moon_position",
    "get_lunar_phase",
    "find_next_moon_phases",
    "find_next_lunar_apsis",
    "find_next_seasons",
    "get_upcoming_tidal_events",
    # Analysis
    "form_factor",
    "tidal_type",
    "rule_of_twelfths",
    "ebb_flood_durations",
]
