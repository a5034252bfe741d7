"""Domain models for tidal-harmonics.

This package is domain-only. It intentionally excludes presentation-layer
concepts like panels, scenes, tutorial state, etc.
"""

from tidal_harmonics.domain.astro import (
    ApsisEvent,
    ApsisType,
    AstronomicalArguments,
    CelestialPosition,
    MoonPhase,
    MoonPhaseEvent,
    NodalFactors,
    SeasonEvent,
    SeasonType,
)
from tidal_harmonics.domain.harmonics import (
    Constituent,
    ConstituentFamily,
    StationConstituent,
    TideStation,
)
from tidal_harmonics.domain.tide import (
    ConstituentContribution,
    ExtremeType,
    TidalRange,
    TidalType,
    TideDurations,
    TideExtreme,
    TidePoint,
)

__all__ = [
    "Constituent",
    "ConstituentFamily",
    "StationConstituent",
    "TideStation",
    "TidePoint",
    "TideExtreme",
    "ExtremeType",
    "TidalRange",
    "ConstituentContribution",
    "TidalType",
    "TideDurations",
    "CelestialPosition",
    "MoonPhase",
    "MoonPhaseEvent",
    "ApsisType",
    "ApsisEvent",
    "SeasonType",
    "SeasonEvent",
    "NodalFactors",
    "AstronomicalArguments",
]
