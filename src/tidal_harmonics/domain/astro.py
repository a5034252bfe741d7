"""Astronomical domain models.

Positions are geocentric and expressed in kilometers; events carry UTC
instants. Everything here is a plain frozen value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class CelestialPosition:
    """Geocentric equatorial (of date) position, in kilometers."""

    x: float
    y: float
    z: float

    @property
    def distance_km(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


class MoonPhase(str, Enum):
    """Quarter phases, in the order they occur."""

    NEW_MOON = "new_moon"
    FIRST_QUARTER = "first_quarter"
    FULL_MOON = "full_moon"
    LAST_QUARTER = "last_quarter"

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]

    @property
    def elongation(self) -> float:
        """Moon-minus-Sun ecliptic longitude at this phase, in degrees."""
        return 90.0 * _PHASE_ORDER.index(self)

    @property
    def is_syzygy(self) -> bool:
        """New and full moon align Sun, Earth and Moon (spring tides)."""
        return self in (MoonPhase.NEW_MOON, MoonPhase.FULL_MOON)


_PHASE_ORDER: tuple[MoonPhase, ...] = (
    MoonPhase.NEW_MOON,
    MoonPhase.FIRST_QUARTER,
    MoonPhase.FULL_MOON,
    MoonPhase.LAST_QUARTER,
)

_PHASE_LABELS: dict[MoonPhase, str] = {
    MoonPhase.NEW_MOON: "New Moon",
    MoonPhase.FIRST_QUARTER: "First Quarter",
    MoonPhase.FULL_MOON: "Full Moon",
    MoonPhase.LAST_QUARTER: "Last Quarter",
}


def phase_for_quarter(index: int) -> MoonPhase:
    """Map a quarter index (0 = new, 1 = first quarter, ...) to its phase."""
    return _PHASE_ORDER[index % 4]


@dataclass(frozen=True)
class MoonPhaseEvent:
    type: MoonPhase
    date: datetime
    label: str


class ApsisType(str, Enum):
    PERIGEE = "perigee"
    APOGEE = "apogee"


@dataclass(frozen=True)
class ApsisEvent:
    """Lunar perigee or apogee.

    Attributes:
        type: PERIGEE (closest) or APOGEE (farthest)
        date: Instant of the apsis (UTC)
        distance_km: Earth-Moon distance at the apsis, in kilometers
    """

    type: ApsisType
    date: datetime
    distance_km: float


class SeasonType(str, Enum):
    MARCH_EQUINOX = "march_equinox"
    JUNE_SOLSTICE = "june_solstice"
    SEPTEMBER_EQUINOX = "september_equinox"
    DECEMBER_SOLSTICE = "december_solstice"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def solar_longitude(self) -> float:
        return 90.0 * list(SeasonType).index(self)


@dataclass(frozen=True)
class SeasonEvent:
    type: SeasonType
    date: datetime
    label: str


@dataclass(frozen=True)
class NodalFactors:
    """Nodal amplitude factor ``f`` and phase correction ``u`` (degrees)."""

    f: float
    u: float


@dataclass(frozen=True)
class AstronomicalArguments:
    """Fundamental astronomical arguments, each in degrees [0, 360).

    Attributes:
        T: Hour angle of the mean Sun at Greenwich
        s: Mean longitude of the Moon
        h: Mean longitude of the Sun
        p: Longitude of lunar perigee
        N: Longitude of the Moon's ascending node
        pp: Longitude of solar perigee
    """

    T: float
    s: float
    h: float
    p: float
    N: float
    pp: float

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.T, self.s, self.h, self.p, self.N, self.pp)
