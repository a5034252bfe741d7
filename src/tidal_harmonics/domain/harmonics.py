"""Harmonic constant domain models.

This module provides:
- ConstituentFamily: Classification of constituents by characteristic period
- Constituent: Catalog entry (speed, Doodson number, family)
- StationConstituent: Station-specific amplitude and phase lag
- TideStation: A tide station with its ordered harmonic constants
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ConstituentFamily(str, Enum):
    """Constituent families by characteristic period."""

    SEMIDIURNAL = "semidiurnal"  # ~12 h
    DIURNAL = "diurnal"  # ~24 h
    SHALLOW_WATER = "shallow-water"  # overtides and compound tides
    LONG_PERIOD = "long-period"  # fortnightly and longer


# Type aliases with validation
SpeedDegPerHour = Annotated[float, Field(gt=0, description="Angular speed, in degrees per hour")]
AmplitudeMeters = Annotated[float, Field(ge=0, description="Amplitude, in meters")]
PhaseDegrees = Annotated[float, Field(ge=0, lt=360, description="Phase lag, in degrees")]
DoodsonNumber = tuple[int, int, int, int, int, int]


class Constituent(FrozenModel):
    """One periodic term of the harmonic decomposition.

    The Doodson number weights the astronomical arguments
    (T, s, h, p, N, p') whose rates sum to ``speed``.
    """

    symbol: str = Field(min_length=1)
    name: str
    speed: SpeedDegPerHour
    family: ConstituentFamily
    doodson: DoodsonNumber

    @property
    def period_hours(self) -> float:
        """Period of one full cycle, in hours."""
        return 360.0 / self.speed


class StationConstituent(FrozenModel):
    """Harmonic constants of one constituent at one station."""

    symbol: str = Field(min_length=1)
    amplitude: AmplitudeMeters
    phase: PhaseDegrees


class TideStation(FrozenModel):
    """A tide station and its harmonic constants.

    Stations are created once from static data and never mutated; consumers
    only ever hold read-only references.
    """

    id: str = Field(min_length=1)
    name: str
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    datum: str
    country: str
    state: str | None = None
    timezone: str = "UTC"
    harmonic_epoch: str | None = None
    constituents: tuple[StationConstituent, ...] = ()

    @model_validator(mode="after")
    def _unique_symbols(self) -> TideStation:
        seen: set[str] = set()
        for c in self.constituents:
            if c.symbol in seen:
                raise ValueError(f"duplicate constituent {c.symbol!r} on station {self.id}")
            seen.add(c.symbol)
        return self

    @property
    def label(self) -> str:
        """Display label, e.g. ``"San Francisco, CA"``."""
        return f"{self.name}, {self.state}" if self.state else self.name

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(c.symbol for c in self.constituents)

    def amplitude_of(self, symbol: str) -> float:
        """Amplitude of ``symbol`` at this station, 0.0 when absent."""
        for c in self.constituents:
            if c.symbol == symbol:
                return c.amplitude
        return 0.0
