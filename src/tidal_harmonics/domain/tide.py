"""Domain models for predicted tide heights.

This module provides dataclasses for prediction outputs:
- TidePoint: One predicted height at one instant
- TideExtreme: A detected high or low water
- TidalRange: Bracketing low/high heights around an instant
- ConstituentContribution: One constituent's share of a predicted height
- TidalType, TideDurations: Post-processing summaries of a station or series

All of them are ephemeral values produced per call and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ExtremeType(str, Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class TidePoint:
    """Predicted water height at one instant.

    Attributes:
        time: Instant of the prediction (UTC)
        height: Height relative to the station datum, in meters
    """

    time: datetime
    height: float


@dataclass(frozen=True)
class TideExtreme:
    """High or low water derived from a TidePoint sequence.

    Attributes:
        time: Instant of the extreme (UTC)
        height: Height, in meters
        type: HIGH or LOW
    """

    time: datetime
    height: float
    type: ExtremeType

    @property
    def is_high(self) -> bool:
        return self.type is ExtremeType.HIGH


@dataclass(frozen=True)
class TidalRange:
    """Low and high water bracketing an instant.

    ``degraded`` is set when the extremum scan could not find a high/low pair
    and the heights are plain sample minimum/maximum instead.
    """

    min_height: float
    max_height: float
    degraded: bool = False

    @property
    def range(self) -> float:
        return self.max_height - self.min_height


@dataclass(frozen=True)
class ConstituentContribution:
    """Phasor breakdown of one constituent at one instant.

    Attributes:
        symbol: Constituent symbol
        amplitude: Effective amplitude (after any multiplier), in meters
        phase: Reduced phase angle ``speed*t - phase_lag``, in degrees [0, 360)
        contribution: Signed height contribution, in meters
    """

    symbol: str
    amplitude: float
    phase: float
    contribution: float


class TidalType(str, Enum):
    """Tidal regime from the form factor (K1 + O1) / (M2 + S2)."""

    SEMIDIURNAL = "semidiurnal"
    MIXED_SEMIDIURNAL = "mixed-semidiurnal"
    MIXED_DIURNAL = "mixed-diurnal"
    DIURNAL = "diurnal"


@dataclass(frozen=True)
class TideDurations:
    """Mean flood (low to high) and ebb (high to low) durations, in hours."""

    flood_hours: float
    ebb_hours: float

    @property
    def ratio(self) -> float:
        """Flood duration divided by ebb duration."""
        return self.flood_hours / self.ebb_hours
