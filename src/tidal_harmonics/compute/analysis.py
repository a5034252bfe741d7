"""Post-processing over harmonic constants and detected extremes.

Functions:
- form_factor / tidal_type: Classify a station's tidal regime
- rule_of_twelfths: Mariner's approximation between two extremes
- ebb_flood_durations: Mean flood and ebb durations of an extreme series

Everything here consumes station constants or ``find_extremes`` output and
never re-runs the synthesis.
"""

from __future__ import annotations

from collections.abc import Sequence

from tidal_harmonics.domain.harmonics import TideStation
from tidal_harmonics.domain.tide import TidalType, TideDurations, TideExtreme, TidePoint
from tidal_harmonics.errors import InvalidInputError

# Upper bounds of the form factor for each regime (Courtier, 1938)
SEMIDIURNAL_MAX = 0.25
MIXED_SEMIDIURNAL_MAX = 1.5
MIXED_DIURNAL_MAX = 3.0

# Cumulative fraction of the range covered after each sixth of the interval
_TWELFTHS = (1 / 12, 3 / 12, 6 / 12, 9 / 12, 11 / 12, 12 / 12)


def form_factor(station: TideStation) -> float:
    """Form factor F = (K1 + O1) / (M2 + S2).

    A station without M2 or S2 uses a denominator of 1.
    """
    diurnal = station.amplitude_of("K1") + station.amplitude_of("O1")
    semidiurnal = station.amplitude_of("M2") + station.amplitude_of("S2")
    if semidiurnal == 0.0:
        semidiurnal = 1.0
    return diurnal / semidiurnal


def tidal_type(station: TideStation) -> TidalType:
    ratio = form_factor(station)
    if ratio < SEMIDIURNAL_MAX:
        return TidalType.SEMIDIURNAL
    if ratio < MIXED_SEMIDIURNAL_MAX:
        return TidalType.MIXED_SEMIDIURNAL
    if ratio < MIXED_DIURNAL_MAX:
        return TidalType.MIXED_DIURNAL
    return TidalType.DIURNAL


def rule_of_twelfths(start: TideExtreme, end: TideExtreme) -> list[TidePoint]:
    """Rule-of-twelfths heights between two consecutive extremes.

    The interval is split into six equal parts (one "tidal hour" each) and
    the water moves 1, 2, 3, 3, 2, 1 twelfths of the range across them.

    Args:
        start: Earlier extreme
        end: Following extreme of the opposite type

    Returns:
        Six TidePoint marks, the last one at ``end``

    Raises:
        InvalidInputError: If ``end`` does not follow ``start``.
    """
    if end.time <= start.time:
        raise InvalidInputError(
            "end must follow start",
            start=start.time.isoformat(),
            end=end.time.isoformat(),
        )
    tidal_hour = (end.time - start.time) / 6
    delta = end.height - start.height
    return [
        TidePoint(time=start.time + tidal_hour * (k + 1), height=start.height + delta * fraction)
        for k, fraction in enumerate(_TWELFTHS)
    ]


def ebb_flood_durations(extremes: Sequence[TideExtreme]) -> TideDurations | None:
    """Mean flood and ebb durations over an alternating extreme series.

    Returns:
        TideDurations, or None unless the series holds at least one complete
        flood and one complete ebb.
    """
    flood: list[float] = []
    ebb: list[float] = []
    for first, second in zip(extremes[:-1], extremes[1:], strict=True):
        hours = (second.time - first.time).total_seconds() / 3600.0
        if not first.is_high and second.is_high:
            flood.append(hours)
        elif first.is_high and not second.is_high:
            ebb.append(hours)
    if not flood or not ebb:
        return None
    return TideDurations(flood_hours=sum(flood) / len(flood), ebb_hours=sum(ebb) / len(ebb))
