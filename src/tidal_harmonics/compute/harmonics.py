"""Harmonic tide synthesis.

Pure-compute functions evaluating

    h(t) = sum_i F_i * A_i * cos(w_i * t - k_i)

for the constituents of a station, where ``t`` is elapsed hours since
``HARMONIC_EPOCH``, ``w_i`` the catalog speed (deg/h), ``k_i`` the station
phase lag and ``F_i`` an optional caller-supplied amplitude multiplier
(nodal factors, for example). Angles are reduced modulo 360 degrees before
the cosine so that multi-decade elapsed times keep full precision.

Functions:
- predict_tide: Height from all station constituents
- predict_tide_from_constituents: Height from a subset of constituents
- predict_tide_series: Uniformly sampled heights over a closed range
- constituent_contributions: Per-constituent phasor breakdown
- recommended_step_minutes: Sampling step fine enough for extremum finding

No I/O; every call is a pure function of its arguments.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

import numpy as np

from tidal_harmonics.compute.julian import as_utc, hours_since
from tidal_harmonics.data.constituents import CONSTITUENTS
from tidal_harmonics.domain.harmonics import TideStation
from tidal_harmonics.domain.tide import ConstituentContribution, TidePoint
from tidal_harmonics.errors import InvalidInputError

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

MIN_STEP_MINUTES = 1.0
MAX_STEP_MINUTES = 30.0
# Samples per period of the fastest constituent
_SAMPLES_PER_PERIOD = 24.0


def _normalize_symbols(enabled_symbols: Iterable[str] | None) -> frozenset[str] | None:
    if enabled_symbols is None:
        return None
    if isinstance(enabled_symbols, str):
        raise InvalidInputError(
            "enabled_symbols must be a collection of symbols, not a single string",
            enabled_symbols=enabled_symbols,
        )
    return frozenset(enabled_symbols)


def _constituent_arrays(
    station: TideStation,
    enabled_symbols: frozenset[str] | None,
    amplitude_factors: Mapping[str, float] | None,
) -> tuple[list[str], NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Collect (symbols, speeds, amplitudes, phase lags) in station order.

    Constituents whose symbol is missing from the catalog, or not enabled,
    are skipped.
    """
    symbols: list[str] = []
    speeds: list[float] = []
    amplitudes: list[float] = []
    phases: list[float] = []
    for c in station.constituents:
        if enabled_symbols is not None and c.symbol not in enabled_symbols:
            continue
        catalog = CONSTITUENTS.get(c.symbol)
        if catalog is None:
            logger.debug("Skipping %s on station %s: not in catalog", c.symbol, station.id)
            continue
        factor = 1.0 if amplitude_factors is None else float(amplitude_factors.get(c.symbol, 1.0))
        symbols.append(c.symbol)
        speeds.append(catalog.speed)
        amplitudes.append(c.amplitude * factor)
        phases.append(c.phase)
    return (
        symbols,
        np.asarray(speeds, dtype=np.float64),
        np.asarray(amplitudes, dtype=np.float64),
        np.asarray(phases, dtype=np.float64),
    )


def _phase_angles(
    hours: NDArray[np.float64],
    speeds: NDArray[np.float64],
    phases: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Reduced phase angles in degrees [0, 360), shape (n_times, n_constituents)."""
    return np.mod(np.multiply.outer(hours, speeds) - phases, 360.0)


def _synthesize(
    hours: NDArray[np.float64],
    speeds: NDArray[np.float64],
    amplitudes: NDArray[np.float64],
    phases: NDArray[np.float64],
) -> NDArray[np.float64]:
    if speeds.size == 0:
        return np.zeros(hours.shape, dtype=np.float64)
    angles = np.deg2rad(_phase_angles(hours, speeds, phases))
    result: NDArray[np.float64] = np.cos(angles) @ amplitudes
    return result


def predict_tide_from_constituents(
    station: TideStation,
    when: datetime,
    enabled_symbols: Iterable[str] | None,
    *,
    amplitude_factors: Mapping[str, float] | None = None,
) -> float:
    """Predicted height from a subset of the station's constituents.

    Args:
        station: Station providing harmonic constants
        when: Instant to evaluate
        enabled_symbols: Symbols to include; None means all. Symbols the
            station does not carry are ignored.
        amplitude_factors: Optional per-symbol amplitude multipliers
            (missing symbols default to 1.0)

    Returns:
        Height in meters relative to the station datum's mean level. A
        station (or subset) without constituents yields 0.0.
    """
    symbols = _normalize_symbols(enabled_symbols)
    _, speeds, amplitudes, phases = _constituent_arrays(station, symbols, amplitude_factors)
    hours = np.array([hours_since(when)], dtype=np.float64)
    return float(_synthesize(hours, speeds, amplitudes, phases)[0])


def predict_tide(
    station: TideStation,
    when: datetime,
    *,
    amplitude_factors: Mapping[str, float] | None = None,
) -> float:
    """Predicted height at ``when`` summed over all station constituents."""
    return predict_tide_from_constituents(
        station, when, None, amplitude_factors=amplitude_factors
    )


def _validate_step(step_minutes: float) -> float:
    try:
        step = float(step_minutes)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"step_minutes must be a number, got {step_minutes!r}", step_minutes=repr(step_minutes)
        ) from exc
    if not math.isfinite(step) or step <= 0.0:
        raise InvalidInputError(
            f"step_minutes must be positive and finite, got {step_minutes!r}", step_minutes=step
        )
    return step


def sample_times(start: datetime, end: datetime, step_minutes: float) -> list[datetime]:
    """Instants ``start + k*step`` for every k with the instant <= ``end``.

    Raises:
        InvalidInputError: If ``step_minutes`` is not positive and finite.
    """
    step = _validate_step(step_minutes)
    start_utc = as_utc(start)
    end_utc = as_utc(end)
    if end_utc < start_utc:
        return []
    span_minutes = (end_utc - start_utc) / timedelta(minutes=1)
    # Tolerance keeps an endpoint that lands on a step boundary
    n_points = int(math.floor(span_minutes / step + 1e-9)) + 1
    times = [start_utc + timedelta(minutes=step * k) for k in range(n_points)]
    while times and times[-1] > end_utc:
        times.pop()
    return times


def predict_tide_series(
    station: TideStation,
    start: datetime,
    end: datetime,
    step_minutes: float = 6.0,
    *,
    enabled_symbols: Iterable[str] | None = None,
    amplitude_factors: Mapping[str, float] | None = None,
) -> list[TidePoint]:
    """Sample predicted heights from ``start`` to ``end`` inclusive.

    Every point is synthesized from its own elapsed time; nothing is
    accumulated between samples.

    Args:
        station: Station providing harmonic constants
        start: First instant
        end: Last instant (included when it falls on a step)
        step_minutes: Sampling step, in minutes; must be positive
        enabled_symbols: Optional subset of constituents
        amplitude_factors: Optional per-symbol amplitude multipliers

    Returns:
        Chronological list of TidePoint. Empty when ``end < start``.

    Raises:
        InvalidInputError: If ``step_minutes`` is not positive and finite.
    """
    times = sample_times(start, end, step_minutes)
    if not times:
        return []
    symbols = _normalize_symbols(enabled_symbols)
    _, speeds, amplitudes, phases = _constituent_arrays(station, symbols, amplitude_factors)
    hours = np.array([hours_since(t) for t in times], dtype=np.float64)
    heights = _synthesize(hours, speeds, amplitudes, phases)
    return [TidePoint(time=t, height=float(h)) for t, h in zip(times, heights, strict=True)]


def constituent_contributions(
    station: TideStation,
    when: datetime,
    *,
    amplitude_factors: Mapping[str, float] | None = None,
) -> list[ConstituentContribution]:
    """Per-constituent breakdown of :func:`predict_tide` at ``when``.

    The contributions sum to the predicted height (up to rounding).
    """
    symbols, speeds, amplitudes, phases = _constituent_arrays(station, None, amplitude_factors)
    if not symbols:
        return []
    hours = np.array([hours_since(when)], dtype=np.float64)
    angles = _phase_angles(hours, speeds, phases)[0]
    values = amplitudes * np.cos(np.deg2rad(angles))
    return [
        ConstituentContribution(
            symbol=symbol,
            amplitude=float(amplitude),
            phase=float(angle),
            contribution=float(value),
        )
        for symbol, amplitude, angle, value in zip(symbols, amplitudes, angles, values, strict=True)
    ]


def recommended_step_minutes(
    station: TideStation,
    enabled_symbols: Iterable[str] | None = None,
) -> float:
    """Sampling step resolving the fastest enabled constituent.

    The fastest constituent's period is divided into 24 samples and the
    result clamped to [1, 30] minutes. Stations with nothing enabled get the
    coarsest step.
    """
    symbols = _normalize_symbols(enabled_symbols)
    _, speeds, amplitudes, _ = _constituent_arrays(station, symbols, None)
    active = speeds[amplitudes > 0.0]
    if active.size == 0:
        return MAX_STEP_MINUTES
    fastest_period_minutes = 360.0 / float(np.max(active)) * 60.0
    step = fastest_period_minutes / _SAMPLES_PER_PERIOD
    return float(min(max(step, MIN_STEP_MINUTES), MAX_STEP_MINUTES))
