"""Low-precision Sun and Moon ephemeris with event search.

Pure-compute functions for geocentric positions and the events that drive
spring/neap and perigean tides:
- sun_ecliptic / moon_ecliptic: Apparent ecliptic longitude, latitude, distance
- get_sun_position / get_moon_position: Equatorial (of date) vectors, in km
- get_lunar_phase: Fraction of the synodic month since new moon
- find_next_moon_phases: Upcoming quarter phases
- find_next_lunar_apsis: Upcoming perigees and apogees
- find_next_seasons: Upcoming equinoxes and solstices
- get_upcoming_tidal_events: The three above merged chronologically

The series are truncated forms of those in Meeus, "Astronomical Algorithms"
(ch. 25 for the Sun, ch. 47 for the Moon): arc-minute class, good for
visualization and qualitative tidal reasoning, not for navigation. Every
periodic argument is reduced modulo 360 degrees before trigonometry, so
accuracy decays gracefully far from J2000 instead of producing NaN.

Event searches are bounded loops whose iteration count is proportional to
the requested number of events.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from scipy.optimize import brentq, minimize_scalar

from tidal_harmonics.compute.astronomical import normalize_angle
from tidal_harmonics.compute.julian import as_utc, julian_centuries
from tidal_harmonics.domain.astro import (
    ApsisEvent,
    ApsisType,
    CelestialPosition,
    MoonPhaseEvent,
    SeasonEvent,
    SeasonType,
    phase_for_quarter,
)
from tidal_harmonics.errors import InvalidInputError

logger = logging.getLogger(__name__)

AU_KM = 149_597_870.7
SYNODIC_MONTH_DAYS = 29.530588853

# Convergence tolerance of event refinement
_REFINE_TOLERANCE_DAYS = 0.05 / 86400.0
# Events no later than this after the search origin are the origin itself
_EVENT_TOLERANCE_DAYS = 1.0 / 86400.0
_PHASE_SEARCH_STEP_DAYS = 1.0
_SEASON_SEARCH_STEP_DAYS = 10.0
_APSIS_SCAN_STEP_DAYS = 0.25


def _sin(deg: float) -> float:
    return math.sin(math.radians(normalize_angle(deg)))


def _cos(deg: float) -> float:
    return math.cos(math.radians(normalize_angle(deg)))


def _wrap180(deg: float) -> float:
    """Reduce an angle to [-180, 180)."""
    return normalize_angle(deg + 180.0) - 180.0


# ---------------------------------------------------------------------------
# Sun
# ---------------------------------------------------------------------------


def _sun_from_centuries(T: float) -> tuple[float, float, float]:
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T * T
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T * T
    e = 0.016708634 - 0.000042037 * T - 0.0000001267 * T * T

    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * _sin(M)
        + (0.019993 - 0.000101 * T) * _sin(2.0 * M)
        + 0.000289 * _sin(3.0 * M)
    )
    true_longitude = L0 + C
    true_anomaly = M + C
    radius_au = 1.000001018 * (1.0 - e * e) / (1.0 + e * _cos(true_anomaly))

    # Aberration and nutation in longitude
    omega = 125.04 - 1934.136 * T
    apparent = true_longitude - 0.00569 - 0.00478 * _sin(omega)
    return normalize_angle(apparent), 0.0, radius_au * AU_KM


def sun_ecliptic(when: datetime) -> tuple[float, float, float]:
    """Apparent geocentric ecliptic coordinates of the Sun.

    Returns:
        Tuple of (longitude_deg, latitude_deg, distance_km). The latitude
        never exceeds an arc-second and is returned as 0.0.
    """
    return _sun_from_centuries(julian_centuries(when))


# ---------------------------------------------------------------------------
# Moon
# ---------------------------------------------------------------------------

# Multiples of (D, M, M', F) with longitude (1e-6 deg) and distance (1e-3 km)
# coefficients, largest terms of Meeus table 47.A
_MOON_LR_TERMS: tuple[tuple[int, int, int, int, float, float], ...] = (
    (0, 0, 1, 0, 6288774, -20905355),
    (2, 0, -1, 0, 1274027, -3699111),
    (2, 0, 0, 0, 658314, -2955968),
    (0, 0, 2, 0, 213618, -569925),
    (0, 1, 0, 0, -185116, 48888),
    (0, 0, 0, 2, -114332, -3149),
    (2, 0, -2, 0, 58793, 246158),
    (2, -1, -1, 0, 57066, -152138),
    (2, 0, 1, 0, 53322, -170733),
    (2, -1, 0, 0, 45758, -204586),
    (0, 1, -1, 0, -40923, -129620),
    (1, 0, 0, 0, -34720, 108743),
    (0, 1, 1, 0, -30383, 104755),
    (2, 0, 0, -2, 15327, 10321),
    (0, 0, 1, 2, -12528, 0),
    (0, 0, 1, -2, 10980, 79661),
    (4, 0, -1, 0, 10675, -34782),
    (0, 0, 3, 0, 10034, -23210),
    (4, 0, -2, 0, 8548, -21636),
    (2, 1, -1, 0, -7888, 24208),
    (2, 1, 0, 0, -6766, 30824),
    (1, 0, -1, 0, -5163, -8379),
    (1, 1, 0, 0, 4987, -16675),
    (2, -1, 1, 0, 4036, -12831),
    (2, 0, 2, 0, 3994, -10445),
    (4, 0, 0, 0, 3861, -11650),
    (2, 0, -3, 0, 3665, 14403),
    (0, 1, -2, 0, -2689, -7003),
    (2, 0, -1, 2, -2602, 0),
    (2, -1, -2, 0, 2390, 10056),
    (1, 0, 1, 0, -2348, 6322),
    (2, -2, 0, 0, 2236, -9884),
)

# Multiples of (D, M, M', F) with latitude coefficients (1e-6 deg), table 47.B
_MOON_B_TERMS: tuple[tuple[int, int, int, int, float], ...] = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
    (2, -1, -1, 1, 2463),
    (2, -1, 0, 1, 2211),
    (2, -1, -1, -1, 2065),
    (0, 1, -1, -1, -1870),
    (4, 0, -1, -1, 1828),
    (0, 1, 0, 1, -1794),
)

_MEAN_MOON_DISTANCE_KM = 385000.56


def _moon_from_centuries(T: float) -> tuple[float, float, float]:
    T2 = T * T
    T3 = T2 * T
    T4 = T3 * T
    Lp = normalize_angle(218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0)
    D = normalize_angle(297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0)
    M = normalize_angle(357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0)
    Mp = normalize_angle(134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0)
    F = normalize_angle(93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0)
    # Decreasing eccentricity of Earth's orbit
    E = 1.0 - 0.002516 * T - 0.0000074 * T2
    eccentricity = (1.0, E, E * E)

    A1 = 119.75 + 131.849 * T
    A2 = 53.09 + 479264.290 * T
    A3 = 313.45 + 481266.484 * T

    sum_l = 0.0
    sum_r = 0.0
    for d, m, mp, f, coeff_l, coeff_r in _MOON_LR_TERMS:
        arg = d * D + m * M + mp * Mp + f * F
        scale = eccentricity[abs(m)]
        sum_l += coeff_l * scale * _sin(arg)
        sum_r += coeff_r * scale * _cos(arg)

    sum_b = 0.0
    for d, m, mp, f, coeff_b in _MOON_B_TERMS:
        arg = d * D + m * M + mp * Mp + f * F
        sum_b += coeff_b * eccentricity[abs(m)] * _sin(arg)

    sum_l += 3958.0 * _sin(A1) + 1962.0 * _sin(Lp - F) + 318.0 * _sin(A2)
    sum_b += (
        -2235.0 * _sin(Lp)
        + 382.0 * _sin(A3)
        + 175.0 * _sin(A1 - F)
        + 175.0 * _sin(A1 + F)
        + 127.0 * _sin(Lp - Mp)
        - 115.0 * _sin(Lp + Mp)
    )

    # Nutation in longitude keeps the Moon on the same (apparent) frame as the Sun
    omega = 125.04 - 1934.136 * T
    longitude = normalize_angle(Lp + sum_l / 1e6 - 0.00478 * _sin(omega))
    latitude = sum_b / 1e6
    distance = _MEAN_MOON_DISTANCE_KM + sum_r / 1000.0
    return longitude, latitude, distance


def moon_ecliptic(when: datetime) -> tuple[float, float, float]:
    """Apparent geocentric ecliptic coordinates of the Moon.

    Returns:
        Tuple of (longitude_deg, latitude_deg, distance_km)
    """
    return _moon_from_centuries(julian_centuries(when))


# ---------------------------------------------------------------------------
# Positions and phase
# ---------------------------------------------------------------------------


def _mean_obliquity(T: float) -> float:
    return 23.4392911 - 0.0130042 * T - 1.64e-7 * T * T + 5.04e-7 * T * T * T


def _ecliptic_to_equatorial(longitude: float, latitude: float, distance: float, T: float) -> CelestialPosition:
    eps = math.radians(_mean_obliquity(T))
    lam = math.radians(normalize_angle(longitude))
    beta = math.radians(latitude)
    x_ecl = distance * math.cos(beta) * math.cos(lam)
    y_ecl = distance * math.cos(beta) * math.sin(lam)
    z_ecl = distance * math.sin(beta)
    return CelestialPosition(
        x=x_ecl,
        y=y_ecl * math.cos(eps) - z_ecl * math.sin(eps),
        z=y_ecl * math.sin(eps) + z_ecl * math.cos(eps),
    )


def get_sun_position(when: datetime) -> CelestialPosition:
    """Geocentric position of the Sun, in km (equatorial frame of date)."""
    T = julian_centuries(when)
    return _ecliptic_to_equatorial(*_sun_from_centuries(T), T)


def get_moon_position(when: datetime) -> CelestialPosition:
    """Geocentric position of the Moon, in km (equatorial frame of date)."""
    T = julian_centuries(when)
    return _ecliptic_to_equatorial(*_moon_from_centuries(T), T)


def _elongation_at(T: float) -> float:
    """Moon-minus-Sun apparent ecliptic longitude, in degrees [0, 360)."""
    return normalize_angle(_moon_from_centuries(T)[0] - _sun_from_centuries(T)[0])


def get_lunar_phase(when: datetime) -> float:
    """Fraction of the synodic month elapsed since new moon, in [0, 1).

    0 is new moon, 0.25 first quarter, 0.5 full moon, 0.75 last quarter.
    Computed from the same longitudes as the Sun and Moon positions.
    """
    phase = _elongation_at(julian_centuries(when)) / 360.0
    return 0.0 if phase >= 1.0 else phase


# ---------------------------------------------------------------------------
# Event search
# ---------------------------------------------------------------------------


def _validate_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidInputError(f"count must be an integer, got {count!r}", count=repr(count))
    if count < 0:
        raise InvalidInputError(f"count must be non-negative, got {count}", count=count)
    return count


def _days_to_centuries(t0: datetime, days: float) -> float:
    return julian_centuries(t0 + timedelta(days=days))


def _find_crossing(
    angle_fn: Callable[[float], float],
    target: float,
    start_days: float,
    step_days: float,
    max_steps: int,
) -> float | None:
    """First time after ``start_days`` at which ``angle_fn`` reaches ``target``.

    ``angle_fn`` maps days since the search origin to an increasing angle (mod 360).
    The crossing is bracketed by stepping forward and refined with Brent's
    method. Returns days since the origin, or None if no crossing was bracketed
    within ``max_steps`` steps.
    """

    def offset(days: float) -> float:
        return _wrap180(angle_fn(days) - target)

    lo = start_days
    f_lo = offset(lo)
    for _ in range(max_steps):
        hi = lo + step_days
        f_hi = offset(hi)
        # A jump from +180 to -180 is the far side of the circle, not a crossing
        if f_lo < 0.0 <= f_hi and f_hi - f_lo < 180.0:
            if f_hi == 0.0:
                return hi
            return float(brentq(offset, lo, hi, xtol=_REFINE_TOLERANCE_DAYS))
        lo, f_lo = hi, f_hi
    return None


def find_next_moon_phases(from_when: datetime, count: int = 4) -> list[MoonPhaseEvent]:
    """Next ``count`` quarter phases strictly after ``from_when``.

    Events come in the cyclic order new -> first quarter -> full -> last
    quarter, about 7.38 days apart on average. A phase within a second of
    ``from_when`` is ``from_when`` itself and is skipped, so searching from
    an event date yields the following event.

    Raises:
        InvalidInputError: If ``count`` is negative or not an integer.
    """
    count = _validate_count(count)
    t0 = as_utc(from_when)
    if count == 0:
        return []

    def elongation(days: float) -> float:
        return _elongation_at(_days_to_centuries(t0, days))

    quarter = int(elongation(0.0) // 90.0) + 1
    events: list[MoonPhaseEvent] = []
    start = 0.0
    # A quarter never takes more than ~9 days; 12 one-day steps always bracket it
    for _ in range(count + 1):
        if len(events) >= count:
            break
        phase = phase_for_quarter(quarter)
        found = _find_crossing(elongation, phase.elongation, start, _PHASE_SEARCH_STEP_DAYS, 12)
        if found is None:
            logger.warning("Could not bracket %s after %s; stopping search", phase.value, t0.isoformat())
            break
        start = found + _EVENT_TOLERANCE_DAYS
        quarter += 1
        if found <= _EVENT_TOLERANCE_DAYS:
            continue
        events.append(MoonPhaseEvent(type=phase, date=t0 + timedelta(days=found), label=phase.label))
    return events


def find_next_seasons(from_when: datetime, count: int = 2) -> list[SeasonEvent]:
    """Next ``count`` equinoxes/solstices strictly after ``from_when``.

    Raises:
        InvalidInputError: If ``count`` is negative or not an integer.
    """
    count = _validate_count(count)
    t0 = as_utc(from_when)
    if count == 0:
        return []

    def solar_longitude(days: float) -> float:
        return _sun_from_centuries(_days_to_centuries(t0, days))[0]

    seasons = list(SeasonType)
    index = int(solar_longitude(0.0) // 90.0) + 1
    events: list[SeasonEvent] = []
    start = 0.0
    for _ in range(count + 1):
        if len(events) >= count:
            break
        season = seasons[index % 4]
        # A season lasts at most ~94 days
        found = _find_crossing(solar_longitude, season.solar_longitude, start, _SEASON_SEARCH_STEP_DAYS, 12)
        if found is None:
            logger.warning("Could not bracket %s after %s; stopping search", season.value, t0.isoformat())
            break
        start = found + _EVENT_TOLERANCE_DAYS
        index += 1
        if found <= _EVENT_TOLERANCE_DAYS:
            continue
        events.append(SeasonEvent(type=season, date=t0 + timedelta(days=found), label=season.label))
    return events


def _moon_distance_at(t0: datetime, days: float) -> float:
    return _moon_from_centuries(_days_to_centuries(t0, days))[2]


def find_next_lunar_apsis(from_when: datetime, count: int = 4) -> list[ApsisEvent]:
    """Next ``count`` perigees/apogees strictly after ``from_when``.

    The Moon's distance is scanned in 6-hour steps; each local extremum is
    refined with a bounded scalar minimisation. Consecutive events
    alternate perigee/apogee, about 13.78 days apart on average.

    Raises:
        InvalidInputError: If ``count`` is negative or not an integer.
    """
    count = _validate_count(count)
    t0 = as_utc(from_when)
    if count == 0:
        return []

    step = _APSIS_SCAN_STEP_DAYS
    # Apsides are never more than ~16 days apart
    max_steps = int(math.ceil((count + 1) * 16.0 / step))

    events: list[ApsisEvent] = []
    # Start one step early so an apsis just after from_when is still bracketed
    d_prev = _moon_distance_at(t0, -step)
    d_curr = _moon_distance_at(t0, 0.0)
    trend = 0 if d_curr == d_prev else (1 if d_curr > d_prev else -1)
    for k in range(1, max_steps + 1):
        if len(events) >= count:
            break
        days = k * step
        d_next = _moon_distance_at(t0, days)
        next_trend = 0 if d_next == d_curr else (1 if d_next > d_curr else -1)
        if trend != 0 and next_trend != 0 and next_trend != trend:
            kind = ApsisType.APOGEE if trend > 0 else ApsisType.PERIGEE
            event = _refine_apsis(t0, days - 2.0 * step, days, kind)
            if event is not None and event.date - t0 > timedelta(days=_EVENT_TOLERANCE_DAYS):
                events.append(event)
        if next_trend != 0:
            trend = next_trend
        d_curr = d_next
    if len(events) < count:
        logger.warning("Found %d of %d lunar apsides after %s", len(events), count, t0.isoformat())
    return events


def _refine_apsis(t0: datetime, lo: float, hi: float, kind: ApsisType) -> ApsisEvent | None:
    sign = 1.0 if kind is ApsisType.PERIGEE else -1.0

    def objective(days: float) -> float:
        return sign * _moon_distance_at(t0, days)

    result: Any = minimize_scalar(
        objective,
        bounds=(lo, hi),
        method="bounded",
        options={"xatol": _REFINE_TOLERANCE_DAYS},
    )
    days = float(result.x)
    if not math.isfinite(days):
        return None
    return ApsisEvent(type=kind, date=t0 + timedelta(days=days), distance_km=_moon_distance_at(t0, days))


def get_upcoming_tidal_events(from_when: datetime) -> list[MoonPhaseEvent | ApsisEvent | SeasonEvent]:
    """Four quarter phases, three apsides and one season, in date order."""
    events: list[MoonPhaseEvent | ApsisEvent | SeasonEvent] = [
        *find_next_moon_phases(from_when, 4),
        *find_next_lunar_apsis(from_when, 3),
        *find_next_seasons(from_when, 1),
    ]
    return sorted(events, key=lambda e: e.date)
