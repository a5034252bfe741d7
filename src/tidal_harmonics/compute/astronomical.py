"""Astronomical arguments and nodal corrections for tidal work.

Pure-compute helpers:
- normalize_angle: Reduce degrees to [0, 360)
- astronomical_arguments: Mean longitudes T, s, h, p, N, p' at an instant
- equilibrium_argument: V0 from a Doodson number
- lunar_node_longitude: Longitude of the Moon's ascending node (18.61-year cycle)
- nodal_factors / nodal_amplitude_factors: Per-constituent f and u
- spring_neap_indicator: Phase of the M2/S2 beat

Polynomials follow Schureman (1958) and Meeus, "Astronomical Algorithms".
Nodal factors are simplified presentation-grade approximations; they are not
applied by the synthesis engine unless a caller passes them in explicitly.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime

from tidal_harmonics.compute.julian import as_utc, julian_centuries
from tidal_harmonics.data.constituents import CONSTITUENTS
from tidal_harmonics.domain.astro import AstronomicalArguments, NodalFactors
from tidal_harmonics.domain.harmonics import TideStation


def normalize_angle(degrees: float) -> float:
    """Reduce an angle in degrees to [0, 360)."""
    normalized = math.fmod(degrees, 360.0)
    if normalized < 0.0:
        normalized += 360.0
    # fmod of a tiny negative value can round up to exactly 360
    return 0.0 if normalized >= 360.0 else normalized


def _hours_in_day(when: datetime) -> float:
    return when.hour + when.minute / 60.0 + (when.second + when.microsecond / 1e6) / 3600.0


def astronomical_arguments(when: datetime) -> AstronomicalArguments:
    """Fundamental arguments at ``when``, each in degrees [0, 360).

    ``T`` is the hour angle of the mean Sun at Greenwich, 180 + 15 * UT, so
    it is 0 at noon UT.
    """
    utc = as_utc(when)
    T = julian_centuries(utc)
    T2 = T * T
    T3 = T2 * T

    hour_angle = 180.0 + _hours_in_day(utc) * 15.0
    s = 218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0
    h = 280.4664567 + 360007.6982779 * T + 0.03032028 * T2 + T3 / 49931.0 - T2 * T2 / 15300.0
    p = 83.3532465 + 4069.0137287 * T - 0.0103200 * T2 - T3 / 80053.0
    N = 125.0445479 - 1934.1362891 * T + 0.0020754 * T2 + T3 / 467441.0
    pp = 282.9373 + 1.7195 * T

    return AstronomicalArguments(
        T=normalize_angle(hour_angle),
        s=normalize_angle(s),
        h=normalize_angle(h),
        p=normalize_angle(p),
        N=normalize_angle(N),
        pp=normalize_angle(pp),
    )


def equilibrium_argument(doodson: Sequence[int], args: AstronomicalArguments) -> float:
    """Equilibrium argument V0 = sum of Doodson weights times arguments.

    The constant phase offsets of Schureman's tables (the +/-90 degrees of
    most diurnal terms, the 180 of L2 and friends) are not included, so an
    absolute V0 is off by that constant. M2 and S2 carry none, which is all
    ``spring_neap_indicator`` relies on.
    """
    total = sum(d * a for d, a in zip(doodson, args.as_tuple(), strict=True))
    return normalize_angle(total)


def lunar_node_longitude(when: datetime) -> float:
    """Mean longitude of the Moon's ascending node, in degrees [0, 360).

    Regresses through a full circle every ~18.61 years.
    """
    return astronomical_arguments(when).N


# Amplitude factor of the principal lunar semidiurnal family
def _f_m2(cos_n: float) -> float:
    return 1.0 - 0.037 * cos_n


def _f_k1(cos_n: float) -> float:
    return 1.006 + 0.115 * cos_n


def _f_o1(cos_n: float) -> float:
    return 1.009 + 0.187 * cos_n


def _f_k2(cos_n: float) -> float:
    return 1.024 + 0.286 * cos_n


_M2_FAMILY = frozenset({"M2", "N2", "2N2", "MU2", "NU2", "L2", "LAM2"})
_O1_FAMILY = frozenset({"O1", "Q1", "2Q1", "RHO1"})
_K2_FAMILY = frozenset({"K2", "J1", "OO1"})
_UNMODULATED = frozenset({"S2", "T2", "R2", "P1", "S1", "Ssa", "Sa", "MSf", "S4", "S6"})


def nodal_factors(symbol: str, node_longitude_deg: float) -> NodalFactors:
    """Nodal amplitude factor ``f`` and phase correction ``u`` for a constituent.

    Args:
        symbol: Constituent symbol
        node_longitude_deg: Longitude of the Moon's ascending node, in degrees

    Returns:
        NodalFactors with ``f`` (multiplier) and ``u`` (degrees). Solar
        constituents and unknown symbols are unmodulated (f=1, u=0).
    """
    n = math.radians(normalize_angle(node_longitude_deg))
    sin_n = math.sin(n)
    cos_n = math.cos(n)

    if symbol in _M2_FAMILY:
        return NodalFactors(f=_f_m2(cos_n), u=-2.1 * sin_n)
    if symbol in _UNMODULATED:
        return NodalFactors(f=1.0, u=0.0)
    if symbol in _K2_FAMILY:
        return NodalFactors(f=_f_k2(cos_n), u=-17.74 * sin_n)
    if symbol == "K1":
        return NodalFactors(f=_f_k1(cos_n), u=-8.86 * sin_n)
    if symbol in _O1_FAMILY:
        return NodalFactors(f=_f_o1(cos_n), u=10.8 * sin_n)
    if symbol == "M1":
        sin_2n = math.sin(2.0 * n)
        cos_2n = math.cos(2.0 * n)
        w = math.hypot(
            1.0 - 0.2505 * cos_2n - 0.1102 * cos_n,
            0.2505 * sin_2n + 0.1102 * sin_n,
        )
        return NodalFactors(f=w, u=0.0)
    if symbol == "Mf":
        return NodalFactors(f=1.043 + 0.414 * cos_n, u=-23.7 * sin_n)
    if symbol == "Mm":
        return NodalFactors(f=1.0 - 0.13 * cos_n, u=0.0)

    # Compound and overtides: products of their parents
    if symbol in ("M4", "MN4"):
        return NodalFactors(f=_f_m2(cos_n) ** 2, u=-4.2 * sin_n)
    if symbol == "MS4":
        return NodalFactors(f=_f_m2(cos_n), u=-2.1 * sin_n)
    if symbol == "M6":
        return NodalFactors(f=_f_m2(cos_n) ** 3, u=-6.3 * sin_n)
    if symbol == "M8":
        return NodalFactors(f=_f_m2(cos_n) ** 4, u=-8.4 * sin_n)
    if symbol == "MK3":
        return NodalFactors(f=_f_m2(cos_n) * _f_k1(cos_n), u=(-2.1 - 8.86) * sin_n)
    if symbol == "2MK3":
        return NodalFactors(f=_f_m2(cos_n) ** 2 * _f_k1(cos_n), u=(-4.2 + 8.86) * sin_n)

    return NodalFactors(f=1.0, u=0.0)


def nodal_amplitude_factors(station: TideStation, when: datetime) -> dict[str, float]:
    """``{symbol: f}`` for every station constituent at ``when``.

    The result can be handed to the synthesis engine as ``amplitude_factors``
    to opt into nodally-corrected amplitudes.
    """
    node = lunar_node_longitude(when)
    return {c.symbol: nodal_factors(c.symbol, node).f for c in station.constituents}


def spring_neap_indicator(when: datetime) -> float:
    """Spring/neap indicator in [-1, 1].

    +1 when M2 and S2 are in phase (syzygy, spring tides), -1 when they are
    in opposition (quarter moons, neap tides). V0(M2) - V0(S2) = 2(h - s),
    twice the lunar elongation.
    """
    args = astronomical_arguments(when)
    v0_m2 = equilibrium_argument(CONSTITUENTS["M2"].doodson, args)
    v0_s2 = equilibrium_argument(CONSTITUENTS["S2"].doodson, args)
    phase_diff = normalize_angle(v0_m2 - v0_s2)
    return math.cos(math.radians(phase_diff))
