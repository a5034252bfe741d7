"""Constituent catalog.

Angular speeds are the NOAA CO-OPS values in degrees per hour. Doodson
numbers weight the astronomical arguments (T, s, h, p, N, p'), so the speed
of each constituent equals the weighted sum of the argument rates in
``ARGUMENT_RATES_DEG_PER_HOUR``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from tidal_harmonics.domain.harmonics import Constituent, ConstituentFamily

SEMI = ConstituentFamily.SEMIDIURNAL
DIURNAL = ConstituentFamily.DIURNAL
SHALLOW = ConstituentFamily.SHALLOW_WATER
LONG = ConstituentFamily.LONG_PERIOD

# Rates of T, s, h, p, N, p' in degrees per hour
ARGUMENT_RATES_DEG_PER_HOUR: tuple[float, ...] = (
    15.0,
    0.5490165,
    0.0410686,
    0.0046418,
    -0.0022064,
    0.0000020,
)

_CATALOG: tuple[Constituent, ...] = (
    # Semidiurnal
    Constituent(symbol="M2", name="Principal lunar semidiurnal", speed=28.9841042, family=SEMI, doodson=(2, -2, 2, 0, 0, 0)),
    Constituent(symbol="S2", name="Principal solar semidiurnal", speed=30.0, family=SEMI, doodson=(2, 0, 0, 0, 0, 0)),
    Constituent(symbol="N2", name="Larger lunar elliptic semidiurnal", speed=28.4397295, family=SEMI, doodson=(2, -3, 2, 1, 0, 0)),
    Constituent(symbol="K2", name="Lunisolar semidiurnal", speed=30.0821373, family=SEMI, doodson=(2, 0, 2, 0, 0, 0)),
    Constituent(symbol="NU2", name="Larger lunar evectional", speed=28.5125831, family=SEMI, doodson=(2, -3, 4, -1, 0, 0)),
    Constituent(symbol="MU2", name="Variational", speed=27.9682084, family=SEMI, doodson=(2, -4, 4, 0, 0, 0)),
    Constituent(symbol="2N2", name="Lunar elliptical semidiurnal second-order", speed=27.8953548, family=SEMI, doodson=(2, -4, 2, 2, 0, 0)),
    Constituent(symbol="L2", name="Smaller lunar elliptic semidiurnal", speed=29.5284789, family=SEMI, doodson=(2, -1, 2, -1, 0, 0)),
    Constituent(symbol="T2", name="Larger solar elliptic", speed=29.9589333, family=SEMI, doodson=(2, 0, -1, 0, 0, 1)),
    Constituent(symbol="R2", name="Smaller solar elliptic", speed=30.0410667, family=SEMI, doodson=(2, 0, 1, 0, 0, -1)),
    Constituent(symbol="LAM2", name="Smaller lunar evectional", speed=29.4556253, family=SEMI, doodson=(2, -1, 0, 1, 0, 0)),
    Constituent(symbol="2SM2", name="Shallow water semidiurnal", speed=31.0158958, family=SEMI, doodson=(2, 2, -2, 0, 0, 0)),
    # Diurnal
    Constituent(symbol="K1", name="Lunisolar diurnal", speed=15.0410686, family=DIURNAL, doodson=(1, 0, 1, 0, 0, 0)),
    Constituent(symbol="O1", name="Principal lunar diurnal", speed=13.9430356, family=DIURNAL, doodson=(1, -2, 1, 0, 0, 0)),
    Constituent(symbol="P1", name="Principal solar diurnal", speed=14.9589314, family=DIURNAL, doodson=(1, 0, -1, 0, 0, 0)),
    Constituent(symbol="Q1", name="Larger lunar elliptic diurnal", speed=13.3986609, family=DIURNAL, doodson=(1, -3, 1, 1, 0, 0)),
    Constituent(symbol="J1", name="Smaller lunar elliptic diurnal", speed=15.5854433, family=DIURNAL, doodson=(1, 1, 1, -1, 0, 0)),
    Constituent(symbol="M1", name="Smaller lunar diurnal", speed=14.4966939, family=DIURNAL, doodson=(1, -1, 1, 1, 0, 0)),
    Constituent(symbol="OO1", name="Lunar diurnal second-order", speed=16.1391017, family=DIURNAL, doodson=(1, 2, 1, 0, 0, 0)),
    Constituent(symbol="S1", name="Solar diurnal (radiational)", speed=15.0, family=DIURNAL, doodson=(1, 0, 0, 0, 0, 0)),
    Constituent(symbol="RHO1", name="Larger lunar evectional diurnal", speed=13.4715145, family=DIURNAL, doodson=(1, -3, 3, -1, 0, 0)),
    Constituent(symbol="2Q1", name="Larger elliptic diurnal", speed=12.8542862, family=DIURNAL, doodson=(1, -4, 1, 2, 0, 0)),
    # Long period
    Constituent(symbol="Mf", name="Lunisolar fortnightly", speed=1.0980331, family=LONG, doodson=(0, 2, 0, 0, 0, 0)),
    Constituent(symbol="Mm", name="Lunar monthly", speed=0.5443747, family=LONG, doodson=(0, 1, 0, -1, 0, 0)),
    Constituent(symbol="Ssa", name="Solar semiannual", speed=0.0821373, family=LONG, doodson=(0, 0, 2, 0, 0, 0)),
    Constituent(symbol="Sa", name="Solar annual", speed=0.0410686, family=LONG, doodson=(0, 0, 1, 0, 0, 0)),
    Constituent(symbol="MSf", name="Lunisolar synodic fortnightly", speed=1.0158958, family=LONG, doodson=(0, 2, -2, 0, 0, 0)),
    # Shallow water (terdiurnal terms are grouped here as well)
    Constituent(symbol="M4", name="Shallow water overtide of principal lunar", speed=57.9682084, family=SHALLOW, doodson=(4, -4, 4, 0, 0, 0)),
    Constituent(symbol="MS4", name="Shallow water quarter diurnal", speed=58.9841042, family=SHALLOW, doodson=(4, -2, 2, 0, 0, 0)),
    Constituent(symbol="MN4", name="Shallow water quarter diurnal", speed=57.4238337, family=SHALLOW, doodson=(4, -5, 4, 1, 0, 0)),
    Constituent(symbol="S4", name="Shallow water overtide of principal solar", speed=60.0, family=SHALLOW, doodson=(4, 0, 0, 0, 0, 0)),
    Constituent(symbol="M6", name="Shallow water overtide of principal lunar", speed=86.9523127, family=SHALLOW, doodson=(6, -6, 6, 0, 0, 0)),
    Constituent(symbol="S6", name="Shallow water overtide of principal solar", speed=90.0, family=SHALLOW, doodson=(6, 0, 0, 0, 0, 0)),
    Constituent(symbol="MK3", name="Shallow water terdiurnal", speed=44.0251729, family=SHALLOW, doodson=(3, -2, 3, 0, 0, 0)),
    Constituent(symbol="2MK3", name="Shallow water terdiurnal", speed=42.9271398, family=SHALLOW, doodson=(3, -4, 3, 0, 0, 0)),
    Constituent(symbol="M3", name="Lunar terdiurnal", speed=43.4761563, family=SHALLOW, doodson=(3, -3, 3, 0, 0, 0)),
    Constituent(symbol="M8", name="Shallow water eighth diurnal", speed=115.9364166, family=SHALLOW, doodson=(8, -8, 8, 0, 0, 0)),
)

CONSTITUENTS: Mapping[str, Constituent] = MappingProxyType({c.symbol: c for c in _CATALOG})


def get_constituent(symbol: str) -> Constituent | None:
    """Look up a catalog entry; returns None for unknown symbols."""
    return CONSTITUENTS.get(symbol)


def constituents_by_family(family: ConstituentFamily | str) -> tuple[Constituent, ...]:
    """All catalog constituents in ``family``, in catalog order."""
    fam = ConstituentFamily(family)
    return tuple(c for c in _CATALOG if c.family is fam)


def symbols_in_families(families: Iterable[ConstituentFamily | str]) -> frozenset[str]:
    """Symbols belonging to any of ``families``.

    Handy for "what-if" synthesis with whole families switched off.
    """
    wanted = {ConstituentFamily(f) for f in families}
    return frozenset(c.symbol for c in _CATALOG if c.family in wanted)
