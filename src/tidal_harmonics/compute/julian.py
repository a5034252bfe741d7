"""Time-scale helpers.

Instants enter the core as ``datetime`` values. Aware values are converted
to UTC; naive values are taken to already be UTC. UTC is used in place of
TT for the astronomical series (ΔT of about a minute is negligible at
this precision).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tidal_harmonics.errors import InvalidInputError

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
UNIX_EPOCH_JD = 2440587.5
J2000_JD = 2451545.0  # 2000-01-01T12:00
DAYS_PER_CENTURY = 36525.0

# Reference epoch for harmonic synthesis: elapsed hours are counted from here
HARMONIC_EPOCH = datetime(2000, 1, 1, tzinfo=timezone.utc)

_ONE_HOUR = timedelta(hours=1)
_ONE_DAY = timedelta(days=1)


def as_utc(when: datetime) -> datetime:
    """Return ``when`` as an aware UTC datetime."""
    if not isinstance(when, datetime):
        raise InvalidInputError(
            f"expected a datetime, got {type(when).__name__}", value=repr(when)
        )
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def hours_since(when: datetime, epoch: datetime = HARMONIC_EPOCH) -> float:
    """Elapsed hours from ``epoch`` to ``when`` (negative before the epoch)."""
    return (as_utc(when) - epoch) / _ONE_HOUR


def julian_day(when: datetime) -> float:
    return UNIX_EPOCH_JD + (as_utc(when) - UNIX_EPOCH) / _ONE_DAY


def julian_centuries(when: datetime) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (julian_day(when) - J2000_JD) / DAYS_PER_CENTURY


def from_julian_day(jd: float) -> datetime:
    """Inverse of :func:`julian_day`, rounded to the microsecond."""
    return UNIX_EPOCH + timedelta(days=jd - UNIX_EPOCH_JD)
