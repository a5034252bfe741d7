"""Tidal range around an instant.

The range is read from the high/low pair that brackets the instant in a
sampled prediction. Quiet or degenerate stations fall back to the sample
minimum and maximum, flagged as degraded.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from tidal_harmonics.compute.extremes import find_extremes
from tidal_harmonics.compute.harmonics import predict_tide_series, recommended_step_minutes
from tidal_harmonics.compute.julian import as_utc
from tidal_harmonics.domain.harmonics import TideStation
from tidal_harmonics.domain.tide import TidalRange, TideExtreme, TidePoint

logger = logging.getLogger(__name__)

BASE_WINDOW_HOURS = 25.0
MAX_WINDOW_MULTIPLIER = 4


def _bracketing_pair(extremes: Sequence[TideExtreme], when: datetime) -> tuple[TideExtreme, TideExtreme]:
    """Adjacent extremes around ``when``, or the pair nearest to it."""
    for first, second in zip(extremes[:-1], extremes[1:], strict=True):
        if first.time <= when <= second.time:
            return first, second
    if when < extremes[0].time:
        return extremes[0], extremes[1]
    return extremes[-2], extremes[-1]


def _sample_window(station: TideStation, when: datetime, half_width_hours: float, step: float) -> list[TidePoint]:
    half_width = timedelta(hours=half_width_hours)
    return predict_tide_series(station, when - half_width, when + half_width, step)


def get_tidal_range(station: TideStation, when: datetime) -> TidalRange:
    """Heights of the low and high water bracketing ``when``.

    Samples ``when`` +/- 25 h at the station's recommended step. When fewer
    than two extremes are found the window is doubled, up to four times the
    base width; after that the sample extremes are reported with
    ``degraded=True``.

    Returns:
        TidalRange with ``max_height >= min_height``
    """
    utc = as_utc(when)
    step = recommended_step_minutes(station)

    multiplier = 1
    points: list[TidePoint] = []
    while multiplier <= MAX_WINDOW_MULTIPLIER:
        points = _sample_window(station, utc, BASE_WINDOW_HOURS * multiplier, step)
        extremes = find_extremes(points)
        if len(extremes) >= 2:
            first, second = _bracketing_pair(extremes, utc)
            heights = (first.height, second.height)
            return TidalRange(min_height=min(heights), max_height=max(heights))
        multiplier *= 2

    logger.warning(
        "No high/low pair within +/-%.0f h of %s at station %s; using sample extremes",
        BASE_WINDOW_HOURS * MAX_WINDOW_MULTIPLIER,
        utc.isoformat(),
        station.id,
    )
    heights = [p.height for p in points] or [0.0]
    return TidalRange(min_height=min(heights), max_height=max(heights), degraded=True)
