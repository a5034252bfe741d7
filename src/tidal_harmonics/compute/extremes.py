"""High and low water detection on a sampled tide curve.

The scan follows first differences and declares an extreme wherever the
trend reverses. A flat run at a reversal (exactly equal adjacent heights)
belongs to its first sample, the one nearest the previous reversal. Because
the trend flips sign at every declared extreme, consecutive extremes always
alternate high/low.

The finder trusts the caller's sampling step: a step coarser than the
fastest visible constituent can merge or miss extremes. See
``recommended_step_minutes`` in ``tidal_harmonics.compute.harmonics``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import timedelta

from tidal_harmonics.domain.tide import ExtremeType, TideExtreme, TidePoint


def _trend(prev: float, curr: float) -> int:
    diff = curr - prev
    if not math.isfinite(diff) or diff == 0.0:
        return 0
    return 1 if diff > 0.0 else -1


def _refine(points: Sequence[TidePoint], k: int, kind: ExtremeType) -> TideExtreme:
    """Move an extreme to the vertex of the parabola through k-1, k, k+1.

    Assumes equally spaced samples, as produced by ``predict_tide_series``.
    """
    prev_point, mid_point, next_point = points[k - 1], points[k], points[k + 1]
    step = next_point.time - mid_point.time
    y_prev, y_mid, y_next = prev_point.height, mid_point.height, next_point.height

    curvature = y_next + y_prev - 2.0 * y_mid
    if step <= timedelta(0) or curvature == 0.0:
        return TideExtreme(time=mid_point.time, height=y_mid, type=kind)

    # Vertex offset in units of the step, within (-1, 1) for a strict extreme
    offset = 0.5 * (y_prev - y_next) / curvature
    offset = max(-1.0, min(1.0, offset))
    height = y_mid - 0.25 * (y_prev - y_next) * offset
    return TideExtreme(time=mid_point.time + step * offset, height=height, type=kind)


def find_extremes(points: Sequence[TidePoint], *, refine: bool = False) -> list[TideExtreme]:
    """Locate high and low water in a time-ordered, fixed-step series.

    Args:
        points: Chronological TidePoint samples
        refine: Fit a parabola through each extreme and its neighbours to
            estimate time and height between samples

    Returns:
        Chronological extremes alternating HIGH/LOW. Empty when fewer than
        3 points are supplied or no reversal occurs.
    """
    n = len(points)
    if n < 3:
        return []

    extremes: list[TideExtreme] = []
    trend = 0
    # Index of the last sample reached by a non-flat step
    pivot = 0
    for k in range(1, n):
        step_trend = _trend(points[k - 1].height, points[k].height)
        if step_trend == 0:
            continue
        if trend != 0 and step_trend != trend:
            kind = ExtremeType.HIGH if trend > 0 else ExtremeType.LOW
            is_plateau = pivot != k - 1
            if refine and not is_plateau:
                extremes.append(_refine(points, pivot, kind))
            else:
                point = points[pivot]
                extremes.append(TideExtreme(time=point.time, height=point.height, type=kind))
        trend = step_trend
        pivot = k
    return extremes
