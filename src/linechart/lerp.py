"""Linear interpolation between two line chart snapshots.

Only the shape is tweened: spot coordinates, stroke widths and explicit
axis bounds. Flags, callbacks, colors, indicator lists and tooltip groups
switch to the end snapshot's value at every ``t``.

All functions are pure; ``begin`` and ``end`` are never modified.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .types import FlSpot, LineBarData, LineChartData

__all__ = [
    "lerp_double",
    "lerp_optional",
    "lerp_spot",
    "lerp_spots",
    "lerp_bar_data",
    "lerp_chart_data",
]


def lerp_double(a: float, b: float, t: float) -> float:
    if t == 0:
        return a
    if t == 1:
        return b
    return a + (b - a) * t


def lerp_optional(a: Optional[float], b: Optional[float], t: float) -> Optional[float]:
    if a is None or b is None:
        return b
    return lerp_double(a, b, t)


def lerp_spot(a: FlSpot, b: FlSpot, t: float) -> FlSpot:
    if a.is_null() or b.is_null():
        return b
    return FlSpot(lerp_double(a.x, b.x, t), lerp_double(a.y, b.y, t))


def lerp_spots(
    a: Sequence[FlSpot], b: Sequence[FlSpot], t: float
) -> Tuple[FlSpot, ...]:
    """Lerp spot lists by index over ``b``.

    Spots of ``b`` past the end of ``a`` appear at their end value; spots of
    ``a`` past the end of ``b`` are dropped.
    """
    return tuple(lerp_spot(a[i] if i < len(a) else sb, sb, t) for i, sb in enumerate(b))


def lerp_bar_data(a: LineBarData, b: LineBarData, t: float) -> LineBarData:
    return b.copy_with(
        spots=lerp_spots(a.spots, b.spots, t),
        bar_width=lerp_double(a.bar_width, b.bar_width, t),
    )


def lerp_chart_data(begin: LineChartData, end: LineChartData, t: float) -> LineChartData:
    """Blend ``begin`` into ``end`` at progress ``t``.

    Series are paired by position. A series of ``end`` with no partner in
    ``begin`` is lerped with itself, so it appears without a transition.
    """
    bars = []
    for i, end_bar in enumerate(end.line_bars_data):
        begin_bar = begin.line_bars_data[i] if i < len(begin.line_bars_data) else end_bar
        bars.append(lerp_bar_data(begin_bar, end_bar, t))
    return end.copy_with(
        line_bars_data=tuple(bars),
        min_x=lerp_optional(begin.min_x, end.min_x, t),
        max_x=lerp_optional(begin.max_x, end.max_x, t),
        min_y=lerp_optional(begin.min_y, end.min_y, t),
        max_y=lerp_optional(begin.max_y, end.max_y, t),
    )
