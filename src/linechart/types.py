"""Line chart snapshot types.

A ``LineChartData`` instance describes the full content of a chart at one
instant: its series, touch configuration and the tooltip groups currently
shown. Every type here is frozen; changes go through ``copy_with`` which
returns a new instance and never touches the original.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

__all__ = [
    "FlSpot",
    "LineBarData",
    "TouchedSpot",
    "ShowingTooltipIndicators",
    "TouchEventKind",
    "TouchEvent",
    "LineTouchResponse",
    "TouchCallback",
    "LineTouchData",
    "LineChartData",
]


@dataclass(frozen=True)
class FlSpot:
    """A single (x, y) data point."""

    x: float
    y: float

    @classmethod
    def null(cls) -> "FlSpot":
        """Return the null spot, used to break a line into segments."""
        return cls(math.nan, math.nan)

    def is_null(self) -> bool:
        return math.isnan(self.x) and math.isnan(self.y)


@dataclass(frozen=True)
class LineBarData:
    """One series ("bar") of the chart.

    Attributes:
        spots: Ordered points of the line.
        showing_indicators: Indexes into ``spots`` currently highlighted.
        color: Line color (any matplotlib color spec).
        bar_width: Stroke width, interpolated during animation.
        show: Whether the series is drawn at all.
    """

    spots: Tuple[FlSpot, ...] = ()
    showing_indicators: Tuple[int, ...] = ()
    color: str = "#1f77b4"
    bar_width: float = 2.0
    show: bool = True

    def __post_init__(self) -> None:
        # Accept lists from callers, store tuples
        object.__setattr__(self, "spots", tuple(self.spots))
        object.__setattr__(self, "showing_indicators", tuple(self.showing_indicators))

    def copy_with(self, **changes) -> "LineBarData":
        return replace(self, **changes)

    def index_of(self, x: float, y: float) -> int:
        """Return the index of the first spot at exactly (x, y), or -1."""
        for i, spot in enumerate(self.spots):
            if spot.x == x and spot.y == y:
                return i
        return -1


@dataclass(frozen=True)
class TouchedSpot:
    """A spot picked by a touch event, tagged with its series and index."""

    bar_index: int
    spot_index: int
    x: float
    y: float

    @property
    def spot(self) -> FlSpot:
        return FlSpot(self.x, self.y)


@dataclass(frozen=True)
class ShowingTooltipIndicators:
    """One tooltip group: touched spots rendered together as one tooltip."""

    touched_spots: Tuple[TouchedSpot, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "touched_spots", tuple(self.touched_spots))


class TouchEventKind(str, Enum):
    POINTER_ENTER = "pointer_enter"
    POINTER_HOVER = "pointer_hover"
    POINTER_EXIT = "pointer_exit"
    TAP_DOWN = "tap_down"
    TAP_UP = "tap_up"
    TAP_CANCEL = "tap_cancel"
    PAN_DOWN = "pan_down"
    PAN_START = "pan_start"
    PAN_UPDATE = "pan_update"
    PAN_END = "pan_end"
    PAN_CANCEL = "pan_cancel"
    LONG_PRESS_START = "long_press_start"
    LONG_PRESS_MOVE = "long_press_move"
    LONG_PRESS_END = "long_press_end"


# Release, exit and cancel events end an interaction
_NOT_INTERESTED = frozenset(
    {
        TouchEventKind.POINTER_EXIT,
        TouchEventKind.TAP_UP,
        TouchEventKind.TAP_CANCEL,
        TouchEventKind.PAN_END,
        TouchEventKind.PAN_CANCEL,
        TouchEventKind.LONG_PRESS_END,
    }
)


@dataclass(frozen=True)
class TouchEvent:
    """A pointer event as delivered by the input collaborator."""

    kind: TouchEventKind
    local_x: Optional[float] = None
    local_y: Optional[float] = None

    @property
    def is_interested_for_interactions(self) -> bool:
        return self.kind not in _NOT_INTERESTED


@dataclass(frozen=True)
class LineTouchResponse:
    """Hit-test result for one touch event; ``touched_spots`` may be None."""

    touched_spots: Optional[Tuple[TouchedSpot, ...]] = None

    def __post_init__(self) -> None:
        if self.touched_spots is not None:
            object.__setattr__(self, "touched_spots", tuple(self.touched_spots))


TouchCallback = Callable[[TouchEvent, Optional[LineTouchResponse]], None]


@dataclass(frozen=True)
class LineTouchData:
    enabled: bool = True
    handle_built_in_touches: bool = True
    touch_callback: Optional[TouchCallback] = None

    def copy_with(self, **changes) -> "LineTouchData":
        return replace(self, **changes)


@dataclass(frozen=True)
class LineChartData:
    """Immutable snapshot of a whole line chart.

    Bounds left as ``None`` are derived by the renderer from the spots.
    """

    line_bars_data: Tuple[LineBarData, ...] = ()
    touch_data: LineTouchData = LineTouchData()
    showing_tooltip_indicators: Tuple[ShowingTooltipIndicators, ...] = ()
    min_x: Optional[float] = None
    max_x: Optional[float] = None
    min_y: Optional[float] = None
    max_y: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_bars_data", tuple(self.line_bars_data))
        object.__setattr__(
            self, "showing_tooltip_indicators", tuple(self.showing_tooltip_indicators)
        )

    def copy_with(self, **changes) -> "LineChartData":
        return replace(self, **changes)

    @property
    def touch_enabled_with_built_ins(self) -> bool:
        return self.touch_data.enabled and self.touch_data.handle_built_in_touches
