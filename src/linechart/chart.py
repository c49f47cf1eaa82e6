"""Animated, touch-aware line chart component.

``LineChart`` wires the pieces together for a host application:

 - ``set_data`` swaps in a new snapshot, reconciles the current touch
   selection against it and retargets the transition
 - ``tick`` advances the transition with the host clock's progress
 - ``dispatch_touch`` forwards a hit-tested pointer event to the chart's
   touch callback
 - every call ends with a ``RenderFrame`` handed to the renderer

The frame carries the blended snapshot (``data``) and the un-blended
target (``target_data``), both with the current selection overlaid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from .animation import LineChartDataTween
from .controller import TouchInteractionController
from .motion import Curve, resolve_curve
from .reduced_motion import adjust_duration
from .settings import DEFAULT_ANIMATION_CURVE, DEFAULT_ANIMATION_MS
from .types import LineChartData, LineTouchResponse, TouchEvent

__all__ = [
    "ChartConfigError",
    "LineChartConfig",
    "RenderFrame",
    "LineChartRenderer",
    "LineChart",
]

log = logging.getLogger(__name__)


class ChartConfigError(ValueError):
    """Raised when a chart is configured with an invalid duration or curve."""


@dataclass(frozen=True)
class LineChartConfig:
    """Construction-time options.

    Attributes:
        duration_ms: Length of the transition between two snapshots.
        curve: Easing curve name, ``cubic-bezier(...)`` string or callable.
        should_clear_touches: Drop the touch selection on the next data
            update instead of reconciling it.
    """

    duration_ms: int = DEFAULT_ANIMATION_MS
    curve: Union[str, Curve] = DEFAULT_ANIMATION_CURVE
    should_clear_touches: bool = False

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ChartConfigError(f"duration_ms must be >= 0, got {self.duration_ms}")
        try:
            resolve_curve(self.curve)
        except ValueError as e:
            raise ChartConfigError(str(e)) from e

    def easing(self) -> Curve:
        return resolve_curve(self.curve)

    @property
    def effective_duration_ms(self) -> int:
        return adjust_duration(self.duration_ms)


@dataclass(frozen=True)
class RenderFrame:
    data: LineChartData
    target_data: LineChartData


class LineChartRenderer(Protocol):  # pragma: no cover - structural only
    def render(self, frame: RenderFrame) -> None: ...


class LineChart:
    def __init__(
        self,
        data: LineChartData,
        *,
        config: Optional[LineChartConfig] = None,
        renderer: Optional[LineChartRenderer] = None,
    ) -> None:
        self._config = config or LineChartConfig()
        self._renderer = renderer
        self._data = data
        self._should_clear_touches = self._config.should_clear_touches
        self._controller = TouchInteractionController()
        self._tween = LineChartDataTween(
            self._controller.logical_data(data), self._config.easing()
        )
        self._frame: Optional[RenderFrame] = None

    @property
    def data(self) -> LineChartData:
        return self._data

    @property
    def config(self) -> LineChartConfig:
        return self._config

    @property
    def controller(self) -> TouchInteractionController:
        return self._controller

    @property
    def frame(self) -> Optional[RenderFrame]:
        return self._frame

    @property
    def duration_ms(self) -> int:
        return self._config.effective_duration_ms

    @property
    def is_animating(self) -> bool:
        return not self._tween.is_complete

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------
    def set_data(
        self, data: LineChartData, *, should_clear_touches: Optional[bool] = None
    ) -> RenderFrame:
        self._data = data
        if should_clear_touches is not None:
            self._should_clear_touches = should_clear_touches
        self._tween.retarget(self._controller.logical_data(data))
        log.debug("chart data replaced, transition over %d ms", self.duration_ms)
        if self.duration_ms == 0:
            self._tween.set_progress(1.0)
        return self.build()

    def tick(self, progress: float) -> RenderFrame:
        self._tween.set_progress(progress)
        return self._render()

    def dispatch_touch(
        self, event: TouchEvent, response: Optional[LineTouchResponse]
    ) -> RenderFrame:
        touch_data = self._tween.end.touch_data
        if touch_data.enabled and touch_data.touch_callback is not None:
            touch_data.touch_callback(event, response)
        return self._render()

    def clear_touches(self) -> RenderFrame:
        self._controller.clear_touches()
        return self._render()

    # ------------------------------------------------------------------
    # Build pass
    # ------------------------------------------------------------------
    def build(self) -> RenderFrame:
        """Reconcile the selection against the target data, then render."""
        self._controller.on_build(self._tween.end, self._should_clear_touches)
        return self._render()

    def _render(self) -> RenderFrame:
        ctrl = self._controller
        frame = RenderFrame(
            data=ctrl.with_touched_indicators(self._tween.evaluate()),
            target_data=ctrl.with_touched_indicators(self._tween.end),
        )
        self._frame = frame
        if self._renderer is not None:
            self._renderer.render(frame)
        return frame
