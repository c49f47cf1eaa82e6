"""Explicit tween state for animated data swaps.

``LineChartDataTween`` holds ``{begin, end, progress}``. The host's clock
pushes linear progress through ``set_progress``; ``evaluate`` is a pure
read that may be called any number of times per tick.

Retargeting mid-animation rebinds ``begin`` to the value currently shown
and restarts from progress 0, which supersedes the running transition.
"""

from __future__ import annotations

from typing import Optional

from .lerp import lerp_chart_data
from .motion import Curve, linear
from .types import LineChartData

__all__ = ["LineChartDataTween"]


class LineChartDataTween:
    def __init__(self, end: LineChartData, curve: Curve = linear) -> None:
        self._begin = end
        self._end = end
        self._progress = 1.0
        self._curve = curve

    @property
    def begin(self) -> LineChartData:
        return self._begin

    @property
    def end(self) -> LineChartData:
        return self._end

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def is_complete(self) -> bool:
        return self._progress >= 1.0

    def set_progress(self, progress: float) -> None:
        self._progress = min(1.0, max(0.0, float(progress)))

    def retarget(self, end: LineChartData, *, curve: Optional[Curve] = None) -> None:
        self._begin = self.evaluate()
        self._end = end
        self._progress = 0.0
        if curve is not None:
            self._curve = curve

    def evaluate(self) -> LineChartData:
        if self._progress >= 1.0:
            return self._end
        return lerp_chart_data(self._begin, self._end, self._curve(self._progress))
