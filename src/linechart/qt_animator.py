"""PyQt6 clock for ``LineChart`` transitions.

``QtChartAnimator`` owns a ``QVariantAnimation`` running linearly from 0.0
to 1.0 over the chart's duration and pushes each value into
``LineChart.tick``. The chart applies its own easing curve, so the Qt
animation keeps a linear easing.

Tests can inspect the configured animation and call ``_on_value_changed``
directly without running an event loop.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QEasingCurve, QObject, QVariantAnimation

from .chart import LineChart
from .types import LineChartData

__all__ = ["QtChartAnimator"]

log = logging.getLogger(__name__)


class QtChartAnimator(QObject):
    def __init__(self, chart: LineChart, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._chart = chart
        self._animation = QVariantAnimation(self)
        self._animation.setStartValue(0.0)
        self._animation.setEndValue(1.0)
        self._animation.setEasingCurve(QEasingCurve.Type.Linear)
        self._animation.valueChanged.connect(self._on_value_changed)

    @property
    def chart(self) -> LineChart:
        return self._chart

    @property
    def animation(self) -> QVariantAnimation:
        return self._animation

    def start(self) -> None:
        self._animation.stop()
        duration = self._chart.duration_ms
        if duration == 0:
            self._chart.tick(1.0)
            return
        self._animation.setDuration(duration)
        self._animation.start()

    def stop(self) -> None:
        self._animation.stop()

    def set_data(self, data: LineChartData, *, should_clear_touches: Optional[bool] = None) -> None:
        self._chart.set_data(data, should_clear_touches=should_clear_touches)
        log.debug("restarting chart animation")
        self.start()

    def _on_value_changed(self, value) -> None:
        self._chart.tick(float(value))
