"""Touch interaction controller for line charts.

Keeps the selection made by built-in touch handling (touched spots,
indicators, tooltip groups) consistent across data updates.

States:
    Idle       nothing selected
    Selecting  one touch-driven selection with tooltips and indicators

When the chart data asks for built-in touch handling, the caller's touch
callback is stored aside and replaced by ``handle_touch``. The caller is
still notified: its callback runs first, then the controller updates its
own state.

Each update builds a new ``SelectionState`` and swaps it in under a lock,
so readers never observe a partially rebuilt selection.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Callable, Optional

from .selection import (
    IDLE,
    SelectionState,
    indicators_from_touched_spots,
    reconcile_touched_spots,
    sort_touched_spots,
)
from .types import (
    LineChartData,
    LineTouchResponse,
    ShowingTooltipIndicators,
    TouchCallback,
    TouchEvent,
)

__all__ = ["TouchInteractionController"]

log = logging.getLogger(__name__)


class TouchInteractionController:
    def __init__(self, on_change: Optional[Callable[[], None]] = None) -> None:
        self._lock = RLock()
        self._state: SelectionState = IDLE
        self._provided_touch_callback: Optional[TouchCallback] = None
        self._on_change = on_change

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def is_selecting(self) -> bool:
        return bool(self._state.tooltips)

    # ------------------------------------------------------------------
    # Build pass
    # ------------------------------------------------------------------
    def logical_data(self, data: LineChartData) -> LineChartData:
        """Return ``data`` with the built-in touch handler substituted in."""
        if not data.touch_enabled_with_built_ins:
            return data
        with self._lock:
            self._provided_touch_callback = data.touch_data.touch_callback
        return data.copy_with(
            touch_data=data.touch_data.copy_with(touch_callback=self.handle_touch)
        )

    def on_build(self, logical: LineChartData, should_force_clear: bool = False) -> None:
        with self._lock:
            if should_force_clear:
                if not self._state.is_idle:
                    log.debug("force clear requested, dropping selection")
                self._state = IDLE
                return
            self._state = self._reselect(logical)

    def _reselect(self, data: LineChartData) -> SelectionState:
        current = self._state
        if not current.touched_spots:
            return IDLE
        result = reconcile_touched_spots(data, current.touched_spots)
        tooltips = current.tooltips
        if result.should_clear_tooltips:
            log.debug(
                "%d touched spot(s) no longer match chart data, clearing tooltips",
                len(current.touched_spots),
            )
            tooltips = ()
        if not tooltips:
            return IDLE
        return SelectionState(
            touched_spots=current.touched_spots,
            indicators=result.indicators,
            tooltips=tooltips,
        )

    def with_touched_indicators(self, data: LineChartData) -> LineChartData:
        """Overlay the current selection onto ``data`` for rendering."""
        if not data.touch_enabled_with_built_ins:
            return data
        state = self._state
        return data.copy_with(
            showing_tooltip_indicators=state.tooltips,
            line_bars_data=tuple(
                bar.copy_with(showing_indicators=tuple(state.indicators.get(i, ())))
                for i, bar in enumerate(data.line_bars_data)
            ),
        )

    # ------------------------------------------------------------------
    # Touch handling
    # ------------------------------------------------------------------
    def handle_touch(self, event: TouchEvent, response: Optional[LineTouchResponse]) -> None:
        callback = self._provided_touch_callback
        if callback is not None:
            callback(event, response)

        touched = response.touched_spots if response is not None else None
        if not event.is_interested_for_interactions or not touched:
            self._commit(IDLE)
            return

        sorted_spots = sort_touched_spots(touched)
        self._commit(
            SelectionState(
                touched_spots=sorted_spots,
                indicators=indicators_from_touched_spots(sorted_spots),
                tooltips=(ShowingTooltipIndicators(sorted_spots),),
            )
        )

    def clear_touches(self) -> None:
        self._commit(IDLE)

    def _commit(self, state: SelectionState) -> None:
        with self._lock:
            if state is IDLE and self._state is not IDLE:
                log.debug("selection cleared")
            self._state = state
        if self._on_change is not None:
            self._on_change()
