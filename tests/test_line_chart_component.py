"""Tests for the LineChart component wiring (data swaps, ticks, touches)."""

from __future__ import annotations

import pytest

from linechart import reduced_motion
from linechart.chart import ChartConfigError, LineChart, LineChartConfig
from linechart.types import (
    FlSpot,
    LineBarData,
    LineChartData,
    LineTouchData,
    LineTouchResponse,
    TouchedSpot,
    TouchEvent,
    TouchEventKind,
)

HOVER = TouchEvent(TouchEventKind.POINTER_HOVER)


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def render(self, frame):
        self.frames.append(frame)


def _chart(*bars, touch_data=None):
    return LineChartData(
        line_bars_data=[LineBarData(spots=[FlSpot(x, y) for x, y in pts]) for pts in bars],
        touch_data=touch_data or LineTouchData(),
    )


def test_config_validation():
    with pytest.raises(ChartConfigError):
        LineChartConfig(duration_ms=-1)
    with pytest.raises(ChartConfigError):
        LineChartConfig(curve="bouncy")
    with pytest.raises(ValueError):
        LineChartConfig(curve="cubic-bezier(1, 2)")
    assert LineChartConfig().duration_ms == 150


def test_set_data_animates_between_snapshots():
    renderer = RecordingRenderer()
    chart = LineChart(_chart([(0, 0), (1, 0)]), renderer=renderer)
    frame = chart.set_data(_chart([(0, 10), (1, 20)]))
    assert chart.is_animating
    assert frame.data.line_bars_data[0].spots[1].y == 0
    assert frame.target_data.line_bars_data[0].spots[1].y == 20

    frame = chart.tick(0.5)
    assert frame.data.line_bars_data[0].spots[1].y == 10
    frame = chart.tick(1.0)
    assert frame.data.line_bars_data[0].spots == frame.target_data.line_bars_data[0].spots
    assert not chart.is_animating
    assert len(renderer.frames) == 3


def test_reduced_motion_jumps_to_target():
    chart = LineChart(_chart([(0, 0)]))
    with reduced_motion.temporarily_reduced_motion(True):
        assert chart.duration_ms == 0
        frame = chart.set_data(_chart([(0, 9)]))
    assert frame.data.line_bars_data[0].spots[0].y == 9


def test_touch_flows_into_both_frames_and_caller_is_notified():
    seen = []
    data = _chart([(1, 5), (2, 6)], [(1, 9), (2, 1)], touch_data=LineTouchData(
        touch_callback=lambda e, r: seen.append(e)
    ))
    chart = LineChart(data)
    response = LineTouchResponse(
        touched_spots=[TouchedSpot(0, 0, 1, 5), TouchedSpot(1, 0, 1, 9)]
    )
    frame = chart.dispatch_touch(HOVER, response)
    assert seen == [HOVER]
    for snapshot in (frame.data, frame.target_data):
        assert [s.bar_index for s in snapshot.showing_tooltip_indicators[0].touched_spots] == [1, 0]
        assert [b.showing_indicators for b in snapshot.line_bars_data] == [(0,), (0,)]


def test_touch_ignored_when_disabled():
    seen = []
    data = _chart([(1, 5)], touch_data=LineTouchData(
        enabled=False, touch_callback=lambda e, r: seen.append(e)
    ))
    chart = LineChart(data)
    frame = chart.dispatch_touch(
        HOVER, LineTouchResponse(touched_spots=[TouchedSpot(0, 0, 1, 5)])
    )
    assert seen == []
    assert frame.data.showing_tooltip_indicators == ()


def test_custom_handling_only_notifies_caller():
    seen = []
    data = _chart([(1, 5)], touch_data=LineTouchData(
        handle_built_in_touches=False, touch_callback=lambda e, r: seen.append(r)
    ))
    chart = LineChart(data)
    chart.dispatch_touch(HOVER, LineTouchResponse(touched_spots=[TouchedSpot(0, 0, 1, 5)]))
    assert len(seen) == 1
    assert chart.controller.state.is_idle


def test_selection_survives_update_then_clears_on_shift():
    other = [(1, 0), (2, 0), (3, 0)]
    chart = LineChart(_chart([(1, 1), (2, 10), (3, 3)], other))
    chart.dispatch_touch(HOVER, LineTouchResponse(touched_spots=[TouchedSpot(0, 1, 2, 10)]))

    frame = chart.set_data(_chart([(1, 1), (2, 10), (3, 3)], other))
    assert frame.target_data.line_bars_data[0].showing_indicators == (1,)
    assert len(frame.target_data.showing_tooltip_indicators) == 1

    frame = chart.set_data(_chart([(1, 1), (2, 11), (3, 3)], other))
    assert frame.target_data.line_bars_data[0].showing_indicators == ()
    assert frame.target_data.showing_tooltip_indicators == ()


def test_should_clear_touches_drops_selection_on_update():
    chart = LineChart(_chart([(1, 1)], [(2, 2)]))
    chart.dispatch_touch(HOVER, LineTouchResponse(touched_spots=[TouchedSpot(0, 0, 1, 1)]))
    frame = chart.set_data(_chart([(1, 1)], [(2, 2)]), should_clear_touches=True)
    assert frame.target_data.showing_tooltip_indicators == ()
    assert chart.controller.state.is_idle


def test_clear_touches():
    chart = LineChart(_chart([(1, 1)], [(2, 2)]))
    chart.dispatch_touch(HOVER, LineTouchResponse(touched_spots=[TouchedSpot(0, 0, 1, 1)]))
    frame = chart.clear_touches()
    assert frame.data.showing_tooltip_indicators == ()
    assert chart.controller.state.is_idle


def test_tick_without_renderer_keeps_last_frame():
    chart = LineChart(_chart([(0, 0)]))
    assert chart.frame is None
    frame = chart.tick(1.0)
    assert chart.frame is frame
