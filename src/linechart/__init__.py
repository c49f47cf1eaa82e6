"""Animated line chart core.

Snapshot types, the interpolator between two snapshots, touch selection
reconciliation and the ``LineChart`` component that drives them. The
matplotlib renderer lives in ``linechart.backends`` and the PyQt6 clock in
``linechart.qt_animator``; neither is imported here so the core stays
headless.
"""

from .animation import LineChartDataTween  # noqa: F401
from .chart import (  # noqa: F401
    ChartConfigError,
    LineChart,
    LineChartConfig,
    LineChartRenderer,
    RenderFrame,
)
from .controller import TouchInteractionController  # noqa: F401
from .lerp import lerp_chart_data  # noqa: F401
from .selection import ReconcileResult, SelectionState, reconcile_touched_spots  # noqa: F401
from .types import (  # noqa: F401
    FlSpot,
    LineBarData,
    LineChartData,
    LineTouchData,
    LineTouchResponse,
    ShowingTooltipIndicators,
    TouchedSpot,
    TouchEvent,
    TouchEventKind,
)
