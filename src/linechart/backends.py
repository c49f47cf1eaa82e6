"""Matplotlib renderer for line chart frames.

Draws the blended snapshot of a ``RenderFrame`` onto a matplotlib
``Figure``: one line per visible series, markers on indicator spots and
one annotation per tooltip group. Snapshots are only read.

Null spots become NaN gaps so matplotlib breaks the line there.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from matplotlib.figure import Figure

from .chart import RenderFrame
from .settings import DEFAULT_EXPORT_DPI, DEFAULT_FIGSIZE
from .types import LineChartData

__all__ = ["MatplotlibLineChartRenderer"]


class MatplotlibLineChartRenderer:
    def __init__(self, figure: Optional[Figure] = None, *, title: str | None = None) -> None:
        self.figure = figure or Figure(figsize=DEFAULT_FIGSIZE, tight_layout=True)
        self.ax = self.figure.axes[0] if self.figure.axes else self.figure.add_subplot(111)
        self._title = title
        self.frames_rendered = 0

    def render(self, frame: RenderFrame) -> None:
        data = frame.data
        ax = self.ax
        ax.clear()
        for bar in data.line_bars_data:
            if not bar.show or not bar.spots:
                continue
            xs = np.array([s.x for s in bar.spots], dtype=float)
            ys = np.array([s.y for s in bar.spots], dtype=float)
            ax.plot(xs, ys, color=bar.color, linewidth=bar.bar_width)
            marked = [i for i in bar.showing_indicators if 0 <= i < len(bar.spots)]
            if marked:
                ax.scatter(xs[marked], ys[marked], color=bar.color, zorder=3)
        self._annotate_tooltips(data)
        self._apply_bounds(data)
        if self._title:
            ax.set_title(self._title)
        canvas = self.figure.canvas
        if canvas is not None:
            canvas.draw_idle()
        self.frames_rendered += 1

    def _annotate_tooltips(self, data: LineChartData) -> None:
        for group in data.showing_tooltip_indicators:
            if not group.touched_spots:
                continue
            lines = [
                f"#{s.bar_index + 1}: {s.y:g}"
                for s in group.touched_spots
            ]
            anchor = group.touched_spots[0]
            self.ax.annotate(
                "\n".join(lines),
                xy=(anchor.x, anchor.y),
                xytext=(10, 10),
                textcoords="offset points",
                bbox={"boxstyle": "round", "fc": "w", "alpha": 0.8},
            )

    def _apply_bounds(self, data: LineChartData) -> None:
        if data.min_x is not None or data.max_x is not None:
            self.ax.set_xlim(left=data.min_x, right=data.max_x)
        if data.min_y is not None or data.max_y is not None:
            self.ax.set_ylim(bottom=data.min_y, top=data.max_y)

    def export(self, path: str, *, format: str = "png", dpi: int = DEFAULT_EXPORT_DPI) -> None:
        fmt = format.lower()
        if fmt not in {"png", "svg"}:
            raise ValueError("format must be 'png' or 'svg'")
        self.figure.savefig(path, format=fmt, dpi=dpi if fmt == "png" else None)
