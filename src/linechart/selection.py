"""Touch selection state and reconciliation against new chart data.

When the chart data changes while spots are selected, the previously
touched spots are looked up again in the new data by exact coordinate so
the indicators follow them. If a remembered spot cannot be found, the
tooltips built from it are no longer valid and must be cleared.

Matching uses exact float equality and a linear scan over every series;
rounded or re-binned data will not match and the selection is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from .types import LineChartData, ShowingTooltipIndicators, TouchedSpot

__all__ = [
    "ReconcileResult",
    "SelectionState",
    "reconcile_touched_spots",
    "indicators_from_touched_spots",
    "sort_touched_spots",
]


@dataclass(frozen=True)
class ReconcileResult:
    indicators: Dict[int, List[int]] = field(default_factory=dict)
    should_clear_tooltips: bool = False


@dataclass(frozen=True)
class SelectionState:
    """Reconciliation state, replaced wholesale on every update.

    Attributes:
        touched_spots: Spots of the last completed selection, sorted for display.
        indicators: Series index -> spot indexes flagged as indicators,
            stored as a read-only mapping of tuples.
        tooltips: Tooltip groups currently shown.
    """

    touched_spots: Tuple[TouchedSpot, ...] = ()
    indicators: Mapping[int, Tuple[int, ...]] = field(default_factory=dict)
    tooltips: Tuple[ShowingTooltipIndicators, ...] = ()

    def __post_init__(self) -> None:
        frozen = {k: tuple(v) for k, v in self.indicators.items()}
        object.__setattr__(self, "indicators", MappingProxyType(frozen))
        object.__setattr__(self, "touched_spots", tuple(self.touched_spots))
        object.__setattr__(self, "tooltips", tuple(self.tooltips))

    @property
    def is_idle(self) -> bool:
        return not self.touched_spots and not self.tooltips and not self.indicators


IDLE = SelectionState()


def reconcile_touched_spots(
    data: LineChartData, remembered: Sequence[TouchedSpot]
) -> ReconcileResult:
    """Re-derive indicators for ``remembered`` spots against ``data``.

    Aligned mode (one remembered spot per series): ``remembered[i]`` is looked
    up in series ``i`` only. Unaligned mode: each remembered spot is looked up
    in every series and the first series containing it wins; the spot index
    found there is stored under the remembered spot's position.

    A single remembered spot without a match sets ``should_clear_tooltips``.
    """
    if not remembered:
        return ReconcileResult()

    bars = data.line_bars_data
    indicators: Dict[int, List[int]] = {}
    should_clear = False

    if len(bars) == len(remembered):
        for i, bar in enumerate(bars):
            index = bar.index_of(remembered[i].x, remembered[i].y)
            if index > -1:
                indicators[i] = [index]
            else:
                should_clear = True
    else:
        for i, touched in enumerate(remembered):
            found = next(
                (
                    idx
                    for idx in (bar.index_of(touched.x, touched.y) for bar in bars)
                    if idx != -1
                ),
                None,
            )
            if found is not None:
                indicators[i] = [found]
            else:
                should_clear = True

    return ReconcileResult(indicators=indicators, should_clear_tooltips=should_clear)


def sort_touched_spots(spots: Sequence[TouchedSpot]) -> Tuple[TouchedSpot, ...]:
    """Order spots by y descending; ties keep their arrival order."""
    return tuple(sorted(spots, key=lambda s: s.y, reverse=True))


def indicators_from_touched_spots(spots: Sequence[TouchedSpot]) -> Dict[int, List[int]]:
    # Last write wins when two spots share a series
    indicators: Dict[int, List[int]] = {}
    for spot in spots:
        indicators[spot.bar_index] = [spot.spot_index]
    return indicators
