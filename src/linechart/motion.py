"""Easing curves for chart transitions.

Curves remap the linear clock progress ``t`` in [0, 1] before the snapshots
are blended. Supported forms:

 - a named curve (``"linear"``, ``"ease_in_out"``, ...)
 - a CSS-like ``"cubic-bezier(x1, y1, x2, y2)"`` string
 - any callable ``float -> float``

Cubic bezier evaluation solves x(s) = t with a few Newton steps and falls
back to bisection when the slope is too flat. Endpoints map exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Union

__all__ = [
    "Curve",
    "CubicBezierCurve",
    "NAMED_CURVES",
    "resolve_curve",
    "linear",
]

Curve = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_EPSILON = 1e-7
_CSS_BEZIER = re.compile(r"cubic-bezier\((.*)\)")


def linear(t: float) -> float:
    return t


@dataclass(frozen=True)
class CubicBezierCurve:
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise ValueError("cubic-bezier x control points must lie within [0, 1]")

    @classmethod
    def from_css(cls, text: str) -> "CubicBezierCurve":
        """Build a curve from a CSS timing function, e.g. ``cubic-bezier(.4, 0, .2, 1)``."""
        match = _CSS_BEZIER.fullmatch(text.strip().lower())
        if match is None:
            raise ValueError(f"Expected cubic-bezier(x1, y1, x2, y2), got {text!r}")
        args = [a.strip() for a in match.group(1).split(",")]
        if len(args) != 4:
            raise ValueError(f"cubic-bezier takes 4 control values, got {len(args)} in {text!r}")
        try:
            values = [float(a) for a in args]
        except ValueError as e:
            raise ValueError(f"Non-numeric cubic-bezier control value in {text!r}") from e
        return cls(*values)

    @staticmethod
    def _bezier(a: float, b: float, s: float) -> float:
        # B(s) for control values 0, a, b, 1
        inv = 1.0 - s
        return 3 * a * inv * inv * s + 3 * b * inv * s * s + s * s * s

    @staticmethod
    def _slope(a: float, b: float, s: float) -> float:
        inv = 1.0 - s
        return 3 * a * inv * inv + 6 * (b - a) * inv * s + 3 * (1.0 - b) * s * s

    def _solve_s(self, t: float) -> float:
        s = t
        for _ in range(_NEWTON_ITERATIONS):
            x = self._bezier(self.x1, self.x2, s) - t
            if abs(x) < _EPSILON:
                return s
            d = self._slope(self.x1, self.x2, s)
            if abs(d) < 1e-6:
                break
            s -= x / d
        lo, hi = 0.0, 1.0
        s = t
        while hi - lo > _EPSILON:
            x = self._bezier(self.x1, self.x2, s)
            if abs(x - t) < _EPSILON:
                return s
            if x < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2.0
        return s

    def transform(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return self._bezier(self.y1, self.y2, self._solve_s(t))

    __call__ = transform


NAMED_CURVES: Dict[str, Curve] = {
    "linear": linear,
    "ease": CubicBezierCurve(0.25, 0.1, 0.25, 1.0),
    "ease_in": CubicBezierCurve(0.42, 0.0, 1.0, 1.0),
    "ease_out": CubicBezierCurve(0.0, 0.0, 0.58, 1.0),
    "ease_in_out": CubicBezierCurve(0.42, 0.0, 0.58, 1.0),
    "fast_out_slow_in": CubicBezierCurve(0.4, 0.0, 0.2, 1.0),
    "decelerate": CubicBezierCurve(0.0, 0.0, 0.2, 1.0),
}


def resolve_curve(spec: Union[str, Curve]) -> Curve:
    if callable(spec):
        return spec
    key = spec.strip().lower().replace("-", "_")
    if key in NAMED_CURVES:
        return NAMED_CURVES[key]
    if key.startswith("cubic_bezier("):
        return CubicBezierCurve.from_css(spec)
    raise ValueError(f"Unknown easing curve: {spec}")
