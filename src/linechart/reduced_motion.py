"""Reduced motion preference for chart transitions.

When enabled, data swaps jump straight to the new snapshot instead of
animating. Bootstrapped from ``LINECHART_PREFER_REDUCED_MOTION`` ("1",
"true", "yes" or "on", case-insensitive); any other value leaves it off.

Module level state with a plain setter/getter; operations are idempotent.
"""

from __future__ import annotations

import contextlib
import os
from typing import Iterator

__all__ = [
    "set_reduced_motion",
    "is_reduced_motion",
    "adjust_duration",
    "temporarily_reduced_motion",
]

_reduced_motion_enabled: bool = (
    os.getenv("LINECHART_PREFER_REDUCED_MOTION", "").strip().lower()
    in {"1", "true", "yes", "on"}
)


def set_reduced_motion(enabled: bool) -> None:
    global _reduced_motion_enabled
    _reduced_motion_enabled = bool(enabled)


def is_reduced_motion() -> bool:
    return _reduced_motion_enabled


def adjust_duration(ms: int) -> int:
    """Return 0 when reduced motion is on, otherwise ``ms`` clamped to >= 0."""
    if _reduced_motion_enabled:
        return 0
    return max(0, ms)


@contextlib.contextmanager
def temporarily_reduced_motion(force: bool = True) -> Iterator[None]:
    """Override the preference within the context, restoring it afterwards."""
    prev = _reduced_motion_enabled
    try:
        set_reduced_motion(force)
        yield
    finally:
        set_reduced_motion(prev)
