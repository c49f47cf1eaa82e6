"""Default animation settings for line charts."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_ANIMATION_MS: Final = int(os.environ.get("LINECHART_ANIMATION_MS", "150"))
DEFAULT_ANIMATION_CURVE: Final = os.environ.get("LINECHART_ANIMATION_CURVE", "linear")

# Matplotlib figure defaults for the bundled renderer
DEFAULT_FIGSIZE: Final = (4.0, 2.2)
DEFAULT_EXPORT_DPI: Final = 120
