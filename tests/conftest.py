# Headless defaults for the chart tests: offscreen Qt platform and the Agg
# matplotlib backend. Provides a fallback 'qapp' fixture if pytest-qt is not
# installed; when it is, its fixture wins.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except Exception:  # pragma: no cover

    @pytest.fixture
    def qapp():  # type: ignore
        QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
        return QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)


@pytest.fixture(autouse=True)
def _reset_reduced_motion():
    from linechart import reduced_motion

    prev = reduced_motion.is_reduced_motion()
    reduced_motion.set_reduced_motion(False)
    yield
    reduced_motion.set_reduced_motion(prev)
