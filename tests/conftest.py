"""Shared fixtures: a fake clock, a square layout and an offscreen QApplication."""
import os

import pytest

# must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

from checkview.model.geometry_primitives import Rect


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now = start_ms

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


#============================================
@pytest.fixture
def clock():
    return FakeClock(start_ms=1000.0)


#============================================
@pytest.fixture
def square_rect():
    return Rect(0.0, 0.0, 100.0, 100.0)


#============================================
@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
