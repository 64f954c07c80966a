"""
Pytest configuration and shared fixtures.

Provides:
- A session QCoreApplication for Store signal tests
- A seeded numpy generator
- Fresh CalculatorState / Store instances
"""
import numpy as np
import pytest

from PySide6.QtCore import QCoreApplication

from strategycalc.app.state import Store
from strategycalc.model.state import CalculatorState


@pytest.fixture(scope="session")
def qapp():
    """Create QCoreApplication for Qt signal tests."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def state():
    """Empty state: 3 days, no slots, sync off."""
    return CalculatorState()


@pytest.fixture
def store(qapp, rng):
    """Store in its start-up configuration, drawing from a seeded generator."""
    return Store(rng=rng)


class SignalRecorder:
    """Collects every emission of a Qt signal."""
    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder():
    return SignalRecorder
