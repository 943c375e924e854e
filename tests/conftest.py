"""pytest configuration and fixtures for pyqt-fieldstate tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QCoreApplication
from PyQt6.QtTest import QTest

from pyqt_fieldstate.protocols import set_field_config


@pytest.fixture(scope="session")
def qapp():
    """Create Qt application instance for tests."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def wait_until(qapp):
    """Pump the event loop until predicate() is true or timeout_ms elapses."""
    def _wait(predicate, timeout_ms=2000, step_ms=10):
        waited = 0
        while not predicate():
            if waited >= timeout_ms:
                raise AssertionError(f"Condition not met within {timeout_ms}ms")
            QTest.qWait(step_ms)
            waited += step_ms
    return _wait


@pytest.fixture
def pump(qapp):
    """Process events for a fixed time."""
    def _pump(ms):
        QTest.qWait(ms)
    return _pump


@pytest.fixture(autouse=True)
def reset_field_config():
    yield
    set_field_config(None)


@pytest.fixture
def make_controller(qapp):
    """Build FieldControllers and close them after the test."""
    from pyqt_fieldstate import FieldController

    created = []

    def _make(*args, **kwargs):
        controller = FieldController(*args, **kwargs)
        created.append(controller)
        return controller

    yield _make
    for controller in created:
        controller.close()
