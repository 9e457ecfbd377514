import pytest
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Signals are delivered through a core application; no display is needed"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
