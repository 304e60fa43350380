"""pytest configuration and fixtures for pyqt-dataform tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_form_settings():
    """Every test starts from library default settings."""
    from pyqt_dataform.protocols import set_form_settings

    set_form_settings(None)
    yield
    set_form_settings(None)


@pytest.fixture
def status_views():
    """Two named presets over a 'status' property."""
    from pyqt_dataform import View, ViewCollection

    return ViewCollection([
        View(name="A", properties={"status": "open"}),
        View(name="B", properties={"status": "closed", "age": {"min": 18, "max": 65}}, page=2),
    ])
