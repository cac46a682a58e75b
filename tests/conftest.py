import os

# Headless Qt for painting and widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from datetime import date
from PyQt6.QtCore import QSettings, QStandardPaths

from vietdoc.config import AppConfig
from vietdoc.models.document import DocumentRecord

# Keep config/data directories out of the real home folder
QStandardPaths.setTestModeEnabled(True)


@pytest.fixture
def record():
    """Sample record with a fixed issue date so renders are reproducible."""
    return DocumentRecord(issue_date=date(2024, 3, 5))


@pytest.fixture
def config():
    # Dedicated org/app name so tests never touch the real settings
    settings = QSettings("VietDoc", "TestConfig")
    settings.clear()

    app_config = AppConfig()
    app_config.settings = settings
    yield app_config
    settings.clear()
