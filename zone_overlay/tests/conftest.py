import os

import pytest


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required"):
        if not os.getenv("PYQT_TESTS"):
            pytest.skip("PYQT_TESTS not set; skipping PyQt-dependent test")


@pytest.fixture(autouse=True)
def _isolated_user_dirs(monkeypatch, tmp_path):
    monkeypatch.setenv("MODERN_ZONES_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("MODERN_ZONES_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("MODERN_ZONES_DEBUG", raising=False)
    monkeypatch.delenv("MODERN_ZONES_PROPAGATE_LOGS", raising=False)
