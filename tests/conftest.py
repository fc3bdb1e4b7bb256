"""
Pytest configuration and shared fixtures.

Headless Qt on Linux: QT_QPA_PLATFORM=offscreen so QApplication can be created in CI
without a display. Every test gets its own data dir (FLOWCRAFT_DATA_DIR) and a fresh
config cache, so nothing touches the real per-user state file.
"""
import os
import sys

# Must set before any PySide6/Qt import
if sys.platform.startswith("linux"):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import logging

import pytest

from flowcraft.config import reset_config
from flowcraft.core import logger as logger_module
from flowcraft.core.config import ENV_CONFIG, ENV_DATA_DIR, state_file_path
from flowcraft.core.recent import RecencyStore
from flowcraft.core.state import StateFile


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Per-test data dir; config cache cleared before and after."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv(ENV_DATA_DIR, str(data_dir))
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    reset_config()
    yield data_dir
    reset_config()


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests call setup_logging(); drop its handlers so later tests start clean."""
    yield
    root = logging.getLogger(logger_module.ROOT_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    logger_module._setup_done = False


@pytest.fixture
def state_file(isolated_data_dir):
    return StateFile(state_file_path(isolated_data_dir))


@pytest.fixture
def store(state_file):
    return RecencyStore.load_or_default(state_file)


class FakePicker:
    """Scripted FilePicker: returns queued answers, records the filters it was shown."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def _next(self, kind, filters):
        self.calls.append((kind, tuple(filters)))
        return self.answers.pop(0) if self.answers else None

    def pick_open(self, filters):
        return self._next("open", filters)

    def pick_save(self, filters):
        return self._next("save", filters)


@pytest.fixture
def fake_picker_cls():
    return FakePicker
