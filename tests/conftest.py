import pytest

from quicksaver.core.monitor.window_detector import ActiveWindowOracle
from quicksaver.shared.config import AppConfig
from quicksaver.shared.errors import CopyError


class FakeOracle(ActiveWindowOracle):
    def __init__(self, name="Starfield"):
        self.name = name
        self.calls = 0

    def get_foreground_process_name(self):
        self.calls += 1
        if isinstance(self.name, Exception):
            raise self.name
        return self.name


class FakeTrigger:
    def __init__(self):
        self.presses = []

    def press_and_release(self, key, hold_ms):
        self.presses.append((key, hold_ms))


class FakeCopier:
    """Records copy attempts; raises CopyError while fail is set."""

    def __init__(self):
        self.fail = False
        self.calls = []

    def __call__(self, source, dest):
        self.calls.append((source, dest))
        if self.fail:
            raise CopyError(source, dest, "PermissionError: file is locked")


@pytest.fixture
def trigger():
    return FakeTrigger()


@pytest.fixture
def copier():
    return FakeCopier()


@pytest.fixture
def oracle():
    return FakeOracle()


@pytest.fixture
def config(tmp_path):
    return AppConfig(save_directory=str(tmp_path))
