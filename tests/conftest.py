import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from carthage_tasks.config import ConfigLoader
from carthage_tasks.platform import ExecutableLocator, Version
from carthage_tasks.utils import CommandRunnerError

CARTHAGE_PATH = "/opt/homebrew/bin/carthage"


class RecordingLogger:
    """Logger stub that keeps every message."""

    def __init__(self):
        self.messages = []
        self.verbose = False

    def _record(self, level, msg):
        self.messages.append((level, msg))

    def debug(self, msg):
        self._record("debug", msg)

    def info(self, msg):
        self._record("info", msg)

    def warning(self, msg):
        self._record("warning", msg)

    def error(self, msg):
        self._record("error", msg)

    def success(self, msg):
        self._record("success", msg)

    def raw(self, msg):
        self._record("raw", msg)


class RecordingRunner:
    """Command runner stub that records calls instead of spawning processes."""

    def __init__(self, results=None, fail_with=None):
        self.calls = []
        self.results = results or {}
        self.fail_with = fail_with
        self.dry_run = False

    def run(self, directory, args, environment=None, output_appender=None):
        self.calls.append({
            "directory": directory,
            "args": list(args),
            "environment": dict(environment or {}),
            "output_appender": output_appender,
        })
        if self.fail_with is not None:
            raise self.fail_with

    def run_with_result(self, *args, directory=None):
        if args in self.results:
            return self.results[args]
        raise CommandRunnerError(args, 1, "not stubbed")


class FakeXcode:
    """Xcode stub with a fixed version."""

    def __init__(self, major, select_environment=None):
        self.version = Version(major)
        self.select_environment = select_environment or {}
        self.requested = []

    def get_xcode_select_environment_value(self, required):
        self.requested.append(required)
        return dict(self.select_environment)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def locator():
    return ExecutableLocator(search=lambda name: CARTHAGE_PATH, exists=lambda path: False)


@pytest.fixture
def project_dir(tmp_path):
    project = tmp_path / "App"
    project.mkdir()
    return project


@pytest.fixture
def make_settings(project_dir):
    def _make(**overrides):
        return ConfigLoader(project_dir).load(**overrides)
    return _make
