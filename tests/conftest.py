"""
Shared fakes for the driver tests.

FakeStarter hands out FakeInstances instead of spawning VLC; a test
simulates process exit by calling instance.exit().
"""

import time
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

from vlcdriver.errors import LaunchError, StatusFetchError
from vlcdriver.models import DriverSettings
from vlcdriver.ports import PortAllocator


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeInstance:

    def __init__(self, arguments):
        self.arguments = arguments
        self.callbacks = []

    def watch(self, callback):
        if self.callbacks:
            raise RuntimeError("already watched")
        self.callbacks.append(callback)

    def exit(self):
        callback = self.callbacks.pop()
        return callback(self)


class FakeStarter:

    def __init__(self, fail=False):
        self.fail = fail
        self.started: list[FakeInstance] = []

    def start(self, arguments, vlc_path):
        if self.fail:
            raise LaunchError(f"Binary not found: {vlc_path}")
        instance = FakeInstance(arguments)
        self.started.append(instance)
        return instance


class FakeStatusSource:

    def __init__(self, document="<root><position>0.25</position></root>", error=None):
        self.url = None
        self.document = document
        self.error = error
        self.calls = 0

    def get_document(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.document


@pytest.fixture
def allocator():
    return PortAllocator(start_port=8080)


@pytest.fixture
def settings():
    return DriverSettings(start_port=8080, http_password="X", vlc_path=Path("/usr/bin/vlc"))


@pytest.fixture
def starter():
    return FakeStarter()


@pytest.fixture
def unreachable():
    return StatusFetchError("http://localhost:8080/requests/status.xml", "connection refused")


def wait_for(predicate, timeout=10.0):
    """
    Pump the Qt event loop until *predicate()* is true.

    Signals emitted on watcher threads are queued to the thread that
    connected, so they only arrive while its event loop is processing.
    """
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        QCoreApplication.processEvents()
        time.sleep(0.01)
    return True
