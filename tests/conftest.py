"""Shared fixtures for the mathrush test suite."""

import io
import threading

import pytest
from rich.console import Console

from mathrush.event_log import close_event_log, open_event_log


@pytest.fixture
def console():
    """A plain, uncolored console that records everything printed."""
    return Console(file=io.StringIO(), highlight=False, force_terminal=False, width=200)


@pytest.fixture
def event_log(tmp_path):
    """Event logger writing to a temp log.txt; yields (logger, path)."""
    path = tmp_path / "log.txt"
    logger = open_event_log(path)
    yield logger, path
    close_event_log(logger)


class IdleStream:
    """Text stream whose readline blocks until released, like an idle user."""

    def __init__(self):
        self._released = threading.Event()

    def readline(self):
        self._released.wait()
        return ""

    def release(self):
        self._released.set()


@pytest.fixture
def idle_stream():
    stream = IdleStream()
    yield stream
    stream.release()
