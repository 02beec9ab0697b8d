"""Shared fixtures: scripted input streams and a clean package logger."""

import io
import logging

import pytest


class RecordingStdout(io.StringIO):
    """StringIO that records write/flush order into a shared event list."""

    def __init__(self, events):
        super().__init__()
        self.events = events

    def write(self, s):
        self.events.append(("write", s))
        return super().write(s)

    def flush(self):
        self.events.append(("flush", None))
        super().flush()


class RecordingStdin(io.StringIO):
    def __init__(self, text, events):
        super().__init__(text)
        self.events = events

    def readline(self, *args):
        self.events.append(("read", None))
        return super().readline(*args)


@pytest.fixture
def events():
    return []


@pytest.fixture
def scripted(events):
    """Build (stdin, stdout) for a list of raw lines."""
    def _build(lines):
        return RecordingStdin("".join(lines), events), RecordingStdout(events)
    return _build


@pytest.fixture
def feed_stdin(monkeypatch):
    """Replace sys.stdin with the given raw lines."""
    def _feed(lines):
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(lines)))
    return _feed


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that setup_console_logging attached during a test."""
    package_logger = logging.getLogger("typedprompt")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)
