"""
Pytest fixtures for the PeriodiCode test suite.
"""

import pytest


class RecordingReporter:
    """Reporter that keeps every echoed line and surfaced value"""

    def __init__(self):
        self.lines = []
        self.values = []

    def on_line(self, stack_trace, radix, line):
        self.lines.append((tuple(stack_trace), radix, line))

    def on_value(self, value, radix):
        self.values.append((value, radix))


@pytest.fixture
def files():
    """In-memory file system: path -> contents"""
    return {}


@pytest.fixture
def reader(files):
    """File reader backed by the `files` fixture"""
    def read(path):
        if path not in files:
            raise FileNotFoundError(path)
        return files[path]
    return read


@pytest.fixture
def recorder():
    return RecordingReporter()
