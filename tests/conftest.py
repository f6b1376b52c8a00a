"""conftest.py - Shared fixtures: a recording logger handle and a facade.

``RecordingLogger`` satisfies ``SignatureLogger`` and stores every call as a
``Call`` tuple instead of emitting it, so tests can assert on the exact
template, argument sequence and attached exception the facade produced.
"""

from typing import Any, List, NamedTuple

import pytest

from siglog import Loggeable


class Call(NamedTuple):
    method: str
    template: str
    args: tuple
    exc_info: Any = None


class RecordingLogger:
    def __init__(self) -> None:
        self.calls: List[Call] = []

    def trace(self, template, *args):
        self.calls.append(Call("trace", template, args))

    def debug(self, template, *args):
        self.calls.append(Call("debug", template, args))

    def info(self, template, *args):
        self.calls.append(Call("info", template, args))

    def warn(self, template, *args):
        self.calls.append(Call("warn", template, args))

    def error(self, template, *args, exc_info=None):
        self.calls.append(Call("error", template, args, exc_info))


class Service(Loggeable):
    """Minimal Loggeable used throughout the test suite."""

    def __init__(self, logger) -> None:
        self._logger = logger

    def get_logger(self):
        return self._logger


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def service(recorder) -> Service:
    return Service(recorder)
