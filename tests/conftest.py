# tests/conftest.py
from __future__ import annotations

from itertools import chain, repeat
from collections.abc import Iterable

import pytest


class FakeClock:
    """Manual clock: returns ``now`` on every read and counts the reads."""

    def __init__(self, now: int) -> None:
        self.now = now
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now


class ScriptedClock:
    """Replays the given readings in order, then repeats the last one forever."""

    def __init__(self, readings: Iterable[int]) -> None:
        readings = list(readings)
        self._it = chain(readings, repeat(readings[-1]))
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return next(self._it)


# 2024-01-01T00:00:00Z
BASE_MS = 1704067200000


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(BASE_MS)
