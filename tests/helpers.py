from __future__ import annotations

import time
from collections.abc import Iterable
from contextlib import contextmanager


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SteppingClock(FakeClock):
    """Clock that moves forward by a fixed step on every read."""

    def __init__(self, step: float, start: float = 0.0) -> None:
        super().__init__(start)
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


class ScriptedRandom:
    """Random source that replays fixed randrange results in order."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.values.pop(0)
        assert low <= value < high
        return value


class FakeTerminal:
    """Terminal I/O stand-in: scripted keys in, frames and mode changes recorded."""

    def __init__(self, poll_keys: Iterable[str] = (), read_keys: Iterable[str] = ()) -> None:
        self.poll_keys = list(poll_keys)
        self.read_keys = list(read_keys)
        self.frames: list[list[str]] = []
        self.sessions = 0
        self.active = False

    @contextmanager
    def interactive(self):
        self.sessions += 1
        self.active = True
        try:
            yield self
        finally:
            self.active = False

    def poll_key(self, timeout: float) -> str | None:
        if self.poll_keys:
            return self.poll_keys.pop(0)
        time.sleep(min(timeout, 0.001))
        return None

    def read_key(self) -> str | None:
        return self.read_keys.pop(0)

    def draw(self, lines: list[str]) -> None:
        self.frames.append(list(lines))
