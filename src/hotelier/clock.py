"""Wall-clock source for task timestamps."""

import time
from typing import Callable

Clock = Callable[[], int]


def now_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class FixedClock:
    """
    Clock that returns a preset time, advancing by `step` on every call.

    Used to make ordering by date_added deterministic.
    """

    def __init__(self, start: int = 0, step: int = 0):
        self.current = start
        self.step = step

    def __call__(self) -> int:
        value = self.current
        self.current += self.step
        return value
