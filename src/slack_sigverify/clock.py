import time
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    def now_unix(self) -> int:
        ...


class SystemClock:
    def now_unix(self) -> int:
        return int(time.time())


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single instant, for tests and replays."""

    now: int

    def now_unix(self) -> int:
        return self.now


DEFAULT_CLOCK: Clock = SystemClock()
