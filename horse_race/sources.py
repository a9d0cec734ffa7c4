from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import IO, Callable

from horse_race.logging import get_logger

logger = get_logger(__name__)

TickSource = Callable[[], int]


def millis_since_epoch() -> int:
    """Wall-clock milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


@dataclass
class FixedTickSource:
    """Tick source that always returns the same value (replays, tests)."""

    value: int
    calls: int = field(default=0, init=False)

    def __call__(self) -> int:
        self.calls += 1
        return self.value


class Trigger(ABC):
    """
    Unblocks one race iteration. Only the occurrence matters, not content.

    echoes_line is True when waiting leaves an extra line on the display
    (a typed line echoed by the terminal) that the next erase must skip.
    """

    echoes_line: bool = False

    @abstractmethod
    def wait(self) -> None: ...


class StdinTrigger(Trigger):
    echoes_line = True

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin

    def wait(self) -> None:
        # A failed read only affects pacing, never race state.
        try:
            self.stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Ignoring trigger read failure: %s", e)


@dataclass
class ImmediateTrigger(Trigger):
    """Trigger that never blocks; counts how often it fired."""

    fired: int = field(default=0, init=False)

    def wait(self) -> None:
        self.fired += 1
