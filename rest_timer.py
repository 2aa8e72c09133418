from __future__ import annotations

import datetime
import math
from typing import Callable

Clock = Callable[[], datetime.datetime]


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def format_clock(seconds: int) -> str:
    """Format ``seconds`` as ``M:SS``."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def format_elapsed(seconds: int) -> str:
    """Format ``seconds`` as ``H:MM:SS`` from one hour on, else ``M:SS``."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    if hours > 0:
        minutes, secs = divmod(rest, 60)
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return format_clock(rest)


class RestTimer:
    """Countdown between sets, computed from its start time on every read."""

    DEFAULT_DURATION: int = 90

    def __init__(self, clock: Clock = utc_now, default_duration: int | None = None) -> None:
        self.clock = clock
        self.default_duration = default_duration or self.DEFAULT_DURATION
        self.started_at: datetime.datetime | None = None
        self.duration = 0

    def start(self, duration: int | None = None) -> None:
        self.started_at = self.clock()
        self.duration = duration or self.default_duration

    def skip(self) -> None:
        self.started_at = None
        self.duration = 0

    def remaining(self) -> int:
        """Return whole seconds left; an expired timer resets itself."""
        if self.started_at is None:
            return 0
        elapsed = math.floor((self.clock() - self.started_at).total_seconds())
        left = max(0, self.duration - elapsed)
        if left == 0:
            self.skip()
        return left

    @property
    def is_resting(self) -> bool:
        return self.remaining() > 0

    def formatted_time(self) -> str:
        return format_clock(self.remaining())


class WorkoutTimer:
    """Elapsed time since a workout started, sampled on demand."""

    def __init__(self, start_time: datetime.datetime, clock: Clock = utc_now) -> None:
        self.start_time = start_time
        self.clock = clock

    def elapsed(self) -> int:
        return max(0, math.floor((self.clock() - self.start_time).total_seconds()))

    def formatted_time(self) -> str:
        return format_elapsed(self.elapsed())
