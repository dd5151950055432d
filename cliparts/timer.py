"""A simple timer with readable output."""

from __future__ import annotations

import sys
import time as _time
from collections.abc import Callable

TimePrint = Callable[[str, str], str]


class Timer:
    """Counts time from its creation and formats it."""

    @staticmethod
    def simple(title: str, time: str) -> str:
        """Default formatter: ``title: time``."""
        return f"{title}: {time}"

    @staticmethod
    def big(title: str, time: str) -> str:
        """Formatter framed by lines of dashes."""
        rule = "-----------------------------------------"
        return f"{rule}\n| {title} | Time = {time}\n{rule}"

    def __init__(self, title: str = "Timer", time_print: TimePrint | None = None) -> None:
        self.title = title
        self.time_print = time_print if time_print is not None else Timer.simple
        self.cycles = 1
        self._start = _time.perf_counter()

    def time_it(self, func: Callable[[], object], target_time: float = 1) -> str:
        """Run ``func`` repeatedly until ``target_time`` seconds pass, or 101 runs."""
        start = _time.perf_counter()
        runs = 0
        while True:
            func()
            total_time = _time.perf_counter() - start
            below_limit = runs < 100
            runs += 1
            if not (below_limit and total_time < target_time):
                break
        return f"{self.make_time_str(total_time / runs)} for {runs} tries"

    def make_time_str(self, time: float | None = None) -> str:
        """Format ``time`` in seconds, or the elapsed time per cycle when omitted."""
        if time is None:
            time = (_time.perf_counter() - self._start) / self.cycles
        if time < 0.000001:
            value, unit = time * 1_000_000_000, "ns"
        elif time < 0.001:
            value, unit = time * 1_000_000, "us"
        elif time < 1:
            value, unit = time * 1000, "ms"
        else:
            value, unit = time, "s"
        return f"{value:.5g} {unit}"

    def to_string(self) -> str:
        """The formatted timing message."""
        return self.time_print(self.title, self.make_time_str())

    def __truediv__(self, val: int) -> Timer:
        self.cycles = val
        return self

    def __str__(self) -> str:
        return self.to_string()


class AutoTimer(Timer):
    """A timer that prints its message when its ``with`` block ends."""

    def __enter__(self) -> AutoTimer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        print(self.to_string(), file=sys.stdout)