"""Timing and per-path counters for demo runs."""

import time
from collections import defaultdict


class Metrics:
    """Collects wall-clock time and per-path call counts."""

    def __init__(self):
        self.start_time = None
        self.end_time = None
        self.calls: dict[str, int] = defaultdict(int)
        self.seconds: dict[str, float] = defaultdict(float)

    def start(self):
        self.start_time = time.time()

    def stop(self):
        self.end_time = time.time()

    @property
    def elapsed(self):
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time else time.time()
        return end - self.start_time

    def timed(self, path: str, fn, *args):
        """Call fn(*args), charging its run time to `path`."""
        t0 = time.perf_counter()
        result = fn(*args)
        self.seconds[path] += time.perf_counter() - t0
        self.calls[path] += 1
        return result
