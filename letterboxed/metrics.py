import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("letterboxed")


class StageTimer:
    """Per-stage wall time and solve counters (valid words, states explored) for a single solve."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counters: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)  # ms
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    def record(self, name: str, value: int):
        self.counters[name] = value
        logger.info("counter=%s value=%d", name, value)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}
