import time
from datetime import timedelta
from typing import Optional


class PerformanceTimer:
    """Measures wall time spent inside a ``with`` block using
    time.perf_counter(). Reading the time before the block ends gives zero.

    Example:
    >>> with PerformanceTimer() as timer:
    ...     time.sleep(0.5)
    >>> print(timer)  # doctest: +ELLIPSIS
    0:00:00.5...
    """

    def __init__(self) -> None:
        self._started_at: Optional[float] = None
        self._elapsed: Optional[float] = None

    def __enter__(self):
        self._elapsed = None
        self._started_at = time.perf_counter()
        return self

    def __exit__(self, *args, **kwargs):
        self._elapsed = time.perf_counter() - self._started_at

    def __str__(self) -> str:
        return str(self.timedelta)

    @property
    def time(self) -> float:
        """Elapsed time in seconds"""
        return 0.0 if self._elapsed is None else self._elapsed

    @property
    def timedelta(self) -> timedelta:
        return timedelta(seconds=self.time)
