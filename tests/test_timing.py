import time
from datetime import timedelta

from oner._timing import PerformanceTimer


def test_timer_measures_block():
    with PerformanceTimer() as timer:
        time.sleep(0.01)

    assert timer.time >= 0.01
    assert timer.timedelta == timedelta(seconds=timer.time)
    assert str(timer).startswith("0:00:0")


def test_timer_before_block_ends():
    timer = PerformanceTimer()

    assert timer.time == 0.0
    assert timer.timedelta == timedelta()
