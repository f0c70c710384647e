import pytest

from lessonengine.timer import Timer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_ticks_start_at_zero():
    clock = FakeClock()
    timer = Timer(clock)
    assert timer.ticks() == 0


def test_ticks_are_milliseconds():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now += 0.25
    assert timer.ticks() == pytest.approx(250)


def test_reset_restarts_count():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now += 3
    timer.reset()
    assert timer.ticks() == 0
    clock.now += 1
    assert timer.ticks() == pytest.approx(1000)


def test_real_clock_never_runs_backwards():
    timer = Timer()
    first = timer.ticks()
    assert timer.ticks() >= first >= 0