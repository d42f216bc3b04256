"""
Test script to verify timer functionality
"""

import time

import pytest
from game import GameTimer


class FakeClock:
    """Manually advanced time source"""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timer(clock):
    return GameTimer(clock=clock, threaded=False)


def test_timer_initial_state(timer):
    """Test that timer starts stopped at zero"""
    assert timer.get_time() == 0.0
    assert timer.is_running() is False


def test_tick_before_start_does_nothing(timer, clock):
    clock.advance(5)
    timer.tick()
    assert timer.get_time() == 0.0


def test_tick_advances_one_step(timer, clock):
    """Test that each tick moves at most one tenth of a second"""
    timer.start()
    clock.advance(0.05)
    timer.tick()
    assert timer.get_time() == 0.0

    clock.advance(0.1)
    timer.tick()
    assert timer.get_time() == 0.1

    clock.advance(1.0)
    timer.tick()
    timer.tick()
    assert timer.get_time() == 0.3


def test_ticks_catch_up_with_elapsed_time(timer, clock):
    """Test that repeated ticks follow real time"""
    timer.start()
    for _ in range(25):
        clock.advance(0.1001)
        timer.tick()
    assert timer.get_time() == 2.5


def test_stop_takes_final_step(timer, clock):
    """Test the catch-up step on stop"""
    timer.start()
    clock.advance(0.35)
    timer.tick()
    timer.tick()
    assert timer.get_time() == 0.2

    assert timer.stop() == 0.3
    assert timer.is_running() is False

    clock.advance(10)
    timer.tick()
    assert timer.get_time() == 0.3


def test_stop_when_not_running(timer):
    assert timer.stop() == 0.0


def test_start_resets(timer, clock):
    """Test that each new game starts from zero"""
    timer.start()
    clock.advance(0.5)
    timer.tick()
    timer.stop()

    timer.start()
    assert timer.get_time() == 0.0
    assert timer.is_running() is True


def test_reset_clears_display(clock):
    """Test that a reset stops the clock and shows zero again"""
    values = []
    timer = GameTimer(on_tick=values.append, clock=clock, threaded=False)
    timer.start()
    clock.advance(0.35)
    timer.tick()
    timer.tick()

    timer.reset()
    clock.advance(1.0)
    timer.tick()

    assert timer.get_time() == 0.0
    assert timer.is_running() is False
    assert values[-1] == 0.0


def test_on_tick_callback(clock):
    """Test that the display callback receives every new value"""
    values = []
    timer = GameTimer(on_tick=values.append, clock=clock, threaded=False)

    timer.start()
    clock.advance(0.25)
    timer.tick()
    timer.tick()
    timer.tick()

    assert values == [0.0, 0.1, 0.2]


def test_background_thread_counts():
    """Test the threaded timer against the real clock"""
    timer = GameTimer(interval=0.005)
    try:
        timer.start()
        time.sleep(0.35)
        elapsed = timer.stop()
    finally:
        timer.shutdown()

    assert 0.2 <= elapsed <= 0.4
    assert timer.is_running() is False
