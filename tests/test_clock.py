from haul.clock import Cadence, Clock
from config import FPS, MAX_FRAMES_PER_UPDATE


def test_cadence_fires_once_per_period_and_carries_remainder():
    cadence = Cadence(4)
    fired = [cadence.advance(1) for _ in range(12)]
    assert fired == [0, 0, 0, 1] * 3

    cadence.reset()
    assert cadence.advance(3) == 0
    assert cadence.advance(6) == 2
    assert cadence.accumulated == 1


def test_clock_counts_frames_and_play_time():
    clock = Clock()
    for _ in range(FPS * 2 + 30):
        clock.tick()
    assert clock.frame == FPS * 2 + 30
    assert clock.play_seconds == 2
    assert clock.elapsed == 2.5


def test_accumulate_caps_catch_up_after_a_stall():
    clock = Clock()
    assert clock.accumulate(0.0) == 0
    assert clock.accumulate(10.0) == MAX_FRAMES_PER_UPDATE
    assert clock.accumulate(0.0) == 0


def test_accumulate_runs_one_step_per_reference_frame():
    clock = Clock(fps=4)
    assert clock.accumulate(0.25) == 1
    assert clock.accumulate(0.5) == 2
    assert clock.accumulate(0.125) == 0
    assert clock.accumulate(0.125) == 1


def test_reset_zeroes_frames():
    clock = Clock()
    clock.tick()
    clock.reset()
    assert clock.frame == 0
