"""Tests for the playback Stepper."""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from algorithms.linear_search import linear_search
from engine.stepper import Stepper, StepperState


@pytest.fixture
def stepper():
    """Linear search for 4 in [1..5]: four checks and a final FOUND step."""
    s = Stepper()
    s.start(linear_search([1, 2, 3, 4, 5], 4))
    return s


def test_start_loads_first_step(stepper):
    assert stepper.state == StepperState.PAUSED
    assert stepper.current_idx == 0
    assert stepper.current_step.log_line == "Checking index 0 (value=1)"
    assert stepper.total_steps_fetched == 1


def test_next_and_prev(stepper):
    assert stepper.next_step()
    assert stepper.current_idx == 1
    assert stepper.prev_step()
    assert stepper.current_idx == 0
    assert not stepper.prev_step()


def test_next_until_finished(stepper):
    while stepper.next_step():
        pass
    assert stepper.is_finished
    assert stepper.current_step.is_final
    assert stepper.current_step.found_index == 3
    assert stepper.total_steps_fetched == 5


def test_rewind_after_finish_reopens_playback(stepper):
    stepper.jump_to_end()
    assert stepper.is_finished
    stepper.rewind()
    assert stepper.current_idx == 0
    assert stepper.state == StepperState.PAUSED


def test_goto_step(stepper):
    assert stepper.goto_step(3)
    assert stepper.current_step.marker.active_index == 3
    assert not stepper.goto_step(10)
    assert stepper.current_idx == 3


def test_play_through_sleeps_each_frame_delay(stepper):
    sleeps = []
    final = stepper.play_through(sleeps.append)
    assert final.is_final
    assert sleeps == [0.12] * 4


def test_speed_scales_delay():
    s = Stepper(speed="fast")
    s.start(linear_search([1, 2, 3], 3))
    assert s.current_delay_ms == 60
    sleeps = []
    s.play_through(sleeps.append)
    assert sleeps == [0.06] * 3

    s.set_speed("slow")
    s.rewind()
    assert s.current_delay_ms == 240
    s.set_speed("bogus")
    assert s.speed == 1.0


def test_on_step_fires_for_every_shown_step():
    shown = []
    s = Stepper(on_step=shown.append)
    s.start(linear_search([1, 2, 3], 9))
    s.play_through(lambda _seconds: None)
    assert [st.step_number for st in shown] == [0, 1, 2, 3]


def test_idle_stepper():
    s = Stepper()
    assert s.current_step is None
    assert s.play_through(lambda _seconds: None) is None
    assert not s.next_step()

