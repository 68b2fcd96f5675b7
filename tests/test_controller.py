"""Tests for the PlaygroundController: preconditions, busy flag, status and log."""
import os
import sys
import threading
import time

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine import INTRO_LOG, PlaygroundController
from engine.recorder import Recorder
from store import ArrayStore


def no_sleep(_seconds):
    pass


@pytest.fixture
def ctrl():
    return PlaygroundController(store=ArrayStore([1, 2, 3, 4, 5]))


# ---------------------------------------------------------------------------
# Generate
# ---------------------------------------------------------------------------
def test_generate_sets_status_and_intro_log():
    c = PlaygroundController()
    assert c.generate(size=10, seed=1)
    assert len(c.store) == 10
    assert c.status == "Generated an array of 10 numbers."
    assert c.log == [INTRO_LOG]
    assert not c.busy


def test_generate_clamps_size():
    c = PlaygroundController()
    c.generate(size="2", seed=1)
    assert c.status == "Generated an array of 5 numbers."


# ---------------------------------------------------------------------------
# Refusals
# ---------------------------------------------------------------------------
def test_run_on_empty_array_is_refused():
    c = PlaygroundController()
    assert c.run_linear_search(4) is None
    assert c.status == "Generate an array first."
    assert c.run_bubble_sort() is None
    assert c.status == "Generate an array first."


def test_empty_array_reported_before_bad_target():
    c = PlaygroundController()
    c.run_binary_search("")
    assert c.status == "Generate an array first."


@pytest.mark.parametrize("target", ["", "   ", "abc", None])
def test_missing_target_is_refused(ctrl, target):
    assert ctrl.run_linear_search(target) is None
    assert ctrl.status == "Enter a target number."
    assert ctrl.recorder is None


def test_binary_search_on_unsorted_array_is_refused():
    """[4,1,3], target 3: no steps, array untouched."""
    c = PlaygroundController(store=ArrayStore([4, 1, 3]))
    assert c.run_binary_search(3) is None
    assert c.status == "Binary Search requires a sorted array. Click Bubble Sort first."
    assert c.store.values == [4, 1, 3]
    assert c.stepper is None
    assert not c.busy


def test_unknown_algorithm_raises(ctrl):
    with pytest.raises(ValueError):
        ctrl.run("quick_sort")


# ---------------------------------------------------------------------------
# Runs and playback
# ---------------------------------------------------------------------------
def test_linear_search_run_and_log(ctrl):
    first = ctrl.run_linear_search("4")
    assert first.log_line == "Checking index 0 (value=1)"
    assert ctrl.status == "Running Linear Search for 4..."
    assert ctrl.log == ["Checking index 0 (value=1)"]
    assert ctrl.busy

    final = ctrl.play(no_sleep)
    assert final.found_index == 3
    assert ctrl.status == "Found 4 at index 3 using Linear Search."
    assert ctrl.log == [
        "Checking index 0 (value=1)",
        "Checking index 1 (value=2)",
        "Checking index 2 (value=3)",
        "Checking index 3 (value=4)",
    ]
    assert not ctrl.busy


def test_target_parsed_like_a_text_field(ctrl):
    ctrl.run_linear_search(" 3rd")
    assert ctrl.status == "Running Linear Search for 3..."


def test_busy_refuses_runs_and_generate():
    c = PlaygroundController(store=ArrayStore([5, 3, 1, 4, 2]))
    c.run_bubble_sort()
    shown = c.current_step
    assert c.busy

    assert c.run_linear_search(3) is None
    assert c.status == "A run is already in progress."
    assert not c.generate()
    assert c.status == "A run is already in progress."
    assert c.current_step is shown
    assert c.compare_searches(3) is None

    c.jump_to_end()
    assert not c.busy
    assert c.status == "Array sorted (Bubble Sort). Now Binary Search will work correctly."


def test_bubble_sort_then_binary_search():
    c = PlaygroundController(store=ArrayStore([5, 3, 1, 4, 2]))
    first = c.run_bubble_sort()
    assert c.status == "Running Bubble Sort..."
    assert first.values == (5, 3, 1, 4, 2)
    assert c.store.values == [1, 2, 3, 4, 5]

    c.play(no_sleep)
    metrics = c.metrics
    assert (metrics.comparisons, metrics.swaps, metrics.passes) == (10, 7, 4)

    c.run_binary_search(2)
    final = c.play(no_sleep)
    assert final.found_index == 1
    assert c.status == "Found 2 at index 1 using Binary Search."
    assert c.log == [
        "low=0, high=4, mid=2 (value=3)",
        "low=0, high=1, mid=0 (value=1)",
        "low=1, high=1, mid=1 (value=2)",
    ]


def test_not_found_status(ctrl):
    ctrl.run_linear_search(42)
    ctrl.play(no_sleep)
    assert ctrl.status == "42 not found using Linear Search."


def test_stepping_back_keeps_run_complete(ctrl):
    ctrl.run_linear_search(2)
    ctrl.next_step()
    ctrl.next_step()
    assert not ctrl.busy
    assert ctrl.prev_step() is not None
    assert not ctrl.busy
    assert ctrl.log == ["Checking index 0 (value=1)", "Checking index 1 (value=2)"]
    assert ctrl.goto_step(99) is None


def test_playback_without_run():
    c = PlaygroundController()
    assert c.next_step() is None
    assert c.prev_step() is None
    assert c.jump_to_end() is None
    assert c.play(no_sleep) is None


def test_generate_after_run_clears_it(ctrl):
    ctrl.run_linear_search(1)
    ctrl.jump_to_end()
    assert ctrl.generate(seed=3)
    assert ctrl.recorder is None
    assert ctrl.log == [INTRO_LOG]


def test_speed_changes_sleep():
    c = PlaygroundController(store=ArrayStore([1, 2, 3]))
    assert c.set_speed("turbo") == "turbo"
    c.run_linear_search(3)
    sleeps = []
    c.play(sleeps.append)
    assert sleeps == [0.012] * 3
    assert c.set_speed("warp") == "normal"


def test_on_render_receives_every_frame():
    frames = []
    c = PlaygroundController(store=ArrayStore([1, 2, 3]), on_render=frames.append)
    c.run_linear_search(3)
    c.play(no_sleep)
    assert [f.step_number for f in frames] == [0, 1, 2, 3]


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------
def test_compare_searches(ctrl):
    result = ctrl.compare_searches(5)
    assert result.left.algo_label == "Linear Search"
    assert result.right.algo_label == "Binary Search"
    assert result.left.comparisons == 5
    assert result.right.comparisons == 3
    assert ctrl.status == "Compared searches for 5: 5 vs 3 comparison(s)."
    assert ctrl.recorder is None


def test_compare_needs_sorted_array():
    c = PlaygroundController(store=ArrayStore([4, 1, 3]))
    assert c.compare_searches(3) is None
    assert c.status == "Binary Search requires a sorted array. Click Bubble Sort first."


# ---------------------------------------------------------------------------
# Hostile input never escapes the controller
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("target", ["9" * 5000, float("nan"), float("inf"), "٣"])
def test_unusable_target_is_refused(ctrl, target):
    assert ctrl.run_linear_search(target) is None
    assert ctrl.status == "Enter a target number."
    assert ctrl.compare_searches(target) is None
    assert ctrl.status == "Enter a target number."


def test_unusable_size_clamps():
    c = PlaygroundController()
    assert c.generate(size=float("inf"), max_value="9" * 5000, seed=1)
    assert c.status == "Generated an array of 5 numbers."
    assert all(1 <= v <= 10 for v in c.store)


# ---------------------------------------------------------------------------
# Overlapping requests
# ---------------------------------------------------------------------------
def test_overlapping_runs_start_only_once(monkeypatch):
    original = Recorder.run_to_completion

    def slow_run_to_completion(self):
        time.sleep(0.05)
        return original(self)

    monkeypatch.setattr(Recorder, "run_to_completion", slow_run_to_completion)

    c = PlaygroundController(store=ArrayStore([5, 3, 1, 4, 2]))
    barrier = threading.Barrier(2)
    results = []

    def worker():
        barrier.wait()
        results.append(c.run_bubble_sort())

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    started = [r for r in results if r is not None]
    assert len(started) == 1
    assert c.status == "A run is already in progress."
    assert c.busy
