"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the
analytics metrics the UI needs for the Analytics panel and Comparison
Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="binary_search", store=store, target=42)
    metrics = rec.run_to_completion()   # exhausts the generator

Note that recording a bubble sort sorts the store for real: the
generator mutates the live list as it is exhausted.  The buffered Steps
keep the intermediate snapshots for playback.

Comparison Mode:
    Run linear and binary search for the SAME target on the SAME sorted
    array, then call compare(rec1, rec2) → ComparisonResult.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step
from engine.stepper import Stepper
from store import ArrayStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str           = ""
    algo_label:    str           = ""
    array_size:    int           = 0
    target:        Optional[int] = None
    comparisons:   int           = 0
    swaps:         int           = 0
    passes:        int           = 0
    total_steps:   int           = 0      # number of Steps yielded, final one included
    outcome:       str           = ""     # kind of the final step
    found_index:   Optional[int] = None
    animation_ms:  int           = 0      # sum of step delays at normal speed
    wall_time_ms:  float         = 0.0    # wall-clock time to run to completion


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which run compared fewer elements
    winner_animation:   str = ""   # which run finished sooner on screen


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper (live step-by-step access).
    """

    def __init__(self, speed: str = "normal"):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._speed:      str               = speed
        self._algo_info:  Optional[AlgoInfo] = None
        self._target:     Optional[int]     = None
        self._size:       int               = 0
        self._start_time: float             = 0.0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        store: ArrayStore,
        target: Optional[int] = None,
        delay_ms: Optional[int] = None,
    ) -> Stepper:
        """Initialise the generator and stepper for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        if info.needs_target and target is None:
            raise ValueError(f"{info.label} needs a target")

        self._algo_info = info
        self._target    = target
        self._size      = len(store)
        self.steps      = []
        self.metrics    = None

        # build kwargs based on what the algo accepts
        kwargs: Dict[str, Any] = {"values": store.values, "delay_ms": delay_ms}
        if info.needs_target:
            kwargs["target"] = target

        gen = info.fn(**kwargs)

        self.stepper = Stepper(speed=self._speed)
        self._start_time = time.monotonic()
        self.stepper.start(gen)
        logger.info("Started %s on %d values (target=%s)", info.label, self._size, target)
        return self.stepper

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        # pull every step, then put the cursor back on the first one
        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)
        self.stepper.rewind()

        wall_ms = (time.monotonic() - self._start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "%s finished: %s after %d step(s)",
            self.metrics.algo_label, self.metrics.outcome, self.metrics.total_steps,
        )
        return self.metrics

    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.final_step
        tally = last.metrics if last else {}

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            array_size=self._size,
            target=self._target,
            comparisons=tally.get("comparisons", 0),
            swaps=tally.get("swaps", 0),
            passes=tally.get("passes", 0),
            total_steps=len(self.steps),
            outcome=last.kind if last else "",
            found_index=last.found_index if last else None,
            animation_ms=sum(s.delay_ms for s in self.steps),
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key, lower_is_better=True):
        if l_val == r_val:
            return "tie"
        if lower_is_better:
            return l_key if l_val < r_val else r_key
        return l_key if l_val > r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_animation=winner(l.animation_ms, r.animation_ms, l.algo_label, r.algo_label),
    )
