"""
controller.py — Playground Controller
======================================
The one object that owns the playground's state:

    • the ArrayStore (the only mutable algorithmic state)
    • the status line and the log transcript shown to the operator
    • the current run (a Recorder + its Stepper) and the busy flag

Every operator action comes through here.  Each action first runs its
precondition checks; a failed check raises a PlaygroundError, which is
caught right here and becomes the status line.  Nothing has been
mutated at that point, and no exception leaves the controller.

Runs are serialized: while a run is being played back (its final step
has not been shown yet) any further run or regeneration is refused.
Jumping to the end of the playback releases the flag.  The check and
the start happen under one per-controller lock, so two overlapping
requests cannot both get past the busy check.
"""

import logging
import threading
import time
from typing import Callable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step
from engine.errors import (
    BusyError,
    EmptyArrayError,
    InvalidTargetError,
    PlaygroundError,
    UnsortedArrayError,
)
from engine.recorder import ComparisonResult, Recorder, RunMetrics, compare
from engine.stepper import SPEED_PRESETS, Stepper
from settings import SETTINGS, PlaygroundSettings
from store import ArrayStore, parse_int
from store.generator import RawInt

logger = logging.getLogger(__name__)

INTRO_LOG = "Try: Linear Search → Bubble Sort → Binary Search"


class PlaygroundController:
    """
    Attributes:
        store     : The ArrayStore under study.
        status    : One-line status message.
        recorder  : Recorder of the current / last run (None after regeneration).
        speed     : Playback speed preset name.
        on_render : Optional callback(Step) fired whenever the displayed
                    step changes.  The terminal driver draws frames here.
    """

    def __init__(
        self,
        store: Optional[ArrayStore] = None,
        settings: PlaygroundSettings = SETTINGS,
        on_render: Optional[Callable[[Step], None]] = None,
    ):
        self.store:     ArrayStore         = store if store is not None else ArrayStore()
        self.settings:  PlaygroundSettings = settings
        self.status:    str                = ""
        self.recorder:  Optional[Recorder] = None
        self.speed:     str                = settings.default_speed
        self.on_render: Optional[Callable[[Step], None]] = on_render

        self._intro_log:    List[str] = []
        self._run_complete: bool      = True
        self._lock:         threading.Lock = threading.Lock()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def busy(self) -> bool:
        return self.recorder is not None and not self._run_complete

    @property
    def stepper(self) -> Optional[Stepper]:
        return self.recorder.stepper if self.recorder else None

    @property
    def current_step(self) -> Optional[Step]:
        return self.stepper.current_step if self.stepper else None

    @property
    def log(self) -> List[str]:
        """Log transcript up to the displayed step."""
        stepper = self.stepper
        if stepper is None:
            return list(self._intro_log)
        shown = stepper.steps[: stepper.current_idx + 1]
        return [s.log_line for s in shown if s.log_line]

    @property
    def metrics(self) -> Optional[RunMetrics]:
        return self.recorder.metrics if self.recorder else None

    # ------------------------------------------------------------------
    # Generate
    # ------------------------------------------------------------------
    def generate(self, size: RawInt = None, max_value: RawInt = None, seed: Optional[int] = None) -> bool:
        """Replace the array with random values.  Returns False if refused."""
        with self._lock:
            try:
                self._check_idle()
            except PlaygroundError as exc:
                return self._refuse(exc)

            n = self.store.regenerate(size, max_value, seed=seed)
            self.recorder      = None
            self._run_complete = True
            self.status        = f"Generated an array of {n} numbers."
            self._intro_log    = [INTRO_LOG]
            logger.debug("arr: %s", self.store.values)
            return True

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    def run_linear_search(self, target: RawInt) -> Optional[Step]:
        return self.run("linear_search", target)

    def run_bubble_sort(self) -> Optional[Step]:
        return self.run("bubble_sort")

    def run_binary_search(self, target: RawInt) -> Optional[Step]:
        return self.run("binary_search", target)

    def run(self, algo_key: str, target: RawInt = None) -> Optional[Step]:
        """
        Check preconditions, record the whole run and show its first step.

        Returns the first Step, or None when the run was refused (the
        reason is in `status`).  Raises ValueError for an unknown key.
        """
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        # check-and-start is one step: a second request waits here, then
        # sees the busy flag
        with self._lock:
            try:
                parsed = self._check_preconditions(info, target)
            except PlaygroundError as exc:
                self._refuse(exc)
                return None

            if info.needs_target:
                self.status = f"Running {info.label} for {parsed}..."
            else:
                self.status = f"Running {info.label}..."

            rec = Recorder(speed=self.speed)
            stepper = rec.start(info.key, self.store, target=parsed,
                                delay_ms=self.settings.delay_for(info.key))
            rec.run_to_completion()

            self.recorder      = rec
            self._run_complete = False
            stepper.on_step    = self._on_step
            self._on_step(stepper.current_step)
            return stepper.current_step

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    def next_step(self) -> Optional[Step]:
        if self.stepper is None or not self.stepper.next_step():
            return None
        return self.current_step

    def prev_step(self) -> Optional[Step]:
        if self.stepper is None or not self.stepper.prev_step():
            return None
        return self.current_step

    def goto_step(self, idx: int) -> Optional[Step]:
        if self.stepper is None or not self.stepper.goto_step(idx):
            return None
        return self.current_step

    def jump_to_end(self) -> Optional[Step]:
        if self.stepper is None:
            return None
        self.stepper.jump_to_end()
        return self.current_step

    def play(self, sleep: Callable[[float], None] = time.sleep) -> Optional[Step]:
        """Play the current run to its final step, pausing between frames."""
        if self.stepper is None:
            return None
        return self.stepper.play_through(sleep)

    def set_speed(self, preset: str) -> str:
        if preset not in SPEED_PRESETS:
            preset = self.settings.default_speed
        self.speed = preset
        if self.stepper is not None:
            self.stepper.set_speed(preset)
        return preset

    # ------------------------------------------------------------------
    # Comparison mode
    # ------------------------------------------------------------------
    def compare_searches(self, target: RawInt) -> Optional[ComparisonResult]:
        """
        Record linear and binary search for the same target on the current
        array without touching the display.  None (and a status) if refused.
        """
        binary = get_algorithm("binary_search")
        with self._lock:
            try:
                parsed = self._check_preconditions(binary, target)
            except PlaygroundError as exc:
                self._refuse(exc)
                return None

            recorders: List[Recorder] = []
            for key in ("linear_search", "binary_search"):
                rec = Recorder(speed=self.speed)
                rec.start(key, self.store, target=parsed, delay_ms=self.settings.delay_for(key))
                rec.run_to_completion()
                recorders.append(rec)

            result = compare(recorders[0], recorders[1])
            self.status = (
                f"Compared searches for {parsed}: {result.left.comparisons} vs "
                f"{result.right.comparisons} comparison(s)."
            )
            return result

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _check_idle(self) -> None:
        if self.busy:
            raise BusyError()

    def _check_preconditions(self, info: AlgoInfo, target: RawInt) -> Optional[int]:
        """Raise the first failing precondition; return the parsed target."""
        self._check_idle()
        if self.store.is_empty:
            raise EmptyArrayError()

        parsed = None
        if info.needs_target:
            parsed = parse_int(target)
            logger.debug("target raw=%r parsed=%s", target, parsed)
            if parsed is None:
                raise InvalidTargetError()

        if info.requires_sorted and not self.store.is_sorted_ascending():
            logger.debug("%s blocked: array not sorted.", info.label)
            raise UnsortedArrayError()
        return parsed

    def _refuse(self, exc: PlaygroundError) -> bool:
        logger.info("Refused: %s", exc.message)
        self.status = exc.message
        return False

    def _on_step(self, step: Optional[Step]) -> None:
        if step is None:
            return
        if step.is_final:
            self.status        = step.status
            self._run_complete = True
        if self.on_render is not None:
            self.on_render(step)

