"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the UI interacts with during a run.
It owns the algorithm generator, buffers every Step it has seen
(enabling rewind), and exposes a next/prev/goto/speed API.

Every Step carries its own delay (120 ms for a linear-search check,
80 ms for a bubble-sort compare, …).  The speed preset scales that
delay instead of replacing it, so the relative rhythm of the three
algorithms is preserved at any speed.

State machine:
    IDLE    →  start()          →  PAUSED
    PAUSED  →  play_through()   →  PLAYING
    any     →  (final step shown) → FINISHED
    FINISHED → (stepped back)   →  PAUSED

Two ways to drive it:
  - next_step() per request (the web app: the browser waits
    `delay_ms` and asks again)
  - play_through(sleep) which consumes the whole run, rendering and
    sleeping between steps (the terminal driver)

Thread safety:
  This class is NOT thread-safe.  Call it from a single thread.
"""

import logging
import time
from enum import Enum
from typing import Callable, Generator, List, Optional

from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (multiplier applied to each step's own delay)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   2.0,    # teaching mode
    "normal": 1.0,
    "fast":   0.5,
    "turbo":  0.1,    # demo mode
}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : List of all Steps yielded so far (buffer for rewind).
        current_idx : Index into `steps` that is currently displayed.
        speed       : Multiplier applied to every step's delay_ms.
        on_step     : Optional callback(Step) fired every time current step changes.
                      The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None, speed: str = "normal"):
        self._generator:  Optional[Generator[Step, None, None]] = None
        self.steps:       List[Step]    = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS.get(speed, 1.0)
        self.on_step:     Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Generator[Step, None, None]) -> None:
        """Attach a fresh algorithm generator and load the first step."""
        self._generator  = generator
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.PAUSED
        # eagerly fetch step 0 so the UI can show the initial state
        if self._fetch_next():
            self._goto(0)
        self._sync_finished()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        target = self.current_idx + 1
        # if we haven't fetched this step yet, try
        if target >= len(self.steps):
            if not self._fetch_next():
                self.state = StepperState.FINISHED
                return False
        self._goto(target)
        self._sync_finished()
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        self._sync_finished()
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, fetching forward if needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            self._sync_finished()
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.steps:
            self._goto(0)
            self._sync_finished()

    def jump_to_end(self) -> None:
        """Exhaust the generator and jump to the final step."""
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Auto-play
    # ------------------------------------------------------------------
    def play_through(self, sleep: Callable[[float], None] = time.sleep) -> Optional[Step]:
        """
        Drive the run to completion: render, pause, advance, repeat.
        `sleep` receives seconds; tests pass a fake.  Returns the final Step.
        """
        if self.state == StepperState.IDLE:
            return None
        self.state = StepperState.PLAYING
        while not self.is_finished:
            delay = self.current_delay_ms
            if delay > 0:
                sleep(delay / 1000.0)
            if not self.next_step():
                break
        return self.current_step

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, 1.0)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def current_delay_ms(self) -> int:
        """How long the current frame should stay up, after the speed factor."""
        step = self.current_step
        if step is None:
            return 0
        return int(round(step.delay_ms * self.speed))

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one Step from the generator into the buffer."""
        if self._generator is None:
            return False
        try:
            step = next(self._generator)
        except StopIteration:
            self._generator = None
            return False
        self.steps.append(step)
        return True

    def _sync_finished(self) -> None:
        step = self.current_step
        if step is not None and step.is_final:
            if self.state != StepperState.FINISHED:
                logger.debug("Playback finished at step %d", step.step_number)
            self.state = StepperState.FINISHED
        elif self.state == StepperState.FINISHED:
            # rewound away from the final step
            self.state = StepperState.PAUSED

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.steps[idx] if 0 <= idx < len(self.steps) else None)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step and step is not None:
            self.on_step(step)
