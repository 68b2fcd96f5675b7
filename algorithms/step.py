"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The array contents right after the event
    • Which pill to highlight (active / found) and, for binary search,
      the current low / high bounds
    • How long to hold the frame before the next one
    • The line appended to the on-screen log
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - Step and Marker are frozen dataclasses.  The algorithm generator is
    the only writer; the stepper / renderer are pure readers.
  - `values` is a tuple copy, so rewinding shows the array as it was at
    that step even though bubble sort keeps mutating the live list.
  - `status` is only set on the terminal step (the run's final message).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple


# ---------------------------------------------------------------------------
# Step kinds
# ---------------------------------------------------------------------------
CHECK     = "check"       # linear search looks at one index
COMPARE   = "compare"     # bubble sort compares a neighbour pair
SWAP      = "swap"        # bubble sort just swapped that pair
PROBE     = "probe"       # binary search looks at mid
FOUND     = "found"       # terminal: target located
NOT_FOUND = "not_found"   # terminal: target absent
SORTED    = "sorted"      # terminal: bubble sort finished


@dataclass(frozen=True)
class Marker:
    """Highlight metadata for one frame.  Every field is an index or None."""

    active_index: Optional[int] = None
    found_index:  Optional[int] = None
    low:          Optional[int] = None
    high:         Optional[int] = None

    @property
    def has_bounds(self) -> bool:
        return self.low is not None and self.high is not None


NO_MARKER = Marker()


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        kind            : One of the step-kind constants above.
        values          : Snapshot of the array after this event.
        marker          : What to highlight.
        delay_ms        : Pause after showing this frame (0 on the final step).
        log_line        : Line appended to the log panel ("" for none).
        status          : Final status message (terminal step only).
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable "why" text for the explanation panel.
        metrics         : Running tally: comparisons, swaps, passes.
        is_final        : True on the very last step.
    """

    step_number:     int                 = 0
    kind:            str                 = CHECK
    values:          Tuple[int, ...]     = ()
    marker:          Marker              = NO_MARKER
    delay_ms:        int                 = 0
    log_line:        str                 = ""
    status:          str                 = ""
    pseudocode_line: int                 = 0
    explanation:     str                 = ""
    metrics:         Dict[str, Any]      = field(default_factory=dict)
    is_final:        bool                = False

    @property
    def found_index(self) -> Optional[int]:
        return self.marker.found_index if self.kind == FOUND else None


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Scratch-pad that numbers steps and keeps the running metrics.

    Usage inside an algorithm generator:
        sb = StepBuilder(values, delay_ms=120)
        sb.count("comparisons")
        yield sb.emit(CHECK, Marker(active_index=i), log_line="...", pseudocode_line=2)
    """

    def __init__(self, values: Sequence[int], delay_ms: int = 0):
        self._values  = values
        self.delay_ms = delay_ms
        self.step_no  = 0
        self.metrics: Dict[str, Any] = {"comparisons": 0, "swaps": 0, "passes": 0}

    def count(self, key: str, n: int = 1) -> None:
        self.metrics[key] = self.metrics.get(key, 0) + n

    def emit(
        self,
        kind: str,
        marker: Marker = NO_MARKER,
        log_line: str = "",
        pseudocode_line: int = 0,
        explanation: str = "",
    ) -> Step:
        step = Step(
            step_number=self.step_no,
            kind=kind,
            values=tuple(self._values),
            marker=marker,
            delay_ms=self.delay_ms,
            log_line=log_line,
            pseudocode_line=pseudocode_line,
            explanation=explanation,
            metrics=dict(self.metrics),
        )
        self.step_no += 1
        return step

    def finish(
        self,
        kind: str,
        status: str,
        marker: Marker = NO_MARKER,
        pseudocode_line: int = 0,
        explanation: str = "",
    ) -> Step:
        """The terminal step: carries the status and holds no delay."""
        step = Step(
            step_number=self.step_no,
            kind=kind,
            values=tuple(self._values),
            marker=marker,
            delay_ms=0,
            status=status,
            pseudocode_line=pseudocode_line,
            explanation=explanation,
            metrics=dict(self.metrics),
            is_final=True,
        )
        self.step_no += 1
        return step
