"""
engine/
-------
Playback, recording & control layer.

    from engine import PlaygroundController
    from engine import Stepper, Recorder, compare
"""

from engine.errors     import (
    PlaygroundError, EmptyArrayError, InvalidTargetError, UnsortedArrayError, BusyError,
)
from engine.stepper    import Stepper, StepperState, SPEED_PRESETS
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare
from engine.controller import PlaygroundController, INTRO_LOG

__all__ = [
    "PlaygroundController",
    "INTRO_LOG",
    "PlaygroundError",
    "EmptyArrayError",
    "InvalidTargetError",
    "UnsortedArrayError",
    "BusyError",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
