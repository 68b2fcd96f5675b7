"""
errors.py — Run Precondition Failures
======================================
Every reason a requested action can be refused before its first step.
The controller raises these from its checks and turns them into the
status line the operator sees; none of them ever reaches the UI as an
exception, and none of them leaves the array modified.
"""


class PlaygroundError(Exception):
    """Base class.  `message` is the operator-facing status text."""

    message = "Action refused."

    def __init__(self, message: str = ""):
        self.message = message or self.message
        super().__init__(self.message)


class EmptyArrayError(PlaygroundError):
    message = "Generate an array first."


class InvalidTargetError(PlaygroundError):
    message = "Enter a target number."


class UnsortedArrayError(PlaygroundError):
    message = "Binary Search requires a sorted array. Click Bubble Sort first."


class BusyError(PlaygroundError):
    message = "A run is already in progress."
