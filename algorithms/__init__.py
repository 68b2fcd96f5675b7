"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the playground knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "linear_search": AlgoInfo(key, label, fn, pseudocode, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it:
the controller reads `needs_target` / `requires_sorted` to decide which
preconditions to check, the page reads labels and complexities.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from algorithms.linear_search import linear_search as _linear, PSEUDOCODE as _linear_pc
from algorithms.bubble_sort   import bubble_sort   as _bubble, PSEUDOCODE as _bubble_pc
from algorithms.binary_search import binary_search as _binary, PSEUDOCODE as _binary_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble_sort"
    label:            str                    # human label, e.g. "Bubble Sort"
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    needs_target:     bool      = False      # search algorithms take a target
    requires_sorted:  bool      = False      # refuse unless ascending
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", fn=_linear, pseudocode=_linear_pc,
        needs_target=True,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks items one by one. Works on any array.",
    ),

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Sorts by swapping neighbours. Stops early once a pass makes no swap.",
    ),

    "binary_search": AlgoInfo(
        key="binary_search", label="Binary Search", fn=_binary, pseudocode=_binary_pc,
        needs_target=True, requires_sorted=True,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the range each step, but only works if the array is sorted.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
]
