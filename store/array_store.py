"""
array_store.py — The Array Under Study
=======================================
Single source of truth for the numbers on screen.  Algorithms, the
renderer and the controller all talk to this object.

Responsibilities:
  1. Hold the ordered list of integers            (values / len / [])
  2. Full regeneration from size + max bounds     (regenerate)
  3. The sortedness check binary search needs     (is_sorted_ascending)

Invariant: the length and the multiset of values change only through
`replace` / `regenerate`.  Bubble sort reorders `values` in place while
it is recorded; it never adds or drops an element.
"""

import logging
from typing import Iterable, List, Optional

from store.generator import RawInt, generate_values

logger = logging.getLogger(__name__)


def is_sorted_ascending(values: Iterable[int]) -> bool:
    """True when every element is >= its predecessor."""
    seq = list(values)
    for i in range(1, len(seq)):
        if seq[i] < seq[i - 1]:
            return False
    return True


class ArrayStore:
    """
    Attributes:
        values : The live list.  Bubble sort mutates it in place; read it,
                 don't rebind it.
    """

    def __init__(self, values: Optional[Iterable[int]] = None):
        self.values: List[int] = list(values) if values is not None else []

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, idx: int) -> int:
        return self.values[idx]

    def __iter__(self):
        return iter(self.values)

    def __repr__(self) -> str:
        return f"ArrayStore({self.values!r})"

    @property
    def is_empty(self) -> bool:
        return not self.values

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def replace(self, values: Iterable[int]) -> None:
        """Swap in a whole new array (contents replaced, list object kept)."""
        self.values[:] = list(values)

    def regenerate(self, size: RawInt = None, max_value: RawInt = None, seed: Optional[int] = None) -> int:
        """Fill with fresh random numbers.  Returns the clamped size used."""
        self.replace(generate_values(size, max_value, seed=seed))
        logger.info("Generated an array of %d numbers", len(self.values))
        return len(self.values)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_sorted_ascending(self) -> bool:
        return is_sorted_ascending(self.values)
