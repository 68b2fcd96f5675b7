"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort that works IN PLACE on the list it is given.

Yields a Step at every meaningful event:
  1. Compare arr[i] and arr[i+1]   →  highlight i
  2. Swap them (if out of order)   →  highlight i+1, where the larger moved
  3. Final step once sorted

Early exit: a full pass with no swap means the array is sorted, so the
outer loop stops.  After pass k the last k elements are in their final
position, which is why each pass compares one pair fewer.

Only strict `>` triggers a swap, so equal elements never change their
relative order (the sort is stable).  Time complexity O(n²).
"""

import logging
from typing import Generator, List, MutableSequence, Optional

from algorithms.step import COMPARE, SORTED, SWAP, Marker, Step, StepBuilder
from settings import SETTINGS

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                        # 0
    "    for pass in 0 .. n-2:",                    # 1
    "        swapped ← false",                      # 2
    "        for i in 0 .. n-2-pass:",              # 3
    "            if arr[i] > arr[i+1]:",            # 4
    "                swap(arr[i], arr[i+1])",       # 5
    "                swapped ← true",               # 6
    "        if not swapped: break",                # 7
    "    return arr",                               # 8
]


def bubble_sort(
    values: MutableSequence[int],
    delay_ms: Optional[int] = None,
) -> Generator[Step, None, None]:
    """
    Sorts `values` ascending in place, yielding a Step per compare and swap.

    Args:
        values   : The live array.  It is mutated as the generator advances.
        delay_ms : Pause after each compare / swap (defaults to 80 ms).
    """
    if delay_ms is None:
        delay_ms = SETTINGS.delay_for("bubble_sort")

    sb = StepBuilder(values, delay_ms=delay_ms)
    n  = len(values)
    logger.debug("Bubble Sort started: %s", list(values))

    for pass_ in range(n - 1):
        swapped = False
        sb.count("passes")
        logger.debug("Pass %d starting...", pass_ + 1)

        for i in range(n - 1 - pass_):
            sb.count("comparisons")
            yield sb.emit(
                COMPARE,
                Marker(active_index=i),
                log_line=f"Compare index {i} and {i + 1}",
                pseudocode_line=4,
                explanation=(
                    f"Pass {pass_ + 1}: compare neighbours arr[{i}] = {values[i]} "
                    f"and arr[{i + 1}] = {values[i + 1]}."
                ),
            )

            if values[i] > values[i + 1]:
                logger.debug("Swap at i=%d: %d > %d", i, values[i], values[i + 1])
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
                sb.count("swaps")
                yield sb.emit(
                    SWAP,
                    Marker(active_index=i + 1),
                    log_line=f"Swap → [{values[i]} , {values[i + 1]}]",
                    pseudocode_line=5,
                    explanation=(
                        f"{values[i + 1]} > {values[i]}, so they swap. The larger value "
                        f"keeps bubbling right towards its final place."
                    ),
                )

        logger.debug("Pass %d done. swapped=%s. arr=%s", pass_ + 1, swapped, list(values))

        if not swapped:
            logger.debug("Early exit: array already sorted.")
            break

    logger.debug("Bubble Sort finished: %s", list(values))
    yield sb.finish(
        SORTED,
        status="Array sorted (Bubble Sort). Now Binary Search will work correctly.",
        pseudocode_line=8,
        explanation=(
            f"Done after {sb.metrics['passes']} pass(es), {sb.metrics['comparisons']} "
            f"comparison(s) and {sb.metrics['swaps']} swap(s). The array is ascending."
        ),
    )
