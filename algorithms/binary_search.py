"""
binary_search.py — Binary Search
=================================
Generator-based binary search over an ascending array.

Yields a Step at every probe of the middle element, highlighting mid
and the current low / high bounds, then one final step.

Precondition: the array is sorted ascending.  The generator does not
re-check it (the controller refuses the run before any step is taken);
on unsorted input it still terminates but its answer is meaningless.

mid rounds down on even-length ranges.  Time complexity O(log n).
"""

import logging
from typing import Generator, List, Optional, Sequence

from algorithms.step import FOUND, NOT_FOUND, PROBE, Marker, Step, StepBuilder
from settings import SETTINGS

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",             # 0
    "    low ← 0, high ← n-1",                     # 1
    "    while low <= high:",                      # 2
    "        mid ← ⌊(low + high) / 2⌋",            # 3
    "        if arr[mid] == target: return mid",   # 4
    "        if arr[mid] < target: low ← mid+1",   # 5
    "        else: high ← mid-1",                  # 6
    "    return NOT FOUND",                        # 7
]


def binary_search(
    values: Sequence[int],
    target: int,
    delay_ms: Optional[int] = None,
) -> Generator[Step, None, None]:
    """
    Yields one PROBE step per midpoint examined, then FOUND / NOT_FOUND.

    Args:
        values   : An ascending array (read only).
        target   : Value to look for.
        delay_ms : Pause after each probe (defaults to 160 ms).
    """
    if delay_ms is None:
        delay_ms = SETTINGS.delay_for("binary_search")

    sb   = StepBuilder(values, delay_ms=delay_ms)
    low  = 0
    high = len(values) - 1
    logger.debug("Binary Search started: target=%s arr=%s", target, list(values))

    while low <= high:
        mid = (low + high) // 2
        logger.debug("Binary step: low=%d, high=%d, mid=%d, value=%d", low, high, mid, values[mid])

        sb.count("comparisons")
        yield sb.emit(
            PROBE,
            Marker(active_index=mid, low=low, high=high),
            log_line=f"low={low}, high={high}, mid={mid} (value={values[mid]})",
            pseudocode_line=3,
            explanation=(
                f"The search range is [{low}, {high}]. Its middle is index {mid} "
                f"holding {values[mid]}; compare it with {target}."
            ),
        )

        if values[mid] == target:
            logger.debug("Binary Search found: index=%d value=%d", mid, values[mid])
            yield sb.finish(
                FOUND,
                status=f"Found {target} at index {mid} using Binary Search.",
                marker=Marker(found_index=mid),
                pseudocode_line=4,
                explanation=(
                    f"arr[{mid}] equals {target}. Found after "
                    f"{sb.metrics['comparisons']} probe(s)."
                ),
            )
            return

        if values[mid] < target:
            low = mid + 1    # go right
        else:
            high = mid - 1   # go left

    logger.debug("Binary Search ended: not found target=%s", target)
    yield sb.finish(
        NOT_FOUND,
        status=f"{target} not found using Binary Search.",
        pseudocode_line=7,
        explanation=(
            f"low ({low}) passed high ({high}): the range is empty, so {target} "
            f"is not in the array."
        ),
    )
