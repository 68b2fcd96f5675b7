"""
linear_search.py — Linear Search
=================================
Generator-based linear search.  Yields a Step at every meaningful event:
  1. Check index i  →  highlight it ACTIVE
  2. Match          →  final step highlighting the FOUND pill
  3. End of array   →  final "not found" step

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.

Never mutates the array.  Time complexity O(n).
"""

import logging
from typing import Generator, List, Optional, Sequence

from algorithms.step import CHECK, FOUND, NOT_FOUND, Marker, Step, StepBuilder
from settings import SETTINGS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",       # 0
    "    for i in 0 .. n-1:",                # 1
    "        if arr[i] == target:",          # 2
    "            return i",                  # 3
    "    return NOT FOUND",                  # 4
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def linear_search(
    values: Sequence[int],
    target: int,
    delay_ms: Optional[int] = None,
) -> Generator[Step, None, None]:
    """
    Yields Step snapshots while scanning `values` left to right for `target`.

    Args:
        values   : The array to search (read only).
        target   : Value to look for.
        delay_ms : Pause after each check (defaults to the configured 120 ms).

    Yields:
        Step – one CHECK per index examined, then one final FOUND / NOT_FOUND.
    """
    if delay_ms is None:
        delay_ms = SETTINGS.delay_for("linear_search")

    sb = StepBuilder(values, delay_ms=delay_ms)
    logger.debug("Linear Search started: target=%s length=%d", target, len(values))

    for i, value in enumerate(values):
        logger.debug("Linear: checking i=%d, value=%d", i, value)
        sb.count("comparisons")
        yield sb.emit(
            CHECK,
            Marker(active_index=i),
            log_line=f"Checking index {i} (value={value})",
            pseudocode_line=2,
            explanation=(
                f"Compare arr[{i}] = {value} with the target {target}. "
                f"Linear search looks at every element in order until it finds a match."
            ),
        )

        if value == target:
            logger.debug("Linear Search found: index=%d value=%d", i, value)
            yield sb.finish(
                FOUND,
                status=f"Found {target} at index {i} using Linear Search.",
                marker=Marker(found_index=i),
                pseudocode_line=3,
                explanation=(
                    f"arr[{i}] equals {target}, so the search stops after "
                    f"{i + 1} comparison(s)."
                ),
            )
            return

    logger.debug("Linear Search ended: not found target=%s", target)
    yield sb.finish(
        NOT_FOUND,
        status=f"{target} not found using Linear Search.",
        pseudocode_line=4,
        explanation=(
            f"Every one of the {len(values)} elements was checked and none equals "
            f"{target}. That is the O(n) worst case."
        ),
    )
