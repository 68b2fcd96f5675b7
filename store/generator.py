"""
generator.py — Random Array Generator & Input Parsing
======================================================
Turns the operator's raw "Size" / "Max Value" / "Target" inputs into
safe integers and draws fresh random arrays.

Parsing follows the page's rules exactly:
  - leading whitespace is skipped, an optional sign is allowed, and the
    leading run of digits is the number ("12abc" → 12, "4.7" → 4)
  - anything else ("", "abc", None) is unparseable → None
  - clamping an unparseable value yields the lower bound
"""

import logging
import random
import re
from typing import List, Optional, Tuple, Union

from settings import SETTINGS

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

RawInt = Union[int, str, None]


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------
def parse_int(raw: RawInt) -> Optional[int]:
    """Leading integer of `raw`, or None when there is none."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        if isinstance(raw, float):
            # NaN / ±Infinity arrive here from JSON
            return int(raw)
        match = _LEADING_INT.match(str(raw))
        if not match:
            return None
        return int(match.group(1))
    except (ValueError, OverflowError):
        # past the interpreter's int-digit limit, or not finite
        logger.debug("unparseable number: %.40r", raw)
        return None


def clamp(n: Optional[int], lo: int, hi: int) -> int:
    """Keep `n` inside [lo, hi]; an unparsed value becomes `lo`."""
    if n is None:
        return lo
    return max(lo, min(hi, n))


def parse_bounded(raw: RawInt, default: int, bounds: Tuple[int, int]) -> int:
    """Empty input means `default`; everything else is parsed then clamped."""
    if raw is None or (isinstance(raw, str) and raw == ""):
        raw = default
    return clamp(parse_int(raw), *bounds)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_values(
    size: RawInt = None,
    max_value: RawInt = None,
    seed: Optional[int] = None,
) -> List[int]:
    """
    A new list of `size` integers, each drawn uniformly from [1, max_value].

    Both arguments accept raw operator input; see the module docstring for
    how it is parsed and clamped.  Never fails.
    """
    n       = parse_bounded(size, SETTINGS.default_size, SETTINGS.size_bounds)
    max_val = parse_bounded(max_value, SETTINGS.default_max_value, SETTINGS.max_value_bounds)

    rng = random.Random(seed)
    values = [rng.randint(SETTINGS.min_value, max_val) for _ in range(n)]

    logger.debug("generate_values size=%d max_value=%d seed=%s -> %s", n, max_val, seed, values)
    return values
