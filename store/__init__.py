"""
store/
------
Core data layer.  Public API:

    from store import ArrayStore, generate_values
    from store import parse_int, clamp, is_sorted_ascending
"""

from store.generator   import generate_values, parse_int, parse_bounded, clamp
from store.array_store import ArrayStore, is_sorted_ascending

__all__ = [
    "ArrayStore",
    "is_sorted_ascending",
    "generate_values",
    "parse_int",
    "parse_bounded",
    "clamp",
]
