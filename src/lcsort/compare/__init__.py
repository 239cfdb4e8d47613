"""Ordering of parsed LC call numbers.

Fields are compared in a fixed priority order (see
lcsort.models.COMPARISON_FIELDS), first difference wins.
"""

from lcsort.compare.comparators import (
    compare_components,
    compare_values,
    first_difference,
)

__all__ = [
    "compare_values",
    "compare_components",
    "first_difference",
]
