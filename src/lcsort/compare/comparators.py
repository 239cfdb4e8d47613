"""Field comparators for call-number ordering.

This module provides pure, deterministic functions for comparing parsed
call numbers. Strings compare by code point; the comparators apply no
case folding of their own, so casing is whatever the parser produced.
"""

from typing import Any

from lcsort.models.components import COMPARISON_FIELDS, CallNumberComponents

__all__ = ["compare_values", "compare_components", "first_difference"]


def compare_values(x: Any, y: Any) -> int:
    """Compare two values of the same type.

    Parameters
    ----------
    x : Any
        First value (str, int or float).
    y : Any
        Second value, same type as ``x``.

    Returns
    -------
    int
        -1 if x < y, 1 if x > y, else 0.
    """
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


def first_difference(a: CallNumberComponents, b: CallNumberComponents) -> str | None:
    """Find the field that decides the ordering of two call numbers.

    Parameters
    ----------
    a : CallNumberComponents
        First call number.
    b : CallNumberComponents
        Second call number.

    Returns
    -------
    str | None
        Name of the highest-priority field whose values differ, or None
        if the call numbers compare equal.
    """
    for name in COMPARISON_FIELDS:
        if compare_values(getattr(a, name), getattr(b, name)) != 0:
            return name
    return None


def compare_components(a: CallNumberComponents, b: CallNumberComponents) -> int:
    """Compare two parsed call numbers field by field.

    Fields are compared in ``COMPARISON_FIELDS`` order and the first
    non-zero result wins.

    Parameters
    ----------
    a : CallNumberComponents
        First call number.
    b : CallNumberComponents
        Second call number.

    Returns
    -------
    int
        -1, 0 or 1.
    """
    name = first_difference(a, b)
    if name is None:
        return 0
    return compare_values(getattr(a, name), getattr(b, name))
