"""Public API for comparing and sorting LC call numbers.

This module provides the main public API for lcsort, enabling:
- Three-way comparison of call numbers (usable as a sort comparator)
- Boolean predicates built on that comparison
- Shelf-order sorting of whole collections
- Reading call numbers from text files and exporting parsed
  components to JSONL
"""

from __future__ import annotations

import functools
import json
from collections.abc import Callable, Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from lcsort.compare import compare_components
from lcsort.config import CompareOptions, resolve_options
from lcsort.models import CallNumberComponents
from lcsort.parse import parse_call_number

__all__ = [
    "cmp",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "sort_key",
    "sort_call_numbers",
    "sort_parsed",
    "iter_call_numbers",
    "read_call_numbers",
    "write_jsonl",
    "to_json_line",
]

Options = CompareOptions | Mapping[str, Any] | None


def cmp(x: Any, y: Any, options: Options = None) -> int:
    """Compare two LC call numbers.

    Can be used as a three-way comparator, e.g. through ``sort_key``.
    Values are converted with ``str()``; ``None`` stands for a missing
    value and sorts after every call number.

    Parameters
    ----------
    x : Any
        The first call number.
    y : Any
        The second call number.
    options : CompareOptions | Mapping[str, Any] | None, optional
        Comparison options, e.g. ``{"case_sensitive": True}``.

    Returns
    -------
    int
        1 if x sorts after y, -1 if x sorts before y, 0 if they are
        equal.

    Examples
    --------
        >>> from lcsort import cmp
        >>> cmp("AM101 .S3533 L58 1987b", "HF5381 .S5145 2008")
        -1
    """
    opts = resolve_options(options)

    if x is None and y is None:
        return 0
    if x is None:
        return 1
    if y is None:
        return -1

    x_components = parse_call_number(str(x), opts.case_sensitive)
    y_components = parse_call_number(str(y), opts.case_sensitive)

    return compare_components(x_components, y_components)


def eq(x: Any, y: Any, options: Options = None) -> bool:
    """Return True if x and y are the same call number."""
    return cmp(x, y, options) == 0


def gt(x: Any, y: Any, options: Options = None) -> bool:
    """Return True if x sorts after y."""
    return cmp(x, y, options) > 0


def gte(x: Any, y: Any, options: Options = None) -> bool:
    """Return True if x sorts after or with y."""
    return cmp(x, y, options) >= 0


def lt(x: Any, y: Any, options: Options = None) -> bool:
    """Return True if x sorts before y."""
    return cmp(x, y, options) < 0


def lte(x: Any, y: Any, options: Options = None) -> bool:
    """Return True if x sorts before or with y."""
    return cmp(x, y, options) <= 0


def sort_key(options: Options = None) -> Callable[[Any], Any]:
    """Build a key function for ``sorted()`` and ``list.sort()``.

    Parameters
    ----------
    options : CompareOptions | Mapping[str, Any] | None, optional
        Comparison options.

    Returns
    -------
    Callable[[Any], Any]
        Key function ordering values as ``cmp`` does.

    Examples
    --------
        >>> sorted(["PE1479 .B87 O93 1993", "AM101 .S3533"], key=sort_key())
        ['AM101 .S3533', 'PE1479 .B87 O93 1993']
    """
    opts = resolve_options(options)
    return functools.cmp_to_key(lambda x, y: cmp(x, y, opts))


def sort_call_numbers(
    values: Iterable[Any],
    options: Options = None,
    *,
    reverse: bool = False,
) -> list[Any]:
    """Sort call numbers into shelf order.

    Each value is parsed once. The original objects are returned, not
    their string forms. The sort is stable.

    Parameters
    ----------
    values : Iterable[Any]
        Call numbers (anything with a string form); None entries are
        treated as missing.
    options : CompareOptions | Mapping[str, Any] | None, optional
        Comparison options.
    reverse : bool, optional
        Sort in descending order, by default False.

    Returns
    -------
    list[Any]
        Values in shelf order. Missing values come last, or first when
        ``reverse`` is True.
    """
    opts = resolve_options(options)

    present: list[tuple[tuple[Any, ...], Any]] = []
    missing: list[Any] = []
    for value in values:
        if value is None:
            missing.append(value)
            continue
        components = parse_call_number(str(value), opts.case_sensitive)
        present.append((components.sort_key(), value))

    present.sort(key=lambda item: item[0], reverse=reverse)
    ordered = [value for _, value in present]

    if reverse:
        return missing + ordered
    return ordered + missing


def sort_parsed(
    components: Iterable[CallNumberComponents],
    *,
    reverse: bool = False,
) -> list[CallNumberComponents]:
    """Sort already parsed call numbers into shelf order.

    Use this when the records are needed anyway (e.g. to report the
    unparsed ones), so each call number is only parsed once. Casing was
    fixed when the records were parsed; there are no options here.

    Parameters
    ----------
    components : Iterable[CallNumberComponents]
        Parsed call numbers.
    reverse : bool, optional
        Sort in descending order, by default False.

    Returns
    -------
    list[CallNumberComponents]
        Records in shelf order. The sort is stable.
    """
    return sorted(components, key=CallNumberComponents.sort_key, reverse=reverse)


def iter_call_numbers(lines: Iterable[str]) -> Iterator[str]:
    """Yield call numbers from text lines, one per line.

    Line endings are stripped and blank lines skipped. Other whitespace
    is kept, since it is part of the pristine call number.
    """
    for line in lines:
        call_number = line.rstrip("\r\n")
        if call_number.strip():
            yield call_number


def read_call_numbers(path: str | Path) -> list[str]:
    """Read a text file holding one call number per line.

    Parameters
    ----------
    path : str | Path
        Path to a UTF-8 text file.

    Returns
    -------
    list[str]
        Call numbers in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open(encoding="utf-8") as f:
        return list(iter_call_numbers(f))


def write_jsonl(
    components: Iterable[CallNumberComponents],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> None:
    """Write parsed call numbers to JSONL file (one JSON object per line).

    Parameters
    ----------
    components : Iterable[CallNumberComponents]
        Parsed call numbers to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.

    Examples
    --------
        >>> from lcsort import parse_call_number, write_jsonl
        >>> write_jsonl([parse_call_number("HF5381 .S5145 2008")], "out.jsonl")
    """
    file_path = Path(path)

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for item in components:
            f.write(to_json_line(item, sort_keys=sort_keys) + "\n")


def to_json_line(components: CallNumberComponents, *, sort_keys: bool = True) -> str:
    """Serialize one parsed call number as a compact JSON line."""
    return json.dumps(components.to_dict(), ensure_ascii=False, sort_keys=sort_keys)
