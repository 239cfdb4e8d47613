"""Shelf-order comparison and sorting for Library of Congress call numbers.

This package provides:
- Data models (lcsort.models) — the parsed call-number record
- Parsing (lcsort.parse) — LC call-number grammar
- Comparison (lcsort.compare) — field-priority ordering
- Configuration (lcsort.config) — comparison options
- Audit (lcsort.audit) — JSONL event logging for CLI runs
- CLI (lcsort.cli) — command-line interface
- Public API (lcsort.api) — cmp/eq/gt/gte/lt/lte and sorting helpers
"""

__version__ = "0.1.0"
__license__ = "MIT"

from lcsort.api import (
    cmp,
    eq,
    gt,
    gte,
    iter_call_numbers,
    lt,
    lte,
    read_call_numbers,
    sort_call_numbers,
    sort_key,
    sort_parsed,
    to_json_line,
    write_jsonl,
)
from lcsort.config import DEFAULT_OPTIONS, CompareOptions
from lcsort.models import CallNumberComponents
from lcsort.parse import parse_call_number

__all__ = [
    "__version__",
    "__license__",
    "CallNumberComponents",
    "CompareOptions",
    "DEFAULT_OPTIONS",
    "parse_call_number",
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
