"""LC call-number parsing.

Main entry point:
- parse_call_number: Break a call number into its sortable components
"""

from lcsort.parse.grammar import LC_CALL_NUMBER_RE
from lcsort.parse.parser import parse_call_number

__all__ = [
    "LC_CALL_NUMBER_RE",
    "parse_call_number",
]
