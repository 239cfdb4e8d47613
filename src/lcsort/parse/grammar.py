"""Compiled grammar for LC call numbers.

The pattern is matched against the whole call number with ``fullmatch``.
Letters are ASCII only and match in either case; whether the captured
text keeps its casing is decided by the parser, which uppercases the
input first unless a case-sensitive parse was requested.

Separators are ``\\s`` and may include line breaks, but the trailing
supplement never contains a line terminator (LF, CR, U+2028, U+2029).

Both cutter groups may repeat. As with any repeated regex group, only the
last repetition is kept in the captures.
"""

import re

__all__ = ["LC_CALL_NUMBER_RE"]

LC_CALL_NUMBER_RE = re.compile(
    r"""
    (?P<class_alpha>[A-Za-z]+)
    \s*
    (?P<class_numeric>[0-9]+(?:\.[0-9]+)?)
    (?:                                     # first cutter: ".S3533"
        \s*\.\s*
        (?P<first_cutter_alpha>[A-Za-z])
        (?P<first_cutter_digits>[0-9]+)
        (?P<first_cutter_work_letters>[A-Za-z]*)
    )*
    (?:                                     # second cutter: " L58"
        \s*
        (?P<second_cutter_alpha>[A-Za-z])
        (?P<second_cutter_digits>[0-9]+)
        (?P<second_cutter_work_letters>[A-Za-z]*)
    )*
    (?:                                     # date: " 1987b", " 1990-"
        \s+
        (?P<date_of_publication>[0-9]{4})
        (?P<date_of_publication_work_letters>[A-Za-z]*)
        -?
    )?
    (?P<suppl>[^\n\r\u2028\u2029]*?)
    """,
    re.VERBOSE,
)
