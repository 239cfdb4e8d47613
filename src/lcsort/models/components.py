"""Call-number component record for lcsort.

This module defines the structured form a raw LC call number is broken
into before comparison. Every comparison in the package consumes
records in this shape.
"""

from dataclasses import asdict, dataclass
from typing import Any

# Fields in the order they decide a comparison
COMPARISON_FIELDS = (
    "class_alpha",
    "class_numeric",
    "first_cutter_alpha",
    "first_cutter_numeric",
    "first_cutter_work_letters",
    "second_cutter_alpha",
    "second_cutter_numeric",
    "second_cutter_work_letters",
    "date_of_publication",
    "date_of_publication_work_letters",
    "suppl",
)


@dataclass(frozen=True)
class CallNumberComponents:
    """A LC call number broken up into its sortable components.

    Alphabetical components default to empty strings and numerical
    components default to 0. Cutter digits are stored as fractional
    decimals (0.xxx) so that "S35" files before "S4". A long run of
    trailing nines rounds up to exactly 1.0 in float precision.

    Attributes
    ----------
    pristine : str
        The call number exactly as given, original casing kept.
    class_alpha : str
        Leading classification letters (e.g., 'HF').
    class_numeric : float
        Class number, may carry one decimal point (e.g., 5381.5).
    first_cutter_alpha : str
        Letter of the first cutter.
    first_cutter_numeric : float
        Digits of the first cutter read as '0.<digits>'.
    first_cutter_work_letters : str
        Letters appended to the first cutter digits.
    second_cutter_alpha : str
        Letter of the second cutter.
    second_cutter_numeric : float
        Digits of the second cutter read as '0.<digits>'.
    second_cutter_work_letters : str
        Letters appended to the second cutter digits.
    date_of_publication : int
        Four-digit year.
    date_of_publication_work_letters : str
        Letters appended to the year (e.g., 'B' in '1987b').
    suppl : str
        Trailing text the grammar could not classify, or the whole
        normalized input when nothing matched.
    """

    pristine: str
    class_alpha: str = ""
    class_numeric: float = 0.0
    first_cutter_alpha: str = ""
    first_cutter_numeric: float = 0.0
    first_cutter_work_letters: str = ""
    second_cutter_alpha: str = ""
    second_cutter_numeric: float = 0.0
    second_cutter_work_letters: str = ""
    date_of_publication: int = 0
    date_of_publication_work_letters: str = ""
    suppl: str = ""

    @property
    def is_structured(self) -> bool:
        """Whether the call-number grammar matched.

        The grammar requires class letters, so an empty ``class_alpha``
        means the whole input was routed to ``suppl``.
        """
        return self.class_alpha != ""

    def sort_key(self) -> tuple[Any, ...]:
        """Return the comparison fields as a tuple, in priority order.

        Ordering two keys with ``<`` gives the same result as
        ``compare_components`` on the records.
        """
        return tuple(getattr(self, name) for name in COMPARISON_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
