"""Call-number parsing."""

from lcsort.models.components import CallNumberComponents

from .grammar import LC_CALL_NUMBER_RE

__all__ = ["parse_call_number"]


def _cutter_fraction(digits: str | None) -> float:
    """Read cutter digits as the fractional part of a decimal."""
    if not digits:
        return 0.0
    return float("0." + digits)


def parse_call_number(call_number: str, case_sensitive: bool = False) -> CallNumberComponents:
    """Break up a LC call number into its sortable components.

    Parameters
    ----------
    call_number : str
        The call number to parse.
    case_sensitive : bool, optional
        If False, the string components are uppercased so they compare
        without regard to case, by default False.

    Returns
    -------
    CallNumberComponents
        Components ready for comparison. Never raises for string input:
        text that does not look like a LC call number is kept whole in
        ``suppl``.

    Examples
    --------
        >>> c = parse_call_number("AM101 .S3533 L58 1987b")
        >>> c.class_alpha, c.first_cutter_numeric, c.date_of_publication_work_letters
        ('AM', 0.3533, 'B')
    """
    pristine = call_number
    if not case_sensitive:
        call_number = call_number.upper()

    match = LC_CALL_NUMBER_RE.fullmatch(call_number)
    if match is None:
        return CallNumberComponents(pristine=pristine, suppl=call_number)

    groups = match.groupdict(default="")
    date = groups["date_of_publication"]

    return CallNumberComponents(
        pristine=pristine,
        class_alpha=groups["class_alpha"],
        class_numeric=float(groups["class_numeric"]),
        first_cutter_alpha=groups["first_cutter_alpha"],
        first_cutter_numeric=_cutter_fraction(groups["first_cutter_digits"]),
        first_cutter_work_letters=groups["first_cutter_work_letters"],
        second_cutter_alpha=groups["second_cutter_alpha"],
        second_cutter_numeric=_cutter_fraction(groups["second_cutter_digits"]),
        second_cutter_work_letters=groups["second_cutter_work_letters"],
        date_of_publication=int(date) if date else 0,
        date_of_publication_work_letters=groups["date_of_publication_work_letters"],
        suppl=groups["suppl"],
    )
