"""Comparison options."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

__all__ = ["CompareOptions", "DEFAULT_OPTIONS", "resolve_options"]


@dataclass(frozen=True)
class CompareOptions:
    """Options that alter comparison behavior.

    Attributes
    ----------
    case_sensitive : bool
        If True, call numbers keep their casing and lowercase letters
        sort after uppercase ones. If False (default), both call numbers
        are uppercased before parsing.
    """

    case_sensitive: bool = False

    def __post_init__(self) -> None:
        """Validate option types."""
        if not isinstance(self.case_sensitive, bool):
            raise TypeError(
                f"case_sensitive must be a bool, got {type(self.case_sensitive).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


DEFAULT_OPTIONS = CompareOptions()

_OPTION_NAMES = frozenset(f.name for f in fields(CompareOptions))


def resolve_options(options: CompareOptions | Mapping[str, Any] | None = None) -> CompareOptions:
    """Build the effective options for one comparison.

    Caller overrides are applied to a copy of ``DEFAULT_OPTIONS``; the
    defaults themselves are never changed.

    Parameters
    ----------
    options : CompareOptions | Mapping[str, Any] | None, optional
        Overrides, e.g. ``{"case_sensitive": True}``. None means defaults.

    Returns
    -------
    CompareOptions
        Effective options.

    Raises
    ------
    ValueError
        If a mapping names an unknown option.
    TypeError
        If an option value has the wrong type.
    """
    if isinstance(options, CompareOptions):
        return options
    if options is None:
        return replace(DEFAULT_OPTIONS)

    unknown = sorted(set(options) - _OPTION_NAMES)
    if unknown:
        raise ValueError(f"Unknown comparison option(s): {', '.join(unknown)}")

    return replace(DEFAULT_OPTIONS, **options)
