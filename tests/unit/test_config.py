"""Tests for comparison options."""

from dataclasses import FrozenInstanceError

import pytest

from lcsort.config import DEFAULT_OPTIONS, CompareOptions, resolve_options


@pytest.mark.unit
def test_default_options() -> None:
    """Test comparisons are case-insensitive by default."""
    assert DEFAULT_OPTIONS.case_sensitive is False
    assert DEFAULT_OPTIONS.to_dict() == {"case_sensitive": False}


@pytest.mark.unit
def test_resolve_none_returns_fresh_defaults() -> None:
    """Test missing options resolve to a copy of the defaults."""
    opts = resolve_options(None)

    assert opts == DEFAULT_OPTIONS
    assert opts is not DEFAULT_OPTIONS


@pytest.mark.unit
def test_resolve_mapping_overrides_defaults() -> None:
    """Test mapping overrides produce new options and leave defaults alone."""
    opts = resolve_options({"case_sensitive": True})

    assert opts.case_sensitive is True
    assert DEFAULT_OPTIONS.case_sensitive is False


@pytest.mark.unit
def test_resolve_empty_mapping() -> None:
    """Test empty mapping resolves to defaults."""
    assert resolve_options({}) == DEFAULT_OPTIONS


@pytest.mark.unit
def test_resolve_options_instance_passthrough() -> None:
    """Test an options instance is used as is."""
    opts = CompareOptions(case_sensitive=True)

    assert resolve_options(opts) is opts


@pytest.mark.unit
def test_resolve_unknown_option_raises() -> None:
    """Test unknown option names are rejected."""
    with pytest.raises(ValueError, match="locale"):
        resolve_options({"locale": "en_US"})


@pytest.mark.unit
@pytest.mark.parametrize("value", ["yes", 1, None])
def test_case_sensitive_must_be_bool(value: object) -> None:
    """Test non-bool case_sensitive values are rejected."""
    with pytest.raises(TypeError):
        CompareOptions(case_sensitive=value)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        resolve_options({"case_sensitive": value})


@pytest.mark.unit
def test_options_are_immutable() -> None:
    """Test the shared defaults cannot be modified in place."""
    with pytest.raises(FrozenInstanceError):
        DEFAULT_OPTIONS.case_sensitive = True  # type: ignore[misc]
