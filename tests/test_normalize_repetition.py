"""Tests for repetition normalization."""

import pytest

from markdown_anchor.errors import InvalidRepetitionError
from markdown_anchor.normalize_repetition import normalize_repetition, repetition_suffix


def test_normalize_repetition_empty_values() -> None:
    """Verify absent, empty and zero counts mean no suffix."""
    assert normalize_repetition(None) is None
    assert normalize_repetition("") is None
    assert normalize_repetition(0) is None
    assert normalize_repetition("0") is None


def test_normalize_repetition_numbers() -> None:
    """Verify ints and numeric strings are read as counts."""
    assert normalize_repetition(3) == 3
    assert normalize_repetition("12") == 12
    assert normalize_repetition(" 4 ") == 4


@pytest.mark.parametrize("value", [-1, "-1", "abc", "1.5", True, 2.0])
def test_normalize_repetition_invalid(value: object) -> None:
    """Verify values that are not non-negative counts are rejected."""
    with pytest.raises(InvalidRepetitionError):
        normalize_repetition(value)  # type: ignore[arg-type]


def test_repetition_suffix() -> None:
    """Verify the suffix uses the given separator."""
    assert repetition_suffix("-", 2) == "-2"
    assert repetition_suffix("_", "07") == "_7"
    assert repetition_suffix("-", None) == ""
