"""Normalization of the repetition count used to disambiguate headings."""

from markdown_anchor.errors import InvalidRepetitionError


def normalize_repetition(value: int | str | None) -> int | None:
    """Read a repetition given as an int or a numeric string.

    Returns ``None`` when no suffix should be appended (absent, empty or zero).
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidRepetitionError(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        if not stripped.isdecimal():
            raise InvalidRepetitionError(value)
        count = int(stripped)
    elif isinstance(value, int):
        count = value
    else:
        raise InvalidRepetitionError(value)
    if count < 0:
        raise InvalidRepetitionError(value)
    return count or None


def repetition_suffix(separator: str, repetition: int | str | None) -> str:
    """Return ``separator + count`` for a truthy repetition, else an empty string."""
    count = normalize_repetition(repetition)
    return f"{separator}{count}" if count else ""
