"""Lowercasing restricted to the ASCII alphabet."""

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_only_to_lower_case(text: str) -> str:
    """Lowercase A-Z only.

    Accented letters, CJK, emoji and every other code point pass through
    unchanged, unlike ``str.lower``.
    """
    return text.translate(_ASCII_LOWER)
