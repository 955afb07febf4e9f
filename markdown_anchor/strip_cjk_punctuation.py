"""Removal of CJK punctuation from heading text."""

from markdown_anchor.char_tables import CJK_PUNCTUATION_RE


def strip_cjk_punctuation(text: str) -> str:
    """Remove full-width and CJK punctuation marks."""
    return CJK_PUNCTUATION_RE.sub("", text)
