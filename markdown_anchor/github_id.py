"""GitHub heading ids."""

import re

import emoji

from markdown_anchor.char_tables import REMOVED_CHARS_RE
from markdown_anchor.normalize_repetition import repetition_suffix
from markdown_anchor.platform import Platform
from markdown_anchor.strip_cjk_punctuation import strip_cjk_punctuation

NUMERIC_CHAR_REF_RE = re.compile(r"&#([0-9]+);", re.IGNORECASE)
ESCAPE_CODE_RE = re.compile(r"%([abcdef]|[0-9]){2}", re.IGNORECASE)


def _decode_char_ref(match: re.Match[str]) -> str:
    # Char refs are read as UTF-16 code units.
    return chr(int(match.group(1)) & 0xFFFF).lower()


def get_basic_github_id(text: str) -> str:
    """Apply the GitHub transform without repetition or emoji handling.

    Shared with Bitbucket, whose ids are built from the same base.
    """
    text = NUMERIC_CHAR_REF_RE.sub(_decode_char_ref, text)
    text = text.replace(" ", "-")
    text = ESCAPE_CODE_RE.sub("", text)
    text = REMOVED_CHARS_RE[Platform.GITHUB].sub("", text)
    return strip_cjk_punctuation(text)


def get_github_id(text: str, repetition: int | str | None = None) -> str:
    """Generate the id GitHub assigns to a heading.

    GitHub does not collapse consecutive hyphens. Emoji are stripped after the
    repetition suffix is appended.
    """
    text = get_basic_github_id(text) + repetition_suffix("-", repetition)
    return emoji.replace_emoji(text, replace="")
