"""Node.js API docs heading ids."""

import re

from markdown_anchor.normalize_repetition import repetition_suffix

NON_ALNUM_RUN_RE = re.compile(r"[^a-z0-9]+")
# One run only: the leading one if present, else the trailing one.
EDGE_UNDERSCORES_RE = re.compile(r"^_+|_+$")
LEADING_NON_LETTER_RE = re.compile(r"^([^a-z])")


def get_nodejs_id(text: str, repetition: int | str | None = None) -> str:
    """Generate the id the Node.js doc tooling assigns to a heading.

    ``text`` is expected to be module-qualified already (``domain.example``).
    """
    text = NON_ALNUM_RUN_RE.sub("_", text)
    text = EDGE_UNDERSCORES_RE.sub("", text, count=1)
    text = LEADING_NON_LETTER_RE.sub(r"_\1", text)
    return text + repetition_suffix("_", repetition)
