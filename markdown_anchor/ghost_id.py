"""Ghost heading ids."""

import logging

from markdown_anchor.char_tables import GHOST_SUBSTITUTIONS, REMOVED_CHARS_RE
from markdown_anchor.normalize_repetition import normalize_repetition
from markdown_anchor.platform import Platform

logger = logging.getLogger(__name__)


def get_basic_ghost_id(text: str) -> str:
    """Drop spaces and punctuation, spelling out ``$`` and ``~``.

    Escape codes are not removed as a unit; only their ``%`` is dropped.
    """
    text = text.replace(" ", "")
    text = REMOVED_CHARS_RE[Platform.GHOST].sub("", text)
    for char, replacement in GHOST_SUBSTITUTIONS.items():
        text = text.replace(char, replacement)
    return text


def get_ghost_id(text: str, repetition: int | str | None = None) -> str:
    """Generate the id Ghost assigns to a heading.

    Ghost has no repetition suffix, so ``repetition`` is ignored.
    """
    if normalize_repetition(repetition):
        logger.debug("Ghost does not support repetitions; ignoring %s", repetition)
    return get_basic_ghost_id(text)
