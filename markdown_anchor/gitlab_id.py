"""GitLab heading ids."""

import re

from markdown_anchor.char_tables import REMOVED_CHARS_RE, WHITESPACE_RUN_RE
from markdown_anchor.normalize_repetition import repetition_suffix
from markdown_anchor.platform import Platform
from markdown_anchor.strip_cjk_punctuation import strip_cjk_punctuation

HTML_TAG_PAIR_RE = re.compile(r"<(.*)>(.*)</\1>")
IMAGE_RE = re.compile(r"!\[.*\]\(.*\)")
LINK_RE = re.compile(r"\[(.*)\]\(.*\)")
HYPHEN_RUN_RE = re.compile(r"-+")


def get_gitlab_id(text: str, repetition: int | str | None = None) -> str:
    """Generate the id GitLab assigns to a heading.

    Only one markdown link substitution is made, matching GitLab.
    """
    text = HTML_TAG_PAIR_RE.sub(r"\2", text)
    text = IMAGE_RE.sub("", text)
    text = LINK_RE.sub(r"\1", text, count=1)
    text = WHITESPACE_RUN_RE.sub("-", text)
    text = REMOVED_CHARS_RE[Platform.GITLAB].sub("", text)
    text = strip_cjk_punctuation(text)
    text = HYPHEN_RUN_RE.sub("-", text)
    text = text.removeprefix("-").removesuffix("-")
    return text + repetition_suffix("-", repetition)
