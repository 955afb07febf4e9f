"""Bitbucket heading ids."""

import re

from markdown_anchor.github_id import get_basic_github_id
from markdown_anchor.normalize_repetition import repetition_suffix

BITBUCKET_PREFIX = "markdown-header-"
MULTI_HYPHEN_RE = re.compile(r"--+")


def get_bitbucket_id(text: str, repetition: int | str | None = None) -> str:
    """Generate the id Bitbucket assigns to a heading.

    Bitbucket condenses consecutive hyphens (GitHub doesn't) and separates the
    repetition with an underscore.
    """
    text = MULTI_HYPHEN_RE.sub("-", BITBUCKET_PREFIX + get_basic_github_id(text))
    return text + repetition_suffix("_", repetition)
