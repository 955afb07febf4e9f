"""Markdown links to headings."""

from markdown_anchor.get_url_hash import get_url_hash
from markdown_anchor.platform import Platform


def anchor(
    header: str,
    mode: Platform | str | None = None,
    repetition: int | str | None = None,
    module_name: str | None = None,
) -> str:
    """Return a markdown link to ``header`` on ``mode`` (GitHub by default).

    The link text is the heading exactly as given.
    """
    fragment = get_url_hash(header, mode or Platform.GITHUB, repetition, module_name)
    return f"[{header}](#{fragment})"
