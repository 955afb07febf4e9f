"""Computation of the URL fragment for a heading."""

from markdown_anchor.ascii_only_to_lower_case import ascii_only_to_lower_case
from markdown_anchor.char_tables import WHITESPACE
from markdown_anchor.get_encode_uri_method import get_encode_uri_method
from markdown_anchor.get_replace_method import get_replace_method
from markdown_anchor.normalize_repetition import normalize_repetition
from markdown_anchor.platform import Platform


def get_url_hash(
    header: str,
    mode: Platform | str,
    repetition: int | str | None = None,
    module_name: str | None = None,
) -> str:
    """Return the encoded fragment (without ``#``) ``mode`` uses for ``header``."""
    count = normalize_repetition(repetition)
    replace = get_replace_method(mode, count, module_name)
    encode = get_encode_uri_method(mode)
    text = ascii_only_to_lower_case(header.strip(WHITESPACE))
    return encode(replace(text, count))
