"""Percent-encoding of computed ids."""

from collections.abc import Callable
from urllib.parse import quote

from markdown_anchor.platform import Platform, resolve_platform

# Reserved and unreserved characters that encodeURI leaves alone.
URI_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"
ENCODED_ZWJ = "%E2%80%8D"
ZWJ = "\u200d"


def encode_uri(uri: str) -> str:
    """Percent-encode ``uri`` as UTF-8, keeping URI syntax characters."""
    return quote(uri, safe=URI_SAFE_CHARS)


def encode_github_uri(uri: str) -> str:
    """Encode like encode_uri but keep zero width joiners literal.

    Joiners build emoji sequences (e.g. 👷🏼‍♀️); GitHub doesn't encode them, so
    the anchor only resolves with the literal character.
    """
    return encode_uri(uri).replace(ENCODED_ZWJ, ZWJ)


def get_encode_uri_method(mode: Platform | str) -> Callable[[str], str]:
    """Return the encoder matching how ``mode`` writes ids into URLs."""
    if resolve_platform(mode) is Platform.GITHUB:
        return encode_github_uri
    return encode_uri
