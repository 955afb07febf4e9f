"""Character tables and patterns shared by the platform slugifiers.

Each platform removes a fixed set of characters from heading text. The sets
are kept here, keyed by platform, so adding a platform only adds an entry.
"""

import re

from markdown_anchor.platform import Platform

CJK_PUNCTUATION = (
    "。？！，、；：“”【】"
    "（）〔〕［］﹃﹄ ‘’﹁"
    "﹂—…－～《》〈〉「」"
)

REMOVED_CHARS: dict[Platform, str] = {
    Platform.GITHUB: "/?!:[]`.,()*\"';{}+=<>~$|#@%^&¥–—",
    Platform.GITLAB: "/?!:[]`.,()*\"';{}+=<>~$|#@",
    Platform.GHOST: "/?:[]`.,()*\"';{}-+=<>!@#%^&\\|",
}

# Ghost keeps these as letters rather than dropping them.
GHOST_SUBSTITUTIONS: dict[str, str] = {"$": "d", "~": "t"}


def char_class(chars: str) -> re.Pattern[str]:
    """Compile a pattern matching any single character of ``chars``."""
    return re.compile("[" + re.escape(chars) + "]")


CJK_PUNCTUATION_RE = char_class(CJK_PUNCTUATION)
REMOVED_CHARS_RE: dict[Platform, re.Pattern[str]] = {
    platform: char_class(chars) for platform, chars in REMOVED_CHARS.items()
}

# Whitespace as JavaScript trim() and \s see it: includes U+FEFF, excludes
# \x1c-\x1f and \x85.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE_RUN_RE = re.compile("[" + re.escape(WHITESPACE) + "]+")
