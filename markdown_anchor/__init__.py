"""markdown_anchor - markdown links to headings on GitHub, GitLab and friends.

Usage::

    from markdown_anchor import anchor

    anchor("Hello, World!")                      # '[Hello, World!](#hello-world)'
    anchor("Hello World", "bitbucket.org", 1)    # '[Hello World](#markdown-header-hello-world_1)'
"""

from markdown_anchor.anchor import anchor
from markdown_anchor.ascii_only_to_lower_case import ascii_only_to_lower_case
from markdown_anchor.bitbucket_id import get_bitbucket_id
from markdown_anchor.errors import (
    AnchorError,
    InvalidRepetitionError,
    MissingParameterError,
    UnsupportedModeError,
)
from markdown_anchor.get_encode_uri_method import get_encode_uri_method
from markdown_anchor.get_replace_method import get_replace_method
from markdown_anchor.get_url_hash import get_url_hash
from markdown_anchor.ghost_id import get_basic_ghost_id, get_ghost_id
from markdown_anchor.github_id import get_basic_github_id, get_github_id
from markdown_anchor.gitlab_id import get_gitlab_id
from markdown_anchor.nodejs_id import get_nodejs_id
from markdown_anchor.platform import Platform

__version__ = "0.1.0"
__all__ = [
    "AnchorError",
    "InvalidRepetitionError",
    "MissingParameterError",
    "Platform",
    "UnsupportedModeError",
    "anchor",
    "ascii_only_to_lower_case",
    "get_basic_ghost_id",
    "get_basic_github_id",
    "get_bitbucket_id",
    "get_encode_uri_method",
    "get_ghost_id",
    "get_github_id",
    "get_gitlab_id",
    "get_nodejs_id",
    "get_replace_method",
    "get_url_hash",
]
