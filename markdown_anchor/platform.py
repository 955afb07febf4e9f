"""The closed set of hosting platforms an anchor can be generated for."""

from enum import Enum

from markdown_anchor.errors import UnsupportedModeError


class Platform(str, Enum):
    """Hosting platform, keyed by the host name users pass on the command line."""

    GITHUB = "github.com"
    BITBUCKET = "bitbucket.org"
    GITLAB = "gitlab.com"
    NODEJS = "nodejs.org"
    GHOST = "ghost.org"

    def __str__(self) -> str:
        return self.value


def resolve_platform(mode: Platform | str) -> Platform:
    """Look up a platform by key, raising UnsupportedModeError for unknown keys."""
    try:
        return Platform(mode)
    except ValueError:
        raise UnsupportedModeError(mode) from None
