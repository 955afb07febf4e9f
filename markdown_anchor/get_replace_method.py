"""Selection of the slugifier for a platform."""

import logging
from collections.abc import Callable

from markdown_anchor.bitbucket_id import get_bitbucket_id
from markdown_anchor.errors import MissingParameterError
from markdown_anchor.ghost_id import get_ghost_id
from markdown_anchor.github_id import get_github_id
from markdown_anchor.gitlab_id import get_gitlab_id
from markdown_anchor.nodejs_id import get_nodejs_id
from markdown_anchor.platform import Platform, resolve_platform

logger = logging.getLogger(__name__)

ReplaceMethod = Callable[..., str]

SLUGIFIERS: dict[Platform, ReplaceMethod] = {
    Platform.GITHUB: get_github_id,
    Platform.BITBUCKET: get_bitbucket_id,
    Platform.GITLAB: get_gitlab_id,
    Platform.NODEJS: get_nodejs_id,
    Platform.GHOST: get_ghost_id,
}


def _nodejs_method(module_name: str) -> ReplaceMethod:
    def replace(text: str, repetition: int | str | None = None) -> str:
        return get_nodejs_id(f"{module_name}.{text}", repetition)

    return replace


def get_replace_method(
    mode: Platform | str,
    repetition: int | str | None = None,
    module_name: str | None = None,
) -> ReplaceMethod:
    """Return the function turning heading text into an id for ``mode``.

    The returned callable takes ``(text, repetition=None)``. Node.js ids are
    namespaced by module, so ``module_name`` is required for ``nodejs.org``
    and is bound into the returned function.

    Raises:
        UnsupportedModeError: ``mode`` is not a supported platform.
        MissingParameterError: ``mode`` is ``nodejs.org`` and no module name
            was given.
    """
    platform = resolve_platform(mode)
    logger.debug("Using %s slugifier (repetition=%s)", platform, repetition)
    if platform is Platform.NODEJS:
        if not module_name:
            raise MissingParameterError(platform, "module_name")
        return _nodejs_method(module_name)
    return SLUGIFIERS[platform]
