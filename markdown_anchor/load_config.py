"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from markdown_anchor.platform import resolve_platform

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("link", "hash")

DEFAULT_CONFIG: dict[str, Any] = {
    "platform": "github.com",
    "module_name": None,
    "output": "link",
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises:
        ValueError: the file is not a mapping or names an unknown output format.
        UnsupportedModeError: the file names an unknown platform.
    """
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            logger.debug("Loading config from %s", p)
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file must contain a mapping: {p}"
                raise ValueError(msg)
            for key in sorted(set(user_config) - set(DEFAULT_CONFIG)):
                logger.warning("Ignoring unknown config key: %s", key)
                del user_config[key]
            config = {**config, **user_config}
        else:
            logger.debug("Config file %s not found, using defaults", p)
    resolve_platform(config["platform"])
    if config["output"] not in OUTPUT_FORMATS:
        msg = f"Unknown output format: {config['output']}"
        raise ValueError(msg)
    return config
