"""Configuration loader for excov."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from excov.config.schema import ExcovConfig

logger = logging.getLogger(__name__)


def load_config(path: Path | str | None = None) -> ExcovConfig:
    """Load configuration from a YAML file.

    If path is None, doesn't exist, or is a directory, returns defaults.
    Raises ValueError for malformed YAML.
    """
    if path is None:
        return ExcovConfig()

    path = Path(path).expanduser().resolve()
    if not path.is_file():
        logger.debug("No config file at %s, using defaults", path)
        return ExcovConfig()

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {path}: {e}") from e

    if data is None or not isinstance(data, dict):
        logger.warning("Config %s is not a mapping, using defaults", path)
        return ExcovConfig()

    logger.debug("Loaded config from %s (sections: %s)", path, ", ".join(data))
    return ExcovConfig(**data)
