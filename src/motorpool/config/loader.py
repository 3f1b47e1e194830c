"""YAML loader for fleet configuration files (see ``scenarios/showroom.yaml``)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from motorpool.config.fleet import FleetConfig

logger = logging.getLogger(__name__)


def load_fleet_config(path: Path | str) -> FleetConfig:
    """Load and validate a fleet configuration.

    An empty file yields the default fleet.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If the content does not match :class:`FleetConfig`.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Fleet config not found: {config_path}")

    with open(config_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    config = FleetConfig.model_validate(data)
    logger.info("Loaded %d vehicle(s) from %s", len(config.vehicles), config_path)
    return config
