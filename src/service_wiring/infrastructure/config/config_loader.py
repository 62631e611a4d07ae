"""Reads WiringConfig from application.yaml and an optional stage file."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from service_wiring.infrastructure.config.wiring_config import WiringConfig

logger = logging.getLogger(__name__)

BASE_FILE = "application.yaml"


def resolve_config_dir(config_dir: Optional[str] = None) -> Optional[str]:
    """Explicit argument first, then the CONFIG_DIR environment variable."""
    return config_dir or os.environ.get("CONFIG_DIR") or None


def load_wiring_config(config_dir: str, stage: Optional[str] = None) -> WiringConfig:
    """
    Load and validate the wiring configuration.

    ``application-{stage}.yaml`` is merged over ``application.yaml`` when it
    exists. The merged mapping is validated once, so stage values are checked
    with the same field types as the base file.

    Args:
        config_dir: Directory holding application.yaml
        stage: Stage name; defaults to the STAGE environment variable, then "local"

    Returns:
        The validated WiringConfig
    """
    directory = Path(config_dir)
    base_file = directory / BASE_FILE
    if not base_file.is_file():
        raise FileNotFoundError(f"{BASE_FILE} not found in {directory}")

    stage = stage or os.environ.get("STAGE", "local")
    data = _read_mapping(base_file)

    stage_file = directory / f"application-{stage}.yaml"
    if stage_file.is_file():
        data = _merge(data, _read_mapping(stage_file))
        logger.info(f"Applied stage overrides from {stage_file.name}")
    elif stage != "local":
        logger.warning(f"No {stage_file.name} in {directory}, using {BASE_FILE} only")

    return WiringConfig.model_validate(data)


def _read_mapping(path: Path) -> Dict[str, Any]:
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping, got {type(data).__name__}")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
