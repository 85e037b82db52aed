"""
Config loader - reads and writes section capacities as YAML.

File format:

    sections:
      violin: 16
      cello: 12
      bass: 8
"""

from __future__ import annotations

from pathlib import Path

import yaml

from chuk_orchestra.models.config import OrchestraConfig


def load_config(path: Path) -> OrchestraConfig:
    """
    Load an orchestra config from a YAML file.

    Args:
        path: Path to the config file

    Returns:
        The loaded OrchestraConfig

    Raises:
        ValueError: If the file is not laid out as section capacities
        pydantic.ValidationError: If a capacity is invalid
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    return OrchestraConfig.from_yaml_dict(data)


def save_config(config: OrchestraConfig, path: Path) -> Path:
    """
    Save an orchestra config to a YAML file.

    Args:
        config: The config to save
        path: Destination path

    Returns:
        Path to the saved file
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

    return path
