"""
YAML Configuration Loader
=========================

Loads the infrastructure configuration (database URLs, credentials, pool
defaults) from a YAML file mounted into the container.

Example:
    >>> from dbhotel.infrastructure.k8s import YamlConfig, load_infrastructure_config
    >>>
    >>> config = load_infrastructure_config()
    >>> oracle_cfg = config.get("databases.oracle")
    >>> jdbc_url = oracle_cfg["jdbc_url"]
"""

import os

import yaml
from dotenv import load_dotenv
from pathlib import Path
from typing import Any, Optional


INFRASTRUCTURE_CONFIG_ENV = "INFRASTRUCTURE_CONFIG_PATH"


class YamlConfig:
    """
    Simple YAML loader with dot-notation access.

    Example:
        >>> config = YamlConfig("config/infrastructure.yaml")
        >>> pool_cfg = config.get("databases.pool")
        >>> max_size = pool_cfg["maximum_pool_size"]
    """

    def __init__(self, yaml_path: str):
        """
        Initialize the loader by loading the YAML file.

        Args:
            yaml_path: Path to YAML file (absolute or relative to project root)

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If file does not contain a valid dict
        """
        path = Path(yaml_path)
        if not path.is_absolute():
            project_root = Path(__file__).parent.parent.parent.parent
            path = project_root / path

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            self._data = yaml.safe_load(f)

        if not isinstance(self._data, dict):
            raise ValueError(f"Invalid config: expected dict, got {type(self._data)}")

    def get(self, path: str) -> Any:
        """
        Access via dot-notation.

        Args:
            path: Path separated by dots (e.g. "databases.oracle")

        Returns:
            Raw value (dict/list/primitive)

        Raises:
            KeyError: If path not found
        """
        keys = path.split(".")
        current = self._data
        for key in keys:
            if not isinstance(current, dict) or key not in current:
                raise KeyError(f"Path '{path}' not found")
            current = current[key]
        return current

    def has(self, path: str) -> bool:
        """Return True if the dotted path exists."""
        try:
            self.get(path)
        except KeyError:
            return False
        return True


def load_infrastructure_config(yaml_path: Optional[str] = None) -> YamlConfig:
    """
    Load the infrastructure YAML, reading `.env` first.

    Args:
        yaml_path: Explicit path. If None, INFRASTRUCTURE_CONFIG_PATH is used.

    Raises:
        ValueError: If no path is given and the environment variable is unset
    """
    load_dotenv()
    path = yaml_path or os.getenv(INFRASTRUCTURE_CONFIG_ENV)
    if not path:
        raise ValueError(
            f"No infrastructure config path given and {INFRASTRUCTURE_CONFIG_ENV} is not set"
        )
    return YamlConfig(path)
