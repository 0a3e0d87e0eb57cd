"""
Configuration utilities for Doctorus utilities.
Provides configuration loading from the environment and from JSON/YAML files.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from ..types.errors import ConfigurationError


logger = logging.getLogger(__name__)

ENV_PREFIX = "DOCTORUS_"


def load_config_from_env(prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """
    Load configuration from environment variables with given prefix.
    """
    config = {}

    for key, value in os.environ.items():
        if key.startswith(prefix):
            # Remove prefix and convert to lowercase
            config_key = normalize_config_key(key[len(prefix):])
            config[config_key] = value

    return config


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.
    Later configs override earlier ones.
    """
    result = {}

    for config in configs:
        if isinstance(config, dict):
            result.update(config)

    return result


def normalize_config_key(key: str) -> str:
    """Normalize configuration key to standard format."""
    return key.lower().replace('-', '_')


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file (JSON or YAML).

    Raises:
        ConfigurationError: if the file is missing, unreadable, has an
            unsupported extension or does not contain a mapping
    """
    path = Path(file_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}", config_key="file_path",
                                 config_value=file_path)

    file_ext = path.suffix.lower()

    with open(path, 'r', encoding='utf-8') as f:
        try:
            if file_ext == '.json':
                data = json.load(f)
            elif file_ext in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            else:
                raise ConfigurationError(f"Unsupported configuration file format: {file_ext}",
                                         config_key="file_path", config_value=file_path)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {file_path}: {e}",
                                     config_key="file_path", config_value=file_path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {file_path} must contain a mapping",
                                 config_key="file_path", config_value=file_path)

    logger.info(f"Loaded configuration from {file_path}")
    return {normalize_config_key(str(k)): v for k, v in data.items()}
