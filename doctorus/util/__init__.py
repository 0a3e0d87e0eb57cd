"""
Utility package providing configuration helpers for Doctorus utilities.
"""

from .config import (
    ENV_PREFIX,
    load_config_from_env,
    merge_configs,
    normalize_config_key,
    load_config_file,
)

__all__ = [
    'ENV_PREFIX',
    'load_config_from_env',
    'merge_configs',
    'normalize_config_key',
    'load_config_file',
]
