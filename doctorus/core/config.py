"""
Configuration module for Doctorus utilities.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from ..types.common import Locale, DEFAULT_LOCALE, resolve_locale
from ..types.errors import ConfigurationError, UnknownLocaleError
from ..util.config import ENV_PREFIX, load_config_from_env, load_config_file, merge_configs


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Settings shared by services embedding Doctorus utilities."""
    environment: Optional[str] = None
    ssm_prefix: Optional[str] = None
    default_locale: Locale = DEFAULT_LOCALE
    log_level: str = "INFO"

    def __post_init__(self):
        try:
            self.default_locale = resolve_locale(self.default_locale)
        except UnknownLocaleError as e:
            raise ConfigurationError(
                f"Unsupported default locale: {self.default_locale}",
                config_key="default_locale",
                config_value=self.default_locale
            ) from e
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
        if not self.environment:
            self.environment = None
        if not self.ssm_prefix:
            self.ssm_prefix = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Create configuration from a mapping; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        return cls(**values)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "Config":
        """Create configuration from environment variables"""
        return cls.from_dict(load_config_from_env(prefix))

    @classmethod
    def from_file(cls, file_path: str) -> "Config":
        """Create configuration from a JSON or YAML file"""
        return cls.from_dict(load_config_file(file_path))

    @classmethod
    def load(cls, file_path: Optional[str] = None, prefix: str = ENV_PREFIX) -> "Config":
        """
        Create configuration from an optional file overlaid with environment
        variables; environment values win.
        """
        file_values = load_config_file(file_path) if file_path else {}
        return cls.from_dict(merge_configs(file_values, load_config_from_env(prefix)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'environment': self.environment,
            'ssm_prefix': self.ssm_prefix,
            'default_locale': self.default_locale.value,
            'log_level': self.log_level,
        }

    def validate(self) -> bool:
        """Validate the configuration"""
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of: {', '.join(LOG_LEVELS)}",
                config_key="log_level",
                config_value=self.log_level
            )
        if self.environment is not None and '/' in self.environment:
            raise ConfigurationError(
                "environment must be a single path segment",
                config_key="environment",
                config_value=self.environment
            )
        if self.ssm_prefix is not None and not self.ssm_prefix.startswith('/'):
            raise ConfigurationError(
                "ssm_prefix must start with '/'",
                config_key="ssm_prefix",
                config_value=self.ssm_prefix
            )
        return True
