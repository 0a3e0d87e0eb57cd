"""
Parameter store path utilities.

Paths are built as /<env>/<key>, or /<key> for environment-agnostic
parameters shared by every stage.
"""

import re
from typing import Optional, Union, TYPE_CHECKING

from .keys import SSMParamKey

if TYPE_CHECKING:
    from ..core.config import Config


_ENV_PATTERN = re.compile(r'^/([^/]+)/')

KeyLike = Union[SSMParamKey, str]


def _key_value(key: KeyLike) -> str:
    return key.value if isinstance(key, SSMParamKey) else str(key)


def build_ssm_path(env: Optional[str], key: KeyLike) -> str:
    """
    Build parameter path with optional environment prefix.

    Args:
        env: Environment name (e.g., 'dev', 'staging', 'prod'), or None for
            env-agnostic parameters
        key: Parameter key

    Example:
        >>> build_ssm_path('prod', SSMParamKey.COGNITO_USER_POOL_ID)
        '/prod/user-pool-id'
        >>> build_ssm_path(None, SSMParamKey.DB_USER)
        '/db-user'
    """
    key_value = _key_value(key)
    return f"/{env}/{key_value}" if env else f"/{key_value}"


def build_ssm_path_with_prefix(prefix: str, key: KeyLike) -> str:
    """
    Build parameter path with custom prefix.

    Example:
        >>> build_ssm_path_with_prefix('/myapp/prod/', SSMParamKey.DB_USER)
        '/myapp/prod/db-user'
    """
    normalized_prefix = prefix[:-1] if prefix.endswith('/') else prefix
    key_value = _key_value(key)
    normalized_key = key_value if key_value.startswith('/') else f"/{key_value}"
    return f"{normalized_prefix}{normalized_key}"


def extract_env_from_path(path: str) -> Optional[str]:
    """
    Extract environment from parameter path.

    Returns the first segment when another segment follows it, otherwise
    None (env-agnostic or malformed path).

    Example:
        >>> extract_env_from_path('/prod/user-pool-id')
        'prod'
        >>> extract_env_from_path('/db-user') is None
        True
    """
    match = _ENV_PATTERN.match(path)
    return match.group(1) if match else None


def extract_key_from_path(path: str) -> Optional[SSMParamKey]:
    """
    Parse parameter path to extract key.

    Example:
        >>> extract_key_from_path('/myapp/staging/db-password')
        <SSMParamKey.DB_PASSWORD: 'db-password'>
    """
    key_value = path.split('/')[-1]
    try:
        return SSMParamKey(key_value)
    except ValueError:
        return None


def is_env_agnostic(path: str) -> bool:
    """Check if a path has no environment prefix (a single segment)."""
    parts = [part for part in path.split('/') if part]
    return len(parts) == 1


def resolve_ssm_path(key: KeyLike, config: 'Config') -> str:
    """
    Build the parameter path for a key using configured settings.

    A configured ssm_prefix wins over the environment; without either the
    path is env-agnostic.
    """
    if config.ssm_prefix:
        return build_ssm_path_with_prefix(config.ssm_prefix, key)
    return build_ssm_path(config.environment, key)
