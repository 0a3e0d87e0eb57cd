"""
Parameter store keys and path helpers.
"""

from .keys import SSMParamKey, SSM_PARAM_KEY
from .utils import (
    build_ssm_path,
    build_ssm_path_with_prefix,
    extract_env_from_path,
    extract_key_from_path,
    is_env_agnostic,
    resolve_ssm_path,
)

__all__ = [
    'SSMParamKey',
    'SSM_PARAM_KEY',
    'build_ssm_path',
    'build_ssm_path_with_prefix',
    'extract_env_from_path',
    'extract_key_from_path',
    'is_env_agnostic',
    'resolve_ssm_path',
]
