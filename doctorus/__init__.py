"""
Doctorus Utilities

Shared status metadata, operation taxonomy, parameter store paths and audit
helpers for Doctorus services.
"""

__version__ = "0.1.0"

from .core.config import Config
from .types import (
    Locale,
    LabelFormat,
    DoctorusError,
    UnknownFeatureError,
    UnknownStatusError,
    UnknownLocaleOrFormatError,
    UnknownLocaleError,
    UnknownFormatError,
    InvalidTransitionError,
    ValidationError,
    ConfigurationError,
)
from .status import (
    StatusFeature,
    StatusMetadata,
    StatusRegistry,
    default_registry,
    MedicalServiceStatus,
    AccountLocationStatus,
    MedicalHistoryStatus,
    BooleanStatus,
)
from .operations import Resource, Action, Operation, Operations, get_operation_label
from .ssm import SSMParamKey, build_ssm_path, build_ssm_path_with_prefix
from .audit import calculate_changed_data, changed_data_includes_field

__all__ = [
    "Config",
    "Locale",
    "LabelFormat",
    "DoctorusError",
    "UnknownFeatureError",
    "UnknownStatusError",
    "UnknownLocaleOrFormatError",
    "UnknownLocaleError",
    "UnknownFormatError",
    "InvalidTransitionError",
    "ValidationError",
    "ConfigurationError",
    "StatusFeature",
    "StatusMetadata",
    "StatusRegistry",
    "default_registry",
    "MedicalServiceStatus",
    "AccountLocationStatus",
    "MedicalHistoryStatus",
    "BooleanStatus",
    "Resource",
    "Action",
    "Operation",
    "Operations",
    "get_operation_label",
    "SSMParamKey",
    "build_ssm_path",
    "build_ssm_path_with_prefix",
    "calculate_changed_data",
    "changed_data_includes_field",
]
