"""
Package types provides shared type definitions for Doctorus utilities.

This package contains common types used across multiple packages to avoid duplication:
- Supported locales and label formats
- The structured error hierarchy and error codes
"""

from .common import (
    Locale,
    LabelFormat,
    SUPPORTED_LOCALES,
    SUPPORTED_FORMATS,
    DEFAULT_LOCALE,
    DEFAULT_FORMAT,
    LocaleLike,
    FormatLike,
    resolve_locale,
    resolve_format,
)

from .errors import (
    # Base error types
    DoctorusError,
    UnknownFeatureError,
    UnknownStatusError,
    UnknownLocaleOrFormatError,
    UnknownLocaleError,
    UnknownFormatError,
    InvalidTransitionError,
    ValidationError,
    ConfigurationError,

    # Error codes
    ErrorCode,
    UNKNOWN_FEATURE,
    UNKNOWN_STATUS,
    UNKNOWN_LOCALE,
    UNKNOWN_FORMAT,
    INVALID_TRANSITION,
    VALIDATION_FAILED,
    CONFIGURATION_ERROR,
    INTERNAL_ERROR,
)

__all__ = [
    # Locale types
    'Locale',
    'LabelFormat',
    'SUPPORTED_LOCALES',
    'SUPPORTED_FORMATS',
    'DEFAULT_LOCALE',
    'DEFAULT_FORMAT',
    'LocaleLike',
    'FormatLike',
    'resolve_locale',
    'resolve_format',

    # Error types
    'DoctorusError',
    'UnknownFeatureError',
    'UnknownStatusError',
    'UnknownLocaleOrFormatError',
    'UnknownLocaleError',
    'UnknownFormatError',
    'InvalidTransitionError',
    'ValidationError',
    'ConfigurationError',
    'ErrorCode',
    'UNKNOWN_FEATURE',
    'UNKNOWN_STATUS',
    'UNKNOWN_LOCALE',
    'UNKNOWN_FORMAT',
    'INVALID_TRANSITION',
    'VALIDATION_FAILED',
    'CONFIGURATION_ERROR',
    'INTERNAL_ERROR',
]
