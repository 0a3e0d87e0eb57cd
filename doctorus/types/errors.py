"""
Error types and error codes for Doctorus utilities.
Provides structured error handling across all packages.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Standard error codes used across Doctorus utilities."""
    UNKNOWN_FEATURE = "unknown_feature"
    UNKNOWN_STATUS = "unknown_status"
    UNKNOWN_LOCALE = "unknown_locale"
    UNKNOWN_FORMAT = "unknown_format"
    INVALID_TRANSITION = "invalid_transition"
    VALIDATION_FAILED = "validation_failed"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
UNKNOWN_FEATURE = ErrorCode.UNKNOWN_FEATURE
UNKNOWN_STATUS = ErrorCode.UNKNOWN_STATUS
UNKNOWN_LOCALE = ErrorCode.UNKNOWN_LOCALE
UNKNOWN_FORMAT = ErrorCode.UNKNOWN_FORMAT
INVALID_TRANSITION = ErrorCode.INVALID_TRANSITION
VALIDATION_FAILED = ErrorCode.VALIDATION_FAILED
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


def _raw(value: Any) -> Any:
    """Unwrap enum members so details carry plain values."""
    return value.value if isinstance(value, Enum) else value


class DoctorusError(Exception):
    """Base exception for all Doctorus utility errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = dict(details or {})
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class UnknownFeatureError(DoctorusError):
    """Raised when a status feature is not registered."""

    def __init__(self, feature: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Unknown status feature: {_raw(feature)}", UNKNOWN_FEATURE, details)
        self.feature = _raw(feature)
        self.details['feature'] = str(self.feature)


class UnknownStatusError(DoctorusError):
    """Raised when a status value is not a member of the feature's enumeration."""

    def __init__(self, feature: Any, status: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Unknown status for feature {_raw(feature)}: {_raw(status)}",
            UNKNOWN_STATUS,
            details
        )
        self.feature = _raw(feature)
        self.status = _raw(status)
        self.details['feature'] = str(self.feature)
        self.details['status'] = str(self.status)


class UnknownLocaleOrFormatError(DoctorusError):
    """Raised when a locale or label format is outside the supported closed set."""


class UnknownLocaleError(UnknownLocaleOrFormatError):
    """Raised for an unsupported locale tag."""

    def __init__(self, locale: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Unsupported locale: {_raw(locale)}", UNKNOWN_LOCALE, details)
        self.locale = _raw(locale)
        self.details['locale'] = str(self.locale)


class UnknownFormatError(UnknownLocaleOrFormatError):
    """Raised for an unsupported label format."""

    def __init__(self, label_format: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Unsupported label format: {_raw(label_format)}", UNKNOWN_FORMAT, details)
        self.label_format = _raw(label_format)
        self.details['format'] = str(self.label_format)


class InvalidTransitionError(DoctorusError):
    """Raised by callers that enforce a workflow transition which is not allowed."""

    def __init__(
        self,
        feature: Any,
        from_status: Any,
        to_status: Any,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            f"Transition {_raw(from_status)} -> {_raw(to_status)} is not allowed for feature {_raw(feature)}",
            INVALID_TRANSITION,
            details
        )
        self.feature = _raw(feature)
        self.from_status = _raw(from_status)
        self.to_status = _raw(to_status)
        self.details['feature'] = str(self.feature)
        self.details['from'] = str(self.from_status)
        self.details['to'] = str(self.to_status)


class ValidationError(DoctorusError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, VALIDATION_FAILED, details)
        self.field = field
        self.value = value

        if field:
            self.details['field'] = field
        if value is not None:
            self.details['value'] = str(value)


class ConfigurationError(DoctorusError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
