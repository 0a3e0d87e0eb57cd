"""
Common types shared across Doctorus packages.
Provides the supported display locales and label formats.
"""

from enum import Enum
from typing import Tuple, Union

from .errors import UnknownLocaleError, UnknownFormatError


class Locale(str, Enum):
    """Supported display languages."""
    US_EN = "us-EN"
    FR_FR = "fr-FR"

    def __str__(self) -> str:
        return self.value


class LabelFormat(str, Enum):
    """Label length variants."""
    SHORT = "short"
    LONG = "long"

    def __str__(self) -> str:
        return self.value


SUPPORTED_LOCALES: Tuple[Locale, ...] = tuple(Locale)
SUPPORTED_FORMATS: Tuple[LabelFormat, ...] = tuple(LabelFormat)
DEFAULT_LOCALE = Locale.US_EN
DEFAULT_FORMAT = LabelFormat.SHORT

LocaleLike = Union[Locale, str]
FormatLike = Union[LabelFormat, str]


def resolve_locale(locale: LocaleLike) -> Locale:
    """
    Resolve a locale tag to a Locale member.

    Raises:
        UnknownLocaleError: if the tag is not one of the supported locales
    """
    try:
        return Locale(locale)
    except ValueError:
        raise UnknownLocaleError(locale) from None


def resolve_format(label_format: FormatLike) -> LabelFormat:
    """
    Resolve a label format name to a LabelFormat member.

    Raises:
        UnknownFormatError: if the name is neither "short" nor "long"
    """
    try:
        return LabelFormat(label_format)
    except ValueError:
        raise UnknownFormatError(label_format) from None
