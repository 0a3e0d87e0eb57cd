"""
Shared status types for all status modules.
Provides the metadata structure (icon, color, bilingual labels and
descriptions) attached to every status value, and the feature names the
registry is keyed by.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, TypeVar

from ..types.common import (
    Locale,
    LabelFormat,
    LocaleLike,
    FormatLike,
    DEFAULT_LOCALE,
    DEFAULT_FORMAT,
    resolve_locale,
    resolve_format,
)
from ..types.errors import ValidationError


S = TypeVar("S", bound=Enum)


class StatusFeature(str, Enum):
    """Names of the status features known to the default registry."""
    MEDICAL_SERVICE = "medicalService"
    ACCOUNT_LOCATION = "accountLocation"
    MEDICAL_HISTORY = "medicalHistory"
    YES_NO = "yesNo"
    ACTIVE_INACTIVE = "activeInactive"
    ENABLED_DISABLED = "enabledDisabled"
    VALID_INVALID = "validInvalid"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LocalizedText:
    """A display string in every supported locale."""
    us_en: str
    fr_fr: str

    def __post_init__(self):
        for locale, text in ((Locale.US_EN, self.us_en), (Locale.FR_FR, self.fr_fr)):
            if not isinstance(text, str) or not text:
                raise ValidationError(
                    f"Missing {locale.value} translation",
                    field=locale.value,
                    value=text
                )

    def get(self, locale: LocaleLike = DEFAULT_LOCALE) -> str:
        """Return the text for the given locale."""
        if resolve_locale(locale) is Locale.FR_FR:
            return self.fr_fr
        return self.us_en

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary representation keyed by locale tag."""
        return {
            Locale.US_EN.value: self.us_en,
            Locale.FR_FR.value: self.fr_fr,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> 'LocalizedText':
        """Create from a mapping keyed by locale tag."""
        return cls(
            us_en=data.get(Locale.US_EN.value, ""),
            fr_fr=data.get(Locale.FR_FR.value, ""),
        )


@dataclass(frozen=True)
class StatusLabel:
    """Short and long label variants."""
    short: LocalizedText
    long: LocalizedText

    def get(self, label_format: FormatLike = DEFAULT_FORMAT) -> LocalizedText:
        if resolve_format(label_format) is LabelFormat.LONG:
            return self.long
        return self.short

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            LabelFormat.SHORT.value: self.short.to_dict(),
            LabelFormat.LONG.value: self.long.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, str]]) -> 'StatusLabel':
        return cls(
            short=LocalizedText.from_dict(data.get(LabelFormat.SHORT.value, {})),
            long=LocalizedText.from_dict(data.get(LabelFormat.LONG.value, {})),
        )


@dataclass(frozen=True)
class StatusMetadata:
    """
    Display metadata for one status value.

    icon is a Material icon name, color a hex code or CSS color name.
    """
    icon: str
    color: str
    label: StatusLabel
    description: LocalizedText

    def get_label(
        self,
        locale: LocaleLike = DEFAULT_LOCALE,
        label_format: FormatLike = DEFAULT_FORMAT
    ) -> str:
        """Return the label in the given locale and format."""
        return self.label.get(label_format).get(locale)

    def get_description(self, locale: LocaleLike = DEFAULT_LOCALE) -> str:
        return self.description.get(locale)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'icon': self.icon,
            'color': self.color,
            'label': self.label.to_dict(),
            'description': self.description.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'StatusMetadata':
        """Create from dictionary representation."""
        return cls(
            icon=data['icon'],
            color=data['color'],
            label=StatusLabel.from_dict(data.get('label', {})),
            description=LocalizedText.from_dict(data.get('description', {})),
        )

    @classmethod
    def build(
        cls,
        icon: str,
        color: str,
        short: Mapping[str, str],
        long: Mapping[str, str],
        description: Mapping[str, str]
    ) -> 'StatusMetadata':
        """Create from flat locale mappings."""
        return cls(
            icon=icon,
            color=color,
            label=StatusLabel(
                short=LocalizedText.from_dict(short),
                long=LocalizedText.from_dict(long),
            ),
            description=LocalizedText.from_dict(description),
        )


@dataclass(frozen=True)
class ExtendedStatusMetadata:
    """Status metadata with labels and description resolved for one locale."""
    icon: str
    color: str
    label: StatusLabel
    short_label: str
    long_label: str
    description: str

    @classmethod
    def from_metadata(
        cls,
        metadata: StatusMetadata,
        locale: LocaleLike = DEFAULT_LOCALE
    ) -> 'ExtendedStatusMetadata':
        return cls(
            icon=metadata.icon,
            color=metadata.color,
            label=metadata.label,
            short_label=metadata.get_label(locale, LabelFormat.SHORT),
            long_label=metadata.get_label(locale, LabelFormat.LONG),
            description=metadata.get_description(locale),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'icon': self.icon,
            'color': self.color,
            'label': self.label.to_dict(),
            'short_label': self.short_label,
            'long_label': self.long_label,
            'description': self.description,
        }


# Metadata table for one enumeration
StatusConfiguration = Mapping[S, StatusMetadata]
