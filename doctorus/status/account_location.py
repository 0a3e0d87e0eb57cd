"""
Account location status enumeration and metadata.
Defines availability policies for medical service locations.
"""

from enum import Enum
from typing import Any, Dict, List

from ..types.common import LocaleLike, FormatLike, DEFAULT_LOCALE, DEFAULT_FORMAT
from .feature import Feature
from .types import StatusFeature, StatusMetadata


class AccountLocationStatus(str, Enum):
    INHERIT = "inherit"
    ALWAYS_OPEN = "always_open"
    CLOSED = "closed"
    PERIODS = "periods"

    def __str__(self) -> str:
        return self.value


ACCOUNT_LOCATION_STATUS_METADATA: Dict[AccountLocationStatus, StatusMetadata] = {
    AccountLocationStatus.INHERIT: StatusMetadata.build(
        icon="settings_backup_restore",
        color="#808080",  # Gray
        short={"us-EN": "Inherit", "fr-FR": "Hériter"},
        long={"us-EN": "Inherit Settings", "fr-FR": "Hériter des paramètres"},
        description={
            "us-EN": "Location inherits availability settings from parent",
            "fr-FR": "Le lieu hérite les paramètres de disponibilité du parent",
        },
    ),
    AccountLocationStatus.ALWAYS_OPEN: StatusMetadata.build(
        icon="public",
        color="#4CAF50",  # Green
        short={"us-EN": "Always Open", "fr-FR": "Toujours ouvert"},
        long={"us-EN": "Always Open", "fr-FR": "Toujours ouvert"},
        description={
            "us-EN": "Location is available 24/7 without restrictions",
            "fr-FR": "Le lieu est disponible 24h/24, 7j/7 sans restrictions",
        },
    ),
    AccountLocationStatus.CLOSED: StatusMetadata.build(
        icon="block",
        color="#F44336",  # Red
        short={"us-EN": "Closed", "fr-FR": "Fermé"},
        long={"us-EN": "Closed", "fr-FR": "Fermé"},
        description={
            "us-EN": "Location is closed and unavailable for services",
            "fr-FR": "Le lieu est fermé et indisponible pour les services",
        },
    ),
    AccountLocationStatus.PERIODS: StatusMetadata.build(
        icon="schedule",
        color="#2196F3",  # Blue
        short={"us-EN": "Periods", "fr-FR": "Périodes"},
        long={"us-EN": "Custom Periods", "fr-FR": "Périodes personnalisées"},
        description={
            "us-EN": "Location has custom availability periods",
            "fr-FR": "Le lieu a des périodes de disponibilité personnalisées",
        },
    ),
}


ACCOUNT_LOCATION_FEATURE: Feature[AccountLocationStatus] = Feature(
    StatusFeature.ACCOUNT_LOCATION,
    AccountLocationStatus,
    ACCOUNT_LOCATION_STATUS_METADATA,
)


def get_status_metadata(status: Any) -> StatusMetadata:
    return ACCOUNT_LOCATION_FEATURE.get_metadata(status)


def get_status_icon(status: Any) -> str:
    return ACCOUNT_LOCATION_FEATURE.get_icon(status)


def get_status_color(status: Any) -> str:
    return ACCOUNT_LOCATION_FEATURE.get_color(status)


def get_status_label(
    status: Any,
    locale: LocaleLike = DEFAULT_LOCALE,
    label_format: FormatLike = DEFAULT_FORMAT
) -> str:
    return ACCOUNT_LOCATION_FEATURE.get_label(status, locale, label_format)


def get_status_description(status: Any, locale: LocaleLike = DEFAULT_LOCALE) -> str:
    return ACCOUNT_LOCATION_FEATURE.get_description(status, locale)


def get_all_account_location_statuses() -> List[AccountLocationStatus]:
    return ACCOUNT_LOCATION_FEATURE.statuses()


def is_valid_account_location_status(value: Any) -> bool:
    return ACCOUNT_LOCATION_FEATURE.is_member(value)
