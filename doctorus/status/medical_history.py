"""
Medical history status enumeration and metadata.
Defines whether a medical history record is current or expired.
"""

from enum import Enum
from typing import Any, Dict, List

from ..types.common import LocaleLike, FormatLike, DEFAULT_LOCALE, DEFAULT_FORMAT
from .feature import Feature
from .types import StatusFeature, StatusMetadata


class MedicalHistoryStatus(str, Enum):
    CURRENT = "current"
    EXPIRED = "expired"

    def __str__(self) -> str:
        return self.value


MEDICAL_HISTORY_STATUS_METADATA: Dict[MedicalHistoryStatus, StatusMetadata] = {
    MedicalHistoryStatus.CURRENT: StatusMetadata.build(
        icon="check_circle",
        color="#4CAF50",  # Green
        short={"us-EN": "Active", "fr-FR": "Actif"},
        long={"us-EN": "Currently Active", "fr-FR": "Actuellement actif"},
        description={
            "us-EN": "Medical history record is currently active and relevant",
            "fr-FR": "L'historique médical est actuellement actif et pertinent",
        },
    ),
    MedicalHistoryStatus.EXPIRED: StatusMetadata.build(
        icon="do_not_disturb_on",
        color="#808080",  # Gray
        short={"us-EN": "Expired", "fr-FR": "Expiré"},
        long={"us-EN": "Expired Record", "fr-FR": "Enregistrement expiré"},
        description={
            "us-EN": "Medical history record has expired and is no longer current",
            "fr-FR": "L'historique médical a expiré et n'est plus actuel",
        },
    ),
}


MEDICAL_HISTORY_FEATURE: Feature[MedicalHistoryStatus] = Feature(
    StatusFeature.MEDICAL_HISTORY,
    MedicalHistoryStatus,
    MEDICAL_HISTORY_STATUS_METADATA,
)


def get_status_metadata(status: Any) -> StatusMetadata:
    return MEDICAL_HISTORY_FEATURE.get_metadata(status)


def get_status_icon(status: Any) -> str:
    return MEDICAL_HISTORY_FEATURE.get_icon(status)


def get_status_color(status: Any) -> str:
    return MEDICAL_HISTORY_FEATURE.get_color(status)


def get_status_label(
    status: Any,
    locale: LocaleLike = DEFAULT_LOCALE,
    label_format: FormatLike = DEFAULT_FORMAT
) -> str:
    return MEDICAL_HISTORY_FEATURE.get_label(status, locale, label_format)


def get_status_description(status: Any, locale: LocaleLike = DEFAULT_LOCALE) -> str:
    return MEDICAL_HISTORY_FEATURE.get_description(status, locale)


def get_all_medical_history_statuses() -> List[MedicalHistoryStatus]:
    return MEDICAL_HISTORY_FEATURE.statuses()


def is_valid_medical_history_status(value: Any) -> bool:
    return MEDICAL_HISTORY_FEATURE.is_member(value)
