"""
Medical service status enumeration, metadata and workflow transitions.
"""

from enum import Enum
from typing import Any, Dict, List

from ..types.common import LocaleLike, FormatLike, DEFAULT_LOCALE, DEFAULT_FORMAT
from .feature import Feature
from .types import StatusFeature, StatusMetadata


class MedicalServiceStatus(str, Enum):
    """Lifecycle of a medical service (consultation)."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    ON_WAITING_ROOM = "on_waiting_room"
    CANCELED = "canceled"
    COMPLETED = "completed"

    def __str__(self) -> str:
        return self.value


MEDICAL_SERVICE_STATUS_METADATA: Dict[MedicalServiceStatus, StatusMetadata] = {
    MedicalServiceStatus.PENDING: StatusMetadata.build(
        icon="schedule",
        color="#9E9E9E",  # Gray
        short={"us-EN": "Pending", "fr-FR": "En attente"},
        long={"us-EN": "Pending Service", "fr-FR": "Service en attente"},
        description={
            "us-EN": "The medical service is scheduled and has not started yet",
            "fr-FR": "Le service médical est planifié et en attente de démarrage",
        },
    ),
    MedicalServiceStatus.ON_WAITING_ROOM: StatusMetadata.build(
        icon="event_busy",
        color="#FF9800",  # Orange
        short={"us-EN": "Waiting", "fr-FR": "En attente"},
        long={"us-EN": "In Waiting Room", "fr-FR": "Dans la salle d'attente"},
        description={
            "us-EN": "Patient has checked in and is waiting in the waiting room",
            "fr-FR": "Le patient s'est enregistré et attend dans la salle d'attente",
        },
    ),
    MedicalServiceStatus.IN_PROGRESS: StatusMetadata.build(
        icon="medical_services",
        color="#2196F3",  # Blue
        short={"us-EN": "In Progress", "fr-FR": "En cours"},
        long={"us-EN": "Service In Progress", "fr-FR": "Service en cours"},
        description={
            "us-EN": "The medical service consultation is currently in progress",
            "fr-FR": "La consultation du service médical est actuellement en cours",
        },
    ),
    MedicalServiceStatus.COMPLETED: StatusMetadata.build(
        icon="check_circle",
        color="#4CAF50",  # Green
        short={"us-EN": "Completed", "fr-FR": "Terminé"},
        long={"us-EN": "Service Completed", "fr-FR": "Service terminé"},
        description={
            "us-EN": "The medical service has been successfully completed",
            "fr-FR": "Le service médical a été terminé avec succès",
        },
    ),
    MedicalServiceStatus.CANCELED: StatusMetadata.build(
        icon="cancel",
        color="#F44336",  # Red
        short={"us-EN": "Canceled", "fr-FR": "Annulé"},
        long={"us-EN": "Service Canceled", "fr-FR": "Service annulé"},
        description={
            "us-EN": "The medical service has been canceled and will not proceed",
            "fr-FR": "Le service médical a été annulé et ne sera pas effectué",
        },
    ),
}


# Business-permitted moves. Not acyclic: completed services can be reopened
# and canceled services uncanceled.
MEDICAL_SERVICE_STATUS_TRANSITIONS: Dict[MedicalServiceStatus, List[MedicalServiceStatus]] = {
    MedicalServiceStatus.PENDING: [
        MedicalServiceStatus.ON_WAITING_ROOM,
        MedicalServiceStatus.IN_PROGRESS,
        MedicalServiceStatus.CANCELED,
    ],
    MedicalServiceStatus.ON_WAITING_ROOM: [
        MedicalServiceStatus.IN_PROGRESS,
        MedicalServiceStatus.CANCELED,
        MedicalServiceStatus.PENDING,
    ],
    MedicalServiceStatus.IN_PROGRESS: [
        MedicalServiceStatus.COMPLETED,
        MedicalServiceStatus.CANCELED,
    ],
    MedicalServiceStatus.COMPLETED: [MedicalServiceStatus.IN_PROGRESS],  # reopen
    MedicalServiceStatus.CANCELED: [MedicalServiceStatus.PENDING],  # uncancel
}


MEDICAL_SERVICE_FEATURE: Feature[MedicalServiceStatus] = Feature(
    StatusFeature.MEDICAL_SERVICE,
    MedicalServiceStatus,
    MEDICAL_SERVICE_STATUS_METADATA,
    MEDICAL_SERVICE_STATUS_TRANSITIONS,
)


def get_status_metadata(status: Any) -> StatusMetadata:
    """Get status metadata."""
    return MEDICAL_SERVICE_FEATURE.get_metadata(status)


def get_status_icon(status: Any) -> str:
    """Get status icon."""
    return MEDICAL_SERVICE_FEATURE.get_icon(status)


def get_status_color(status: Any) -> str:
    """Get status color."""
    return MEDICAL_SERVICE_FEATURE.get_color(status)


def get_status_label(
    status: Any,
    locale: LocaleLike = DEFAULT_LOCALE,
    label_format: FormatLike = DEFAULT_FORMAT
) -> str:
    """Get status label (short or long)."""
    return MEDICAL_SERVICE_FEATURE.get_label(status, locale, label_format)


def get_status_description(status: Any, locale: LocaleLike = DEFAULT_LOCALE) -> str:
    """Get status description."""
    return MEDICAL_SERVICE_FEATURE.get_description(status, locale)


def get_all_medical_service_statuses() -> List[MedicalServiceStatus]:
    """Get all available statuses."""
    return MEDICAL_SERVICE_FEATURE.statuses()


def is_valid_medical_service_status(value: Any) -> bool:
    """Check if a value is a valid MedicalServiceStatus."""
    return MEDICAL_SERVICE_FEATURE.is_member(value)


def is_valid_transition(from_status: Any, to_status: Any) -> bool:
    """Check if a status transition is valid."""
    return MEDICAL_SERVICE_FEATURE.is_valid_transition(from_status, to_status)


def get_allowed_transitions(status: Any) -> List[MedicalServiceStatus]:
    """Get allowed transitions from a status."""
    return MEDICAL_SERVICE_FEATURE.get_allowed_transitions(status)
