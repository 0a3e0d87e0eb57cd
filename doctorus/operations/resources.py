"""
Resource types for operations.
"""

from enum import Enum
from typing import Tuple


class Resource(str, Enum):
    """Objects an operation can act upon."""

    # Medical resources
    PATIENT = "PATIENT"
    PATIENT_MEDICAL_NOTES = "PATIENT_MEDICAL_NOTES"
    PATIENT_MEDICAL_PROPERTIES = "PATIENT_MEDICAL_PROPERTIES"
    MEDICAL_RECORD = "MEDICAL_RECORD"
    MEDICAL_NOTE = "MEDICAL_NOTE"
    MEDICAL_HISTORY = "MEDICAL_HISTORY"
    MEDICAL_SERVICE = "MEDICAL_SERVICE"
    MEDICAL_SERVICE_NOTE = "MEDICAL_SERVICE_NOTE"
    PRESCRIPTION = "PRESCRIPTION"
    DIAGNOSIS = "DIAGNOSIS"
    APPOINTMENT = "APPOINTMENT"
    LAB_RESULT = "LAB_RESULT"
    IMAGING = "IMAGING"
    VITAL_SIGNS = "VITAL_SIGNS"
    OBSERVATION = "OBSERVATION"
    MEDICATION = "MEDICATION"
    ALLERGY = "ALLERGY"
    IMMUNIZATION = "IMMUNIZATION"
    PROCEDURE = "PROCEDURE"
    CLINICAL_NOTE = "CLINICAL_NOTE"
    UPLOADED_DOCUMENT = "UPLOADED_DOCUMENT"
    GENERATED_DOCUMENT = "GENERATED_DOCUMENT"
    MEDICAL_RESOURCE = "MEDICAL_RESOURCE"

    # Public resources
    ACCOUNT = "ACCOUNT"
    ACCOUNT_OWNERSHIP = "ACCOUNT_OWNERSHIP"
    ACCOUNT_PREFERENCES = "ACCOUNT_PREFERENCES"
    USER = "USER"
    PROFILE = "PROFILE"
    CONTACT = "CONTACT"
    MEMBERSHIP = "MEMBERSHIP"
    PATIENT_PUBLIC_PROPERTIES = "PATIENT_PUBLIC_PROPERTIES"
    PATIENT_PAYMENT = "PATIENT_PAYMENT"
    MEDICAL_SERVICE_SCHEDULE = "MEDICAL_SERVICE_SCHEDULE"
    MEDICAL_SERVICE_FEES = "MEDICAL_SERVICE_FEES"
    MEDICAL_SERVICE_STATUS = "MEDICAL_SERVICE_STATUS"
    MEDICAL_HISTORY_MODEL = "MEDICAL_HISTORY_MODEL"
    PRESCRIPTION_MODEL = "PRESCRIPTION_MODEL"
    MEASURE_MODEL = "MEASURE_MODEL"
    CALCULATED_MEASURE_MODEL = "CALCULATED_MEASURE_MODEL"
    DOCUMENT_LAYOUT = "DOCUMENT_LAYOUT"
    DOCUMENT_MODEL = "DOCUMENT_MODEL"
    SNIPPET = "SNIPPET"
    LOCATION = "LOCATION"
    TASK_TYPE = "TASK_TYPE"
    NOTIFICATION = "NOTIFICATION"
    SETTINGS = "SETTINGS"
    REPORT = "REPORT"
    AUDIT_LOG = "AUDIT_LOG"
    SYSTEM = "SYSTEM"
    PUBLIC_RESOURCE = "PUBLIC_RESOURCE"

    def __str__(self) -> str:
        return self.value


# Medical resources - require special access control
MEDICAL_RESOURCES: Tuple[Resource, ...] = (
    Resource.PATIENT,
    Resource.PATIENT_MEDICAL_NOTES,
    Resource.PATIENT_MEDICAL_PROPERTIES,
    Resource.MEDICAL_RECORD,
    Resource.MEDICAL_NOTE,
    Resource.MEDICAL_HISTORY,
    Resource.MEDICAL_SERVICE,
    Resource.MEDICAL_SERVICE_NOTE,
    Resource.PRESCRIPTION,
    Resource.DIAGNOSIS,
    Resource.APPOINTMENT,
    Resource.LAB_RESULT,
    Resource.IMAGING,
    Resource.VITAL_SIGNS,
    Resource.OBSERVATION,
    Resource.MEDICATION,
    Resource.ALLERGY,
    Resource.IMMUNIZATION,
    Resource.PROCEDURE,
    Resource.CLINICAL_NOTE,
    Resource.UPLOADED_DOCUMENT,
    Resource.GENERATED_DOCUMENT,
    Resource.MEDICAL_RESOURCE,
)

# Public resources - standard access control
PUBLIC_RESOURCES: Tuple[Resource, ...] = tuple(
    resource for resource in Resource if resource not in MEDICAL_RESOURCES
)


def is_medical_resource(resource: Resource) -> bool:
    """Check if a resource is medical."""
    return resource in MEDICAL_RESOURCES


def is_public_resource(resource: Resource) -> bool:
    """Check if a resource is public."""
    return resource in PUBLIC_RESOURCES
