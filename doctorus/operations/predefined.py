"""
Predefined common operations for convenience.
"""

from typing import List

from .actions import Action
from .operation import Operation
from .resources import Resource


class Operations:
    """Namespace of frequently used operations."""

    # Patient operations
    PATIENT_CREATE = Operation(Resource.PATIENT, Action.CREATE)
    PATIENT_READ = Operation(Resource.PATIENT, Action.READ)
    PATIENT_UPDATE = Operation(Resource.PATIENT, Action.UPDATE)
    PATIENT_DELETE = Operation(Resource.PATIENT, Action.DELETE)
    PATIENT_LIST = Operation(Resource.PATIENT, Action.LIST)

    # Medical record operations
    MEDICAL_RECORD_CREATE = Operation(Resource.MEDICAL_RECORD, Action.CREATE)
    MEDICAL_RECORD_READ = Operation(Resource.MEDICAL_RECORD, Action.READ)
    MEDICAL_RECORD_UPDATE = Operation(Resource.MEDICAL_RECORD, Action.UPDATE)
    MEDICAL_RECORD_DELETE = Operation(Resource.MEDICAL_RECORD, Action.DELETE)
    MEDICAL_RECORD_SHARE = Operation(Resource.MEDICAL_RECORD, Action.SHARE)
    MEDICAL_RECORD_EXPORT = Operation(Resource.MEDICAL_RECORD, Action.EXPORT)

    # Prescription operations
    PRESCRIPTION_CREATE = Operation(Resource.PRESCRIPTION, Action.CREATE)
    PRESCRIPTION_READ = Operation(Resource.PRESCRIPTION, Action.READ)
    PRESCRIPTION_UPDATE = Operation(Resource.PRESCRIPTION, Action.UPDATE)
    PRESCRIPTION_SIGN = Operation(Resource.PRESCRIPTION, Action.SIGN)
    PRESCRIPTION_PRESCRIBE = Operation(Resource.PRESCRIPTION, Action.PRESCRIBE)

    # Diagnosis operations
    DIAGNOSIS_CREATE = Operation(Resource.DIAGNOSIS, Action.CREATE)
    DIAGNOSIS_READ = Operation(Resource.DIAGNOSIS, Action.READ)
    DIAGNOSIS_UPDATE = Operation(Resource.DIAGNOSIS, Action.UPDATE)
    DIAGNOSIS_DIAGNOSE = Operation(Resource.DIAGNOSIS, Action.DIAGNOSE)
    DIAGNOSIS_VERIFY = Operation(Resource.DIAGNOSIS, Action.VERIFY)

    # Appointment operations
    APPOINTMENT_CREATE = Operation(Resource.APPOINTMENT, Action.CREATE)
    APPOINTMENT_READ = Operation(Resource.APPOINTMENT, Action.READ)
    APPOINTMENT_UPDATE = Operation(Resource.APPOINTMENT, Action.UPDATE)
    APPOINTMENT_DELETE = Operation(Resource.APPOINTMENT, Action.DELETE)
    APPOINTMENT_SCHEDULE = Operation(Resource.APPOINTMENT, Action.SCHEDULE)
    APPOINTMENT_CANCEL = Operation(Resource.APPOINTMENT, Action.CANCEL)
    APPOINTMENT_LIST = Operation(Resource.APPOINTMENT, Action.LIST)

    # User operations
    USER_CREATE = Operation(Resource.USER, Action.CREATE)
    USER_READ = Operation(Resource.USER, Action.READ)
    USER_UPDATE = Operation(Resource.USER, Action.UPDATE)
    USER_DELETE = Operation(Resource.USER, Action.DELETE)
    USER_LIST = Operation(Resource.USER, Action.LIST)
    USER_LOGIN = Operation(Resource.USER, Action.LOGIN)
    USER_LOGOUT = Operation(Resource.USER, Action.LOGOUT)

    # Audit log operations
    AUDIT_LOG_CREATE = Operation(Resource.AUDIT_LOG, Action.CREATE)
    AUDIT_LOG_READ = Operation(Resource.AUDIT_LOG, Action.READ)
    AUDIT_LOG_LIST = Operation(Resource.AUDIT_LOG, Action.LIST)
    AUDIT_LOG_AUDIT = Operation(Resource.AUDIT_LOG, Action.AUDIT)

    # System operations
    SYSTEM_CONFIGURE = Operation(Resource.SYSTEM, Action.CONFIGURE)
    SYSTEM_AUDIT = Operation(Resource.SYSTEM, Action.AUDIT)


def get_all_operations() -> List[Operation]:
    """Get all predefined operations in declaration order."""
    return [value for value in vars(Operations).values() if isinstance(value, Operation)]


def get_operations_by_resource(resource: Resource) -> List[Operation]:
    """Get all operations for a specific resource."""
    return [op for op in get_all_operations() if op.resource == resource]


def get_operations_by_action(action: Action) -> List[Operation]:
    """Get all operations for a specific action."""
    return [op for op in get_all_operations() if op.action == action]
