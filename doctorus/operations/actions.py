"""
Action types for operations.
"""

from enum import Enum


class Action(str, Enum):
    """Verbs an operation can perform on a resource."""

    # CRUD operations
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    PUT = "PUT"
    LIST = "LIST"
    VIEW = "VIEW"
    SEARCH = "SEARCH"
    MANAGE = "MANAGE"

    # Access control
    GRANT = "GRANT"
    REVOKE = "REVOKE"

    # Medical specific
    PRESCRIBE = "PRESCRIBE"
    DIAGNOSE = "DIAGNOSE"
    SCHEDULE = "SCHEDULE"
    CANCEL = "CANCEL"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    SIGN = "SIGN"
    VERIFY = "VERIFY"
    SET_MEDICAL_SERVICE_STATUS = "SET_MEDICAL_SERVICE_STATUS"
    SET_MEDICAL_SERVICE_FEES = "SET_MEDICAL_SERVICE_FEES"
    UPDATE_STATUS = "UPDATE_STATUS"
    VIEW_PATIENTS = "VIEW_PATIENTS"
    PUT_PATIENT_PAYMENT = "PUT_PATIENT_PAYMENT"
    DELETE_PATIENT_PAYMENT = "DELETE_PATIENT_PAYMENT"

    # Data operations
    EXPORT = "EXPORT"
    IMPORT = "IMPORT"
    ARCHIVE = "ARCHIVE"
    RESTORE = "RESTORE"
    RECOVER = "RECOVER"
    SHARE = "SHARE"
    DOWNLOAD = "DOWNLOAD"
    UPLOAD = "UPLOAD"

    # System operations
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    CONFIGURE = "CONFIGURE"
    DISABLE = "DISABLE"
    AUDIT = "AUDIT"

    def __str__(self) -> str:
        return self.value
