"""
Audit record types and change calculation.
"""

from .types import FieldChange, ChangedData, AuditLogRecord, PublishedEvent
from .utils import (
    SYSTEM_FIELDS,
    is_system_field,
    calculate_changed_data,
    changed_data_includes_field,
)

__all__ = [
    'FieldChange',
    'ChangedData',
    'AuditLogRecord',
    'PublishedEvent',
    'SYSTEM_FIELDS',
    'is_system_field',
    'calculate_changed_data',
    'changed_data_includes_field',
]
