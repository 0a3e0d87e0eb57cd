"""
Operations taxonomy.

An Operation pairs a Resource with an Action and is written as
RESOURCE:ACTION. Operations label permissions and audit records.
"""

from .resources import (
    Resource,
    MEDICAL_RESOURCES,
    PUBLIC_RESOURCES,
    is_medical_resource,
    is_public_resource,
)
from .actions import Action
from .operation import (
    Operation,
    OPERATION_SEPARATOR,
    get_resource_from_operation,
    get_action_from_operation,
)
from .predefined import (
    Operations,
    get_all_operations,
    get_operations_by_resource,
    get_operations_by_action,
)
from .labels import (
    ORDER_ACTION_RESOURCE,
    ORDER_RESOURCE_ACTION,
    humanize_key,
    get_action_label,
    get_resource_label,
    get_operation_label,
)

__all__ = [
    'Resource',
    'MEDICAL_RESOURCES',
    'PUBLIC_RESOURCES',
    'is_medical_resource',
    'is_public_resource',
    'Action',
    'Operation',
    'OPERATION_SEPARATOR',
    'get_resource_from_operation',
    'get_action_from_operation',
    'Operations',
    'get_all_operations',
    'get_operations_by_resource',
    'get_operations_by_action',
    'ORDER_ACTION_RESOURCE',
    'ORDER_RESOURCE_ACTION',
    'humanize_key',
    'get_action_label',
    'get_resource_label',
    'get_operation_label',
]
