"""
Operation values in RESOURCE:ACTION format.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..types.errors import ValidationError
from .actions import Action
from .resources import Resource


OPERATION_SEPARATOR = ":"


@dataclass(frozen=True)
class Operation:
    """
    An action applied to a resource, e.g. PATIENT:READ.

    Used as the permission and audit label for everything a user does.
    """
    resource: Resource
    action: Action

    def __post_init__(self):
        try:
            object.__setattr__(self, 'resource', Resource(self.resource))
        except ValueError:
            raise ValidationError("Unknown resource", field="resource", value=self.resource) from None
        try:
            object.__setattr__(self, 'action', Action(self.action))
        except ValueError:
            raise ValidationError("Unknown action", field="action", value=self.action) from None

    def __str__(self) -> str:
        """Operation string in RESOURCE:ACTION format."""
        return f"{self.resource.value}{OPERATION_SEPARATOR}{self.action.value}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'resource': self.resource.value,
            'action': self.action.value,
            'operation': str(self),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Operation':
        """Create from dictionary representation."""
        return cls(resource=data['resource'], action=data['action'])

    @classmethod
    def from_string(cls, operation_string: str) -> Optional['Operation']:
        """
        Create operation from string.

        Args:
            operation_string: String in RESOURCE:ACTION format

        Returns:
            Operation instance or None if invalid
        """
        if not isinstance(operation_string, str):
            return None

        parts = operation_string.split(OPERATION_SEPARATOR)
        if len(parts) != 2:
            return None

        resource_str, action_str = parts
        try:
            return cls(Resource(resource_str), Action(action_str))
        except ValueError:
            return None


def get_resource_from_operation(operation: str) -> Optional[Resource]:
    """Return the resource of a RESOURCE:ACTION string, or None if invalid."""
    parsed = Operation.from_string(operation)
    return parsed.resource if parsed else None


def get_action_from_operation(operation: str) -> Optional[Action]:
    """Return the action of a RESOURCE:ACTION string, or None if invalid."""
    parsed = Operation.from_string(operation)
    return parsed.action if parsed else None
