"""
Audit record types.

These dataclasses describe what services persist to the audit log and what
they publish on the event bus. Serialized forms use camelCase keys so the
records stay compatible with existing stored data.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

from ..operations.operation import Operation
from ..types.errors import ValidationError


def _timestamp(value: Union[str, datetime]) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _now() -> str:
    return datetime.now().isoformat()


@dataclass(frozen=True)
class FieldChange:
    """Previous and current value of a single modified field"""
    old: Any
    new: Any

    def to_dict(self) -> Dict[str, Any]:
        return {'from': self.old, 'to': self.new}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FieldChange':
        return cls(old=data.get('from'), new=data.get('to'))


@dataclass
class ChangedData:
    """
    Result of comparing two versions of a record.

    full holds the latest known state. The other parts are empty when nothing
    was added, modified or removed.
    """
    full: Dict[str, Any] = field(default_factory=dict)
    added: Dict[str, Any] = field(default_factory=dict)
    modified: Dict[str, FieldChange] = field(default_factory=dict)
    removed: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.modified or self.removed)

    def includes_field(self, field_name: str) -> bool:
        return field_name in self.added or field_name in self.modified or field_name in self.removed

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting the empty parts"""
        result: Dict[str, Any] = {}
        if self.added:
            result['added'] = dict(self.added)
        if self.modified:
            result['modified'] = {key: change.to_dict() for key, change in self.modified.items()}
        if self.removed:
            result['removed'] = dict(self.removed)
        result['full'] = dict(self.full)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChangedData':
        return cls(
            full=dict(data.get('full') or {}),
            added=dict(data.get('added') or {}),
            modified={
                key: FieldChange.from_dict(change)
                for key, change in (data.get('modified') or {}).items()
            },
            removed=dict(data.get('removed') or {}),
        )


@dataclass
class AuditLogRecord:
    """A persisted audit log entry for one operation on one object"""
    pk: str
    sk: str
    user_id: str
    operation: Operation
    object_id: str
    timestamp: str = field(default_factory=_now)
    event_id: str = ""
    last_known_state: Optional[Dict[str, Any]] = None
    info: Optional[Dict[str, Any]] = None
    changed: Optional[ChangedData] = None

    def __post_init__(self):
        if not isinstance(self.operation, Operation):
            parsed = Operation.from_string(self.operation)
            if parsed is None:
                raise ValidationError(
                    f"Invalid operation: {self.operation}",
                    field="operation",
                    value=self.operation
                )
            self.operation = parsed
        self.timestamp = _timestamp(self.timestamp)
        if not self.event_id:
            self.event_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'PK': self.pk,
            'SK': self.sk,
            'timestamp': self.timestamp,
            'userId': self.user_id,
            'operation': str(self.operation),
            'objectId': self.object_id,
            'eventId': self.event_id,
        }
        if self.last_known_state is not None:
            result['lastKnownState'] = self.last_known_state
        if self.info is not None:
            result['info'] = self.info
        if self.changed is not None:
            result['changed'] = self.changed.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuditLogRecord':
        changed = data.get('changed')
        return cls(
            pk=data['PK'],
            sk=data['SK'],
            timestamp=data['timestamp'],
            user_id=data['userId'],
            operation=data['operation'],
            object_id=data['objectId'],
            event_id=data['eventId'],
            last_known_state=data.get('lastKnownState'),
            info=data.get('info'),
            changed=ChangedData.from_dict(changed) if changed is not None else None,
        )


@dataclass
class PublishedEvent:
    """Event published after an operation completes"""
    account_id: str
    user_id: str
    operation: str
    at: str = field(default_factory=_now)
    object: Optional[Dict[str, Any]] = None
    changed: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        self.at = _timestamp(self.at)
        if isinstance(self.operation, Operation):
            self.operation = str(self.operation)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'accountId': self.account_id,
            'userId': self.user_id,
            'at': self.at,
            'operation': self.operation,
        }
        if self.object is not None:
            result['object'] = self.object
        if self.changed is not None:
            result['changed'] = self.changed
        return result
