"""
Change calculation between two versions of a record.
"""

from typing import Any, Dict, Mapping, Optional

from .types import ChangedData, FieldChange


# Bookkeeping fields that change on every write and never count as a change
SYSTEM_FIELDS = frozenset([
    'updatedAt',
    'lastModified',
    'modifiedAt',
    'lastUpdated',
    'version',
    'etag',
    'ttl',
])


def is_system_field(key: str) -> bool:
    return key in SYSTEM_FIELDS


def _deep_equal(left: Any, right: Any) -> bool:
    # bool is an int subclass; True must not equal 1 here
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if set(left) != set(right):
            return False
        return all(_deep_equal(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(_deep_equal(a, b) for a, b in zip(left, right))
    return left == right


def calculate_changed_data(
    new_data: Optional[Dict[str, Any]] = None,
    old_data: Optional[Dict[str, Any]] = None
) -> ChangedData:
    """
    Compare two versions of a record.

    Only a missing record (None) counts as absent; an empty dict is a real
    version and is diffed like any other.

    Args:
        new_data: The record after the operation
        old_data: The record before the operation

    Returns:
        ChangedData whose full part is the newest available version
    """
    if new_data is None and old_data is None:
        return ChangedData()
    if old_data is None:
        return ChangedData(full=dict(new_data))
    if new_data is None:
        return ChangedData(full=dict(old_data))

    added: Dict[str, Any] = {}
    modified: Dict[str, FieldChange] = {}
    removed: Dict[str, Any] = {}

    keys = list(old_data) + [key for key in new_data if key not in old_data]
    for key in keys:
        if is_system_field(key):
            continue
        if key not in old_data:
            added[key] = new_data[key]
        elif key not in new_data:
            removed[key] = old_data[key]
        elif not _deep_equal(old_data[key], new_data[key]):
            modified[key] = FieldChange(old=old_data[key], new=new_data[key])

    return ChangedData(full=dict(new_data), added=added, modified=modified, removed=removed)


def changed_data_includes_field(changed: Optional[ChangedData], field_name: str) -> bool:
    """Whether a field was added, modified or removed."""
    if changed is None:
        return False
    return changed.includes_field(field_name)
