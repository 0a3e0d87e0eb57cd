"""
Status feature definition.

A feature binds one status enumeration to its metadata table and, for
workflow-style features, to a transition table. All query helpers operate on
a feature, so the same code serves every enumeration.

Transition tables describe business-permitted moves, not a forward-only
lifecycle. They may contain cycles (a completed service can be reopened, a
canceled one uncanceled), so new features must not assume an acyclic
workflow.
"""

from collections import OrderedDict
from enum import Enum
from types import MappingProxyType
from typing import (
    Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar
)

from ..types.common import (
    FormatLike,
    LocaleLike,
    DEFAULT_LOCALE,
    DEFAULT_FORMAT,
    resolve_locale,
)
from ..types.errors import UnknownStatusError, ValidationError, InvalidTransitionError
from .types import S, StatusMetadata, ExtendedStatusMetadata


U = TypeVar("U")

TransitionTable = Mapping[S, Iterable[S]]


def _feature_name(name: Any) -> str:
    if isinstance(name, Enum):
        return str(name.value)
    return str(name)


class Feature(Generic[S]):
    """
    A named status enumeration with its metadata and optional transitions.

    Tables are validated and frozen at construction; a Feature never changes
    afterwards and is safe to share between threads.
    """

    def __init__(
        self,
        name: Any,
        status_type: Type[S],
        metadata: Mapping[S, StatusMetadata],
        transitions: Optional[TransitionTable] = None
    ):
        self.name = _feature_name(name)
        self.status_type = status_type
        self._statuses: Tuple[S, ...] = tuple(status_type)
        self._metadata = self._build_metadata(metadata)
        self._transitions = self._build_transitions(transitions) if transitions is not None else None

    def __repr__(self) -> str:
        return f"Feature(name={self.name!r}, status_type={self.status_type.__name__})"

    def _build_metadata(self, metadata: Mapping[S, StatusMetadata]) -> Mapping[S, StatusMetadata]:
        table: Dict[S, StatusMetadata] = OrderedDict()
        extra = [key for key in metadata if self._member_or_none(key) is None]

        if extra:
            raise ValidationError(
                f"Metadata for feature {self.name} references unknown statuses",
                field="metadata",
                value=extra
            )

        for status in self._statuses:
            entry = metadata.get(status)
            if entry is None:
                raise ValidationError(
                    f"Missing metadata for status {status.value} in feature {self.name}",
                    field="metadata",
                    value=status.value
                )
            if not isinstance(entry, StatusMetadata):
                raise ValidationError(
                    f"Metadata for status {status.value} in feature {self.name} must be StatusMetadata",
                    field="metadata",
                    value=type(entry).__name__
                )
            table[status] = entry

        return MappingProxyType(table)

    def _build_transitions(self, transitions: TransitionTable) -> Mapping[S, Tuple[S, ...]]:
        table: Dict[S, Tuple[S, ...]] = {}

        for source, targets in transitions.items():
            source_member = self._member_or_none(source)
            if source_member is None:
                raise ValidationError(
                    f"Transition table for feature {self.name} references unknown status",
                    field="transitions",
                    value=source
                )

            target_members = []
            for target in targets:
                target_member = self._member_or_none(target)
                if target_member is None:
                    raise ValidationError(
                        f"Transition {source} -> {target} references unknown status in feature {self.name}",
                        field="transitions",
                        value=target
                    )
                if target_member not in target_members:
                    target_members.append(target_member)

            table[source_member] = tuple(target_members)

        return MappingProxyType(table)

    def _member_or_none(self, value: Any) -> Optional[S]:
        try:
            return self.coerce_status(value)
        except UnknownStatusError:
            return None

    def coerce_status(self, value: Any) -> S:
        """
        Convert a raw value or enum member to this feature's status type.

        Python booleans map to "true"/"false". Members of another enumeration
        are rejected even when their raw values coincide.

        Raises:
            UnknownStatusError: if the value is not a member of the enumeration
        """
        if isinstance(value, self.status_type):
            return value
        if isinstance(value, Enum):
            raise UnknownStatusError(self.name, value)
        if isinstance(value, bool):
            value = "true" if value else "false"
        try:
            return self.status_type(value)
        except (ValueError, TypeError):
            raise UnknownStatusError(self.name, value) from None

    def is_member(self, value: Any) -> bool:
        return self._member_or_none(value) is not None

    # Metadata accessors

    def get_metadata(self, status: Any) -> StatusMetadata:
        return self._metadata[self.coerce_status(status)]

    def get_icon(self, status: Any) -> str:
        return self.get_metadata(status).icon

    def get_color(self, status: Any) -> str:
        return self.get_metadata(status).color

    def get_label(
        self,
        status: Any,
        locale: LocaleLike = DEFAULT_LOCALE,
        label_format: FormatLike = DEFAULT_FORMAT
    ) -> str:
        return self.get_metadata(status).get_label(locale, label_format)

    def get_description(self, status: Any, locale: LocaleLike = DEFAULT_LOCALE) -> str:
        return self.get_metadata(status).get_description(locale)

    def get_extended_metadata(
        self,
        status: Any,
        locale: LocaleLike = DEFAULT_LOCALE
    ) -> ExtendedStatusMetadata:
        return ExtendedStatusMetadata.from_metadata(self.get_metadata(status), locale)

    def statuses(self) -> List[S]:
        """All statuses in registration order."""
        return list(self._statuses)

    @property
    def metadata(self) -> Mapping[S, StatusMetadata]:
        """Read-only view of the full metadata table."""
        return self._metadata

    # Queries

    def filter(self, predicate: Callable[[StatusMetadata, S], bool]) -> List[S]:
        """Statuses whose metadata satisfies the predicate, in registration order."""
        return [status for status, meta in self._metadata.items() if predicate(meta, status)]

    def map(self, transform: Callable[[StatusMetadata, S], U]) -> Dict[S, U]:
        return {status: transform(meta, status) for status, meta in self._metadata.items()}

    def search(self, term: str, locale: LocaleLike = DEFAULT_LOCALE) -> List[S]:
        """
        Case-insensitive substring search over short label, long label and
        description in one locale. An empty term matches every status.
        """
        if not isinstance(term, str):
            raise ValidationError("Search term must be a string", field="term", value=term)
        locale = resolve_locale(locale)
        needle = term.lower()

        def matches(meta: StatusMetadata, status: S) -> bool:
            candidates = (
                meta.label.short.get(locale),
                meta.label.long.get(locale),
                meta.description.get(locale),
            )
            return any(needle in candidate.lower() for candidate in candidates)

        return self.filter(matches)

    def group_by(self, key: Callable[[StatusMetadata], str]) -> Dict[str, List[S]]:
        grouped: Dict[str, List[S]] = {}
        for status, meta in self._metadata.items():
            grouped.setdefault(key(meta), []).append(status)
        return grouped

    def group_by_color(self) -> Dict[str, List[S]]:
        return self.group_by(lambda meta: meta.color)

    def group_by_icon(self) -> Dict[str, List[S]]:
        return self.group_by(lambda meta: meta.icon)

    # Transitions

    @property
    def has_transitions(self) -> bool:
        return self._transitions is not None

    @property
    def transitions(self) -> Mapping[S, Tuple[S, ...]]:
        """Read-only transition table; empty for features without workflow rules."""
        if self._transitions is None:
            return MappingProxyType({})
        return self._transitions

    def get_allowed_transitions(self, from_status: Any) -> List[S]:
        """Statuses reachable in one step, or an empty list if there is no entry."""
        source = self._member_or_none(from_status)
        if source is None:
            return []
        return list(self.transitions.get(source, ()))

    def is_valid_transition(self, from_status: Any, to_status: Any) -> bool:
        """
        Check whether moving from one status to another is allowed.

        This is a pure predicate: unknown statuses and missing table entries
        return False instead of raising.
        """
        target = self._member_or_none(to_status)
        if target is None:
            return False
        return target in self.get_allowed_transitions(from_status)

    def require_transition(self, from_status: Any, to_status: Any) -> None:
        """
        Raise InvalidTransitionError unless the transition is allowed.

        Raises:
            UnknownStatusError: if either status is not a member
            InvalidTransitionError: if the table does not permit the move
        """
        source = self.coerce_status(from_status)
        target = self.coerce_status(to_status)
        if not self.is_valid_transition(source, target):
            raise InvalidTransitionError(self.name, source, target)
