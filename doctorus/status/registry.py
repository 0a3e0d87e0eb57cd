"""
Status registry.

Holds the status features known to a process and answers every metadata,
query and transition question by feature name. A registry is populated once
and then frozen; after that it is read-only and can be shared freely between
threads.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..core.config import Config
from ..types.common import Locale, LocaleLike, FormatLike, DEFAULT_LOCALE, DEFAULT_FORMAT
from ..types.errors import UnknownFeatureError, ValidationError
from .feature import Feature, U
from .types import StatusMetadata, ExtendedStatusMetadata
from .medical_service import MEDICAL_SERVICE_FEATURE
from .account_location import ACCOUNT_LOCATION_FEATURE
from .medical_history import MEDICAL_HISTORY_FEATURE
from .boolean import BOOLEAN_PRESET_FEATURES


logger = logging.getLogger(__name__)


class StatusRegistry:
    """
    Feature-keyed lookup of status metadata and transitions.

    Accessors called without a locale use config.default_locale.
    """

    def __init__(self, features: Optional[Iterable[Feature]] = None, config: Optional[Config] = None):
        self._features: Dict[str, Feature] = {}
        self._frozen = False
        self.default_locale: Locale = config.default_locale if config is not None else DEFAULT_LOCALE

        for feature in features or ():
            self.register(feature)

    def register(self, feature: Feature) -> Feature:
        """
        Register a feature.

        Raises:
            ValidationError: if the registry is frozen or the name is taken
        """
        if not isinstance(feature, Feature):
            raise ValidationError(
                "Only Feature instances can be registered",
                field="feature",
                value=type(feature).__name__
            )
        if self._frozen:
            raise ValidationError(
                f"Cannot register feature {feature.name}: registry is frozen",
                field="feature",
                value=feature.name
            )
        if feature.name in self._features:
            raise ValidationError(
                f"Feature {feature.name} is already registered",
                field="feature",
                value=feature.name
            )

        self._features[feature.name] = feature
        logger.debug(f"Registered status feature {feature.name} ({len(feature.statuses())} statuses)")
        return feature

    def _locale(self, locale: Optional[LocaleLike]) -> LocaleLike:
        return self.default_locale if locale is None else locale

    def freeze(self) -> 'StatusRegistry':
        """Stop accepting registrations."""
        self._frozen = True
        logger.debug(f"Status registry frozen with {len(self._features)} features")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def features(self) -> List[str]:
        """Registered feature names in registration order."""
        return list(self._features)

    def has_feature(self, feature: Any) -> bool:
        try:
            self.get_feature(feature)
        except UnknownFeatureError:
            return False
        return True

    def get_feature(self, feature: Any) -> Feature:
        """
        Look up a feature by name or StatusFeature member.

        Raises:
            UnknownFeatureError: if the feature is not registered
        """
        if isinstance(feature, Feature):
            feature = feature.name
        if isinstance(feature, Enum):
            feature = feature.value
        if not isinstance(feature, str) or feature not in self._features:
            raise UnknownFeatureError(feature)
        return self._features[feature]

    # Metadata accessors

    def get_metadata(self, feature: Any, status: Any) -> StatusMetadata:
        """
        Get status metadata for a specific feature and status.

        Raises:
            UnknownFeatureError: if the feature is not registered
            UnknownStatusError: if the status is not part of the feature
        """
        return self.get_feature(feature).get_metadata(status)

    def get_icon(self, feature: Any, status: Any) -> str:
        return self.get_feature(feature).get_icon(status)

    def get_color(self, feature: Any, status: Any) -> str:
        return self.get_feature(feature).get_color(status)

    def get_label(
        self,
        feature: Any,
        status: Any,
        locale: Optional[LocaleLike] = None,
        label_format: FormatLike = DEFAULT_FORMAT
    ) -> str:
        """
        Get the translated status label.

        Raises:
            UnknownLocaleError: for a locale other than "us-EN" or "fr-FR"
            UnknownFormatError: for a format other than "short" or "long"
        """
        return self.get_feature(feature).get_label(status, self._locale(locale), label_format)

    def get_description(self, feature: Any, status: Any, locale: Optional[LocaleLike] = None) -> str:
        return self.get_feature(feature).get_description(status, self._locale(locale))

    def get_extended_metadata(
        self,
        feature: Any,
        status: Any,
        locale: Optional[LocaleLike] = None
    ) -> ExtendedStatusMetadata:
        """Metadata with labels and description resolved for one locale."""
        return self.get_feature(feature).get_extended_metadata(status, self._locale(locale))

    def get_all_statuses(self, feature: Any) -> List[Any]:
        return self.get_feature(feature).statuses()

    def get_all_metadata(self, feature: Any) -> Mapping[Any, StatusMetadata]:
        return self.get_feature(feature).metadata

    # Queries

    def filter_statuses(
        self,
        feature: Any,
        predicate: Callable[[StatusMetadata, Any], bool]
    ) -> List[Any]:
        """Statuses whose metadata matches the predicate, in registration order."""
        return self.get_feature(feature).filter(predicate)

    def search_statuses(self, feature: Any, term: str, locale: Optional[LocaleLike] = None) -> List[Any]:
        """Case-insensitive search over labels and description; "" matches all."""
        return self.get_feature(feature).search(term, self._locale(locale))

    def map_statuses(
        self,
        feature: Any,
        transform: Callable[[StatusMetadata, Any], U]
    ) -> Dict[Any, U]:
        return self.get_feature(feature).map(transform)

    def group_by_color(self, feature: Any) -> Dict[str, List[Any]]:
        return self.get_feature(feature).group_by_color()

    def group_by_icon(self, feature: Any) -> Dict[str, List[Any]]:
        return self.get_feature(feature).group_by_icon()

    # Transitions

    def has_transitions(self, feature: Any) -> bool:
        return self.get_feature(feature).has_transitions

    def is_valid_transition(self, feature: Any, from_status: Any, to_status: Any) -> bool:
        """
        Check if a status transition is allowed for a feature.

        Advisory only: callers decide what to do with a False result.
        """
        return self.get_feature(feature).is_valid_transition(from_status, to_status)

    def get_allowed_transitions(self, feature: Any, from_status: Any) -> List[Any]:
        return self.get_feature(feature).get_allowed_transitions(from_status)

    def require_transition(self, feature: Any, from_status: Any, to_status: Any) -> None:
        """Raise InvalidTransitionError unless the transition is allowed."""
        self.get_feature(feature).require_transition(from_status, to_status)


def build_default_registry(config: Optional[Config] = None) -> StatusRegistry:
    """Create a frozen registry with every built-in status feature."""
    registry = StatusRegistry([
        MEDICAL_SERVICE_FEATURE,
        ACCOUNT_LOCATION_FEATURE,
        MEDICAL_HISTORY_FEATURE,
        *BOOLEAN_PRESET_FEATURES.values(),
    ], config=config)
    return registry.freeze()


default_registry = build_default_registry()


def get_status_metadata_for_feature(feature: Any, status: Any) -> StatusMetadata:
    """
    Get status metadata for a specific feature and status.

    Args:
        feature: The feature name (e.g., 'medicalService', 'accountLocation')
        status: The status value

    Returns:
        The complete StatusMetadata for the given feature and status
    """
    return default_registry.get_metadata(feature, status)


def get_status_icon_for_feature(feature: Any, status: Any) -> str:
    return default_registry.get_icon(feature, status)


def get_status_color_for_feature(feature: Any, status: Any) -> str:
    return default_registry.get_color(feature, status)


def get_status_label_for_feature(
    feature: Any,
    status: Any,
    locale: Optional[LocaleLike] = None,
    label_format: FormatLike = DEFAULT_FORMAT
) -> str:
    return default_registry.get_label(feature, status, locale, label_format)


def get_status_description_for_feature(
    feature: Any,
    status: Any,
    locale: Optional[LocaleLike] = None
) -> str:
    return default_registry.get_description(feature, status, locale)


def get_extended_status_metadata_for_feature(
    feature: Any,
    status: Any,
    locale: Optional[LocaleLike] = None
) -> ExtendedStatusMetadata:
    return default_registry.get_extended_metadata(feature, status, locale)


def get_all_status_metadata_for_feature(feature: Any) -> Mapping[Any, StatusMetadata]:
    return default_registry.get_all_metadata(feature)


def get_all_statuses_for_feature(feature: Any) -> List[Any]:
    return default_registry.get_all_statuses(feature)


def filter_statuses_by_feature(
    feature: Any,
    predicate: Callable[[StatusMetadata, Any], bool]
) -> List[Any]:
    return default_registry.filter_statuses(feature, predicate)


def map_statuses_by_feature(
    feature: Any,
    transform: Callable[[StatusMetadata, Any], U]
) -> Dict[Any, U]:
    return default_registry.map_statuses(feature, transform)


def search_statuses_by_feature(
    feature: Any,
    search_term: str,
    locale: Optional[LocaleLike] = None
) -> List[Any]:
    return default_registry.search_statuses(feature, search_term, locale)


def group_statuses_by_color_for_feature(feature: Any) -> Dict[str, List[Any]]:
    return default_registry.group_by_color(feature)


def group_statuses_by_icon_for_feature(feature: Any) -> Dict[str, List[Any]]:
    return default_registry.group_by_icon(feature)
