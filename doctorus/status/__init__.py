"""
Status metadata and workflow transitions.

Every status enumeration carries an icon, a color and bilingual short/long
labels and descriptions. Enumerations are grouped into features and served by
a StatusRegistry; the medical service feature also defines which status
changes are allowed.
"""

from .types import (
    StatusFeature,
    LocalizedText,
    StatusLabel,
    StatusMetadata,
    ExtendedStatusMetadata,
    StatusConfiguration,
)
from .feature import Feature, TransitionTable
from .medical_service import (
    MedicalServiceStatus,
    MEDICAL_SERVICE_STATUS_METADATA,
    MEDICAL_SERVICE_STATUS_TRANSITIONS,
    MEDICAL_SERVICE_FEATURE,
    get_all_medical_service_statuses,
    is_valid_medical_service_status,
    is_valid_transition,
    get_allowed_transitions,
)
from .account_location import (
    AccountLocationStatus,
    ACCOUNT_LOCATION_STATUS_METADATA,
    ACCOUNT_LOCATION_FEATURE,
    get_all_account_location_statuses,
    is_valid_account_location_status,
)
from .medical_history import (
    MedicalHistoryStatus,
    MEDICAL_HISTORY_STATUS_METADATA,
    MEDICAL_HISTORY_FEATURE,
    get_all_medical_history_statuses,
    is_valid_medical_history_status,
)
from .boolean import (
    BooleanStatus,
    BooleanStatusPreset,
    BOOLEAN_STATUS_METADATA,
    BOOLEAN_METADATA_REGISTRY,
    BOOLEAN_PRESET_FEATURES,
)
from .registry import (
    StatusRegistry,
    build_default_registry,
    default_registry,
    get_status_metadata_for_feature,
    get_status_icon_for_feature,
    get_status_color_for_feature,
    get_status_label_for_feature,
    get_status_description_for_feature,
    get_extended_status_metadata_for_feature,
    get_all_status_metadata_for_feature,
    get_all_statuses_for_feature,
    filter_statuses_by_feature,
    map_statuses_by_feature,
    search_statuses_by_feature,
    group_statuses_by_color_for_feature,
    group_statuses_by_icon_for_feature,
)

__all__ = [
    # Types
    'StatusFeature',
    'LocalizedText',
    'StatusLabel',
    'StatusMetadata',
    'ExtendedStatusMetadata',
    'StatusConfiguration',
    'Feature',
    'TransitionTable',

    # Medical service
    'MedicalServiceStatus',
    'MEDICAL_SERVICE_STATUS_METADATA',
    'MEDICAL_SERVICE_STATUS_TRANSITIONS',
    'MEDICAL_SERVICE_FEATURE',
    'get_all_medical_service_statuses',
    'is_valid_medical_service_status',
    'is_valid_transition',
    'get_allowed_transitions',

    # Account location
    'AccountLocationStatus',
    'ACCOUNT_LOCATION_STATUS_METADATA',
    'ACCOUNT_LOCATION_FEATURE',
    'get_all_account_location_statuses',
    'is_valid_account_location_status',

    # Medical history
    'MedicalHistoryStatus',
    'MEDICAL_HISTORY_STATUS_METADATA',
    'MEDICAL_HISTORY_FEATURE',
    'get_all_medical_history_statuses',
    'is_valid_medical_history_status',

    # Boolean
    'BooleanStatus',
    'BooleanStatusPreset',
    'BOOLEAN_STATUS_METADATA',
    'BOOLEAN_METADATA_REGISTRY',
    'BOOLEAN_PRESET_FEATURES',

    # Registry
    'StatusRegistry',
    'build_default_registry',
    'default_registry',
    'get_status_metadata_for_feature',
    'get_status_icon_for_feature',
    'get_status_color_for_feature',
    'get_status_label_for_feature',
    'get_status_description_for_feature',
    'get_extended_status_metadata_for_feature',
    'get_all_status_metadata_for_feature',
    'get_all_statuses_for_feature',
    'filter_statuses_by_feature',
    'map_statuses_by_feature',
    'search_statuses_by_feature',
    'group_statuses_by_color_for_feature',
    'group_statuses_by_icon_for_feature',
]
