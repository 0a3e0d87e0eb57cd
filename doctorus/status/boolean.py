"""
Generic boolean status enumeration and metadata.

Provides flexible labeling for boolean states with several label pairs
(yes/no, active/inactive, enabled/disabled, valid/invalid). Each pair is a
preset registered as its own status feature.
"""

from enum import Enum
from typing import Dict, Mapping

from .feature import Feature
from .types import StatusFeature, StatusMetadata


class BooleanStatus(str, Enum):
    TRUE = "true"
    FALSE = "false"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_bool(cls, value: bool) -> 'BooleanStatus':
        return cls.TRUE if value else cls.FALSE


class BooleanStatusPreset(str, Enum):
    """Label pairs available for boolean statuses."""
    YES_NO = "yesNo"
    ACTIVE_INACTIVE = "activeInactive"
    ENABLED_DISABLED = "enabledDisabled"
    VALID_INVALID = "validInvalid"

    def __str__(self) -> str:
        return self.value


_TRUE_ICON, _TRUE_COLOR = "check_circle", "#4CAF50"  # Green
_FALSE_ICON, _FALSE_COLOR = "cancel", "#F44336"  # Red


def _pair(
    true_label: Mapping[str, str],
    false_label: Mapping[str, str],
    true_description: Mapping[str, str],
    false_description: Mapping[str, str]
) -> Dict[BooleanStatus, StatusMetadata]:
    """Build a preset whose short and long labels are identical."""
    return {
        BooleanStatus.TRUE: StatusMetadata.build(
            icon=_TRUE_ICON,
            color=_TRUE_COLOR,
            short=true_label,
            long=true_label,
            description=true_description,
        ),
        BooleanStatus.FALSE: StatusMetadata.build(
            icon=_FALSE_ICON,
            color=_FALSE_COLOR,
            short=false_label,
            long=false_label,
            description=false_description,
        ),
    }


_ACTIVE_DESCRIPTION = {
    "us-EN": "Status is active or enabled",
    "fr-FR": "Le statut est actif ou activé",
}
_INACTIVE_DESCRIPTION = {
    "us-EN": "Status is inactive or disabled",
    "fr-FR": "Le statut est inactif ou désactivé",
}


# Default labels: Yes/No short, Active/Inactive long. Override with a preset
# for specific use cases.
BOOLEAN_STATUS_METADATA: Dict[BooleanStatus, StatusMetadata] = {
    BooleanStatus.TRUE: StatusMetadata.build(
        icon=_TRUE_ICON,
        color=_TRUE_COLOR,
        short={"us-EN": "Yes", "fr-FR": "Oui"},
        long={"us-EN": "Active", "fr-FR": "Actif"},
        description=_ACTIVE_DESCRIPTION,
    ),
    BooleanStatus.FALSE: StatusMetadata.build(
        icon=_FALSE_ICON,
        color=_FALSE_COLOR,
        short={"us-EN": "No", "fr-FR": "Non"},
        long={"us-EN": "Inactive", "fr-FR": "Inactif"},
        description=_INACTIVE_DESCRIPTION,
    ),
}

YES_NO_METADATA = _pair(
    {"us-EN": "Yes", "fr-FR": "Oui"},
    {"us-EN": "No", "fr-FR": "Non"},
    _ACTIVE_DESCRIPTION,
    _INACTIVE_DESCRIPTION,
)

ACTIVE_INACTIVE_METADATA = _pair(
    {"us-EN": "Active", "fr-FR": "Actif"},
    {"us-EN": "Inactive", "fr-FR": "Inactif"},
    _ACTIVE_DESCRIPTION,
    _INACTIVE_DESCRIPTION,
)

ENABLED_DISABLED_METADATA = _pair(
    {"us-EN": "Enabled", "fr-FR": "Activé"},
    {"us-EN": "Disabled", "fr-FR": "Désactivé"},
    {"us-EN": "Status is enabled", "fr-FR": "Le statut est activé"},
    {"us-EN": "Status is disabled", "fr-FR": "Le statut est désactivé"},
)

VALID_INVALID_METADATA = _pair(
    {"us-EN": "Valid", "fr-FR": "Valide"},
    {"us-EN": "Invalid", "fr-FR": "Invalide"},
    {"us-EN": "Status is valid", "fr-FR": "Le statut est valide"},
    {"us-EN": "Status is invalid", "fr-FR": "Le statut est invalide"},
)


BOOLEAN_METADATA_REGISTRY: Dict[BooleanStatusPreset, Dict[BooleanStatus, StatusMetadata]] = {
    BooleanStatusPreset.YES_NO: YES_NO_METADATA,
    BooleanStatusPreset.ACTIVE_INACTIVE: ACTIVE_INACTIVE_METADATA,
    BooleanStatusPreset.ENABLED_DISABLED: ENABLED_DISABLED_METADATA,
    BooleanStatusPreset.VALID_INVALID: VALID_INVALID_METADATA,
}


BOOLEAN_PRESET_FEATURES: Dict[BooleanStatusPreset, Feature[BooleanStatus]] = {
    preset: Feature(StatusFeature(preset.value), BooleanStatus, metadata)
    for preset, metadata in BOOLEAN_METADATA_REGISTRY.items()
}
