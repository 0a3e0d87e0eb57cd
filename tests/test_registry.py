"""
Tests for the status registry and boolean status presets.
"""

import pytest

from doctorus import Config
from doctorus.types import (
    UnknownFeatureError,
    UnknownStatusError,
    UnknownLocaleOrFormatError,
    InvalidTransitionError,
    ValidationError,
)
from doctorus.status import (
    Feature,
    StatusFeature,
    StatusRegistry,
    BooleanStatus,
    BooleanStatusPreset,
    BOOLEAN_STATUS_METADATA,
    BOOLEAN_METADATA_REGISTRY,
    BOOLEAN_PRESET_FEATURES,
    MedicalServiceStatus,
    AccountLocationStatus,
    MEDICAL_SERVICE_FEATURE,
    ACCOUNT_LOCATION_FEATURE,
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


@pytest.fixture
def registry():
    """Create an unfrozen registry with two features"""
    return StatusRegistry([MEDICAL_SERVICE_FEATURE, ACCOUNT_LOCATION_FEATURE])


class TestBooleanStatus:
    """Test boolean status values and presets"""

    def test_values(self):
        assert BooleanStatus.TRUE == "true"
        assert BooleanStatus.FALSE == "false"
        assert BooleanStatus.from_bool(True) is BooleanStatus.TRUE
        assert BooleanStatus.from_bool(False) is BooleanStatus.FALSE

    def test_default_metadata(self):
        true_meta = BOOLEAN_STATUS_METADATA[BooleanStatus.TRUE]
        assert true_meta.icon == "check_circle"
        assert true_meta.color == "#4CAF50"
        assert true_meta.get_label("us-EN", "short") == "Yes"
        assert true_meta.get_label("fr-FR", "short") == "Oui"
        assert true_meta.get_label("us-EN", "long") == "Active"
        assert true_meta.get_label("fr-FR", "long") == "Actif"

        false_meta = BOOLEAN_STATUS_METADATA[BooleanStatus.FALSE]
        assert false_meta.icon == "cancel"
        assert false_meta.color == "#F44336"
        assert false_meta.get_label("us-EN", "short") == "No"
        assert false_meta.get_label("fr-FR", "long") == "Inactif"

    @pytest.mark.parametrize("preset,true_label,false_label,true_fr,false_fr", [
        (BooleanStatusPreset.YES_NO, "Yes", "No", "Oui", "Non"),
        (BooleanStatusPreset.ACTIVE_INACTIVE, "Active", "Inactive", "Actif", "Inactif"),
        (BooleanStatusPreset.ENABLED_DISABLED, "Enabled", "Disabled", "Activé", "Désactivé"),
        (BooleanStatusPreset.VALID_INVALID, "Valid", "Invalid", "Valide", "Invalide"),
    ])
    def test_preset_labels(self, preset, true_label, false_label, true_fr, false_fr):
        metadata = BOOLEAN_METADATA_REGISTRY[preset]
        for label_format in ("short", "long"):
            assert metadata[BooleanStatus.TRUE].get_label("us-EN", label_format) == true_label
            assert metadata[BooleanStatus.FALSE].get_label("us-EN", label_format) == false_label
        assert metadata[BooleanStatus.TRUE].get_label("fr-FR") == true_fr
        assert metadata[BooleanStatus.FALSE].get_label("fr-FR") == false_fr

    @pytest.mark.parametrize("preset", list(BooleanStatusPreset))
    def test_preset_icons_and_colors(self, preset):
        assert get_status_icon_for_feature(preset.value, BooleanStatus.TRUE) == "check_circle"
        assert get_status_icon_for_feature(preset.value, BooleanStatus.FALSE) == "cancel"
        assert get_status_color_for_feature(preset, BooleanStatus.TRUE) == "#4CAF50"
        assert get_status_color_for_feature(preset, BooleanStatus.FALSE) == "#F44336"

    def test_preset_features(self):
        assert set(BOOLEAN_PRESET_FEATURES) == set(BooleanStatusPreset)
        assert BOOLEAN_PRESET_FEATURES[BooleanStatusPreset.YES_NO].name == "yesNo"

    def test_python_bool_coercion(self):
        assert get_status_label_for_feature("activeInactive", True) == "Active"
        assert get_status_label_for_feature("validInvalid", False) == "Invalid"
        assert get_status_label_for_feature("yesNo", "true") == "Yes"


class TestDefaultRegistry:
    """Test the process-wide registry and its module-level helpers"""

    def test_registered_features(self):
        assert default_registry.frozen
        assert default_registry.features() == [feature.value for feature in StatusFeature]

    def test_metadata_helpers(self):
        meta = get_status_metadata_for_feature("medicalService", MedicalServiceStatus.COMPLETED)
        assert meta.icon == "check_circle"
        assert get_status_label_for_feature(
            StatusFeature.MEDICAL_SERVICE, "completed", "fr-FR", "long"
        ) == "Service terminé"
        assert get_status_description_for_feature("accountLocation", AccountLocationStatus.CLOSED)

    def test_extended_metadata_helper(self):
        extended = get_extended_status_metadata_for_feature("yesNo", BooleanStatus.TRUE, "fr-FR")
        assert extended.short_label == "Oui"
        assert extended.long_label == "Oui"

    def test_all_statuses_match_metadata_keys(self):
        for feature in default_registry.features():
            statuses = get_all_statuses_for_feature(feature)
            assert list(get_all_status_metadata_for_feature(feature)) == statuses
            assert len(statuses) == len(set(statuses))

    def test_query_helpers(self):
        assert search_statuses_by_feature("medicalService", "waiting", "us-EN") == [
            MedicalServiceStatus.ON_WAITING_ROOM
        ]
        assert group_statuses_by_color_for_feature("medicalService")["#4CAF50"] == [
            MedicalServiceStatus.COMPLETED
        ]
        assert group_statuses_by_icon_for_feature("yesNo") == {
            "check_circle": [BooleanStatus.TRUE],
            "cancel": [BooleanStatus.FALSE],
        }
        assert filter_statuses_by_feature(
            "accountLocation", lambda meta, status: meta.color == "#2196F3"
        ) == [AccountLocationStatus.PERIODS]
        colors = map_statuses_by_feature("yesNo", lambda meta, status: meta.color)
        assert colors == {BooleanStatus.TRUE: "#4CAF50", BooleanStatus.FALSE: "#F44336"}

    def test_unknown_feature(self):
        with pytest.raises(UnknownFeatureError) as exc_info:
            get_status_metadata_for_feature("invoice", "paid")
        assert exc_info.value.details == {'feature': 'invoice'}
        assert exc_info.value.to_dict()['error'] == "unknown_feature"

    def test_unknown_status(self):
        with pytest.raises(UnknownStatusError):
            get_status_icon_for_feature("yesNo", "maybe")

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleOrFormatError):
            get_status_label_for_feature("yesNo", BooleanStatus.TRUE, "es-ES")

    def test_transitions(self):
        assert default_registry.has_transitions("medicalService")
        assert not default_registry.has_transitions("yesNo")
        assert default_registry.is_valid_transition("medicalService", "pending", "on_waiting_room")
        assert not default_registry.is_valid_transition("yesNo", "true", "false")
        assert default_registry.get_allowed_transitions("medicalService", "canceled") == [
            MedicalServiceStatus.PENDING
        ]
        with pytest.raises(InvalidTransitionError):
            default_registry.require_transition("medicalService", "completed", "canceled")

    def test_cannot_register_after_freeze(self):
        with pytest.raises(ValidationError):
            default_registry.register(MEDICAL_SERVICE_FEATURE)

    def test_build_returns_independent_registry(self):
        registry = build_default_registry()
        assert registry is not default_registry
        assert registry.features() == default_registry.features()


class TestStatusRegistry:
    """Test registry construction and lookups"""

    def test_lookup_by_name_enum_or_feature(self, registry):
        assert registry.get_feature("medicalService") is MEDICAL_SERVICE_FEATURE
        assert registry.get_feature(StatusFeature.MEDICAL_SERVICE) is MEDICAL_SERVICE_FEATURE
        assert registry.get_feature(MEDICAL_SERVICE_FEATURE) is MEDICAL_SERVICE_FEATURE

    def test_has_feature(self, registry):
        assert registry.has_feature("accountLocation")
        assert not registry.has_feature("yesNo")
        assert not registry.has_feature(None)

    def test_duplicate_registration(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.register(MEDICAL_SERVICE_FEATURE)
        assert exc_info.value.field == "feature"

    def test_register_requires_feature(self, registry):
        with pytest.raises(ValidationError):
            registry.register({"name": "medicalHistory"})

    def test_register_custom_feature(self, registry):
        feature = Feature("flag", BooleanStatus, BOOLEAN_STATUS_METADATA)
        registry.register(feature)
        assert registry.get_label("flag", True, "us-EN", "long") == "Active"
        assert registry.features() == ["medicalService", "accountLocation", "flag"]

    def test_freeze(self, registry):
        assert not registry.frozen
        registry.freeze()
        assert registry.frozen
        with pytest.raises(ValidationError):
            registry.register(BOOLEAN_PRESET_FEATURES[BooleanStatusPreset.YES_NO])

    def test_cross_feature_status_rejected(self, registry):
        with pytest.raises(UnknownStatusError):
            registry.get_metadata("accountLocation", MedicalServiceStatus.PENDING)

    def test_accessors_are_idempotent(self, registry):
        first = registry.get_extended_metadata("medicalService", "pending", "fr-FR")
        second = registry.get_extended_metadata("medicalService", "pending", "fr-FR")
        assert first == second


class TestConfiguredLocale:
    """Test the configured default locale"""

    @pytest.fixture
    def french_registry(self):
        return build_default_registry(Config(default_locale="fr-FR"))

    def test_default_locale_from_config(self, french_registry):
        assert french_registry.default_locale.value == "fr-FR"
        assert french_registry.get_label("medicalService", "pending") == "En attente"
        assert french_registry.get_label("medicalService", "completed", label_format="long") == \
            "Service terminé"
        assert french_registry.get_description("yesNo", True) == "Le statut est actif ou activé"
        assert french_registry.get_extended_metadata("yesNo", False).short_label == "Non"

    def test_search_uses_default_locale(self, french_registry):
        assert french_registry.search_statuses("medicalService", "annulé") == [
            MedicalServiceStatus.CANCELED
        ]

    def test_explicit_locale_wins(self, french_registry):
        assert french_registry.get_label("medicalService", "pending", "us-EN") == "Pending"

    def test_without_config(self):
        assert StatusRegistry().default_locale.value == "us-EN"
        assert default_registry.get_label("medicalService", "pending") == "Pending"
