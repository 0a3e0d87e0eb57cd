"""
Tests for the operations taxonomy and operation labels.
"""

import pytest

from doctorus.types import ValidationError, UnknownLocaleError
from doctorus.operations import (
    Resource,
    Action,
    Operation,
    Operations,
    MEDICAL_RESOURCES,
    PUBLIC_RESOURCES,
    is_medical_resource,
    is_public_resource,
    get_resource_from_operation,
    get_action_from_operation,
    get_all_operations,
    get_operations_by_resource,
    get_operations_by_action,
    ORDER_RESOURCE_ACTION,
    humanize_key,
    get_action_label,
    get_resource_label,
    get_operation_label,
)


class TestResourcesAndActions:
    """Test resource and action enums"""

    def test_values(self):
        assert Resource.PATIENT == "PATIENT"
        assert Resource.MEDICAL_RECORD == "MEDICAL_RECORD"
        assert Resource.PROFILE == "PROFILE"
        assert Action.CREATE == "CREATE"
        assert Action.PRESCRIBE == "PRESCRIBE"
        assert Action.AUDIT == "AUDIT"

    def test_medical_resources(self):
        for resource in (Resource.PATIENT, Resource.MEDICAL_RECORD, Resource.PRESCRIPTION,
                         Resource.DIAGNOSIS, Resource.LAB_RESULT):
            assert is_medical_resource(resource)
            assert not is_public_resource(resource)

    def test_public_resources(self):
        for resource in (Resource.USER, Resource.PROFILE, Resource.SETTINGS, Resource.NOTIFICATION):
            assert is_public_resource(resource)
            assert not is_medical_resource(resource)

    def test_resource_partition(self):
        assert not set(MEDICAL_RESOURCES) & set(PUBLIC_RESOURCES)
        assert set(MEDICAL_RESOURCES) | set(PUBLIC_RESOURCES) == set(Resource)


class TestOperation:
    """Test Operation values"""

    def test_to_string(self):
        assert str(Operation(Resource.PATIENT, Action.READ)) == "PATIENT:READ"
        assert str(Operation(Resource.USER, Action.CREATE)) == "USER:CREATE"
        assert str(Operation(Resource.AUDIT_LOG, Action.AUDIT)) == "AUDIT_LOG:AUDIT"

    def test_from_string(self):
        op = Operation.from_string("PATIENT:READ")
        assert op is not None
        assert op.resource is Resource.PATIENT
        assert op.action is Action.READ

    @pytest.mark.parametrize("value", [
        "INVALID",
        "PATIENT",
        "PATIENT:READ:EXTRA",
        "INVALID_RESOURCE:READ",
        "PATIENT:INVALID_ACTION",
        "",
        None,
    ])
    def test_from_string_invalid(self, value):
        assert Operation.from_string(value) is None

    def test_from_string_round_trip_for_predefined(self):
        for op in get_all_operations():
            assert Operation.from_string(str(op)) == op

    def test_equality(self):
        assert Operation(Resource.PATIENT, Action.READ) == Operation("PATIENT", "READ")
        assert Operation(Resource.PATIENT, Action.READ) != Operation(Resource.PATIENT, Action.UPDATE)
        assert Operation(Resource.PATIENT, Action.READ) != Operation(Resource.USER, Action.READ)

    def test_hashable(self):
        ops = {Operation(Resource.PATIENT, Action.READ), Operations.PATIENT_READ}
        assert len(ops) == 1

    def test_invalid_parts(self):
        with pytest.raises(ValidationError) as exc_info:
            Operation("SPACESHIP", Action.READ)
        assert exc_info.value.field == "resource"
        with pytest.raises(ValidationError):
            Operation(Resource.PATIENT, "FLY")

    def test_to_dict(self):
        assert Operation(Resource.PATIENT, Action.READ).to_dict() == {
            'resource': 'PATIENT',
            'action': 'READ',
            'operation': 'PATIENT:READ',
        }
        assert Operation.from_dict({'resource': 'USER', 'action': 'LOGIN'}) == Operations.USER_LOGIN

    def test_component_parsers(self):
        assert get_resource_from_operation("PRESCRIPTION:SIGN") is Resource.PRESCRIPTION
        assert get_action_from_operation("PRESCRIPTION:SIGN") is Action.SIGN
        assert get_resource_from_operation("PRESCRIPTION") is None
        assert get_action_from_operation("PRESCRIPTION:FLY") is None


class TestPredefinedOperations:
    """Test the predefined operation namespace"""

    def test_values(self):
        assert str(Operations.PATIENT_CREATE) == "PATIENT:CREATE"
        assert str(Operations.MEDICAL_RECORD_SHARE) == "MEDICAL_RECORD:SHARE"
        assert str(Operations.PRESCRIPTION_PRESCRIBE) == "PRESCRIPTION:PRESCRIBE"
        assert str(Operations.USER_LOGOUT) == "USER:LOGOUT"

    def test_get_all_operations(self):
        ops = get_all_operations()
        assert Operations.PATIENT_READ in ops
        assert Operations.USER_LOGIN in ops
        assert len(ops) == len(set(ops))

    def test_by_resource(self):
        patient_ops = get_operations_by_resource(Resource.PATIENT)
        assert Operations.PATIENT_CREATE in patient_ops
        assert Operations.PATIENT_DELETE in patient_ops
        assert Operations.USER_CREATE not in patient_ops
        assert all(op.resource is Resource.PATIENT for op in patient_ops)

    def test_by_action(self):
        create_ops = get_operations_by_action(Action.CREATE)
        assert Operations.PATIENT_CREATE in create_ops
        assert Operations.USER_CREATE in create_ops
        assert Operations.MEDICAL_RECORD_CREATE in create_ops
        assert Operations.PATIENT_READ not in create_ops


class TestOperationLabels:
    """Test bilingual operation labels"""

    def test_action_labels(self):
        assert get_action_label(Action.READ, "us-EN") == "Read"
        assert get_action_label(Action.UPDATE, "us-EN") == "Update"
        assert get_action_label(Action.READ, "fr-FR") == "Lire"
        assert get_action_label(Action.UPDATE, "fr-FR") == "Mettre à jour"
        assert get_action_label(Action.PRESCRIBE, "fr-FR") == "Prescrire"

    def test_resource_labels(self):
        assert get_resource_label(Resource.PATIENT, "us-EN") == "Patient"
        assert get_resource_label(Resource.ACCOUNT_OWNERSHIP, "us-EN") == "Account Ownership"
        assert get_resource_label(Resource.ACCOUNT, "fr-FR") == "Compte"
        assert get_resource_label(Resource.ACCOUNT_OWNERSHIP, "fr-FR") == "Propriété du compte"
        assert get_resource_label(Resource.PATIENT, "fr-FR") == "Patient"

    def test_missing_translation_falls_back_to_humanized_key(self):
        assert get_resource_label(Resource.PROFILE, "fr-FR") == "Profile"
        assert get_resource_label(Resource.APPOINTMENT, "fr-FR") == "Appointment"

    def test_every_label_is_non_empty(self):
        for locale in ("us-EN", "fr-FR"):
            for action in Action:
                assert get_action_label(action, locale)
            for resource in Resource:
                assert get_resource_label(resource, locale)

    def test_humanize_key(self):
        assert humanize_key("MEDICAL_SERVICE_NOTE") == "Medical Service Note"
        assert humanize_key("USER") == "User"

    def test_operation_label(self):
        op = Operation(Resource.PATIENT, Action.READ)
        assert get_operation_label(op, "us-EN") == "Read Patient"
        assert get_operation_label(op, "fr-FR") == "Lire Patient"
        assert get_operation_label("PATIENT:READ", "us-EN") == "Read Patient"
        assert get_operation_label("PATIENT:READ", "fr-FR") == "Lire Patient"

    def test_resource_action_order(self):
        op = Operation(Resource.PATIENT, Action.CREATE)
        assert get_operation_label(op, "us-EN", order=ORDER_RESOURCE_ACTION) == "Patient Create"
        assert get_operation_label(op, "us-EN", separator=" / ") == "Create / Patient"

    def test_invalid_operation_string(self):
        assert get_operation_label("PATIENT", "us-EN") == ""

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            get_operation_label(Operations.PATIENT_READ, "us-EN", order="random")

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            get_operation_label(Operations.PATIENT_READ, "de-DE")

    def test_unknown_label_keys(self):
        with pytest.raises(ValidationError):
            get_action_label("FLY", "us-EN")
        with pytest.raises(ValidationError):
            get_resource_label("SPACESHIP", "fr-FR")
