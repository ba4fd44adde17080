"""Tests for the gateway request envelope."""

import json

from aria_access.envelope import ARIA_NAMESPACE, GATEWAY_PATH, wrap_envelope, wrap_values


def test_patient_search_envelope_matches_wire_format() -> None:
    envelope = wrap_envelope("GetPatientsRequest", {"PatientId1": "123", "PatientId2": ""})

    assert json.dumps(envelope, separators=(",", ":")) == (
        '{"__type":"GetPatientsRequest:http://services.varian.com/AriaWebConnect/Link",'
        '"Attributes":null,"PatientId1":{"Value":"123"},"PatientId2":{"Value":""}}'
    )


def test_keys_are_type_attributes_and_every_field() -> None:
    fields = {"PatientId": "P1", "CourseId": "C1", "Scale": "IEC"}

    envelope = wrap_envelope("GetPatientPlanTxFieldsRequest", fields)

    assert set(envelope) == {"__type", "Attributes", *fields}
    assert envelope["__type"].endswith(f":{ARIA_NAMESPACE}")


def test_null_false_and_zero_are_wrapped_not_dropped() -> None:
    envelope = wrap_envelope(
        "GetDoctorsAssignedToPatientRequest",
        {"IsOncologist": None, "IsPrimary": False, "Ranking": 0},
    )

    assert envelope["IsOncologist"] == {"Value": None}
    assert envelope["IsPrimary"] == {"Value": False}
    assert envelope["Ranking"] == {"Value": 0}


def test_nested_structures_are_wrapped_once() -> None:
    nested = wrap_values({"ResourceID": "M1"})

    envelope = wrap_envelope("CreateMachineAppointmentRequest", {"AssociatedResources": [nested]})

    assert envelope["AssociatedResources"] == {"Value": [{"ResourceID": {"Value": "M1"}}]}


def test_empty_fields_give_bare_envelope() -> None:
    assert wrap_envelope("GetMachineListRequest", {}) == {
        "__type": f"GetMachineListRequest:{ARIA_NAMESPACE}",
        "Attributes": None,
    }


def test_input_mapping_is_not_modified() -> None:
    fields = {"PatientId": "P1"}

    wrap_envelope("GetPatientRefPointsRequest", fields)

    assert fields == {"PatientId": "P1"}


def test_gateway_path() -> None:
    assert GATEWAY_PATH == "/Gateway/Service.svc/rest/Process"
