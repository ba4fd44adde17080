"""Patient diagnosis tools.

Gateway request types used:
- GetPatientDiagnosesRequest
- CreatePatientDiagnosisRequest
- UpdatePatientDiagnosisRequest

Create and update send the diagnosis as one nested ``PatientDiagnosis``
record whose fields are wrapped the same way as top-level fields.
"""

from __future__ import annotations

from typing import Any

from aria_access.envelope import wrap_values
from aria_access.tools.base import Arg, Computed, GatewayTool, ListResult, Param, WriteResult
from aria_access.tools.records import Record, computed, field, flag

# ARIA rejects a diagnosis write without this text, even when nothing changed
_UNCHANGED_REASON = "The cancer code for this diagnosis was Unchanged."


def _first_stage(record: Record) -> Any:
    staging = record.get("staging")
    if not staging or not isinstance(staging, list):
        return None
    return Record(staging[0]).first("cancerStageCode")


def _diagnosis_record(args: dict[str, Any], diagnosis_id: Any) -> dict[str, Any]:
    record = wrap_values(
        {
            "PatientDiagnosisId": diagnosis_id,
            "PatientId": args["patientId"],
            "DiagnosisCode": args["diagnosisCode"],
            "ClinicalDescription": args["clinicalDescription"],
            "DiagnosisCodeDescription": args["clinicalDescription"],
            "DiagnosisDate": args["diagnosisDate"],
            "DiagnosisSiteId": args["diagnosisSiteId"],
            "BehaviorCode": args["behaviorCode"],
            "DiagnosisScheme": args["diagnosisScheme"],
            "DiagnosisMethodId": args["diagnosisMethodId"],
            "DiagnosisStatusId": args["diagnosisStatusId"],
            "DiagnosisStatusDate": args["diagnosisDate"],
            "Ranking": args["ranking"],
            "IsConfirmed": args["isConfirmed"],
            "IsHistoric": args["isHistoric"],
            "IsAdverseEvent": args["isAdverseEvent"],
            "IsValidEntry": True,
            "DiagnosisDetails": args["diagnosisDetails"],
            "DiagnosisMethodDescription": args["diagnosisMethodDescription"],
            "AreaName": args["areaName"],
            "EvolvedDate": args["diagnosisDate"],
            "EvolvedFromPatientDiagnosisId": 0,
            "PrimaryPatientDiagnosisId": 0,
            "IsICDCodeReported": False,
            "IsMetastasized": None,
            "PrimaryCancerSiteId": None,
            "ErrorReasonDescription": _UNCHANGED_REASON,
        }
    )
    record["Staging"] = []
    return record


# Optional diagnosis attributes shared by create and update
_DIAGNOSIS_OPTIONS = (
    Param("diagnosisScheme", "number", "Diagnosis scheme (e.g., 19)", default=19),
    Param("diagnosisMethodId", "number", "Diagnosis method ID", default=1),
    Param("diagnosisStatusId", "number", "Diagnosis status ID", default=6),
    Param("ranking", "number", "Ranking", default=1),
    Param("isConfirmed", "boolean", "Is confirmed", default=False),
    Param("isHistoric", "boolean", "Is historic", default=False),
    Param("isAdverseEvent", "boolean", "Is adverse event", default=False),
    Param("diagnosisDetails", "string", "Diagnosis details", default="DiagnosisDetails"),
    Param(
        "diagnosisMethodDescription",
        "string",
        "Diagnosis method description",
        default="DiagnosisMethodDescription",
    ),
    Param("areaName", "string", "Area name", default="CreateDiag"),
)

GET_PATIENT_DIAGNOSIS = GatewayTool(
    name="get-patient-diagnosis",
    description="Get patient diagnosis information",
    error_prefix="Error retrieving patient diagnosis",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("diagnosisId", "string", "Diagnosis ID"),
    ),
    request_type="GetPatientDiagnosesRequest",
    fields={
        "PatientId": Arg("patientId"),
        "PatientDiagnosisId": Arg("diagnosisId"),
    },
    result=ListResult(
        header="Found {count} diagnosis(es):",
        empty="No diagnoses found for this patient.",
        columns=(
            field("Diagnosis ID", "patientDiagnosisId"),
            field("Primary Site", "diagnosisSiteId"),
            field("Histology", "behaviorCode"),
            computed("Stage", _first_stage),
            field("Date", "diagnosisDate"),
            field("Status", "diagnosisStatusId"),
            field("Clinical Description", "clinicalDescription"),
            field("Diagnosis Code", "diagnosisCode"),
            flag("Is Confirmed", "isConfirmed"),
            flag("Is Historic", "isHistoric"),
        ),
    ),
)

CREATE_PATIENT_DIAGNOSIS = GatewayTool(
    name="create-patient-diagnosis",
    description="Create a new patient diagnosis in ARIA",
    error_prefix="Error creating patient diagnosis",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("diagnosisCode", "string", "Diagnosis code (e.g., 140.1)", required=True),
        Param("clinicalDescription", "string", "Clinical description", required=True),
        Param("diagnosisDate", "string", "Diagnosis date (YYYY-MM-DD)", required=True),
        Param("diagnosisSiteId", "number", "Diagnosis site ID", required=True),
        Param("behaviorCode", "string", "Behavior code (e.g., 0)", default="0"),
        *_DIAGNOSIS_OPTIONS,
    ),
    request_type="CreatePatientDiagnosisRequest",
    fields={
        "PatientDiagnosis": Computed(lambda args: _diagnosis_record(args, None)),
    },
    result=WriteResult(
        success=(
            "Patient diagnosis created successfully!\n"
            "Patient ID: {patientId}\n"
            "Diagnosis Code: {diagnosisCode}\n"
            "Clinical Description: {clinicalDescription}"
        ),
        action="create patient diagnosis",
    ),
)

UPDATE_PATIENT_DIAGNOSIS = GatewayTool(
    name="update-patient-diagnosis",
    description="Update an existing patient diagnosis in ARIA",
    error_prefix="Error updating patient diagnosis",
    params=(
        Param("patientDiagnosisId", "number", "Patient diagnosis ID", required=True),
        Param("patientId", "string", "Patient ID", required=True),
        Param("diagnosisCode", "string", "Diagnosis code (e.g., 140.1)", default=""),
        Param("clinicalDescription", "string", "Clinical description", default=""),
        Param("diagnosisDate", "string", "Diagnosis date (YYYY-MM-DD)", default=""),
        Param("diagnosisSiteId", "number", "Diagnosis site ID", default=0),
        Param("behaviorCode", "string", "Behavior code (e.g., 0)"),
        *_DIAGNOSIS_OPTIONS,
    ),
    request_type="UpdatePatientDiagnosisRequest",
    fields={
        "PatientDiagnosis": Computed(
            lambda args: _diagnosis_record(args, args["patientDiagnosisId"])
        ),
    },
    result=WriteResult(
        success=(
            "Patient diagnosis updated successfully!\n"
            "Patient Diagnosis ID: {patientDiagnosisId}\n"
            "Patient ID: {patientId}"
        ),
        action="update patient diagnosis",
    ),
)

TOOLS = (GET_PATIENT_DIAGNOSIS, CREATE_PATIENT_DIAGNOSIS, UPDATE_PATIENT_DIAGNOSIS)
