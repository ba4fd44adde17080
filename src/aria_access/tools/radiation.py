"""Radiation therapy tools: courses, plans, fields and delivered treatment.

Gateway request types used:
- GetPatientCoursesAndPlanSetupsRequest
- GetPatientPlansRequest
- GetPatientPlanSetupsRequest
- GetPatientPlanTxFieldsRequest
- GetPatientFieldsTreatedInfoRequest
- GetPatientRefPointsRequest
- GetPatientClinicalConceptsRequest
"""

from __future__ import annotations

from aria_access.tools.base import Arg, GatewayTool, ListResult, Param
from aria_access.tools.records import Column, Record, computed, field


def quantity(label: str, amount: str, unit: str = "doseUnit") -> Column:
    """``Label: 200 cGy``; the unit is dropped when ARIA leaves it out."""

    def value(record: Record) -> str:
        shown = record.first(amount)
        shown = "N/A" if shown is None else shown
        suffix = record.first(unit)
        return f"{shown} {suffix}" if suffix is not None else str(shown)

    return computed(label, value)


_PATIENT_ID = Param("patientId", "string", "Patient ID", required=True)

GET_RADIATION_COURSES = GatewayTool(
    name="get-radiation-courses",
    description="Get radiation therapy courses and plan setups for a patient",
    error_prefix="Error retrieving radiation courses",
    params=(
        _PATIENT_ID,
        Param("treatmentType", "string", "Treatment Type (e.g., Linac)", default="Linac"),
    ),
    request_type="GetPatientCoursesAndPlanSetupsRequest",
    fields={
        "PatientId": Arg("patientId"),
        "TreatmentType": Arg("treatmentType"),
    },
    result=ListResult(
        header="Found {count} radiation therapy course(s):",
        empty="No radiation therapy courses found for this patient.",
        columns=(
            field("Course ID", "courseId"),
            field("Course Name", "courseName"),
            field("Start Date", "startDate"),
            field("End Date", "endDate"),
            field("Status", "status"),
            field("Total Fractions", "totalFractions"),
            field("Completed Fractions", "completedFractions"),
            quantity("Prescription Dose", "prescriptionDose"),
            field("Target Volume", "targetVolume"),
            field("Treatment Type", "treatmentType"),
        ),
    ),
)

GET_TREATMENT_PLANS = GatewayTool(
    name="get-treatment-plans",
    description="Get radiation treatment plans for a patient",
    error_prefix="Error retrieving treatment plans",
    params=(
        _PATIENT_ID,
        Param("courseId", "string", "Course ID", default=""),
        Param("planSetupId", "string", "Plan Setup ID", default=""),
    ),
    request_type="GetPatientPlansRequest",
    fields={
        "PatientId": Arg("patientId"),
        "CourseId": Arg("courseId"),
        "PlanSetupId": Arg("planSetupId"),
    },
    result=ListResult(
        header="Found {count} treatment plan(s):",
        empty="No treatment plans found for this patient.",
        columns=(
            field("Plan ID", "planId"),
            field("Plan Name", "planName"),
            field("Course ID", "courseId"),
            field("Plan Type", "planType"),
            field("Status", "status"),
            field("Created Date", "createdDate"),
            field("Approved Date", "approvedDate", default="Not approved"),
            quantity("Total Dose", "totalDose"),
            field("Fractions", "fractions"),
            field("Beam Count", "beamCount"),
            field("Plan Setup ID", "planSetupId"),
        ),
    ),
)

GET_PLAN_SETUPS = GatewayTool(
    name="get-plan-setups",
    description="Get radiation treatment plan setups for a patient",
    error_prefix="Error retrieving plan setups",
    params=(
        _PATIENT_ID,
        Param("courseId", "string", "Course ID", default=""),
        Param("planSetupId", "string", "Plan Setup ID", default=""),
    ),
    request_type="GetPatientPlanSetupsRequest",
    fields={
        "PatientId": Arg("patientId"),
        "CourseId": Arg("courseId"),
        # Capital U is how this request type spells it
        "PlanSetUpId": Arg("planSetupId"),
    },
    result=ListResult(
        header="Found {count} plan setup(s):",
        empty="No plan setups found for this patient.",
        columns=(
            field("Plan Setup ID", "planSetupId"),
            field("Plan Setup Name", "planSetupName"),
            field("Course ID", "courseId"),
            field("Patient ID", "patientId"),
            field("Status", "status"),
            field("Created Date", "createdDate"),
            field("Approved Date", "approvedDate", default="Not approved"),
            quantity("Total Dose", "totalDose"),
            field("Fractions", "fractions"),
        ),
    ),
)

GET_PLAN_TX_FIELDS = GatewayTool(
    name="get-plan-tx-fields",
    description="Get radiation treatment plan treatment fields",
    error_prefix="Error retrieving treatment fields",
    params=(
        _PATIENT_ID,
        Param("courseId", "string", "Course ID", required=True),
        Param("planId", "string", "Plan ID", required=True),
        Param("scale", "string", "Scale (e.g., IEC)", default="IEC"),
    ),
    request_type="GetPatientPlanTxFieldsRequest",
    fields={
        "PatientId": Arg("patientId"),
        "CourseId": Arg("courseId"),
        "PlanId": Arg("planId"),
        "Scale": Arg("scale"),
    },
    result=ListResult(
        header="Found {count} treatment field(s):",
        empty="No treatment fields found for this plan.",
        columns=(
            field("Field ID", "fieldId"),
            field("Field Name", "fieldName"),
            field("Plan ID", "planId"),
            field("Course ID", "courseId"),
            field("Field Type", "fieldType"),
            field("Gantry Angle", "gantryAngle"),
            field("Collimator Angle", "collimatorAngle"),
            field("Couch Angle", "couchAngle"),
            quantity("Dose", "dose"),
            field("MU", "mu"),
        ),
    ),
)

GET_FIELDS_TREATED_INFO = GatewayTool(
    name="get-fields-treated-info",
    description="Get information about treated fields for a patient",
    error_prefix="Error retrieving treated field information",
    params=(
        _PATIENT_ID,
        Param("courseId", "string", "Course ID", required=True),
        Param("treatmentStartDate", "string", "Treatment start date (YYYY-MM-DD)", required=True),
        Param("treatmentEndDate", "string", "Treatment end date (YYYY-MM-DD)", required=True),
    ),
    request_type="GetPatientFieldsTreatedInfoRequest",
    fields={
        "PatientId": Arg("patientId"),
        "CourseId": Arg("courseId"),
        "TreatmentStartDate": Arg("treatmentStartDate"),
        "TreatmentEndDate": Arg("treatmentEndDate"),
    },
    result=ListResult(
        header="Found {count} treated field record(s):",
        empty=(
            "No treated field information found for this patient "
            "in the specified date range."
        ),
        columns=(
            field("Field ID", "fieldId"),
            field("Field Name", "fieldName"),
            field("Treatment Date", "treatmentDate"),
            field("Fraction Number", "fractionNumber"),
            quantity("Dose Delivered", "doseDelivered"),
            field("MU Delivered", "muDelivered"),
            field("Status", "status"),
            field("Machine", "machineName"),
            field("Technologist", "technologistName"),
        ),
    ),
)

GET_PATIENT_REF_POINTS = GatewayTool(
    name="get-patient-ref-points",
    description="Get patient reference points",
    error_prefix="Error retrieving reference points",
    params=(_PATIENT_ID,),
    request_type="GetPatientRefPointsRequest",
    fields={"PatientId": Arg("patientId")},
    result=ListResult(
        header="Found {count} reference point(s):",
        empty="No reference points found for this patient.",
        columns=(
            field("Reference Point ID", "refPointId"),
            field("Reference Point Name", "refPointName"),
            field("X Coordinate", "xCoordinate"),
            field("Y Coordinate", "yCoordinate"),
            field("Z Coordinate", "zCoordinate"),
            field("Description", "description"),
        ),
    ),
)

GET_CLINICAL_CONCEPTS = GatewayTool(
    name="get-clinical-concepts",
    description="Get patient clinical concepts",
    error_prefix="Error retrieving clinical concepts",
    params=(
        _PATIENT_ID,
        Param("courseId", "string", "Course ID", required=True),
        Param("prescriptionId", "string", "Prescription ID", default=""),
    ),
    request_type="GetPatientClinicalConceptsRequest",
    fields={
        "PatientId": Arg("patientId"),
        "CourseId": Arg("courseId"),
        "PrescriptionId": Arg("prescriptionId"),
    },
    result=ListResult(
        header="Found {count} clinical concept(s):",
        empty="No clinical concepts found for this patient.",
        columns=(
            field("Concept ID", "conceptId"),
            field("Concept Name", "conceptName"),
            field("Concept Type", "conceptType"),
            field("Value", "value"),
            field("Unit", "unit"),
            field("Description", "description"),
        ),
    ),
)

TOOLS = (
    GET_RADIATION_COURSES,
    GET_TREATMENT_PLANS,
    GET_PLAN_SETUPS,
    GET_PLAN_TX_FIELDS,
    GET_FIELDS_TREATED_INFO,
    GET_PATIENT_REF_POINTS,
    GET_CLINICAL_CONCEPTS,
)
