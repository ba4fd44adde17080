"""Patient demographics tools.

Gateway request types used:
- GetPatientsRequest:    search patients by ID, MRN or name
- CreatePatientRequest:  register a new patient
- UpdatePatientRequest:  change an existing patient's demographics
"""

from __future__ import annotations

from aria_access.config import ARIA_AREA_NAME, ARIA_DEPARTMENT, ARIA_HOSPITAL_NAME
from aria_access.tools.base import Arg, GatewayTool, ListResult, Param, WriteResult
from aria_access.tools.records import Record, computed, field, joined


def _address(record: Record) -> str:
    street = ", ".join(
        str(part)
        for part in (
            record.first("addressLine1"),
            record.first("cityOrTownship"),
        )
        if part
    )
    region = " ".join(
        str(part) for part in (record.first("stateOrProvince"), record.first("postalCode")) if part
    )
    return ", ".join(part for part in (street, region) if part)


GET_PATIENT_DEMOGRAPHICS = GatewayTool(
    name="get-patient-demographics",
    description="Get patient demographic information",
    error_prefix="Error retrieving patient demographics",
    params=(
        Param("patientId", "string", "Patient ID", default=""),
        Param("firstName", "string", "Patient first name", default=""),
        Param("lastName", "string", "Patient last name", default=""),
        Param("mrn", "string", "Medical Record Number", default=""),
    ),
    request_type="GetPatientsRequest",
    fields={
        "PatientId1": Arg("patientId"),
        "PatientId2": Arg("mrn"),
        "FirstName": Arg("firstName"),
        "LastName": Arg("lastName"),
        "IsMultipleNamesRequired": None,
        "MatchingCriteria": None,
    },
    result=ListResult(
        header="Found {count} patient(s):",
        empty="No patients found matching the provided criteria.",
        columns=(
            field("Patient ID", "patientId", "PatientId1"),
            joined("Name", "firstName", "lastName", default=""),
            field("Date of Birth", "dateOfBirth", "Birthdate"),
            field("MRN", "mrn", "PatientId2"),
            field("Gender", "gender", "Sex"),
            computed("Address", _address, default=""),
            field("Phone", "homePhoneNumber"),
            field("Email", "email"),
            field("Status", "patientStatus"),
        ),
    ),
)

# Parameters shared by create and update; create marks some as required.
_ADDRESS_PARAMS = (
    Param("addressLine1", "string", "Address line 1", default=""),
    Param("addressLine2", "string", "Address line 2", default=""),
    Param("cityOrTownship", "string", "City or township", default=""),
    Param("stateOrProvince", "string", "State or province", default=""),
    Param("postalCode", "string", "Postal code", default=""),
    Param("country", "string", "Country", default="United States"),
    Param("homePhoneNumber", "string", "Home phone number", default=""),
    Param("workPhoneNumber", "string", "Work phone number", default=""),
)

_ADDRESS_FIELDS = {
    "AddressLine1": Arg("addressLine1"),
    "AddressLine2": Arg("addressLine2"),
    "CityorTownship": Arg("cityOrTownship"),
    "StateOrProvince": Arg("stateOrProvince"),
    "PostalCode": Arg("postalCode"),
    "Country": Arg("country"),
    "HomePhoneNumber": Arg("homePhoneNumber"),
    "WorkPhoneNumber": Arg("workPhoneNumber"),
}

CREATE_PATIENT = GatewayTool(
    name="create-patient",
    description="Create a new patient in ARIA",
    error_prefix="Error creating patient",
    params=(
        Param("firstName", "string", "Patient first name", required=True),
        Param("lastName", "string", "Patient last name", required=True),
        Param("middleName", "string", "Patient middle name", default=""),
        Param("dateOfBirth", "string", "Date of birth (YYYY-MM-DD)", required=True),
        Param("sex", "string", "Patient sex (Male/Female)", required=True),
        Param("patientId1", "string", "Primary patient ID", required=True),
        Param("patientId2", "string", "Secondary patient ID (MRN)", default=""),
        *_ADDRESS_PARAMS,
        Param("maritalStatus", "string", "Marital status", default="SINGLE"),
        Param("race", "string", "Race", default=""),
        Param("religion", "string", "Religion", default=""),
        Param("occupation", "string", "Occupation", default=""),
        Param("hospitalName", "string", "Hospital name", default=ARIA_HOSPITAL_NAME),
        Param("departmentId", "string", "Department ID", default=ARIA_DEPARTMENT),
    ),
    request_type="CreatePatientRequest",
    fields={
        "FirstName": Arg("firstName"),
        "LastName": Arg("lastName"),
        "MiddleName": Arg("middleName"),
        "Birthdate": Arg("dateOfBirth"),
        "Sex": Arg("sex"),
        "PatientId1": Arg("patientId1"),
        "PatientId2": Arg("patientId2"),
        **_ADDRESS_FIELDS,
        "MaritalStatus": Arg("maritalStatus"),
        "Race": Arg("race"),
        "Religion": Arg("religion"),
        "Occupation": Arg("occupation"),
        "HospitalName": Arg("hospitalName"),
        "DepartmentId": Arg("departmentId"),
        "PatientStatus": "New Patient (NP)",
        "PatientState": "Alive",
        "AreaName": ARIA_AREA_NAME,
        "IsTimeStampCheckRequired": False,
    },
    result=WriteResult(
        success=(
            "Patient created successfully!\n"
            "Patient ID: {patientId1}\n"
            "Name: {firstName} {lastName}\n"
            "Date of Birth: {dateOfBirth}"
        ),
        action="create patient",
    ),
)

UPDATE_PATIENT = GatewayTool(
    name="update-patient",
    description="Update an existing patient in ARIA",
    error_prefix="Error updating patient",
    params=(
        Param("patientId1", "string", "Primary patient ID", required=True),
        Param("firstName", "string", "Patient first name", default=""),
        Param("lastName", "string", "Patient last name", default=""),
        Param("middleName", "string", "Patient middle name", default=""),
        Param("dateOfBirth", "string", "Date of birth (YYYY-MM-DD)", default=""),
        Param("sex", "string", "Patient sex (Male/Female)", default=""),
        *_ADDRESS_PARAMS,
        Param("maritalStatus", "string", "Marital status", default=""),
        Param("race", "string", "Race", default=""),
        Param("religion", "string", "Religion", default=""),
        Param("occupation", "string", "Occupation", default=""),
        Param("medicalAlerts", "string", "Medical alerts", default=""),
        Param("contrastAllergies", "string", "Contrast allergies", default=""),
    ),
    request_type="UpdatePatientRequest",
    fields={
        "PatientId1": Arg("patientId1"),
        "FirstName": Arg("firstName"),
        "LastName": Arg("lastName"),
        "MiddleName": Arg("middleName"),
        "Birthdate": Arg("dateOfBirth"),
        "Sex": Arg("sex"),
        **_ADDRESS_FIELDS,
        "MaritalStatus": Arg("maritalStatus"),
        "Race": Arg("race"),
        "Religion": Arg("religion"),
        "Occupation": Arg("occupation"),
        "MedicalAlerts": Arg("medicalAlerts"),
        "ContrastAllergies": Arg("contrastAllergies"),
        "AreaName": ARIA_AREA_NAME,
        "IsTimeStampCheckRequired": False,
        "TimeStamp": None,
    },
    result=WriteResult(
        success="Patient updated successfully!\nPatient ID: {patientId1}",
        action="update patient",
    ),
)

TOOLS = (GET_PATIENT_DEMOGRAPHICS, CREATE_PATIENT, UPDATE_PATIENT)
