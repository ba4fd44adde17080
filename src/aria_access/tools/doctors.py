"""Doctor tools: creating doctors and linking them to patients.

Gateway request types used:
- CreateDoctorRequest
- GetDoctorsInfoRequest
- AssignDoctorToPatientRequest
- GetDoctorsAssignedToPatientRequest
"""

from __future__ import annotations

from datetime import date

from aria_access.config import ARIA_AREA_NAME
from aria_access.tools.base import Arg, GatewayTool, ListResult, Param, WriteResult
from aria_access.tools.records import field, flag, joined


def _today() -> str:
    return date.today().isoformat()


CREATE_DOCTOR = GatewayTool(
    name="create-doctor",
    description="Create a new doctor in ARIA",
    error_prefix="Error creating doctor",
    params=(
        Param("doctorId", "string", "Doctor ID", required=True),
        Param("firstName", "string", "Doctor first name", required=True),
        Param("lastName", "string", "Doctor last name", required=True),
        Param("middleName", "string", "Doctor middle name", default=""),
        Param("displayName", "string", "Display name", required=True),
        Param("honorific", "string", "Honorific (e.g., DR)", default="DR"),
        Param("nameSuffix", "string", "Name suffix", default=""),
        Param("specialty", "string", "Medical specialty", required=True),
        Param("isOncologist", "boolean", "Is oncologist", default=True),
        Param("institution", "string", "Institution", default="Oncology"),
        Param("location", "string", "Location", default="Life Core Hospital"),
        Param("phoneNumber1", "string", "Primary phone number", default=""),
        Param("phoneNumber2", "string", "Secondary phone number", default=""),
        Param("faxNumber", "string", "Fax number", default=""),
        Param("addressLine1", "string", "Address line 1", default=""),
        Param("addressLine2", "string", "Address line 2", default=""),
        Param("addressLine3", "string", "Address line 3", default=""),
        Param("cityOrTownship", "string", "City or township", default=""),
        Param("stateOrProvince", "string", "State or province", default=""),
        Param("postalCode", "string", "Postal code", default=""),
        Param("country", "string", "Country", default="United States"),
        Param("county", "string", "County", default=""),
        Param("originationDate", "string", "Origination date (YYYY-MM-DD)", default=_today),
        Param("terminationDate", "string", "Termination date (YYYY-MM-DD)", default=""),
        Param("comment", "string", "Comment", default=""),
        Param("addressComment", "string", "Address comment", default=""),
        Param("pocName", "string", "Point of contact name", default=""),
        Param("billingServiceId", "string", "Billing service ID", default=""),
    ),
    request_type="CreateDoctorRequest",
    fields={
        "DoctorId": Arg("doctorId"),
        "FirstName": Arg("firstName"),
        "LastName": Arg("lastName"),
        "MiddleName": Arg("middleName"),
        "DisplayName": Arg("displayName"),
        "Honorific": Arg("honorific"),
        "NameSuffix": Arg("nameSuffix"),
        "Specialty": Arg("specialty"),
        "IsOncologist": Arg("isOncologist"),
        "Institution": Arg("institution"),
        "Location": Arg("location"),
        "PhoneNumber1": Arg("phoneNumber1"),
        "PhoneNumber2": Arg("phoneNumber2"),
        "FaxNumber": Arg("faxNumber"),
        "AddressLine1": Arg("addressLine1"),
        "AddressLine2": Arg("addressLine2"),
        "AddressLine3": Arg("addressLine3"),
        "CityOrTownship": Arg("cityOrTownship"),
        "StateOrProvince": Arg("stateOrProvince"),
        "PostalCode": Arg("postalCode"),
        "Country": Arg("country"),
        "County": Arg("county"),
        "OriginationDate": Arg("originationDate"),
        "TerminationDate": Arg("terminationDate"),
        "Comment": Arg("comment"),
        "AddressComment": Arg("addressComment"),
        "POCName": Arg("pocName"),
        "BillingServiceID": Arg("billingServiceId"),
        "AreaName": ARIA_AREA_NAME,
    },
    result=WriteResult(
        success=(
            "Doctor created successfully!\n"
            "Doctor ID: {doctorId}\n"
            "Name: {honorific} {firstName} {lastName}\n"
            "Specialty: {specialty}"
        ),
        action="create doctor",
    ),
)

GET_DOCTOR_INFO = GatewayTool(
    name="get-doctor-info",
    description="Get doctor information",
    error_prefix="Error retrieving doctor information",
    params=(
        Param("doctorId", "string", "Doctor ID", default=""),
        Param("departmentId", "string", "Department ID", default=""),
    ),
    request_type="GetDoctorsInfoRequest",
    fields={
        "DoctorId": Arg("doctorId"),
        "DepartmentID": Arg("departmentId"),
    },
    result=ListResult(
        header="Found {count} doctor(s):",
        empty="No doctors found matching the provided criteria.",
        columns=(
            field("Doctor ID", "doctorId"),
            joined("Name", "honorific", "firstName", "lastName", default=""),
            field("Display Name", "displayName"),
            field("Specialty", "specialty"),
            field("Institution", "institution"),
            field("Location", "location"),
            field("Phone", "phoneNumber1"),
            field("Fax", "faxNumber"),
            flag("Is Oncologist", "isOncologist"),
        ),
    ),
)

ASSIGN_DOCTOR_TO_PATIENT = GatewayTool(
    name="assign-doctor-to-patient",
    description="Assign a doctor to a patient",
    error_prefix="Error assigning doctor to patient",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("doctorId", "string", "Doctor ID", required=True),
        Param("isOncologist", "boolean", "Is oncologist", default=True),
        Param("isPrimary", "boolean", "Is primary doctor", default=True),
        Param("comment", "string", "Comment", default=""),
    ),
    request_type="AssignDoctorToPatientRequest",
    fields={
        "PatientId": Arg("patientId"),
        "DoctorId": Arg("doctorId"),
        "IsOncologist": Arg("isOncologist"),
        "IsPrimary": Arg("isPrimary"),
        "Comment": Arg("comment"),
        "AreaName": ARIA_AREA_NAME,
    },
    result=WriteResult(
        success=(
            "Doctor assigned to patient successfully!\n"
            "Patient ID: {patientId}\n"
            "Doctor ID: {doctorId}"
        ),
        action="assign doctor to patient",
    ),
)

GET_DOCTORS_ASSIGNED_TO_PATIENT = GatewayTool(
    name="get-doctors-assigned-to-patient",
    description="Get doctors assigned to a patient",
    error_prefix="Error retrieving assigned doctors",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        # Left out means "no filter", which ARIA expects as an explicit null
        Param("isOncologist", "boolean", "Filter by oncologist status"),
    ),
    request_type="GetDoctorsAssignedToPatientRequest",
    fields={
        "PatientId": Arg("patientId"),
        "IsOncologist": Arg("isOncologist"),
    },
    result=ListResult(
        header="Found {count} doctor(s) assigned to patient:",
        empty="No doctors found assigned to this patient.",
        columns=(
            field("Doctor ID", "doctorId"),
            joined("Name", "honorific", "firstName", "lastName", default=""),
            field("Specialty", "specialty"),
            flag("Is Oncologist", "isOncologist"),
            flag("Is Primary", "isPrimary"),
            field("Comment", "comment"),
        ),
    ),
)

TOOLS = (CREATE_DOCTOR, GET_DOCTOR_INFO, ASSIGN_DOCTOR_TO_PATIENT, GET_DOCTORS_ASSIGNED_TO_PATIENT)
