"""Lookups by external identifier (RFID badges, national insurance numbers).

These are the requests ARIA offers to vendor systems that only know an
outside ID and its type.

Gateway request types used:
- GetPatientNameForIDRequest
- GetResourceDetailsForIDRequest
- GetPatientAppointmentsForIDRequest
"""

from __future__ import annotations

from aria_access.tools.base import Arg, GatewayTool, ListResult, Param, RecordResult
from aria_access.tools.records import field
from aria_access.tools.scheduling import time_range

GET_PATIENT_NAME_FOR_ID = GatewayTool(
    name="get-patient-name-for-id",
    description="Get patient name for a specific ID type",
    error_prefix="Error retrieving patient name",
    params=(
        Param("id", "string", "Patient ID (e.g., Social Insurance Number)", required=True),
        Param("idType", "string", "ID Type (e.g., Social Insurance Number)", required=True),
    ),
    request_type="GetPatientNameForIDRequest",
    fields={"Id": Arg("id"), "IdType": Arg("idType")},
    result=RecordResult(
        title="Patient information:",
        empty="No patient found for the provided ID.",
        columns=(
            field("Patient ID", "patientId"),
            field("Patient Name", "patientName"),
            field("ID Type", "idType"),
            field("ID Value", "idValue"),
        ),
    ),
)

GET_RESOURCE_DETAILS_FOR_ID = GatewayTool(
    name="get-resource-details-for-id",
    description="Get resource details for a specific ID type",
    error_prefix="Error retrieving resource details",
    params=(
        Param("id", "string", "Resource ID", required=True),
        Param("idType", "string", "ID Type (e.g., RFID)", required=True),
    ),
    request_type="GetResourceDetailsForIDRequest",
    fields={"Id": Arg("id"), "IdType": Arg("idType")},
    result=RecordResult(
        title="Resource information:",
        empty="No resource found for the provided ID.",
        columns=(
            field("Resource ID", "resourceId"),
            field("Resource Name", "resourceName"),
            field("Resource Type", "resourceType"),
            field("ID Type", "idType"),
            field("Status", "status"),
        ),
    ),
)

GET_PATIENT_APPOINTMENTS_FOR_ID = GatewayTool(
    name="get-patient-appointments-for-id",
    description="Get patient appointments for a specific ID type",
    error_prefix="Error retrieving appointments",
    params=(
        Param("id", "string", "Patient ID", required=True),
        Param("idType", "string", "ID Type (e.g., Social Insurance Number)", required=True),
        Param("startDateTime", "string", "Start date and time (ISO format)", required=True),
        Param("endDateTime", "string", "End date and time (ISO format)", required=True),
        Param("appointmentStatus", "string", "Appointment status (e.g., All)", default="All"),
    ),
    request_type="GetPatientAppointmentsForIDRequest",
    fields={
        "Id": Arg("id"),
        "IdType": Arg("idType"),
        "StartDateTime": Arg("startDateTime"),
        "EndDateTime": Arg("endDateTime"),
        "AppointmentStatus": Arg("appointmentStatus"),
    },
    result=ListResult(
        header="Found {count} appointment(s):",
        empty="No appointments found for this patient in the specified date range.",
        columns=(
            field("Appointment ID", "appointmentId"),
            field("Date", "appointmentDate"),
            time_range("Time", "startTime", "endTime"),
            field("Type", "appointmentType"),
            field("Status", "status"),
            field("Resource", "resourceName"),
            field("Provider", "providerName"),
        ),
    ),
)

TOOLS = (GET_PATIENT_NAME_FOR_ID, GET_RESOURCE_DETAILS_FOR_ID, GET_PATIENT_APPOINTMENTS_FOR_ID)
