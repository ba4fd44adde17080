"""Scheduling tools: patient and machine appointments.

API endpoints used:
- GET /appointments                   (REST, patient appointments)
- Gateway CreateMachineAppointmentRequest
- Gateway UpdateMachineAppointmentRequest
- Gateway GetMachineAppointmentsRequest
"""

from __future__ import annotations

from typing import Any

from aria_access.config import ARIA_AREA_NAME, ARIA_DEPARTMENT, ARIA_HOSPITAL_NAME
from aria_access.envelope import wrap_values
from aria_access.tools.base import (
    Arg,
    Computed,
    GatewayTool,
    ListResult,
    Param,
    RestTool,
    WriteResult,
)
from aria_access.tools.records import Column, Record, computed, field


def time_range(label: str, start: str, end: str) -> Column:
    """``Label: start - end`` with N/A standing in for either side."""

    def value(record: Record) -> str:
        return f"{record.first(start) or 'N/A'} - {record.first(end) or 'N/A'}"

    return computed(label, value)


def _associated_resources(args: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        wrap_values(
            {
                "ResourceID": resource.get("resourceId"),
                "ResourceType": resource.get("resourceType"),
            }
        )
        for resource in args["associatedResources"] or []
    ]


_RESOURCE_ITEMS = {
    "type": "object",
    "properties": {
        "resourceId": {"type": "string"},
        "resourceType": {"type": "string"},
    },
    "required": ["resourceId", "resourceType"],
}

# Activity details shared by create and update (areaName is per tool)
_ACTIVITY_PARAMS = (
    Param("activityName", "string", "Activity name (e.g., Daily Treatment)", required=True),
    Param("activityStatus", "string", "Activity status (e.g., Open)", default="Open"),
    Param("activityNote", "string", "Activity note", default="Note"),
    Param("departmentName", "string", "Department name", default=ARIA_DEPARTMENT),
    Param("hospitalName", "string", "Hospital name", default=ARIA_HOSPITAL_NAME),
    Param("resourceType", "string", "Resource type (e.g., Machine)", default="Machine"),
    Param("associatedResources", "array", "Associated resources", items=_RESOURCE_ITEMS),
)

_ACTIVITY_FIELDS = {
    "ActivityName": Arg("activityName"),
    "ActivityStatus": Arg("activityStatus"),
    "ActivityNote": Arg("activityNote"),
    "DepartmentName": Arg("departmentName"),
    "HospitalName": Arg("hospitalName"),
    "ResourceType": Arg("resourceType"),
    "AreaName": Arg("areaName"),
    "AssociatedResources": Computed(_associated_resources),
}

GET_APPOINTMENTS = RestTool(
    name="get-appointments",
    description="Get patient appointments",
    error_prefix="Error retrieving appointments",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("startDate", "string", "Start date (YYYY-MM-DD)", required=True),
        Param("endDate", "string", "End date (YYYY-MM-DD)", required=True),
        Param("resourceId", "string", "Resource ID"),
    ),
    path="/appointments",
    query={
        "patientId": Arg("patientId"),
        "startDate": Arg("startDate"),
        "endDate": Arg("endDate"),
        "resourceId": Arg("resourceId"),
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
            field("Notes", "notes"),
        ),
    ),
)

CREATE_MACHINE_APPOINTMENT = GatewayTool(
    name="create-machine-appointment",
    description="Create a new machine appointment in ARIA",
    error_prefix="Error creating machine appointment",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("machineId", "string", "Machine ID", required=True),
        Param("startDateTime", "string", "Start date and time (ISO format)", required=True),
        Param("endDateTime", "string", "End date and time (ISO format)", required=True),
        *_ACTIVITY_PARAMS,
        Param("areaName", "string", "Area name", default="AreaName"),
    ),
    request_type="CreateMachineAppointmentRequest",
    fields={
        "PatientId": Arg("patientId"),
        "MachineId": Arg("machineId"),
        "StartDateTime": Arg("startDateTime"),
        "EndDateTime": Arg("endDateTime"),
        **_ACTIVITY_FIELDS,
    },
    result=WriteResult(
        success=(
            "Machine appointment created successfully!\n"
            "Patient ID: {patientId}\n"
            "Machine ID: {machineId}\n"
            "Activity: {activityName}\n"
            "Start: {startDateTime}\n"
            "End: {endDateTime}"
        ),
        action="create machine appointment",
    ),
)

UPDATE_MACHINE_APPOINTMENT = GatewayTool(
    name="update-machine-appointment",
    description="Update an existing machine appointment in ARIA",
    error_prefix="Error updating machine appointment",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("machineId", "string", "Machine ID", required=True),
        Param("startDateTime", "string", "Current start date and time (ISO format)", required=True),
        Param("endDateTime", "string", "Current end date and time (ISO format)", required=True),
        Param("newStartDateTime", "string", "New start date and time (ISO format)", required=True),
        Param("newEndDateTime", "string", "New end date and time (ISO format)", required=True),
        *_ACTIVITY_PARAMS,
        Param("areaName", "string", "Area name", default=ARIA_AREA_NAME),
        Param(
            "isTimeStampCheckRequired",
            "boolean",
            "Is timestamp check required",
            default=False,
        ),
        Param("timeStamp", "string", "Timestamp"),
    ),
    request_type="UpdateMachineAppointmentRequest",
    fields={
        "PatientId": Arg("patientId"),
        "MachineId": Arg("machineId"),
        "StartDateTime": Arg("startDateTime"),
        "EndDateTime": Arg("endDateTime"),
        "NewStartDateTime": Arg("newStartDateTime"),
        "NewEndDateTime": Arg("newEndDateTime"),
        **_ACTIVITY_FIELDS,
        "IsTimeStampCheckRequired": Arg("isTimeStampCheckRequired"),
        "TimeStamp": Arg("timeStamp"),
    },
    result=WriteResult(
        success=(
            "Machine appointment updated successfully!\n"
            "Patient ID: {patientId}\n"
            "Machine ID: {machineId}\n"
            "New Start: {newStartDateTime}\n"
            "New End: {newEndDateTime}"
        ),
        action="update machine appointment",
    ),
)

GET_MACHINE_APPOINTMENTS = GatewayTool(
    name="get-machine-appointments",
    description="Get machine appointments for a specific time range",
    error_prefix="Error retrieving machine appointments",
    params=(
        Param("machineId", "string", "Machine ID", required=True),
        Param("startDateTime", "string", "Start date and time (ISO format)", required=True),
        Param("endDateTime", "string", "End date and time (ISO format)", required=True),
        Param("departmentName", "string", "Department name", default=ARIA_DEPARTMENT),
        Param("hospitalName", "string", "Hospital name", default=ARIA_HOSPITAL_NAME),
    ),
    request_type="GetMachineAppointmentsRequest",
    fields={
        "MachineId": Arg("machineId"),
        "StartDateTime": Arg("startDateTime"),
        "EndDateTime": Arg("endDateTime"),
        "DepartmentName": Arg("departmentName"),
        "HospitalName": Arg("hospitalName"),
    },
    result=ListResult(
        header="Found {count} machine appointment(s):",
        empty="No machine appointments found for the specified time range.",
        columns=(
            field("Appointment ID", "appointmentId"),
            field("Patient ID", "patientId"),
            field("Machine ID", "machineId"),
            field("Start Time", "startDateTime"),
            field("End Time", "endDateTime"),
            field("Activity Name", "activityName"),
            field("Activity Status", "activityStatus"),
            field("Activity Note", "activityNote"),
            field("Department", "departmentName"),
        ),
    ),
)

TOOLS = (
    GET_APPOINTMENTS,
    CREATE_MACHINE_APPOINTMENT,
    UPDATE_MACHINE_APPOINTMENT,
    GET_MACHINE_APPOINTMENTS,
)
