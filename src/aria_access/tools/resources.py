"""Resource tools: machines, rooms and staff.

API endpoints used:
- GET /resources                      (REST, filtered by query string)
- Gateway GetMachineListRequest
"""

from __future__ import annotations

from aria_access.tools.base import Arg, GatewayTool, ListResult, Param, RestTool
from aria_access.tools.records import field, flag

GET_RESOURCES = RestTool(
    name="get-resources",
    description="Get available resources (machines, rooms, staff)",
    error_prefix="Error retrieving resources",
    params=(
        Param("resourceId", "string", "Resource ID"),
        Param("resourceType", "string", "Resource type"),
        Param("startDate", "string", "Start date (YYYY-MM-DD)"),
        Param("endDate", "string", "End date (YYYY-MM-DD)"),
    ),
    path="/resources",
    query={
        "resourceId": Arg("resourceId"),
        "resourceType": Arg("resourceType"),
        "startDate": Arg("startDate"),
        "endDate": Arg("endDate"),
    },
    result=ListResult(
        header="Found {count} resource(s):",
        empty="No resources found matching the provided criteria.",
        columns=(
            field("Resource ID", "resourceId"),
            field("Type", "resourceType"),
            field("Name", "name"),
            field("Status", "status"),
            field("Location", "location"),
            flag("Available", "isAvailable"),
        ),
    ),
)

GET_MACHINE_LIST = GatewayTool(
    name="get-machine-list",
    description="Get list of available machines",
    error_prefix="Error retrieving machine list",
    request_type="GetMachineListRequest",
    result=ListResult(
        header="Found {count} machine(s):",
        empty="No machines found.",
        columns=(
            field("Machine ID", "machineId"),
            field("Machine Name", "machineName"),
            field("Machine Type", "machineType"),
            field("Status", "status"),
            field("Location", "location"),
        ),
    ),
)

TOOLS = (GET_RESOURCES, GET_MACHINE_LIST)
