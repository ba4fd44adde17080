"""Lookup list tools (code tables such as DIAGNOSIS_METHOD or MARITAL_STATUS).

Gateway request types used:
- GetDiagnosisLookUpListRequest
- GetLookUpListRequest
"""

from __future__ import annotations

from aria_access.tools.base import Arg, GatewayTool, ListResult, Param
from aria_access.tools.records import field

_LOOKUP_ITEMS = ListResult(
    header="Found {count} lookup item(s):",
    empty="No lookup items found for the specified type.",
    columns=(
        field("Lookup ID", "lookupId"),
        field("Lookup Name", "lookupName"),
        field("Lookup Type", "lookupType"),
        field("Description", "description"),
    ),
)

_LOOKUP_FIELDS = {
    "LookUpType": Arg("lookupType"),
    "LookUpLanguage": Arg("lookupLanguage"),
}

_LANGUAGE = Param("lookupLanguage", "string", "Lookup language (e.g., ENU)", default="ENU")

GET_DIAGNOSIS_LOOKUP_LIST = GatewayTool(
    name="get-diagnosis-lookup-list",
    description="Get diagnosis lookup list",
    error_prefix="Error retrieving diagnosis lookup list",
    params=(
        Param("lookupType", "string", "Lookup type (e.g., DIAGNOSIS_METHOD)", required=True),
        _LANGUAGE,
    ),
    request_type="GetDiagnosisLookUpListRequest",
    fields=_LOOKUP_FIELDS,
    result=_LOOKUP_ITEMS,
)

GET_LOOKUP_LIST = GatewayTool(
    name="get-lookup-list",
    description="Get general lookup list",
    error_prefix="Error retrieving lookup list",
    params=(
        Param("lookupType", "string", "Lookup type (e.g., MARITAL_STATUS)", required=True),
        _LANGUAGE,
    ),
    request_type="GetLookUpListRequest",
    fields=_LOOKUP_FIELDS,
    result=_LOOKUP_ITEMS,
)

TOOLS = (GET_DIAGNOSIS_LOOKUP_LIST, GET_LOOKUP_LIST)
