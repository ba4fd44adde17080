"""Billing tools: charges and billing export acknowledgement.

API endpoints used:
- GET /billing                        (REST, one patient's bills)
- Gateway GetBillingInfoRequest       (all charges in a date range)
- Gateway AcknowledgeBillingInfoReceivedRequest
"""

from __future__ import annotations

from aria_access.config import ARIA_HOSPITAL_NAME
from aria_access.tools.base import Arg, GatewayTool, ListResult, Param, RestTool, WriteResult
from aria_access.tools.records import field

GET_BILLING_DATA = RestTool(
    name="get-billing-data",
    description="Get patient billing information",
    error_prefix="Error retrieving billing data",
    params=(
        Param("patientId", "string", "Patient ID", required=True),
        Param("startDate", "string", "Start date (YYYY-MM-DD)"),
        Param("endDate", "string", "End date (YYYY-MM-DD)"),
    ),
    path="/billing",
    query={
        "patientId": Arg("patientId"),
        "startDate": Arg("startDate"),
        "endDate": Arg("endDate"),
    },
    result=ListResult(
        header="Found {count} billing record(s):",
        empty="No billing data found for this patient.",
        columns=(
            field("Bill ID", "billId"),
            field("Date", "billDate"),
            field("Amount", "amount", default="0.00", fmt="${}"),
            field("Status", "status"),
            field("Insurance", "insuranceProvider"),
            field("Procedure", "procedureCode"),
            field("Description", "procedureDescription"),
        ),
    ),
)

GET_BILLING_INFO = GatewayTool(
    name="get-billing-info",
    description="Get billing information for a date range",
    error_prefix="Error retrieving billing information",
    params=(
        Param("startDate", "string", "Start date (YYYY-MM-DD)", required=True),
        Param("endDate", "string", "End date (YYYY-MM-DD)", required=True),
        Param("hospitalName", "string", "Hospital name", default=ARIA_HOSPITAL_NAME),
        Param("returnAllCharges", "boolean", "Return all charges", default=True),
        Param("sortMode", "number", "Sort mode (e.g., 2)", default=2),
    ),
    request_type="GetBillingInfoRequest",
    fields={
        "StartDate": Arg("startDate"),
        "EndDate": Arg("endDate"),
        "HospitalName": Arg("hospitalName"),
        "ReturnAllCharges": Arg("returnAllCharges"),
        "SortMode": Arg("sortMode"),
    },
    result=ListResult(
        header="Found {count} billing record(s):",
        empty="No billing information found for the specified date range.",
        columns=(
            field("Billing ID", "billingId"),
            field("Patient ID", "patientId"),
            field("Patient Name", "patientName"),
            field("Service Date", "serviceDate"),
            field("Charge Amount", "chargeAmount", default="0.00", fmt="${}"),
            field("Procedure Code", "procedureCode"),
            field("Procedure Description", "procedureDescription"),
            field("Insurance Provider", "insuranceProvider"),
            field("Billing Status", "billingStatus"),
            field("Department", "department"),
            field("Provider", "provider"),
        ),
    ),
)

ACKNOWLEDGE_BILLING_INFO_RECEIVED = GatewayTool(
    name="acknowledge-billing-info-received",
    description="Acknowledge that billing information has been received",
    error_prefix="Error acknowledging billing information",
    params=(
        Param(
            "exportAcknowledgeDate",
            "string",
            "Export acknowledge date (YYYY-MM-DD)",
            required=True,
        ),
        Param("tsaSerialNumber", "number", "TSA Serial Number", required=True),
    ),
    request_type="AcknowledgeBillingInfoReceivedRequest",
    fields={
        "ExportAcknowledgeDate": Arg("exportAcknowledgeDate"),
        "TSASerialNumber": Arg("tsaSerialNumber"),
    },
    result=WriteResult(
        success=(
            "Billing information acknowledgment successful!\n"
            "Export Acknowledge Date: {exportAcknowledgeDate}\n"
            "TSA Serial Number: {tsaSerialNumber}"
        ),
        action="acknowledge billing information",
    ),
)

TOOLS = (GET_BILLING_DATA, GET_BILLING_INFO, ACKNOWLEDGE_BILLING_INFO_RECEIVED)
