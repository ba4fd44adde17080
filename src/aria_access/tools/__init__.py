"""ARIA Access tools.

Each module in this package declares "tools": named operations an AI agent
can call to read or write ARIA data. A tool is a ToolSpec entry (see
base.py) rather than a hand-written function; the agent sees its name,
description and input schema.

Tools are organized by domain:
- auth.py:         Replace credentials and log in
- patients.py:     Patient search, create, update
- doctors.py:      Doctors and doctor/patient assignments
- resources.py:    Resources and treatment machines
- diagnoses.py:    Patient diagnoses
- scheduling.py:   Patient and machine appointments
- billing.py:      Billing data and export acknowledgement
- radiation.py:    Courses, plans, fields, reference points
- identifiers.py:  Lookups by external ID (RFID, insurance numbers)
- lookups.py:      Code tables
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from aria_access.aria_client import AriaClient
from aria_access.tools import (
    auth,
    billing,
    diagnoses,
    doctors,
    identifiers,
    lookups,
    patients,
    radiation,
    resources,
    scheduling,
)
from aria_access.tools.base import ToolSpec

ALL_TOOLS: tuple[ToolSpec, ...] = (
    *auth.TOOLS,
    *patients.TOOLS,
    *resources.TOOLS,
    *doctors.TOOLS,
    *diagnoses.TOOLS,
    *scheduling.TOOLS,
    *billing.TOOLS,
    *radiation.TOOLS,
    *identifiers.TOOLS,
    *lookups.TOOLS,
)

TOOLS_BY_NAME: dict[str, ToolSpec] = {tool.name: tool for tool in ALL_TOOLS}


def get_tool(name: str) -> ToolSpec | None:
    return TOOLS_BY_NAME.get(name)


async def call_tool(
    name: str,
    arguments: Mapping[str, Any] | None = None,
    client: AriaClient | None = None,
) -> str:
    """Run the named tool and return its text output."""
    tool = get_tool(name)
    if tool is None:
        return f"Unknown tool: {name}"
    return await tool.run(arguments, client=client)
