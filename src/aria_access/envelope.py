"""Request envelopes for the ARIA gateway endpoint.

Every request sent to ``/Gateway/Service.svc/rest/Process`` is a single JSON
object that names its request type in a ``__type`` discriminator and wraps
each field in a ``{"Value": ...}`` object::

    {
        "__type": "GetPatientsRequest:http://services.varian.com/AriaWebConnect/Link",
        "Attributes": null,
        "PatientId1": {"Value": "123"},
        "PatientId2": {"Value": ""}
    }

ARIA treats a field wrapped around ``null`` differently from a missing field,
so nothing here drops, renames or defaults a field. Filling in defaults is
up to whoever builds the ``fields`` mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Namespace suffix ARIA requires on every request type name
ARIA_NAMESPACE = "http://services.varian.com/AriaWebConnect/Link"

# The single RPC-style endpoint that dispatches on ``__type``
GATEWAY_PATH = "/Gateway/Service.svc/rest/Process"


def wrap_values(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap every value in ``fields`` as ``{"Value": value}``."""
    return {key: {"Value": value} for key, value in fields.items()}


def wrap_envelope(request_type: str, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Build the gateway request envelope for ``request_type``.

    Args:
        request_type: ARIA request type name (e.g. "GetPatientsRequest").
            Must match a name the gateway knows; it is not validated here.
        fields: Field name to value. Values may be scalars, None, or
            already-built nested structures; each is wrapped exactly once.

    Returns:
        The envelope dict, ready to be sent as the JSON request body.
    """
    envelope: dict[str, Any] = {
        "__type": f"{request_type}:{ARIA_NAMESPACE}",
        "Attributes": None,
    }
    envelope.update(wrap_values(fields))
    return envelope
