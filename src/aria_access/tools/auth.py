"""The authenticate tool.

Replaces the session's credentials with the ones supplied and immediately
logs in with them, so a bad password is reported here rather than on the
next data request. The base URL is kept from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aria_access.aria_client import AriaAuthError, AriaClient
from aria_access.tools.base import Param, ToolSpec


@dataclass(frozen=True, kw_only=True)
class AuthenticateTool(ToolSpec):
    async def invoke(self, client: AriaClient, args: dict[str, Any]) -> str:
        client.update_credentials(
            client_id=args["clientId"],
            client_secret=args["clientSecret"],
            username=args["username"],
            password=args["password"],
        )
        try:
            await client.get_valid_token()
        except AriaAuthError as exc:
            return f"Authentication failed. Please check your credentials.\n{exc}"
        return "Successfully authenticated with ARIA Access API"


AUTHENTICATE = AuthenticateTool(
    name="authenticate",
    description="Authenticate with ARIA Access API",
    error_prefix="Authentication error",
    params=(
        Param("clientId", "string", "ARIA client ID", required=True),
        Param("clientSecret", "string", "ARIA client secret", required=True),
        Param("username", "string", "ARIA username", required=True),
        Param("password", "string", "ARIA password", required=True),
    ),
)

TOOLS = (AUTHENTICATE,)
