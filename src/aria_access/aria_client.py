"""HTTP client for the ARIA Access API with bearer-token authentication.

This module provides the AriaClient class, which is the single session
object every tool talks through. It handles:
1. Holding the ARIA credentials (replaceable at runtime)
2. Token acquisition via the "password grant" against /auth/token
3. Caching the bearer token until a fixed TTL runs out
4. Authenticated GET/POST requests to REST resources and the gateway

Fixed-TTL token cache:
    ARIA's token endpoint hands back an access_token but its lifetime is
    not something we read. The client therefore assumes every token is good
    for ARIA_TOKEN_TTL_SECONDS after it was issued. Within that window,
    get_valid_token() returns the cached value without a network call.
    Once it lapses, the next caller fetches a new one.

Single-flight refresh:
    Tool calls run concurrently on one event loop. Refresh happens under an
    asyncio.Lock, so callers that all find the token expired wait for one
    token request instead of each sending their own.

Usage:
    client = AriaClient()
    patients = await client.process(wrap_envelope("GetPatientsRequest", {...}))
    resources = await client.get("/resources", params={"resourceType": "Machine"})
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from aria_access.config import (
    ARIA_BASE_URL,
    ARIA_CLIENT_ID,
    ARIA_CLIENT_SECRET,
    ARIA_HTTP_TIMEOUT,
    ARIA_PASSWORD,
    ARIA_SSL_VERIFY,
    ARIA_TOKEN_TTL_SECONDS,
    ARIA_USERNAME,
)
from aria_access.envelope import GATEWAY_PATH

logger = logging.getLogger(__name__)

TOKEN_PATH = "/auth/token"


class AriaError(Exception):
    """Base class for every failure talking to ARIA."""


class AriaAuthError(AriaError):
    """Raised when the credential exchange fails or returns no token."""


class AriaTransportError(AriaError):
    """Raised when a request never got an HTTP response (DNS, timeout, ...)."""


class AriaAPIError(AriaError):
    """Raised when ARIA answers with a non-2xx status code.

    The response body is not parsed; only the status line is
    kept.
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API request failed: {status_code} {reason}")


@dataclass(frozen=True)
class Credentials:
    """Everything needed to obtain a token from one ARIA installation."""

    base_url: str
    client_id: str
    client_secret: str = field(repr=False)
    username: str
    password: str = field(repr=False)

    @classmethod
    def from_config(cls) -> Credentials:
        return cls(
            base_url=ARIA_BASE_URL,
            client_id=ARIA_CLIENT_ID,
            client_secret=ARIA_CLIENT_SECRET,
            username=ARIA_USERNAME,
            password=ARIA_PASSWORD,
        )


@dataclass(frozen=True)
class SessionToken:
    """A bearer token and the Unix timestamp at which we stop trusting it."""

    value: str = field(repr=False)
    expires_at: float

    def is_valid(self, now: float | None = None) -> bool:
        if now is None:
            now = time.time()
        return now < self.expires_at


class AriaClient:
    """Async HTTP client and token session for the ARIA Access API.

    One instance owns the credentials, the cached token and the HTTP
    connection pool. Tools share a single instance through get_client().

    Attributes:
        credentials: The credentials the next token request will use.
        token_ttl: Seconds a freshly issued token is treated as valid.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        token_ttl: float = ARIA_TOKEN_TTL_SECONDS,
        verify_ssl: bool = ARIA_SSL_VERIFY,
        timeout: float = ARIA_HTTP_TIMEOUT,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.credentials = credentials or Credentials.from_config()
        self.token_ttl = token_ttl

        # Empty until the first get_valid_token()
        self._token: SessionToken | None = None
        self._refresh_lock = asyncio.Lock()

        self._http = http or httpx.AsyncClient(
            verify=verify_ssl,
            timeout=httpx.Timeout(timeout),
        )

    @property
    def base_url(self) -> str:
        return self.credentials.base_url.rstrip("/")

    @property
    def token(self) -> SessionToken | None:
        """The cached token, expired or not (None before the first login)."""
        return self._token

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    def set_credentials(self, credentials: Credentials) -> None:
        """Replace the credentials wholesale and forget the cached token.

        A token issued to the previous user must not be reused for the new
        one, so the next request always authenticates again.
        """
        self.credentials = credentials
        self._token = None
        logger.info("ARIA credentials replaced for user %s", credentials.username)

    def update_credentials(self, **changes: str) -> Credentials:
        """Replace some credential fields, keeping the rest. Returns the result."""
        credentials = replace(self.credentials, **changes)
        self.set_credentials(credentials)
        return credentials

    # --- Authentication ---

    async def authenticate(self) -> str:
        """Exchange the current credentials for a bearer token.

        Sends the OAuth2 password grant to /auth/token as form data. This
        does not touch the token cache; get_valid_token() decides what to
        store.

        Returns:
            The access token string.

        Raises:
            AriaAuthError: On a network error, a non-2xx answer, or a body
                without an access_token.
        """
        creds = self.credentials
        url = f"{self.base_url}{TOKEN_PATH}"
        payload = {
            "grant_type": "password",
            "client_id": creds.client_id,
            "client_secret": creds.client_secret,
            "username": creds.username,
            "password": creds.password,
        }
        try:
            response = await self._http.post(
                url,
                data=payload,  # data= sends form-encoded, json= would send JSON
            )
        except httpx.HTTPError as exc:
            raise AriaAuthError(f"Token request failed: {exc}") from exc

        if not response.is_success:
            raise AriaAuthError(
                f"Token request failed (HTTP {response.status_code} "
                f"{response.reason_phrase})"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise AriaAuthError("Token response was not valid JSON") from exc

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise AriaAuthError("Token response did not include an access_token")
        return str(token)

    async def get_valid_token(self) -> str:
        """Return a usable bearer token, authenticating only when needed.

        A cached token younger than token_ttl is returned as-is. Otherwise
        one caller authenticates while the others wait on the lock and then
        reuse its result. A failed exchange leaves the cache untouched.

        Raises:
            AriaAuthError: If a new token was needed and could not be had.
        """
        token = self._token
        if token is not None and token.is_valid():
            return token.value

        async with self._refresh_lock:
            # Another caller may have refreshed while we were waiting.
            token = self._token
            if token is not None and token.is_valid():
                return token.value

            logger.info("No valid ARIA token, authenticating")
            value = await self.authenticate()
            self._token = SessionToken(value=value, expires_at=time.time() + self.token_ttl)
            logger.debug("Token acquired, trusted for %d seconds", self.token_ttl)
            return value

    # --- API Request Methods ---

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Authenticated GET against a REST resource (e.g. "/resources")."""
        return await self.execute(path, params=params)

    async def post(self, path: str, json_data: Any) -> Any:
        """Authenticated POST of a JSON body."""
        return await self.execute(path, body=json_data)

    async def process(self, envelope: dict[str, Any]) -> Any:
        """Send a request envelope to the gateway endpoint."""
        return await self.execute(GATEWAY_PATH, body=envelope)

    async def execute(
        self,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one authenticated request to ARIA.

        Without a body this is a GET; with one it is a POST of that body as
        JSON. There are no retries: a token that expires between here and
        the server is only noticed on the next call.

        Args:
            path: Path appended to the base URL.
            body: JSON body to POST, or None for a GET.
            params: Query-string parameters.

        Returns:
            The parsed JSON response, unmodified (None for an empty body).

        Raises:
            AriaAuthError: If no token could be obtained. Nothing is sent.
            AriaTransportError: If the request got no HTTP response.
            AriaAPIError: If ARIA returned a non-2xx status code.
        """
        try:
            token = await self.get_valid_token()
        except AriaAuthError as exc:
            raise AriaAuthError(f"Failed to authenticate with ARIA: {exc}") from exc

        url = f"{self.base_url}{path}"
        method = "GET" if body is None else "POST"
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

        try:
            response = await self._http.request(
                method,
                url,
                headers=headers,
                params=params,
                json=body,
            )
        except httpx.HTTPError as exc:
            raise AriaTransportError(
                f"Request to {path} failed: {exc or type(exc).__name__}"
            ) from exc

        if not response.is_success:
            logger.warning("%s %s returned %d", method, path, response.status_code)
            raise AriaAPIError(response.status_code, response.reason_phrase)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise AriaError(f"Response from {path} was not valid JSON") from exc


# --- Module-level singleton ---
# Every tool shares one session so they share one token. The stdio server
# and the FastAPI app both run on a single event loop, so one instance is
# enough.

_client: AriaClient | None = None


def get_client() -> AriaClient:
    """Get or create the shared AriaClient session.

    Creating the client does not contact ARIA; the first request does.
    """
    global _client  # noqa: PLW0603
    if _client is None:
        _client = AriaClient()
    return _client


async def close_client() -> None:
    """Close and discard the shared session (used on shutdown and in tests)."""
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.close()
        _client = None
