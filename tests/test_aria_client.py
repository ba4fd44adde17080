"""Tests for the ARIA API client and its token session.

These tests use httpx's MockTransport to simulate HTTP responses from the
ARIA server. No real server connection is needed; everything is faked.

Mocking HTTP calls:
    Instead of making real network requests, we replace httpx's transport
    layer with a function that returns pre-defined responses. This lets us
    test token caching, expiry, concurrent refresh and error handling
    without any external dependencies.
"""

import asyncio
import json
import time
from collections.abc import Awaitable, Callable

import httpx
import pytest

from aria_access.aria_client import (
    AriaAPIError,
    AriaAuthError,
    AriaClient,
    AriaTransportError,
    Credentials,
    SessionToken,
)
from aria_access.envelope import GATEWAY_PATH, wrap_envelope

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]

# --- Test helpers ---


def _credentials(**overrides: str) -> Credentials:
    values = {
        "base_url": "https://aria.test",
        "client_id": "test-client-id",
        "client_secret": "test-client-secret",
        "username": "admin",
        "password": "pass",
    }
    values.update(overrides)
    return Credentials(**values)


def _make_client(handler: Handler, token_ttl: float = 3600) -> AriaClient:
    """Create a client whose HTTP traffic goes to ``handler``."""
    return AriaClient(
        credentials=_credentials(),
        token_ttl=token_ttl,
        http=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def _is_token_request(request: httpx.Request) -> bool:
    return request.url.path == "/auth/token"


# --- Token acquisition tests ---


class TestTokenAcquisition:
    """Tests for getting and caching bearer tokens."""

    @pytest.mark.asyncio
    async def test_get_valid_token_success(self) -> None:
        """A successful exchange caches the token for the configured TTL."""

        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"access_token": "abc123"})

        client = _make_client(handler, token_ttl=600)
        before = time.time()

        token = await client.get_valid_token()

        assert token == "abc123"
        assert client.token is not None
        assert client.token.value == "abc123"
        assert before + 600 <= client.token.expires_at <= time.time() + 600

        await client.close()

    @pytest.mark.asyncio
    async def test_token_request_is_form_encoded_password_grant(self) -> None:
        captured: list[httpx.Request] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"access_token": "abc123"})

        client = _make_client(handler)
        await client.get_valid_token()

        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://aria.test/auth/token"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        body = request.content.decode()
        assert "grant_type=password" in body
        assert "client_id=test-client-id" in body
        assert "client_secret=test-client-secret" in body
        assert "username=admin" in body
        assert "password=pass" in body

        await client.close()

    @pytest.mark.asyncio
    async def test_second_call_within_ttl_is_cached(self) -> None:
        """Only the first call inside the TTL window reaches the network."""
        calls = {"token": 0}

        async def handler(request: httpx.Request) -> httpx.Response:
            calls["token"] += 1
            return httpx.Response(200, json={"access_token": "abc123"})

        client = _make_client(handler)

        first = await client.get_valid_token()
        second = await client.get_valid_token()

        assert first == second == "abc123"
        assert calls["token"] == 1

        await client.close()

    @pytest.mark.asyncio
    async def test_expired_token_is_refreshed(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"access_token": "fresh-token"})

        client = _make_client(handler)
        # Simulate expiry by planting a token whose TTL already ran out
        client._token = SessionToken(value="stale-token", expires_at=time.time() - 1)

        assert await client.get_valid_token() == "fresh-token"

        await client.close()

    @pytest.mark.asyncio
    async def test_rejected_credentials_keep_prior_token(self) -> None:
        """A failed refresh raises and leaves the cached token as it was."""

        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "invalid_grant"})

        client = _make_client(handler)
        stale = SessionToken(value="stale-token", expires_at=time.time() - 1)
        client._token = stale

        with pytest.raises(AriaAuthError, match="401"):
            await client.get_valid_token()

        assert client.token is stale

        await client.close()

    @pytest.mark.asyncio
    async def test_network_error_raises_auth_error(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _make_client(handler)

        with pytest.raises(AriaAuthError, match="connection refused"):
            await client.get_valid_token()
        assert client.token is None

        await client.close()

    @pytest.mark.asyncio
    async def test_response_without_access_token_raises(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"token_type": "Bearer"})

        client = _make_client(handler)

        with pytest.raises(AriaAuthError, match="access_token"):
            await client.get_valid_token()

        await client.close()

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_refresh(self) -> None:
        """Callers that all see no token wait for a single exchange."""
        calls = {"token": 0}

        async def handler(request: httpx.Request) -> httpx.Response:
            calls["token"] += 1
            await asyncio.sleep(0.01)
            return httpx.Response(200, json={"access_token": "shared-token"})

        client = _make_client(handler)

        tokens = await asyncio.gather(*(client.get_valid_token() for _ in range(5)))

        assert tokens == ["shared-token"] * 5
        assert calls["token"] == 1

        await client.close()

    @pytest.mark.asyncio
    async def test_set_credentials_forgets_cached_token(self) -> None:
        seen_users: list[str] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            body = request.content.decode()
            seen_users.append(body.split("username=")[1].split("&")[0])
            return httpx.Response(200, json={"access_token": f"token-{len(seen_users)}"})

        client = _make_client(handler)
        await client.get_valid_token()

        client.update_credentials(username="physicist", password="secret")
        assert client.token is None

        assert await client.get_valid_token() == "token-2"
        assert seen_users == ["admin", "physicist"]
        assert client.credentials.base_url == "https://aria.test"

        await client.close()

    def test_credentials_repr_hides_secrets(self) -> None:
        text = repr(_credentials())
        assert "test-client-secret" not in text
        assert "pass'" not in text
        assert "admin" in text


# --- API request tests ---


class TestExecute:
    """Tests for authenticated GET/POST requests."""

    @pytest.mark.asyncio
    async def test_protected_call_carries_bearer_token(self) -> None:
        captured_headers: dict[str, str] = {}

        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(200, json={"access_token": "abc123"})
            captured_headers.update(dict(request.headers))
            return httpx.Response(200, json=[])

        client = _make_client(handler)

        await client.get("/resources")

        assert captured_headers["authorization"] == "Bearer abc123"

        await client.close()

    @pytest.mark.asyncio
    async def test_get_without_body_encodes_query_params(self) -> None:
        captured: list[httpx.Request] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(200, json={"access_token": "abc123"})
            captured.append(request)
            return httpx.Response(200, json=[{"billId": "B1"}])

        client = _make_client(handler)

        result = await client.execute(
            "/billing", params={"patientId": "P 1", "startDate": "2024-01-01"}
        )

        request = captured[0]
        assert request.method == "GET"
        assert request.url.path == "/billing"
        assert request.url.params["patientId"] == "P 1"
        assert request.url.params["startDate"] == "2024-01-01"
        assert result == [{"billId": "B1"}]

        await client.close()

    @pytest.mark.asyncio
    async def test_post_sends_envelope_to_gateway(self) -> None:
        captured: list[httpx.Request] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(200, json={"access_token": "abc123"})
            captured.append(request)
            return httpx.Response(200, json={"success": True})

        client = _make_client(handler)
        envelope = wrap_envelope("GetMachineListRequest", {})

        result = await client.process(envelope)

        request = captured[0]
        assert request.method == "POST"
        assert request.url.path == GATEWAY_PATH
        assert json.loads(request.content) == envelope
        assert result == {"success": True}

        await client.close()

    @pytest.mark.asyncio
    async def test_api_error_carries_status_without_parsing_body(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(200, json={"access_token": "abc123"})
            return httpx.Response(500, text="<html>stack trace here</html>")

        client = _make_client(handler)

        with pytest.raises(AriaAPIError) as excinfo:
            await client.get("/resources")

        assert excinfo.value.status_code == 500
        assert excinfo.value.reason == "Internal Server Error"
        assert str(excinfo.value) == "API request failed: 500 Internal Server Error"
        assert "stack trace" not in str(excinfo.value)

        await client.close()

    @pytest.mark.asyncio
    async def test_401_is_not_retried(self) -> None:
        calls = {"token": 0, "api": 0}

        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                calls["token"] += 1
                return httpx.Response(200, json={"access_token": "abc123"})
            calls["api"] += 1
            return httpx.Response(401, text="Token expired")

        client = _make_client(handler)

        with pytest.raises(AriaAPIError, match="401"):
            await client.get("/resources")
        assert calls == {"token": 1, "api": 1}

        await client.close()

    @pytest.mark.asyncio
    async def test_auth_failure_aborts_before_request(self) -> None:
        calls = {"api": 0}

        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(403, text="Forbidden")
            calls["api"] += 1
            return httpx.Response(200, json=[])

        client = _make_client(handler)

        with pytest.raises(AriaAuthError, match="Failed to authenticate with ARIA"):
            await client.get("/resources")
        assert calls["api"] == 0

        await client.close()

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(200, json={"access_token": "abc123"})
            raise httpx.ReadTimeout("timed out", request=request)

        client = _make_client(handler)

        with pytest.raises(AriaTransportError, match="/resources"):
            await client.get("/resources")

        await client.close()

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            if _is_token_request(request):
                return httpx.Response(200, json={"access_token": "abc123"})
            return httpx.Response(204)

        client = _make_client(handler)

        assert await client.get("/resources") is None

        await client.close()
