"""Tests for single-URL HEAD probes."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from domain_checker.prober import REQUEST_TIMEOUT, build_client, probe_url


def _response(status_code: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    return response


@pytest.fixture
def client():
    """Create a mock async HTTP client."""
    c = MagicMock(spec=httpx.AsyncClient)
    c.head = AsyncMock()
    return c


@pytest.mark.asyncio
async def test_success_returns_status_code(client):
    client.head.return_value = _response(200)
    assert await probe_url("http://example.com", client) == 200
    client.head.assert_awaited_once_with("http://example.com")


@pytest.mark.asyncio
async def test_any_2xx_counts_as_success(client):
    client.head.return_value = _response(204)
    assert await probe_url("https://example.com", client) == 204


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [301, 403, 404, 500, 503])
async def test_non_success_status_returns_none(client, status_code):
    client.head.return_value = _response(status_code)
    assert await probe_url("http://example.com", client) is None


@pytest.mark.asyncio
async def test_connection_error_returns_none(client):
    client.head.side_effect = httpx.ConnectError("refused")
    assert await probe_url("http://example.com", client) is None


@pytest.mark.asyncio
async def test_transport_timeout_returns_none(client):
    client.head.side_effect = httpx.ReadTimeout("too slow")
    assert await probe_url("http://example.com", client) is None


@pytest.mark.asyncio
async def test_invalid_url_returns_none(client):
    client.head.side_effect = httpx.InvalidURL("bad host")
    assert await probe_url("http://bad..domain", client) is None


@pytest.mark.asyncio
async def test_unexpected_error_returns_none(client):
    client.head.side_effect = RuntimeError("boom")
    assert await probe_url("http://example.com", client) is None


@pytest.mark.asyncio
async def test_slow_response_is_cut_off_by_timeout(client):
    """A response that does not arrive within the timeout counts as failed."""

    async def slow_head(url):
        await asyncio.sleep(5)
        return _response(200)

    client.head.side_effect = slow_head
    assert await probe_url("http://slow.example", client, timeout=0.05) is None


@pytest.mark.asyncio
async def test_probe_against_mock_transport():
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    async with httpx.AsyncClient(transport=transport) as c:
        assert await probe_url("http://example.com", c) == 200


@pytest.mark.asyncio
async def test_probe_sends_head_request():
    methods = []

    def handler(request: httpx.Request) -> httpx.Response:
        methods.append(request.method)
        return httpx.Response(200)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as c:
        await probe_url("http://example.com", c)
    assert methods == ["HEAD"]


@pytest.mark.asyncio
async def test_build_client_defaults():
    async with build_client() as c:
        assert c.timeout == httpx.Timeout(REQUEST_TIMEOUT)
        assert c.follow_redirects is True


@pytest.mark.asyncio
async def test_build_client_custom_timeout():
    async with build_client(2.5, max_connections=10) as c:
        assert c.timeout == httpx.Timeout(2.5)
