"""Tests for the Polygonscan explorer client."""

from unittest.mock import AsyncMock

import httpx
import pytest

from rugscope.parsers.exceptions import NetworkError, UpstreamError
from rugscope.parsers.explorer.client import ExplorerClient


@pytest.fixture
def client() -> ExplorerClient:
    c = ExplorerClient(api_key="KEY123", base_url="https://api.example/api")
    c._client = AsyncMock()
    return c


class TestExplorerClient:
    @pytest.mark.asyncio
    async def test_returns_result_payload(self, client, http_response, explorer_envelope) -> None:
        rows = [{"TokenHolderAddress": "0xabc", "TokenHolderQuantity": "10"}]
        client._client.get = AsyncMock(return_value=http_response(200, explorer_envelope(rows)))

        result = await client.call("token", "tokenholderlist", "0xToken", {"page": 1, "offset": 100})

        assert result == rows
        url = client._client.get.call_args.args[0]
        params = client._client.get.call_args.kwargs["params"]
        assert url == "https://api.example/api"
        assert params == {
            "module": "token",
            "action": "tokenholderlist",
            "address": "0xToken",
            "apikey": "KEY123",
            "page": "1",
            "offset": "100",
        }

    @pytest.mark.asyncio
    async def test_logical_error_inside_200(self, client, http_response, explorer_envelope) -> None:
        """status "0" is a failure even when HTTP says 200."""
        client._client.get = AsyncMock(
            return_value=http_response(200, explorer_envelope([], status="0", message="No transactions found"))
        )

        with pytest.raises(UpstreamError, match="No transactions found"):
            await client.call("account", "tokentx", "0xToken")

    @pytest.mark.asyncio
    async def test_notok_detail_included(self, client, http_response, explorer_envelope) -> None:
        client._client.get = AsyncMock(
            return_value=http_response(200, explorer_envelope("Invalid API Key", status="0", message="NOTOK"))
        )

        with pytest.raises(UpstreamError) as exc_info:
            await client.call("contract", "getsourcecode", "0xToken")

        assert str(exc_info.value) == "Polygonscan API error: NOTOK (Invalid API Key)"
        assert exc_info.value.result == "Invalid API Key"

    @pytest.mark.asyncio
    async def test_missing_message(self, client, http_response) -> None:
        client._client.get = AsyncMock(return_value=http_response(200, {"status": "0"}))

        with pytest.raises(UpstreamError, match="Unknown error"):
            await client.call("account", "tokentx", "0xToken")

    @pytest.mark.asyncio
    async def test_http_error_status(self, client, http_response) -> None:
        client._client.get = AsyncMock(return_value=http_response(502, None, text="Bad Gateway"))

        with pytest.raises(NetworkError) as exc_info:
            await client.call("account", "tokentx", "0xToken")

        assert exc_info.value.status == 502
        assert exc_info.value.body == "Bad Gateway"
        assert "502" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error_not_retried(self, client) -> None:
        client._client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(NetworkError, match="ConnectError"):
            await client.call("account", "tokentx", "0xToken")

        assert client._client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self, client) -> None:
        client._client.get = AsyncMock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(NetworkError):
            await client.call("account", "tokentx", "0xToken")

    @pytest.mark.asyncio
    async def test_non_json_body(self, client, http_response) -> None:
        resp = http_response(200)
        resp.json.side_effect = ValueError("Expecting value")
        client._client.get = AsyncMock(return_value=resp)

        with pytest.raises(UpstreamError, match="not JSON"):
            await client.call("account", "tokentx", "0xToken")
