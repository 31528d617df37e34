"""Shared test fixtures."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from rugscope.parsers.chain.reader import TokenBasics

TOKEN_ADDRESS = "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"
HOLDER_A = "0x1111111111111111111111111111111111111111"
HOLDER_B = "0x2222222222222222222222222222222222222222"


def _http_response(status_code: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    """Fake httpx.Response with status_code/json()/text."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = text
    return resp


def _explorer_envelope(result: Any, status: str = "1", message: str = "OK") -> dict:
    return {"status": status, "message": message, "result": result}


def _tokentx_row(i: int, value: str = "1000000") -> dict:
    return {
        "hash": f"0x{i:064x}",
        "from": HOLDER_A,
        "to": HOLDER_B,
        "value": value,
        "timeStamp": str(1_700_000_000 + i),
        "blockNumber": str(50_000_000 + i),
        "gas": "65000",
        "gasPrice": "30000000000",
        "tokenDecimal": "6",
    }


@pytest.fixture
def token_address() -> str:
    return TOKEN_ADDRESS


@pytest.fixture
def basics() -> TokenBasics:
    """6-decimal token with 10 whole units of supply."""
    return TokenBasics(name="Test Dollar", symbol="TUSD", decimals=6, total_supply=10_000_000)


@pytest.fixture
def chain(basics: TokenBasics) -> MagicMock:
    reader = MagicMock()
    reader.get_basics = AsyncMock(return_value=basics)
    return reader


@pytest.fixture
def explorer_results() -> dict[str, Any]:
    """Per-action explorer results; set a value to an exception to make that call fail."""
    return {
        "tokenholderlist": [
            {"TokenHolderAddress": HOLDER_A, "TokenHolderQuantity": "7500000"},
            {"TokenHolderAddress": HOLDER_B, "TokenHolderQuantity": "2500000"},
        ],
        "tokentx": [_tokentx_row(1, "2500000"), _tokentx_row(0, "1")],
        "getsourcecode": [{"ContractName": "TestDollar", "SourceCode": "contract TestDollar {}"}],
    }


@pytest.fixture
def explorer(explorer_results: dict[str, Any]) -> MagicMock:
    """ExplorerClient stand-in dispatching on the action argument."""

    def _call(module: str, action: str, address: str, extra_params: dict | None = None) -> Any:
        result = explorer_results[action]
        if isinstance(result, Exception):
            raise result
        return result

    client = MagicMock()
    client.call = AsyncMock(side_effect=_call)
    client.close = AsyncMock()
    return client


@pytest.fixture
def http_response():
    return _http_response


@pytest.fixture
def explorer_envelope():
    return _explorer_envelope


@pytest.fixture
def tokentx_row():
    return _tokentx_row
