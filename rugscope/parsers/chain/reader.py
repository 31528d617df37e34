"""ERC20 basics via JSON-RPC: name, symbol, decimals, totalSupply.

Each field is read independently; a failing read falls back to a default
instead of failing the batch.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from rugscope.parsers.exceptions import InvalidAddressError

if TYPE_CHECKING:
    from config.settings import Settings

ERC20_ABI: list[dict[str, Any]] = [
    {
        "constant": True,
        "inputs": [],
        "name": name,
        "outputs": [{"name": "", "type": out_type}],
        "stateMutability": "view",
        "type": "function",
    }
    for name, out_type in (
        ("name", "string"),
        ("symbol", "string"),
        ("decimals", "uint8"),
        ("totalSupply", "uint256"),
    )
]

FIELD_DEFAULTS: dict[str, Any] = {
    "name": "Unknown",
    "symbol": "Unknown",
    "decimals": 18,
    "totalSupply": 0,
}


@dataclass(frozen=True)
class TokenBasics:
    name: str
    symbol: str
    decimals: int
    total_supply: int  # raw, unscaled


def is_valid_address(address: str) -> bool:
    """0x + 40 hex chars; mixed-case input must carry a valid EIP-55 checksum."""
    if not isinstance(address, str) or not Web3.is_address(address):
        return False
    body = address[2:] if address[:2].lower() == "0x" else address
    if body == body.lower() or body == body.upper():
        return True
    return Web3.is_checksum_address("0x" + body)


def validate_address(address: str) -> str:
    """Return the checksummed form of ``address`` or raise InvalidAddressError."""
    if not is_valid_address(address):
        raise InvalidAddressError("Invalid Ethereum address format")
    return Web3.to_checksum_address(address)


class ChainReader:
    """Read-only ERC20 calls against a JSON-RPC node."""

    def __init__(self, rpc_url: str, timeout: float = 10.0, w3: AsyncWeb3 | None = None) -> None:
        self._timeout = timeout
        self._w3 = w3 or AsyncWeb3(AsyncHTTPProvider(rpc_url))

    @classmethod
    def from_settings(cls, cfg: Settings) -> ChainReader:
        return cls(rpc_url=cfg.provider_url, timeout=cfg.rpc_timeout_sec)

    async def close(self) -> None:
        disconnect = getattr(self._w3.provider, "disconnect", None)
        if disconnect is None:
            return
        try:
            await disconnect()
        except NotImplementedError:
            pass

    async def get_basics(self, address: str) -> TokenBasics:
        checksum = validate_address(address)
        contract = self._w3.eth.contract(address=checksum, abi=ERC20_ABI)

        fields = list(FIELD_DEFAULTS)
        results = await asyncio.gather(
            *(self._read(contract, field) for field in fields),
            return_exceptions=True,
        )

        values: dict[str, Any] = {}
        for field, result in zip(fields, results):
            if isinstance(result, BaseException):
                logger.warning(
                    f"[CHAIN] {field}() failed for {checksum}: "
                    f"{type(result).__name__}: {result}, using {FIELD_DEFAULTS[field]!r}"
                )
                values[field] = FIELD_DEFAULTS[field]
            else:
                values[field] = result

        return TokenBasics(
            name=str(values["name"]),
            symbol=str(values["symbol"]),
            decimals=int(values["decimals"]),
            total_supply=int(values["totalSupply"]),
        )

    async def _read(self, contract: Any, field: str) -> Any:
        call = getattr(contract.functions, field)().call()
        return await asyncio.wait_for(call, timeout=self._timeout)
