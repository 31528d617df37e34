"""Normalized token records returned by the check-contract endpoint.

Field aliases match the JSON envelope consumed by the browser UI
(``tokenInfo``, ``sourceCode``, ``blockNumber``...). Every record lives for
one request only.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TokenInfo(BaseModel):
    """Basic ERC20 metadata read from the contract."""

    model_config = ConfigDict(frozen=True)

    address: str
    name: str = "Unknown"
    symbol: str = "Unknown"
    decimals: int = Field(default=18, ge=0)
    total_supply: str = "0.0"  # decimal string, never a float


class Holder(BaseModel):
    account: str
    amount: float = 0.0
    percentage: float = 0.0  # of total supply, 0-100


class Transaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hash: str = ""
    from_: str = Field(default="", alias="from")
    to: str = ""
    value: str = "0.0"
    timestamp: int = 0  # unix seconds
    block_number: str = Field(default="", alias="blockNumber")
    gas: str = ""
    gas_price: str = Field(default="", alias="gasPrice")


class TokenData(BaseModel):
    """Aggregate of chain reads and explorer reads for one token."""

    model_config = ConfigDict(populate_by_name=True)

    token_info: TokenInfo = Field(alias="tokenInfo")
    holders: list[Holder] = []
    transactions: list[Transaction] = []
    source_code: dict[str, Any] | None = Field(default=None, alias="sourceCode")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token_data: TokenData = Field(alias="tokenData")
    analysis: str
