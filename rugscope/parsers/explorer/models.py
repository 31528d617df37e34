"""Pydantic models for Polygonscan API rows."""

from pydantic import BaseModel, Field


class ExplorerHolder(BaseModel):
    """Row from module=token&action=tokenholderlist."""

    TokenHolderAddress: str = ""
    TokenHolderQuantity: str = "0"

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


class ExplorerTokenTransfer(BaseModel):
    """Row from module=account&action=tokentx."""

    hash: str = ""
    sender: str = Field(default="", alias="from")
    to: str = ""
    value: str = "0"
    timeStamp: str = "0"
    blockNumber: str = ""
    gas: str = ""
    gasPrice: str = ""

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }
