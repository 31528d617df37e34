"""Token data aggregation from chain basics and Polygonscan holders, transfers, source.

Order of calls:
1. chain basics (name/symbol/decimals/totalSupply, per-field fallbacks)
2. holder list (optional, degrades to [] on any error)
3. token transfers (mandatory)
4. contract source (mandatory)

Amounts are scaled with the token's decimals and holder percentages are
computed against total supply in one pass after all holders are known.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from rugscope.models.token import Holder, TokenData, TokenInfo, Transaction
from rugscope.parsers.chain.reader import ChainReader
from rugscope.parsers.exceptions import RugscopeError
from rugscope.parsers.explorer.client import ExplorerClient
from rugscope.parsers.explorer.models import ExplorerHolder, ExplorerTokenTransfer
from rugscope.utils.units import parse_raw_amount, to_decimal_string


class TokenDataAggregator:
    def __init__(
        self,
        chain: ChainReader,
        explorer: ExplorerClient,
        *,
        holder_limit: int = 100,
        transaction_limit: int = 100,
    ) -> None:
        self._chain = chain
        self._explorer = explorer
        self._holder_limit = holder_limit
        self._transaction_limit = transaction_limit

    async def aggregate(self, address: str) -> TokenData:
        basics = await self._chain.get_basics(address)
        decimals = basics.decimals

        raw_holders = await self._fetch_holders(address)

        raw_txs = await self._explorer.call(
            "account",
            "tokentx",
            address,
            {"page": 1, "offset": self._transaction_limit, "sort": "desc"},
        )

        token_info = TokenInfo(
            address=address,
            name=basics.name,
            symbol=basics.symbol,
            decimals=decimals,
            total_supply=to_decimal_string(basics.total_supply, decimals),
        )

        holders = [
            _to_holder(row, decimals)
            for row in raw_holders[: self._holder_limit]
            if isinstance(row, dict)
        ]
        apply_percentages(holders, token_info.total_supply)

        transactions = [
            _to_transaction(row, decimals)
            for row in _as_list(raw_txs)[: self._transaction_limit]
            if isinstance(row, dict)
        ]

        source = await self._explorer.call("contract", "getsourcecode", address)
        source_rows = _as_list(source)
        source_code = source_rows[0] if source_rows and isinstance(source_rows[0], dict) else None

        logger.info(
            f"[AGGREGATOR] {token_info.symbol} ({address}): "
            f"{len(holders)} holders, {len(transactions)} transfers, "
            f"supply={token_info.total_supply}"
        )
        return TokenData(
            token_info=token_info,
            holders=holders,
            transactions=transactions,
            source_code=source_code,
        )

    async def _fetch_holders(self, address: str) -> list[Any]:
        """Holder list is optional: not every token/network exposes it."""
        try:
            result = await self._explorer.call(
                "token",
                "tokenholderlist",
                address,
                {"page": 1, "offset": self._holder_limit},
            )
        except RugscopeError as e:
            logger.warning(f"[AGGREGATOR] Token holder check disabled/failed: {e}")
            return []
        except Exception as e:
            logger.warning(
                f"[AGGREGATOR] Token holder check crashed: {type(e).__name__}: {e}"
            )
            return []
        return _as_list(result)


def apply_percentages(holders: list[Holder], total_supply: str) -> None:
    """Set each holder's share of ``total_supply`` (decimal string), in place."""
    if not holders:
        return
    supply = float(total_supply)
    for holder in holders:
        holder.percentage = holder.amount / supply * 100 if supply > 0 else 0.0


def _as_list(result: Any) -> list[Any]:
    return result if isinstance(result, list) else []


def _to_holder(row: dict, decimals: int) -> Holder:
    parsed = ExplorerHolder.model_validate(row)
    raw = parse_raw_amount(parsed.TokenHolderQuantity)
    return Holder(
        account=parsed.TokenHolderAddress,
        amount=float(to_decimal_string(raw, decimals)),
        percentage=0.0,
    )


def _to_transaction(row: dict, decimals: int) -> Transaction:
    parsed = ExplorerTokenTransfer.model_validate(row)
    return Transaction(
        hash=parsed.hash,
        from_=parsed.sender,
        to=parsed.to,
        value=to_decimal_string(parse_raw_amount(parsed.value), decimals),
        timestamp=parse_raw_amount(parsed.timeStamp),
        block_number=parsed.blockNumber,
        gas=parsed.gas,
        gas_price=parsed.gasPrice,
    )
