"""Contract check pipeline: validate address, aggregate, generate report."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from rugscope.models.token import AnalysisResult
from rugscope.parsers.aggregator import TokenDataAggregator
from rugscope.parsers.chain.reader import ChainReader, is_valid_address
from rugscope.parsers.exceptions import InvalidAddressError
from rugscope.parsers.explorer.client import ExplorerClient
from rugscope.parsers.llm_analyzer.client import ReportGenerator

if TYPE_CHECKING:
    from config.settings import Settings


class ContractChecker:
    """All-or-nothing: either a full AnalysisResult or an exception."""

    def __init__(
        self,
        aggregator: TokenDataAggregator,
        reporter: ReportGenerator,
        *,
        chain: ChainReader | None = None,
        explorer: ExplorerClient | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._reporter = reporter
        # owned clients, closed in close()
        self._chain = chain
        self._explorer = explorer

    @classmethod
    def from_settings(cls, cfg: Settings) -> ContractChecker:
        chain = ChainReader.from_settings(cfg)
        explorer = ExplorerClient.from_settings(cfg)
        aggregator = TokenDataAggregator(
            chain,
            explorer,
            holder_limit=cfg.holder_limit,
            transaction_limit=cfg.transaction_limit,
        )
        return cls(
            aggregator,
            ReportGenerator.from_settings(cfg),
            chain=chain,
            explorer=explorer,
        )

    async def check(self, address: str) -> AnalysisResult:
        address = (address or "").strip()
        if not address:
            raise InvalidAddressError("Contract address is required")
        if not is_valid_address(address):
            raise InvalidAddressError("Invalid Ethereum address format")

        logger.info(f"[CHECKER] Checking {address}")
        token_data = await self._aggregator.aggregate(address)
        analysis = await self._reporter.generate(token_data)
        return AnalysisResult(token_data=token_data, analysis=analysis)

    async def close(self) -> None:
        await self._reporter.close()
        if self._explorer is not None:
            await self._explorer.close()
        if self._chain is not None:
            await self._chain.close()
