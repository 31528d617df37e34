"""Contract check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from rugscope.api.dependencies import get_checker
from rugscope.models.token import AnalysisResult
from rugscope.parsers.checker import ContractChecker

router = APIRouter(prefix="/api", tags=["contracts"])


class CheckContractRequest(BaseModel):
    contract_address: str | None = Field(default=None, alias="contractAddress")


@router.post("/check-contract", response_model=AnalysisResult)
async def check_contract(
    body: CheckContractRequest,
    checker: ContractChecker = Depends(get_checker),
) -> AnalysisResult:
    """Aggregate on-chain + explorer data and return it with the LLM report.

    Errors are rendered as ``{"error": message}`` by the app's exception
    handlers: 400 for bad input, 500 for any upstream or analysis failure.
    """
    return await checker.check(body.contract_address or "")
