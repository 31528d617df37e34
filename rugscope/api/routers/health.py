"""Health check, no outbound calls."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from rugscope.api.version import API_VERSION

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=API_VERSION)
