"""FastAPI dependency injection: the per-process contract checker."""

from __future__ import annotations

from fastapi import Request

from rugscope.parsers.checker import ContractChecker


def get_checker(request: Request) -> ContractChecker:
    """Return the checker built by the app lifespan."""
    return request.app.state.checker
