"""Polygonscan API client for the Etherscan-style module/action GET endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from loguru import logger

from rugscope.parsers.exceptions import NetworkError, UpstreamError

if TYPE_CHECKING:
    from config.settings import Settings

BASE_URL = "https://api.polygonscan.com/api"
SUCCESS_STATUS = "1"


class ExplorerClient:
    """Async HTTP client for the Polygonscan REST API.

    One attempt per call: any failure propagates to the caller, which decides
    whether the data was optional.
    """

    def __init__(self, api_key: str, base_url: str = BASE_URL, timeout: float = 15.0) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client = httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, cfg: Settings) -> ExplorerClient:
        return cls(
            api_key=cfg.polygonscan_api_key,
            base_url=cfg.polygonscan_api_url,
            timeout=cfg.explorer_timeout_sec,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def call(
        self,
        module: str,
        action: str,
        address: str,
        extra_params: dict[str, Any] | None = None,
    ) -> Any:
        """GET ``?module=&action=&address=&apikey=`` and return the ``result`` payload.

        Raises NetworkError on transport failure or non-2xx status, and
        UpstreamError when the envelope status is not ``"1"``.
        """
        params: dict[str, str] = {
            "module": module,
            "action": action,
            "address": address,
            "apikey": self._api_key,
        }
        if extra_params:
            params.update({k: str(v) for k, v in extra_params.items()})

        redacted = {k: v for k, v in params.items() if k != "apikey"}
        logger.debug(f"[EXPLORER] GET {self._base_url} params={redacted}")

        try:
            resp = await self._client.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"[EXPLORER] {module}/{action} transport error: {type(e).__name__}: {e}")
            raise NetworkError(
                f"Polygonscan API request failed: {type(e).__name__}: {e}"
            ) from e

        if not 200 <= resp.status_code < 300:
            body = resp.text
            logger.warning(f"[EXPLORER] HTTP {resp.status_code} for {module}/{action}: {body[:200]}")
            raise NetworkError(
                f"Polygonscan API request failed: {resp.status_code}",
                status=resp.status_code,
                body=body,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError("Polygonscan API error: response is not JSON") from e

        if not isinstance(data, dict):
            raise UpstreamError("Polygonscan API error: unexpected response envelope", result=data)

        if data.get("status") != SUCCESS_STATUS:
            message = _error_message(data)
            logger.debug(f"[EXPLORER] {module}/{action} status={data.get('status')}: {message}")
            raise UpstreamError(f"Polygonscan API error: {message}", result=data.get("result"))

        return data.get("result")


def _error_message(data: dict) -> str:
    """Provider message, plus the detail Polygonscan puts in ``result`` for NOTOK."""
    message = data.get("message") or "Unknown error"
    detail = data.get("result")
    if isinstance(detail, str) and detail and detail != message:
        return f"{message} ({detail})"
    return message
