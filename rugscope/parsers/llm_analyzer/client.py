"""Markdown risk report via an OpenAI-compatible chat completions API.

Defaults to DeepSeek (``deepseek-chat``). One request per report, no retry:
the caller turns any failure into an error response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from loguru import logger

from rugscope.models.token import TokenData
from rugscope.parsers.exceptions import AnalysisError
from rugscope.parsers.llm_analyzer.prompts import SYSTEM_PROMPT, build_user_prompt

if TYPE_CHECKING:
    from config.settings import Settings


class ReportGenerator:
    """Token risk report via chat completions (DeepSeek by default)."""

    BASE_URL = "https://api.deepseek.com/v1"

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        base_url: str = BASE_URL,
        temperature: float = 0.3,
        max_tokens: int = 4000,
        timeout: float = 120.0,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
        )

    @classmethod
    def from_settings(cls, cfg: Settings) -> ReportGenerator:
        return cls(
            api_key=cfg.llm_api_key,
            model=cfg.llm_model,
            base_url=cfg.llm_base_url,
            temperature=cfg.llm_temperature,
            max_tokens=cfg.llm_max_tokens,
            timeout=cfg.llm_timeout_sec,
        )

    async def generate(self, token_data: TokenData) -> str:
        """Return the raw markdown report for ``token_data``.

        The section layout is requested in the prompt only; the returned text
        is not validated.
        """
        token_json = token_data.model_dump_json(by_alias=True, indent=2)
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(token_json)},
            ],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }

        try:
            resp = await self._client.post("/chat/completions", json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"[LLM] {type(e).__name__}: {e}")
            raise AnalysisError(f"LLM request failed: {type(e).__name__}: {e}") from e

        if resp.status_code != 200:
            logger.warning(f"[LLM] API error: {resp.status_code} {resp.text[:200]}")
            raise AnalysisError(f"LLM request failed: {resp.status_code}")

        try:
            data = resp.json()
            content = data.get("choices", [{}])[0].get("message", {}).get("content") or ""
        except (ValueError, AttributeError, IndexError, TypeError) as e:
            raise AnalysisError(f"LLM returned a malformed response: {e}") from e

        if not isinstance(content, str) or not content.strip():
            raise AnalysisError("LLM returned an empty analysis")

        usage = data.get("usage") or {}
        logger.info(
            f"[LLM] Report for {token_data.token_info.symbol}: {len(content)} chars, "
            f"tokens={usage.get('total_tokens', '?')}"
        )
        return content

    async def close(self) -> None:
        await self._client.aclose()
