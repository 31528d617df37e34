"""Tests for the markdown report generator."""

from unittest.mock import AsyncMock

import httpx
import pytest

from rugscope.models.token import Holder, TokenData, TokenInfo
from rugscope.parsers.exceptions import AnalysisError
from rugscope.parsers.llm_analyzer.client import ReportGenerator
from rugscope.parsers.llm_analyzer.prompts import SYSTEM_PROMPT


@pytest.fixture
def token_data(token_address) -> TokenData:
    return TokenData(
        token_info=TokenInfo(
            address=token_address, name="Test Dollar", symbol="TUSD", decimals=6, total_supply="10.0"
        ),
        holders=[Holder(account="0xabc", amount=7.5, percentage=75.0)],
        transactions=[],
        source_code={"ContractName": "TestDollar"},
    )


@pytest.fixture
def generator() -> ReportGenerator:
    gen = ReportGenerator(api_key="sk-test")
    gen._client = AsyncMock()
    return gen


def _completion(content: str | None) -> dict:
    return {
        "choices": [{"message": {"role": "assistant", "content": content}}],
        "usage": {"total_tokens": 1234},
    }


class TestReportGenerator:
    @pytest.mark.asyncio
    async def test_returns_markdown(self, generator, token_data, http_response) -> None:
        report = "# Token Analysis Report\n\nRisk Score: 72"
        generator._client.post = AsyncMock(return_value=http_response(200, _completion(report)))

        assert await generator.generate(token_data) == report

    @pytest.mark.asyncio
    async def test_request_payload(self, generator, token_data, http_response) -> None:
        generator._client.post = AsyncMock(return_value=http_response(200, _completion("ok")))

        await generator.generate(token_data)

        path = generator._client.post.call_args.args[0]
        payload = generator._client.post.call_args.kwargs["json"]
        assert path == "/chat/completions"
        assert payload["model"] == "deepseek-chat"
        assert payload["temperature"] == 0.3
        assert payload["max_tokens"] == 4000
        system, user = payload["messages"]
        assert system == {"role": "system", "content": SYSTEM_PROMPT}
        assert user["role"] == "user"
        assert '"tokenInfo"' in user["content"]
        assert '"sourceCode"' in user["content"]
        assert "## 7. Overall Risk Score" in user["content"]

    @pytest.mark.asyncio
    async def test_empty_content(self, generator, token_data, http_response) -> None:
        generator._client.post = AsyncMock(return_value=http_response(200, _completion("   ")))

        with pytest.raises(AnalysisError, match="empty"):
            await generator.generate(token_data)

    @pytest.mark.asyncio
    async def test_no_choices(self, generator, token_data, http_response) -> None:
        generator._client.post = AsyncMock(return_value=http_response(200, {"choices": []}))

        with pytest.raises(AnalysisError):
            await generator.generate(token_data)

    @pytest.mark.asyncio
    async def test_http_error(self, generator, token_data, http_response) -> None:
        generator._client.post = AsyncMock(return_value=http_response(401, None, text="unauthorized"))

        with pytest.raises(AnalysisError, match="401"):
            await generator.generate(token_data)

    @pytest.mark.asyncio
    async def test_timeout_not_retried(self, generator, token_data) -> None:
        generator._client.post = AsyncMock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(AnalysisError, match="ReadTimeout"):
            await generator.generate(token_data)

        assert generator._client.post.await_count == 1
