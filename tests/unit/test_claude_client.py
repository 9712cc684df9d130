"""
Tests for ClaudeClient and SummarizationEngine.
"""

import json
from types import SimpleNamespace

import anthropic
import httpx
import pytest

from notifyops.exceptions import LLMAPIError, ResponseParseError
from notifyops.prompts import get_style
from notifyops.summarization import ClaudeClient, ClaudeOptions, SummarizationEngine

from conftest import FakeClaudeClient, SUMMARY_JSON

REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def api_status_error(cls, status: int, message: str = "error"):
    return cls(message, response=httpx.Response(status, request=REQUEST), body=None)


def sdk_message(text: str, stop_reason: str = "end_turn"):
    return SimpleNamespace(
        id="msg_01",
        model="claude-sonnet-4-5",
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=300, output_tokens=120),
        stop_reason=stop_reason,
    )


class StubbedClaudeClient(ClaudeClient):
    """ClaudeClient with the network call replaced."""

    def __init__(self, result, **kwargs):
        super().__init__(api_key="sk-ant-test-key-0000", **kwargs)
        self.result = result
        self.requests = []

    async def _make_request(self, params):
        self.requests.append(params)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class TestClaudeClient:
    """Tests for ClaudeClient.create_summary."""

    @pytest.mark.asyncio
    async def test_success(self, metrics):
        client = StubbedClaudeClient(sdk_message('{"title": "T"}'), metrics=metrics)
        options = ClaudeOptions(model="claude-sonnet-4-5", max_tokens=2000, temperature=0.7)

        response = await client.create_summary("user prompt", "system prompt", options)

        assert response.content == '{"title": "T"}'
        assert response.total_tokens == 420
        assert response.is_complete()
        params = client.requests[0]
        assert params["system"] == "system prompt"
        assert params["messages"] == [{"role": "user", "content": "user prompt"}]
        assert params["max_tokens"] == 2000
        assert metrics.count("llm_requests_total", "claude-sonnet-4-5", "success") == 1
        assert metrics.count("llm_tokens_used_total", "claude-sonnet-4-5", "prompt") == 300
        assert metrics.count("llm_tokens_used_total", "claude-sonnet-4-5", "completion") == 120
        assert metrics.count("llm_tokens_used_total", "claude-sonnet-4-5", "total") == 420

    @pytest.mark.asyncio
    async def test_truncated_response(self):
        client = StubbedClaudeClient(sdk_message("{", stop_reason="max_tokens"))
        response = await client.create_summary("p", "s", ClaudeOptions())
        assert not response.is_complete()

    @pytest.mark.asyncio
    async def test_empty_content(self):
        message = sdk_message("")
        message.content = []
        response = await StubbedClaudeClient(message).create_summary("p", "s", ClaudeOptions())
        assert response.content == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error,expected", [
        (api_status_error(anthropic.RateLimitError, 429), "rate_limited"),
        (api_status_error(anthropic.AuthenticationError, 401), "authentication_error"),
        (api_status_error(anthropic.NotFoundError, 404), "model_unavailable"),
        (api_status_error(anthropic.BadRequestError, 400, "maximum context length exceeded"),
         "context_length_exceeded"),
        (api_status_error(anthropic.BadRequestError, 400), "bad_request"),
        (api_status_error(anthropic.InternalServerError, 500), "api_error"),
        (anthropic.APITimeoutError(request=REQUEST), "timeout"),
        (anthropic.APIConnectionError(request=REQUEST), "network_error"),
    ])
    async def test_errors_are_classified(self, metrics, error, expected):
        client = StubbedClaudeClient(error, metrics=metrics)

        with pytest.raises(LLMAPIError) as exc_info:
            await client.create_summary("p", "s", ClaudeOptions(model="m"))

        assert exc_info.value.api_error_code == expected
        assert exc_info.value.cause is error
        assert metrics.count("llm_api_errors_total", expected) == 1
        assert metrics.count("llm_requests_total", "m", "error") == 1
        assert len(client.requests) == 1

    def test_sdk_retries_disabled(self):
        client = ClaudeClient(api_key="sk-ant-test-key-0000")
        assert client._client.max_retries == 0


class TestSummarizationEngine:
    """Tests for SummarizationEngine.summarize_issue."""

    @pytest.mark.asyncio
    async def test_summarize(self, enriched_issue, metrics):
        claude = FakeClaudeClient()
        engine = SummarizationEngine(claude, options=ClaudeOptions(model="m"), metrics=metrics)

        summary = await engine.summarize_issue(enriched_issue, get_style("security_expert"))

        assert summary.title == SUMMARY_JSON["title"]
        call = claude.calls[0]
        assert call["options"].model == "m"
        assert call["system_prompt"].startswith("You are a SECURITY EXPERT")
        assert "Issue #42: Login fails with SSO" in call["prompt"]
        assert metrics.count("issue_summaries_generated_total", "acme/webapp") == 1

    @pytest.mark.asyncio
    async def test_api_error_propagates(self, enriched_issue, llm_error, metrics):
        engine = SummarizationEngine(FakeClaudeClient(error=llm_error), metrics=metrics)

        with pytest.raises(LLMAPIError):
            await engine.summarize_issue(enriched_issue, get_style("master_analyst"))

        assert metrics.count("issue_summaries_generated_total", "acme/webapp") == 0

    @pytest.mark.asyncio
    async def test_parse_error(self, enriched_issue, metrics):
        engine = SummarizationEngine(FakeClaudeClient(content="Sorry, no JSON today."),
                                     metrics=metrics)

        with pytest.raises(ResponseParseError) as exc_info:
            await engine.summarize_issue(enriched_issue, get_style("master_analyst"))

        assert exc_info.value.context["subject"] == "acme/webapp:42"
        assert metrics.count("llm_api_errors_total", "parse_error") == 1

    @pytest.mark.asyncio
    async def test_fenced_response(self, enriched_issue):
        content = "```json\n" + json.dumps(SUMMARY_JSON) + "\n```"
        engine = SummarizationEngine(FakeClaudeClient(content=content))

        summary = await engine.summarize_issue(enriched_issue, get_style("master_analyst"))

        assert summary.priority == "high"
