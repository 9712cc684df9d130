"""
Claude API client for issue summarization.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

import anthropic
from anthropic import AsyncAnthropic

from ..config.constants import DEFAULT_LLM_MODEL, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..exceptions import LLMAPIError
from ..models.base import BaseModel, utc_now
from ..monitoring import MetricsRecorder, NullMetrics
from ..utils import mask_secret

logger = logging.getLogger(__name__)


@dataclass
class ClaudeOptions(BaseModel):
    """Options for Claude API requests."""
    model: str = DEFAULT_LLM_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE


@dataclass
class ClaudeResponse(BaseModel):
    """Response from Claude API."""
    content: str
    model: str
    usage: Dict[str, int]
    stop_reason: str
    response_id: str = ""
    created_at: datetime = field(default_factory=utc_now)

    @property
    def input_tokens(self) -> int:
        return self.usage.get("input_tokens", 0)

    @property
    def output_tokens(self) -> int:
        return self.usage.get("output_tokens", 0)

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def is_complete(self) -> bool:
        """Check if response was completed (not truncated)."""
        return self.stop_reason != "max_tokens"


class ClaudeClient:
    """Client for interacting with Claude API.

    Each call is a single attempt: SDK retries are disabled and failures are
    reported to the caller as ``LLMAPIError``.
    """

    def __init__(self, api_key: str, base_url: Optional[str] = None,
                 default_timeout: int = 120,
                 metrics: Optional[MetricsRecorder] = None):
        """Initialize Claude client.

        Args:
            api_key: Anthropic API key
            base_url: Optional custom base URL
            default_timeout: Default request timeout in seconds
            metrics: Recorder for request, token and error metrics
        """
        self.api_key = api_key
        self.base_url = base_url
        self.default_timeout = default_timeout
        self.metrics = metrics or NullMetrics()

        logger.info(f"ClaudeClient initialized with API key: {mask_secret(api_key)}, base_url: {base_url}")

        client_kwargs = {"api_key": api_key, "timeout": default_timeout, "max_retries": 0}
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = AsyncAnthropic(**client_kwargs)

    async def close(self):
        await self._client.close()

    async def create_summary(self,
                             prompt: str,
                             system_prompt: str,
                             options: ClaudeOptions) -> ClaudeResponse:
        """Send one summarization request.

        Args:
            prompt: User prompt with the issue content
            system_prompt: System prompt with style and response contract
            options: API request options

        Returns:
            ClaudeResponse with the model's text

        Raises:
            LLMAPIError: If the API request fails
        """
        request_params = self._build_request_params(prompt, system_prompt, options)
        start = time.monotonic()

        try:
            response = await self._make_request(request_params)
        except anthropic.APIError as e:
            duration = time.monotonic() - start
            error_code = self._classify_error(e)
            self.metrics.record_llm_request(options.model, "error", duration)
            self.metrics.record_llm_error(error_code)
            logger.error(f"Claude API error ({error_code}) after {duration:.2f}s: {e}")
            raise LLMAPIError(
                message=f"Claude request failed: {e}",
                api_error_code=error_code,
                context={"model": options.model},
                cause=e,
            )

        duration = time.monotonic() - start
        claude_response = self._process_response(response, options.model)

        self.metrics.record_llm_request(options.model, "success", duration)
        if claude_response.input_tokens > 0:
            self.metrics.record_llm_tokens(options.model, "prompt", claude_response.input_tokens)
            self.metrics.record_llm_tokens(options.model, "completion", claude_response.output_tokens)
            self.metrics.record_llm_tokens(options.model, "total", claude_response.total_tokens)

        logger.info(
            f"Summary created: model={claude_response.model}, "
            f"tokens={claude_response.input_tokens} in + {claude_response.output_tokens} out, "
            f"duration={duration:.2f}s"
        )
        if not claude_response.is_complete():
            logger.warning("Claude response was truncated at max_tokens")

        return claude_response

    @staticmethod
    def _classify_error(error: anthropic.APIError) -> str:
        if isinstance(error, anthropic.RateLimitError):
            return "rate_limited"
        if isinstance(error, anthropic.AuthenticationError):
            return "authentication_error"
        if isinstance(error, anthropic.APITimeoutError):
            return "timeout"
        if isinstance(error, anthropic.APIConnectionError):
            return "network_error"
        if isinstance(error, anthropic.NotFoundError):
            return "model_unavailable"
        if isinstance(error, anthropic.BadRequestError):
            if "maximum context length" in str(error).lower():
                return "context_length_exceeded"
            return "bad_request"
        return "api_error"

    def _build_request_params(self, prompt: str, system_prompt: str,
                              options: ClaudeOptions) -> Dict[str, Any]:
        return {
            "model": options.model,
            "max_tokens": options.max_tokens,
            "temperature": options.temperature,
            "system": system_prompt,
            "messages": [
                {
                    "role": "user",
                    "content": prompt
                }
            ]
        }

    async def _make_request(self, params: Dict[str, Any]) -> Any:
        """Make the actual API request."""
        return await self._client.messages.create(**params)

    def _process_response(self, response: Any, model: str) -> ClaudeResponse:
        """Process API response into ClaudeResponse object."""
        content = ""
        blocks = getattr(response, "content", None) or []
        for block in blocks:
            text = getattr(block, "text", None)
            if text:
                content = text
                break

        usage = {}
        if getattr(response, "usage", None) is not None:
            usage = {
                "input_tokens": getattr(response.usage, "input_tokens", 0) or 0,
                "output_tokens": getattr(response.usage, "output_tokens", 0) or 0,
            }

        return ClaudeResponse(
            content=content,
            model=getattr(response, "model", model) or model,
            usage=usage,
            stop_reason=getattr(response, "stop_reason", "end_turn") or "end_turn",
            response_id=getattr(response, "id", "") or "",
        )
