"""
Errors raised by the summarization layer.
"""

from typing import Any, Dict, Optional

from .base import NotifyOpsError


class SummarizationError(NotifyOpsError):
    """Summarization of an issue failed."""

    def __init__(self, message: str, error_code: str = "SUMMARIZATION_FAILED",
                 context: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, error_code=error_code, context=context, cause=cause)


class LLMAPIError(SummarizationError):
    """The chat-completion backend rejected or failed the request."""

    def __init__(self, message: str, api_error_code: str = "api_error",
                 context: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, error_code="LLM_API_ERROR", context=context, cause=cause)
        self.api_error_code = api_error_code


class ResponseParseError(SummarizationError):
    """The model response did not contain a valid summary document."""

    def __init__(self, reason: str, response_preview: str = "",
                 cause: Optional[BaseException] = None):
        super().__init__(
            message=f"Failed to parse model response: {reason}",
            error_code="RESPONSE_PARSE_FAILED",
            context={"response_preview": response_preview[:200]} if response_preview else None,
            cause=cause,
        )
        self.reason = reason
