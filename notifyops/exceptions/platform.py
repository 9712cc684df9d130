"""
Errors raised by the issue tracker and chat platform integrations.
"""

from typing import Any, Dict, Optional

from .base import NotifyOpsError


class GitHubAPIError(NotifyOpsError):
    """A GitHub REST API call failed."""

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(
            message=f"GitHub {operation} failed: {message}",
            error_code="GITHUB_API_ERROR",
            context={"operation": operation, "status_code": status_code},
            cause=cause,
        )
        self.operation = operation
        self.status_code = status_code

    @property
    def error_type(self) -> str:
        """Short label used for metrics."""
        if self.status_code is None:
            return "network_error"
        if self.status_code == 404:
            return "not_found"
        if self.status_code in (403, 429):
            return "rate_limited"
        return "api_error"


class NotificationError(NotifyOpsError):
    """Delivering a message to the chat platform failed."""

    def __init__(self, message: str, error_code: str = "NOTIFICATION_FAILED",
                 context: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, error_code=error_code, context=context, cause=cause)


class UnsupportedBlockError(NotificationError):
    """A notification document contained a block the platform cannot express."""

    def __init__(self, block_type: str, index: int):
        super().__init__(
            message=f"Unsupported block type at index {index}: {block_type}",
            error_code="UNSUPPORTED_BLOCK",
            context={"block_type": block_type, "index": index},
        )
        self.block_type = block_type
