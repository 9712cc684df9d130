"""
Base exception types for NotifyOps.
"""

from typing import Any, Dict, Optional


def create_error_context(**fields: Any) -> Dict[str, Any]:
    """Build an error context dict, dropping fields that are not set."""
    return {key: value for key, value in fields.items() if value is not None}


class NotifyOpsError(Exception):
    """Base class for all NotifyOps errors.

    Every error carries a machine-readable ``error_code`` and a context dict
    used for structured logging and metrics labels.
    """

    def __init__(self,
                 message: str,
                 error_code: str = "NOTIFYOPS_ERROR",
                 context: Optional[Dict[str, Any]] = None,
                 user_message: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.user_message = user_message
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and API responses."""
        data = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.context:
            data["context"] = self.context
        if self.user_message:
            data["user_message"] = self.user_message
        return data

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} (caused by {type(self.cause).__name__}: {self.cause})"
        return self.message


class ConfigurationError(NotifyOpsError):
    """Raised when the service configuration is missing or invalid."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="CONFIGURATION_ERROR", context=context)
        self.errors = errors or []


class UnknownPromptStyleError(NotifyOpsError):
    """A prompt style name is not in the catalog."""

    def __init__(self, name: str, available: Optional[list] = None):
        super().__init__(
            f"Unknown prompt style: {name}",
            error_code="UNKNOWN_PROMPT_STYLE",
            context={"style": name},
            user_message="Invalid prompt style",
        )
        self.name = name
        self.available = available or []
