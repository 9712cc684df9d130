"""
Errors raised while receiving inbound webhooks and callbacks.
"""

from typing import Any, Dict, Optional

from .base import NotifyOpsError


class WebhookError(NotifyOpsError):
    """Request-level webhook failure surfaced to the HTTP caller."""

    def __init__(self, message: str, error_code: str = "WEBHOOK_ERROR",
                 context: Optional[Dict[str, Any]] = None,
                 user_message: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, error_code=error_code, context=context,
                         user_message=user_message, cause=cause)


class PayloadDecodeError(WebhookError):
    """The event body could not be decoded into a supported event shape."""

    def __init__(self, event_type: str, reason: str,
                 cause: Optional[BaseException] = None):
        super().__init__(
            message=f"Failed to decode {event_type} event: {reason}",
            error_code="PAYLOAD_DECODE_FAILED",
            context={"event_type": event_type},
            cause=cause,
        )
        self.event_type = event_type


class InteractionPayloadError(WebhookError):
    """The interactive callback form or its JSON payload is unreadable."""

    def __init__(self, reason: str, cause: Optional[BaseException] = None):
        super().__init__(
            message=f"Invalid interaction payload: {reason}",
            error_code="INVALID_INTERACTION_PAYLOAD",
            user_message="Invalid interaction payload",
            cause=cause,
        )
