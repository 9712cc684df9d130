"""
Exception hierarchy for NotifyOps.
"""

from .base import NotifyOpsError, ConfigurationError, UnknownPromptStyleError, create_error_context
from .webhook import WebhookError, PayloadDecodeError, InteractionPayloadError
from .summarization import SummarizationError, LLMAPIError, ResponseParseError
from .platform import GitHubAPIError, NotificationError, UnsupportedBlockError

__all__ = [
    'NotifyOpsError',
    'ConfigurationError',
    'UnknownPromptStyleError',
    'create_error_context',
    'WebhookError',
    'PayloadDecodeError',
    'InteractionPayloadError',
    'SummarizationError',
    'LLMAPIError',
    'ResponseParseError',
    'GitHubAPIError',
    'NotificationError',
    'UnsupportedBlockError',
]
