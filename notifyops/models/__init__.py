"""
Data models for NotifyOps.

Domain objects are frozen dataclasses; wire formats received from GitHub and
Slack are pydantic models.
"""

from .base import BaseModel, utc_now
from .issue import (
    EnrichedIssue, IssueDetails, IssueComment, CommitInfo, CommitFile,
    RepositoryRef, FetchOutcome, FetchStatus
)
from .summary import IssueSummary, Priority, Category
from .notification import (
    NotificationDocument, Block, HeaderBlock, SectionBlock, ActionsBlock,
    Button, ButtonStyle, TextObject, TextFormat
)
from .interaction import InteractionPayload, BlockAction

__all__ = [
    # Base
    'BaseModel',
    'utc_now',

    # Issue models
    'EnrichedIssue',
    'IssueDetails',
    'IssueComment',
    'CommitInfo',
    'CommitFile',
    'RepositoryRef',
    'FetchOutcome',
    'FetchStatus',

    # Summary models
    'IssueSummary',
    'Priority',
    'Category',

    # Notification document
    'NotificationDocument',
    'Block',
    'HeaderBlock',
    'SectionBlock',
    'ActionsBlock',
    'Button',
    'ButtonStyle',
    'TextObject',
    'TextFormat',

    # Interactive callbacks
    'InteractionPayload',
    'BlockAction',
]
