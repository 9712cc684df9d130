"""
Outbound Slack messaging.
"""

import asyncio
import logging
import time
from typing import Optional, Union

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from .blocks import to_slack_blocks
from ..exceptions import NotificationError
from ..models.notification import NotificationDocument
from ..monitoring import MetricsRecorder, NullMetrics

logger = logging.getLogger(__name__)


# AsyncWebClient lets aiohttp transport errors through unwrapped.
SLACK_SEND_ERRORS = (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError)

SlackFailure = Union[SlackClientError, aiohttp.ClientError, asyncio.TimeoutError]


def slack_error_type(error: SlackFailure) -> str:
    """Metric label for a Slack client failure."""
    if isinstance(error, SlackApiError):
        return str(error.response.get("error", "api_error"))
    return "network_error"


class SlackNotifier:
    """Posts issue notifications and threaded replies to Slack."""

    def __init__(self,
                 client: AsyncWebClient,
                 channel_id: str,
                 metrics: Optional[MetricsRecorder] = None):
        self.client = client
        self.channel_id = channel_id
        self.metrics = metrics or NullMetrics()

    async def send_notification(self, document: NotificationDocument,
                                channel_id: Optional[str] = None) -> str:
        """Post ``document`` and return the message timestamp.

        All blocks are converted before anything is sent, so an unsupported
        block raises ``UnsupportedBlockError`` without a partial post.
        """
        channel = channel_id or self.channel_id
        blocks = to_slack_blocks(document)

        start = time.monotonic()
        try:
            response = await self.client.chat_postMessage(
                channel=channel,
                blocks=blocks,
                text=document.fallback_text,
            )
        except SLACK_SEND_ERRORS as e:
            self._record_failure(channel, "issue_summary", "post_message", e, start)
            raise NotificationError(
                f"Failed to post notification to {channel}: {e}",
                context={"channel": channel},
                cause=e,
            )

        self.metrics.record_slack_message(channel, "issue_summary", "success", time.monotonic() - start)
        ts = response.get("ts", "")
        logger.info(f"Posted notification to {channel} (ts={ts})")
        return ts

    async def post_thread_reply(self, channel_id: str, thread_ts: str, text: str) -> str:
        """Post a plain-text reply in the thread of ``thread_ts``."""
        start = time.monotonic()
        try:
            response = await self.client.chat_postMessage(
                channel=channel_id,
                text=text,
                thread_ts=thread_ts,
            )
        except SLACK_SEND_ERRORS as e:
            self._record_failure(channel_id, "thread_reply", "post_thread_reply", e, start)
            raise NotificationError(
                f"Failed to post thread reply to {channel_id}: {e}",
                error_code="REPLY_FAILED",
                context={"channel": channel_id, "thread_ts": thread_ts},
                cause=e,
            )

        self.metrics.record_slack_message(channel_id, "thread_reply", "success", time.monotonic() - start)
        return response.get("ts", "")

    def _record_failure(self, channel: str, message_type: str, operation: str,
                        error: SlackFailure, start: float) -> None:
        error_type = slack_error_type(error)
        self.metrics.record_slack_message(channel, message_type, "error", time.monotonic() - start)
        self.metrics.record_slack_error(operation, error_type)
        logger.error(f"Slack {operation} to {channel} failed ({error_type}): {error}")
