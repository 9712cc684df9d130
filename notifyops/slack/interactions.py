"""
Handling of Slack interactive callbacks (button clicks on issue notifications).
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import ValidationError

from .notifier import SlackNotifier
from ..exceptions import (
    InteractionPayloadError, NotificationError, NotifyOpsError, GitHubAPIError
)
from ..github.enricher import ContextEnricher
from ..models.interaction import InteractionPayload
from ..models.issue import RepositoryRef
from ..monitoring import MetricsRecorder, NullMetrics
from ..notifications.renderer import REVIEW_ACTION_ID, SUGGEST_FIX_ACTION_ID
from ..prompts.registry import StyleRegistry
from ..summarization.engine import SummarizationEngine
from ..utils import split_repository

logger = logging.getLogger(__name__)

REVIEW_ACK_TEXT = ":mag: Review thread started! (AI insights coming soon)"
INVALID_ISSUE_TEXT = ":warning: Could not parse issue information."
INVALID_NUMBER_TEXT = ":warning: Could not parse issue number."
FETCH_FAILED_TEXT = ":warning: Could not fetch issue data for fix suggestion."
SUMMARY_FAILED_TEXT = ":warning: AI could not generate a fix suggestion."

# Internal error codes; the user sees the matching warning text only.
INVALID_ACTION_VALUE = "invalid_action_value"
INVALID_ISSUE_NUMBER = "invalid_issue_number"
ISSUE_FETCH_FAILED = "issue_fetch_failed"
SUMMARIZATION_FAILED = "summarization_failed"
REPLY_FAILED = "reply_failed"


def format_fix_reply(suggested_fix: str) -> str:
    return f":wrench: *Suggested Fix:*\n```\n{suggested_fix}\n```"


def parse_interaction_payload(raw: Optional[str]) -> InteractionPayload:
    """Decode the ``payload`` form field."""
    if not raw:
        raise InteractionPayloadError("missing payload field")
    try:
        return InteractionPayload.model_validate_json(raw)
    except ValidationError as e:
        raise InteractionPayloadError("payload is not a valid interaction payload", cause=e)


class InvalidActionValue(ValueError):
    """A button value that does not identify an issue."""

    def __init__(self, error_code: str, reply_text: str, value: str):
        super().__init__(f"{error_code}: {value!r}")
        self.error_code = error_code
        self.reply_text = reply_text


def parse_action_value(value: str) -> Tuple[RepositoryRef, int]:
    """Split ``owner/repo:number`` into a repository and issue number."""
    repo, separator, number_part = value.partition(":")
    if not separator or split_repository(repo) is None:
        raise InvalidActionValue(INVALID_ACTION_VALUE, INVALID_ISSUE_TEXT, value)
    try:
        number = int(number_part)
    except ValueError:
        raise InvalidActionValue(INVALID_ISSUE_NUMBER, INVALID_NUMBER_TEXT, value)
    if number <= 0:
        raise InvalidActionValue(INVALID_ISSUE_NUMBER, INVALID_NUMBER_TEXT, value)
    return RepositoryRef.from_full_name(repo), number


@dataclass(frozen=True)
class InteractionOutcome:
    """What a callback did, for logging and tests."""
    action_id: str
    status: str
    error_code: Optional[str] = None


class InteractionHandler:
    """Dispatches interactive callbacks.

    Business failures never surface as errors: they become threaded warning
    replies and the callback is still acknowledged.
    """

    def __init__(self,
                 notifier: SlackNotifier,
                 enricher: ContextEnricher,
                 engine: SummarizationEngine,
                 styles: StyleRegistry,
                 metrics: Optional[MetricsRecorder] = None):
        self.notifier = notifier
        self.enricher = enricher
        self.engine = engine
        self.styles = styles
        self.metrics = metrics or NullMetrics()

    async def handle(self, payload: InteractionPayload) -> InteractionOutcome:
        action = payload.first_action
        if action is None:
            logger.warning("Interactive payload without actions")
            return InteractionOutcome(action_id="", status="ignored")

        logger.info(
            f"Slack action {action.action_id!r} from user {payload.user.id} "
            f"in {payload.channel.id} (ts={payload.message.ts})"
        )

        if action.action_id == REVIEW_ACTION_ID:
            return await self._handle_review(payload)
        if action.action_id == SUGGEST_FIX_ACTION_ID:
            return await self._handle_suggest_fix(payload, action.value)

        logger.info(f"Unhandled Slack action: {action.action_id!r}")
        return InteractionOutcome(action_id=action.action_id, status="ignored")

    async def _handle_review(self, payload: InteractionPayload) -> InteractionOutcome:
        if not await self._reply(payload, REVIEW_ACK_TEXT):
            return InteractionOutcome(REVIEW_ACTION_ID, "error", REPLY_FAILED)
        return InteractionOutcome(REVIEW_ACTION_ID, "success")

    async def _handle_suggest_fix(self, payload: InteractionPayload,
                                  value: str) -> InteractionOutcome:
        try:
            repository, number = parse_action_value(value)
        except InvalidActionValue as e:
            return await self._fail(payload, e.error_code, e.reply_text, f"bad action value: {e}")

        subject = f"{repository.full_name}#{number}"
        try:
            enriched = await self.enricher.fetch_enriched_issue(repository, number)
        except GitHubAPIError as e:
            return await self._fail(payload, ISSUE_FETCH_FAILED, FETCH_FAILED_TEXT,
                                    f"could not fetch {subject}: {e}")

        snapshot = self.styles.snapshot()
        try:
            summary = await self.engine.summarize_issue(enriched, snapshot.style)
        except NotifyOpsError as e:
            return await self._fail(payload, SUMMARIZATION_FAILED, SUMMARY_FAILED_TEXT,
                                    f"summarization failed for {subject}: {e}")

        if not await self._reply(payload, format_fix_reply(summary.suggested_fix)):
            return InteractionOutcome(SUGGEST_FIX_ACTION_ID, "error", REPLY_FAILED)

        logger.info(f"Posted fix suggestion for {subject} (style {snapshot.name} v{snapshot.version})")
        return InteractionOutcome(SUGGEST_FIX_ACTION_ID, "success")

    async def _fail(self, payload: InteractionPayload, error_code: str, reply_text: str,
                    log_message: str) -> InteractionOutcome:
        logger.error(f"suggest_fix {error_code}: {log_message}")
        self.metrics.record_slack_error(SUGGEST_FIX_ACTION_ID, error_code)
        await self._reply(payload, reply_text)
        return InteractionOutcome(SUGGEST_FIX_ACTION_ID, "error", error_code)

    async def _reply(self, payload: InteractionPayload, text: str) -> bool:
        try:
            await self.notifier.post_thread_reply(payload.channel.id, payload.message.ts, text)
        except NotificationError as e:
            logger.error(f"{REPLY_FAILED}: could not reply in thread {payload.message.ts}: {e}")
            self.metrics.record_slack_error("interaction_reply", REPLY_FAILED)
            return False
        return True
