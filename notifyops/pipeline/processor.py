"""
Background processing of enriched issues: summarize, render, notify.
"""

import asyncio
import logging
import time
from typing import Optional, Set

from ..exceptions import NotifyOpsError
from ..models.issue import EnrichedIssue
from ..monitoring import MetricsRecorder, NullMetrics
from ..notifications.renderer import NotificationRenderer
from ..prompts.registry import StyleRegistry
from ..slack.notifier import SlackNotifier
from ..summarization.engine import SummarizationEngine

logger = logging.getLogger(__name__)


class IssueProcessor:
    """Runs the post-enrichment pipeline as detached tasks.

    At most ``max_concurrent`` runs execute at once; further dispatches wait
    for a slot. Each run reads the current prompt style once, at its start.
    Failures end that run only and never reach the webhook caller.
    """

    def __init__(self,
                 engine: SummarizationEngine,
                 renderer: NotificationRenderer,
                 notifier: SlackNotifier,
                 styles: StyleRegistry,
                 metrics: Optional[MetricsRecorder] = None,
                 max_concurrent: int = 8):
        if max_concurrent <= 0:
            raise ValueError("max_concurrent must be positive")
        self.engine = engine
        self.renderer = renderer
        self.notifier = notifier
        self.styles = styles
        self.metrics = metrics or NullMetrics()
        self.max_concurrent = max_concurrent
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Dispatched runs that have not finished yet."""
        return len(self._tasks)

    def dispatch(self, issue: EnrichedIssue) -> asyncio.Task:
        """Schedule a pipeline run for ``issue`` and return immediately."""
        task = asyncio.create_task(self._run(issue), name=f"process-{issue.subject}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def process(self, issue: EnrichedIssue) -> bool:
        """Run the pipeline for ``issue`` in the current task.

        Returns True when the notification was posted.
        """
        start = time.monotonic()
        repository = issue.repository.full_name
        snapshot = self.styles.snapshot()

        try:
            summary = await self.engine.summarize_issue(issue, snapshot.style)
            document = self.renderer.render(summary, issue)
            await self.notifier.send_notification(document)
        except NotifyOpsError as e:
            self.metrics.record_issue_processed(repository, "error", time.monotonic() - start)
            logger.error(f"Processing {issue.subject} failed [{e.error_code}]: {e}")
            return False

        duration = time.monotonic() - start
        self.metrics.record_issue_processed(repository, "success", duration)
        logger.info(
            f"Processed {issue.subject} ({issue.event_type}/{issue.action}) in {duration:.2f}s "
            f"with style {snapshot.name} v{snapshot.version}"
        )
        return True

    async def _run(self, issue: EnrichedIssue) -> None:
        async with self._semaphore:
            try:
                await self.process(issue)
            except asyncio.CancelledError:
                logger.warning(f"Processing of {issue.subject} was cancelled")
                raise
            except Exception:
                self.metrics.record_issue_processed(issue.repository.full_name, "error", 0.0)
                logger.exception(f"Unexpected error while processing {issue.subject}")

    async def drain(self, timeout: Optional[float] = None) -> None:
        """Wait for dispatched runs; cancel whatever is left after ``timeout``."""
        if not self._tasks:
            return
        tasks = set(self._tasks)
        logger.info(f"Waiting for {len(tasks)} pipeline run(s) to finish")
        _, still_running = await asyncio.wait(tasks, timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            logger.warning(f"Cancelled {len(still_running)} pipeline run(s) at shutdown")
            await asyncio.gather(*still_running, return_exceptions=True)
