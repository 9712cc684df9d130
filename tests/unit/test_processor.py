"""
Tests for background issue processing.
"""

import asyncio

import pytest

from notifyops.notifications import NotificationRenderer
from notifyops.pipeline import IssueProcessor
from notifyops.prompts import StyleRegistry
from notifyops.slack import SlackNotifier
from notifyops.summarization import SummarizationEngine

from conftest import FakeClaudeClient, FakeSlackClient


class BlockingClaudeClient(FakeClaudeClient):
    """Holds every request until ``release`` is set."""

    def __init__(self):
        super().__init__()
        self.release = asyncio.Event()
        self.in_flight = 0
        self.peak = 0

    async def create_summary(self, prompt, system_prompt, options):
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await self.release.wait()
            return await super().create_summary(prompt, system_prompt, options)
        finally:
            self.in_flight -= 1


def build_processor(metrics, claude=None, slack=None, styles=None, max_concurrent=8):
    slack = slack or FakeSlackClient()
    claude = claude or FakeClaudeClient()
    processor = IssueProcessor(
        engine=SummarizationEngine(claude, metrics=metrics),
        renderer=NotificationRenderer(),
        notifier=SlackNotifier(slack, "C123", metrics),
        styles=styles or StyleRegistry(),
        metrics=metrics,
        max_concurrent=max_concurrent,
    )
    return processor, claude, slack


class TestIssueProcessor:
    """Tests for IssueProcessor."""

    @pytest.mark.asyncio
    async def test_process_posts_one_notification(self, enriched_issue, metrics):
        processor, _, slack = build_processor(metrics)

        assert await processor.process(enriched_issue) is True

        assert len(slack.calls) == 1
        assert len(slack.calls[0]["blocks"]) == 6
        assert metrics.count("issues_processed_total", "acme/webapp", "success") == 1

    @pytest.mark.asyncio
    async def test_model_failure_posts_nothing(self, enriched_issue, metrics, llm_error):
        processor, _, slack = build_processor(metrics, claude=FakeClaudeClient(error=llm_error))

        assert await processor.process(enriched_issue) is False

        assert slack.calls == []
        assert metrics.count("issues_processed_total", "acme/webapp", "error") == 1

    @pytest.mark.asyncio
    async def test_parse_failure_posts_nothing(self, enriched_issue, metrics):
        processor, _, slack = build_processor(metrics, claude=FakeClaudeClient(content="nope"))

        assert await processor.process(enriched_issue) is False
        assert slack.calls == []

    @pytest.mark.asyncio
    async def test_dispatch_and_drain(self, enriched_issue, metrics):
        processor, _, slack = build_processor(metrics)

        processor.dispatch(enriched_issue)
        processor.dispatch(enriched_issue)
        await processor.drain()

        assert len(slack.calls) == 2
        assert processor.pending == 0

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self, enriched_issue, metrics):
        claude = BlockingClaudeClient()
        processor, _, slack = build_processor(metrics, claude=claude, max_concurrent=2)

        for _ in range(5):
            processor.dispatch(enriched_issue)
        await asyncio.sleep(0.05)

        assert claude.in_flight == 2
        assert processor.pending == 5

        claude.release.set()
        await processor.drain(timeout=5)

        assert claude.peak == 2
        assert len(slack.calls) == 5

    @pytest.mark.asyncio
    async def test_style_is_read_once_per_run(self, enriched_issue, metrics):
        claude = BlockingClaudeClient()
        styles = StyleRegistry()
        processor, _, _ = build_processor(metrics, claude=claude, styles=styles)

        processor.dispatch(enriched_issue)
        await asyncio.sleep(0.05)
        styles.select("security_expert")
        claude.release.set()
        await processor.drain(timeout=5)

        assert claude.calls[0]["system_prompt"].startswith("You are a MASTER ANALYST")

    @pytest.mark.asyncio
    async def test_drain_timeout_cancels(self, enriched_issue, metrics):
        processor, _, slack = build_processor(metrics, claude=BlockingClaudeClient())

        processor.dispatch(enriched_issue)
        await asyncio.sleep(0)
        await processor.drain(timeout=0.05)

        assert processor.pending == 0
        assert slack.calls == []

    def test_rejects_non_positive_limit(self, metrics):
        with pytest.raises(ValueError):
            build_processor(metrics, max_concurrent=0)
