"""
Tests for the in-memory metrics recorder.
"""

import threading

import pytest

from notifyops.monitoring import InMemoryMetrics, MetricsRecorder, NullMetrics


class TestInMemoryMetrics:

    def test_counts_by_label_set(self):
        metrics = InMemoryMetrics()
        metrics.record_github_webhook("issues", "opened", "success", 0.2)
        metrics.record_github_webhook("issues", "opened", "success", 0.4)
        metrics.record_github_webhook("issues", "labeled", "skipped", 0.0)

        assert metrics.count("github_webhooks_total", "issues", "opened", "success") == 2
        assert metrics.count("github_webhooks_total", "issues", "labeled", "skipped") == 1
        assert metrics.count("github_webhooks_total", "issue_comment", "created", "success") == 0

    def test_tokens_accumulate(self):
        metrics = InMemoryMetrics()
        metrics.record_llm_tokens("m", "prompt", 100)
        metrics.record_llm_tokens("m", "prompt", 50)
        assert metrics.count("llm_tokens_used_total", "m", "prompt") == 150

    def test_snapshot(self):
        metrics = InMemoryMetrics()
        metrics.record_slack_message("C1", "issue_summary", "success", 0.5)
        metrics.record_slack_message("C1", "issue_summary", "success", 1.5)

        family = metrics.snapshot()["slack_messages_sent_total"]

        assert family["labels"] == ["channel", "message_type", "status"]
        assert family["series"] == [{
            "channel": "C1", "message_type": "issue_summary", "status": "success",
            "count": 2, "sum_seconds": 2.0, "max_seconds": 1.5,
        }]
        assert metrics.snapshot()["issues_processed_total"]["series"] == []

    def test_durations_are_aggregated_not_stored(self):
        metrics = InMemoryMetrics()
        for _ in range(10000):
            metrics.record_github_webhook("issues", "opened", "success", 0.01)
        metrics.record_github_webhook("issues", "opened", "success", 0.5)

        family = metrics._families["github_webhooks_total"]
        key = ("issues", "opened", "success")

        assert family.counts[key] == 10001
        assert family.duration_sums[key] == pytest.approx(100.5)
        assert family.duration_maxes[key] == 0.5
        assert len(family.duration_sums) == 1

    def test_thread_safety(self):
        metrics = InMemoryMetrics()

        def work():
            for _ in range(1000):
                metrics.record_llm_error("timeout")

        threads = [threading.Thread(target=work) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert metrics.count("llm_api_errors_total", "timeout") == 4000

    def test_recorders_satisfy_protocol(self):
        recorder: MetricsRecorder = NullMetrics()
        recorder.record_issue_processed("acme/webapp", "success", 1.0)
        recorder.record_summary_generated("acme/webapp")
