"""
Metrics recording for NotifyOps.

Components depend only on the ``MetricsRecorder`` protocol. ``InMemoryMetrics``
keeps counters and duration totals in process and is what ``GET /metrics``
reports; exporting to an external backend is left to the deployment.
"""

import threading
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, Tuple


class MetricsRecorder(Protocol):
    """Narrow recording interface used throughout the pipeline."""

    def record_github_webhook(self, event_type: str, action: str, status: str,
                              duration: float) -> None: ...

    def record_github_api_error(self, operation: str, error_type: str) -> None: ...

    def record_llm_request(self, model: str, status: str, duration: float) -> None: ...

    def record_llm_tokens(self, model: str, token_type: str, count: int) -> None: ...

    def record_llm_error(self, error_type: str) -> None: ...

    def record_slack_message(self, channel: str, message_type: str, status: str,
                             duration: float) -> None: ...

    def record_slack_error(self, operation: str, error_type: str) -> None: ...

    def record_issue_processed(self, repository: str, status: str, duration: float) -> None: ...

    def record_summary_generated(self, repository: str) -> None: ...


class NullMetrics:
    """Recorder that discards everything."""

    def record_github_webhook(self, event_type, action, status, duration):
        pass

    def record_github_api_error(self, operation, error_type):
        pass

    def record_llm_request(self, model, status, duration):
        pass

    def record_llm_tokens(self, model, token_type, count):
        pass

    def record_llm_error(self, error_type):
        pass

    def record_slack_message(self, channel, message_type, status, duration):
        pass

    def record_slack_error(self, operation, error_type):
        pass

    def record_issue_processed(self, repository, status, duration):
        pass

    def record_summary_generated(self, repository):
        pass


LabelKey = Tuple[str, ...]


@dataclass
class MetricFamily:
    """A named counter with optional duration totals per label set.

    Durations are folded into a running sum and maximum, so memory grows
    with the number of label sets only.
    """
    name: str
    labels: Tuple[str, ...]
    counts: Dict[LabelKey, int] = field(default_factory=lambda: defaultdict(int))
    duration_sums: Dict[LabelKey, float] = field(default_factory=dict)
    duration_maxes: Dict[LabelKey, float] = field(default_factory=dict)

    def inc(self, key: LabelKey, amount: int = 1) -> None:
        self.counts[key] += amount

    def observe(self, key: LabelKey, value: float) -> None:
        self.duration_sums[key] = self.duration_sums.get(key, 0.0) + value
        self.duration_maxes[key] = max(self.duration_maxes.get(key, value), value)

    def to_dict(self) -> Dict[str, Any]:
        series = []
        for key in sorted(set(self.counts) | set(self.duration_sums)):
            entry: Dict[str, Any] = dict(zip(self.labels, key))
            entry["count"] = self.counts.get(key, 0)
            if key in self.duration_sums:
                entry["sum_seconds"] = round(self.duration_sums[key], 6)
                entry["max_seconds"] = round(self.duration_maxes[key], 6)
            series.append(entry)
        return {"labels": list(self.labels), "series": series}


class InMemoryMetrics:
    """Thread-safe in-process metrics recorder."""

    def __init__(self):
        self._lock = threading.Lock()
        self._families: Dict[str, MetricFamily] = {}
        self._register("github_webhooks_total", ("event_type", "action", "status"))
        self._register("github_api_errors_total", ("operation", "error_type"))
        self._register("llm_requests_total", ("model", "status"))
        self._register("llm_tokens_used_total", ("model", "token_type"))
        self._register("llm_api_errors_total", ("error_type",))
        self._register("slack_messages_sent_total", ("channel", "message_type", "status"))
        self._register("slack_api_errors_total", ("operation", "error_type"))
        self._register("issues_processed_total", ("repository", "status"))
        self._register("issue_summaries_generated_total", ("repository",))

    def _register(self, name: str, labels: Tuple[str, ...]) -> None:
        self._families[name] = MetricFamily(name=name, labels=labels)

    def _inc(self, name: str, key: LabelKey, amount: int = 1) -> None:
        with self._lock:
            self._families[name].inc(key, amount)

    def _inc_observe(self, name: str, key: LabelKey, duration: float) -> None:
        with self._lock:
            family = self._families[name]
            family.inc(key)
            family.observe(key, duration)

    def record_github_webhook(self, event_type: str, action: str, status: str,
                              duration: float) -> None:
        self._inc_observe("github_webhooks_total", (event_type, action, status), duration)

    def record_github_api_error(self, operation: str, error_type: str) -> None:
        self._inc("github_api_errors_total", (operation, error_type))

    def record_llm_request(self, model: str, status: str, duration: float) -> None:
        self._inc_observe("llm_requests_total", (model, status), duration)

    def record_llm_tokens(self, model: str, token_type: str, count: int) -> None:
        self._inc("llm_tokens_used_total", (model, token_type), count)

    def record_llm_error(self, error_type: str) -> None:
        self._inc("llm_api_errors_total", (error_type,))

    def record_slack_message(self, channel: str, message_type: str, status: str,
                             duration: float) -> None:
        self._inc_observe("slack_messages_sent_total", (channel, message_type, status), duration)

    def record_slack_error(self, operation: str, error_type: str) -> None:
        self._inc("slack_api_errors_total", (operation, error_type))

    def record_issue_processed(self, repository: str, status: str, duration: float) -> None:
        self._inc_observe("issues_processed_total", (repository, status), duration)

    def record_summary_generated(self, repository: str) -> None:
        self._inc("issue_summaries_generated_total", (repository,))

    def count(self, name: str, *labels: str) -> int:
        """Current count for one label set (mostly for tests and health checks)."""
        with self._lock:
            return self._families[name].counts.get(tuple(labels), 0)

    def snapshot(self) -> Dict[str, Any]:
        """All metric families as a JSON-serializable dict."""
        with self._lock:
            return {name: family.to_dict() for name, family in self._families.items()}
