"""
Shared fixtures and fakes for the NotifyOps test suite.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import pytest

from notifyops.exceptions import GitHubAPIError, LLMAPIError
from notifyops.models.github import (
    GitHubIssue, GitHubComment, GitHubCommit, GitHubCommitDetail, GitHubCommitAuthor,
    GitHubCommitFile, GitHubUser
)
from notifyops.models.issue import (
    EnrichedIssue, IssueDetails, IssueComment, CommitInfo, CommitFile, RepositoryRef,
    FetchOutcome
)
from notifyops.monitoring import InMemoryMetrics
from notifyops.summarization.claude_client import ClaudeResponse

CREATED_AT = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)

SUMMARY_JSON = {
    "title": "Login fails with SSO",
    "summary": "Users authenticating through SSO get a 500 after the redirect.",
    "priority": "high",
    "category": "bug",
    "action_items": ["Reproduce with the staging IdP", "Add a regression test"],
    "code_context": "auth/sso.py callback handler",
    "suggested_fix": "Handle the missing state parameter before decoding the token.",
    "confidence": 0.85,
}


class FakeClaudeClient:
    """Stands in for ``ClaudeClient``; returns a canned response or raises."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = json.dumps(SUMMARY_JSON) if content is None else content
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create_summary(self, prompt, system_prompt, options):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, "options": options})
        if self.error is not None:
            raise self.error
        return ClaudeResponse(
            content=self.content,
            model=options.model,
            usage={"input_tokens": 120, "output_tokens": 80},
            stop_reason="end_turn",
        )

    async def close(self):
        pass


class FakeSlackClient:
    """Records ``chat_postMessage`` calls like ``AsyncWebClient`` would receive them."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def chat_postMessage(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"ok": True, "ts": f"1700000000.{len(self.calls):06d}"}


class FakeGitHubClient:
    """In-memory replacement for ``GitHubClient``.

    Any operation named in ``failures`` raises ``GitHubAPIError`` with the
    given status code. ``requests`` keeps each call with its arguments.
    """

    def __init__(self,
                 issue: Optional[GitHubIssue] = None,
                 comments: Optional[List[GitHubComment]] = None,
                 commits: Optional[List[GitHubCommit]] = None,
                 failures: Optional[Dict[str, Optional[int]]] = None):
        self.issue = issue
        self.comments = comments or []
        self.commits = {c.sha: c for c in (commits or [])}
        self.failures = failures or {}
        self.calls: List[str] = []
        self.requests: List[Tuple[str, tuple]] = []

    def _maybe_fail(self, operation: str, *args, key: str = ""):
        self.calls.append(f"{operation}:{key}" if key else operation)
        self.requests.append((operation, args))
        for name in (f"{operation}:{key}", operation):
            if name in self.failures:
                raise GitHubAPIError(operation, "simulated failure", status_code=self.failures[name])

    async def get_issue(self, owner, repo, number):
        self._maybe_fail("get_issue", owner, repo, number)
        if self.issue is None:
            raise GitHubAPIError("get_issue", "HTTP 404", status_code=404)
        return self.issue

    async def list_comments(self, owner, repo, number, per_page=100):
        self._maybe_fail("list_comments", owner, repo, number)
        return self.comments[:per_page]

    async def search_commits(self, owner, repo, number, per_page=10):
        self._maybe_fail("search_commits", owner, repo, number)
        return list(self.commits.values())[:per_page]

    async def get_commit(self, owner, repo, sha):
        self._maybe_fail("get_commit", owner, repo, sha, key=sha)
        return self.commits[sha]

    async def close(self):
        pass


def make_github_commit(sha: str, message: str = "Fix #42", files=None) -> GitHubCommit:
    return GitHubCommit(
        sha=sha,
        commit=GitHubCommitDetail(author=GitHubCommitAuthor(name="Dana"), message=message),
        files=files or [],
    )


@pytest.fixture
def metrics():
    return InMemoryMetrics()


@pytest.fixture
def issue_payload():
    """An ``issues`` webhook body as GitHub sends it (trimmed)."""
    return {
        "action": "opened",
        "issue": {
            "number": 42,
            "title": "Login fails with SSO",
            "body": "After the redirect we get a 500.",
            "state": "open",
            "user": {"login": "octocat"},
            "assignee": None,
            "labels": [{"name": "bug"}, {"name": "auth"}],
            "created_at": "2024-03-01T12:30:00Z",
            "html_url": "https://github.com/acme/webapp/issues/42",
            "repository_url": "https://api.github.com/repos/acme/webapp",
        },
        "repository": {
            "full_name": "acme/webapp",
            "name": "webapp",
            "owner": {"login": "acme"},
        },
    }


@pytest.fixture
def github_issue():
    return GitHubIssue(
        number=42,
        title="Login fails with SSO",
        body="After the redirect we get a 500.",
        state="open",
        user=GitHubUser(login="octocat"),
        created_at=CREATED_AT,
        html_url="https://github.com/acme/webapp/issues/42",
    )


@pytest.fixture
def github_comments():
    return [
        GitHubComment(user=GitHubUser(login="alice"), body="First!", created_at=CREATED_AT),
        GitHubComment(
            user=GitHubUser(login="bob"),
            body="Same here on Firefox.",
            created_at=datetime(2024, 3, 2, 9, 0, 0, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def github_commits():
    return [
        make_github_commit(
            "a1b2c3d4e5f6a7b8",
            "Handle missing SSO state (#42)",
            files=[GitHubCommitFile(
                filename="auth/sso.py", status="modified", additions=4, deletions=1,
                patch="@@ -1 +1 @@\n-old\n+new",
            )],
        ),
        make_github_commit("ffffeeee11112222", "Add SSO regression test (#42)"),
    ]


@pytest.fixture
def repository():
    return RepositoryRef(full_name="acme/webapp", owner="acme", name="webapp")


@pytest.fixture
def issue_details():
    return IssueDetails(
        number=42,
        title="Login fails with SSO",
        body="After the redirect we get a 500.",
        state="open",
        author="octocat",
        created_at=CREATED_AT,
        html_url="https://github.com/acme/webapp/issues/42",
        labels=("bug", "auth"),
    )


@pytest.fixture
def enriched_issue(issue_details, repository):
    return EnrichedIssue(
        issue=issue_details,
        repository=repository,
        event_type="issues",
        action="opened",
        comments=(IssueComment(author="bob", body="Same here on Firefox.", created_at=CREATED_AT),),
        commits=(CommitInfo(sha="a1b2c3d4e5f6a7b8", author_name="Dana", message="Handle missing SSO state"),),
        files=(CommitFile(filename="auth/sso.py", status="modified", additions=4, deletions=1,
                          patch="@@ -1 +1 @@\n-old\n+new"),),
        comments_outcome=FetchOutcome.found(),
        commits_outcome=FetchOutcome.found(),
        files_outcome=FetchOutcome.found(),
    )


@pytest.fixture
def bare_issue(issue_details, repository):
    """An issue with no enrichment at all."""
    return EnrichedIssue(
        issue=issue_details,
        repository=repository,
        event_type="issues",
        action="opened",
    )


@pytest.fixture
def llm_error():
    return LLMAPIError("Claude request failed: overloaded", api_error_code="api_error")
