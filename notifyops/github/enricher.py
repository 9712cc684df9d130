"""
Context enrichment: comments, related commits and changed files for an issue.
"""

import logging
from typing import List, Optional, Tuple

from .client import GitHubClient
from .normalizer import IssueReference
from ..exceptions import GitHubAPIError
from ..models.issue import (
    EnrichedIssue, IssueComment, CommitFile, FetchOutcome, RepositoryRef
)
from ..models.github import GitHubCommit
from ..monitoring import MetricsRecorder, NullMetrics

logger = logging.getLogger(__name__)

MAX_COMMENTS = 100
MAX_COMMITS = 10


class ContextEnricher:
    """Gathers the context around an issue from the GitHub API.

    The three fetches (comments, commits, files) are independent and best
    effort: a failure is logged, counted and recorded as an ``unavailable``
    outcome, and enrichment carries on. Nothing is retried.
    """

    def __init__(self, client: GitHubClient, metrics: Optional[MetricsRecorder] = None):
        self.client = client
        self.metrics = metrics or NullMetrics()

    async def enrich(self, reference: IssueReference) -> EnrichedIssue:
        repository = reference.repository
        number = reference.issue.number

        comments, comments_outcome = await self._fetch_comments(repository, number)
        resolved, commits_outcome, resolve_error = await self._fetch_commits(repository, number)
        commits = tuple(commit.to_commit() for commit in resolved)

        # Files come from the first resolved commit.
        files: Tuple[CommitFile, ...] = ()
        files_outcome = FetchOutcome()
        if resolved:
            files = tuple(f.to_file() for f in resolved[0].files)
            files_outcome = FetchOutcome.found()
        elif resolve_error is not None:
            files_outcome = self._unavailable("fetch_files", repository, number, resolve_error)

        logger.info(
            f"Enriched {repository.full_name}#{number}: {len(comments)} comments, "
            f"{len(commits)} commits, {len(files)} files"
        )

        return EnrichedIssue(
            issue=reference.issue,
            repository=repository,
            event_type=reference.event_type,
            action=reference.action,
            comments=comments,
            commits=commits,
            files=files,
            comments_outcome=comments_outcome,
            commits_outcome=commits_outcome,
            files_outcome=files_outcome,
        )

    async def fetch_enriched_issue(self,
                                   repository: RepositoryRef,
                                   number: int,
                                   event_type: str = "interactive",
                                   action: str = "suggest_fix") -> EnrichedIssue:
        """Fetch an issue by number, then enrich it.

        Unlike the sub-fetches, failing to fetch the issue itself raises
        ``GitHubAPIError``.
        """
        try:
            issue = await self.client.get_issue(repository.owner, repository.name, number)
        except GitHubAPIError as e:
            self.metrics.record_github_api_error("fetch_issue", e.error_type)
            raise

        reference = IssueReference(
            issue=issue.to_details(),
            repository=repository,
            event_type=event_type,
            action=action,
        )
        return await self.enrich(reference)

    async def _fetch_comments(self, repository: RepositoryRef,
                              number: int) -> Tuple[Tuple[IssueComment, ...], FetchOutcome]:
        try:
            raw = await self.client.list_comments(
                repository.owner, repository.name, number, per_page=MAX_COMMENTS
            )
        except GitHubAPIError as e:
            return (), self._unavailable("fetch_comments", repository, number, e)

        comments = [item.to_comment() for item in raw[:MAX_COMMENTS]]
        comments.reverse()
        return tuple(comments), FetchOutcome.found()

    async def _fetch_commits(self, repository: RepositoryRef, number: int
                             ) -> Tuple[List[GitHubCommit], FetchOutcome, Optional[GitHubAPIError]]:
        """Search commits mentioning the issue and resolve each one with its files.

        Returns the resolved commits, the search outcome and the last error
        seen while resolving, if any.
        """
        try:
            found = await self.client.search_commits(
                repository.owner, repository.name, number, per_page=MAX_COMMITS
            )
        except GitHubAPIError as e:
            return [], self._unavailable("fetch_commits", repository, number, e), None

        resolved: List[GitHubCommit] = []
        last_error: Optional[GitHubAPIError] = None
        for item in found[:MAX_COMMITS]:
            try:
                commit = await self.client.get_commit(repository.owner, repository.name, item.sha)
            except GitHubAPIError as e:
                logger.warning(f"Skipping commit {item.sha[:8]} for {repository.full_name}#{number}: {e}")
                last_error = e
                continue
            resolved.append(commit)

        return resolved, FetchOutcome.found(), last_error

    def _unavailable(self, operation: str, repository: RepositoryRef, subject,
                     error: GitHubAPIError) -> FetchOutcome:
        self.metrics.record_github_api_error(operation, error.error_type)
        logger.warning(f"{operation} failed for {repository.full_name} ({subject}): {error}")
        return FetchOutcome.unavailable(error.error_type)
