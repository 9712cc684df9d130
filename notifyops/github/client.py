"""
Read-only GitHub REST API client.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..exceptions import GitHubAPIError
from ..models.github import GitHubIssue, GitHubComment, GitHubCommit, CommitSearchResult

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


class GitHubClient:
    """Thin async wrapper around the issue, comment, search and commit endpoints."""

    def __init__(self,
                 access_token: str,
                 base_url: str = "https://api.github.com",
                 http_client: Optional[httpx.AsyncClient] = None,
                 timeout: float = 30.0):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            headers = {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
                "User-Agent": "notifyops",
            }
            if self.access_token:
                headers["Authorization"] = f"Bearer {self.access_token}"
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url, headers=headers, timeout=self.timeout
            )
        return self._http_client

    async def close(self):
        """Close HTTP client."""
        if self._http_client and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def get_issue(self, owner: str, repo: str, number: int) -> GitHubIssue:
        data = await self._get("get_issue", f"/repos/{owner}/{repo}/issues/{number}")
        return self._decode("get_issue", GitHubIssue, data)

    async def list_comments(self, owner: str, repo: str, number: int,
                            per_page: int = 100) -> List[GitHubComment]:
        """Comments on an issue in the order GitHub returns them (oldest first)."""
        data = await self._get(
            "list_comments",
            f"/repos/{owner}/{repo}/issues/{number}/comments",
            params={"per_page": per_page},
        )
        if not isinstance(data, list):
            raise GitHubAPIError("list_comments", "expected a JSON array")
        return [self._decode("list_comments", GitHubComment, item) for item in data]

    async def search_commits(self, owner: str, repo: str, number: int,
                             per_page: int = 10) -> List[GitHubCommit]:
        """Commits in ``owner/repo`` whose message references issue ``number``."""
        data = await self._get(
            "search_commits",
            "/search/commits",
            params={"q": f"repo:{owner}/{repo} issue:{number}", "per_page": per_page},
        )
        result = self._decode("search_commits", CommitSearchResult, data)
        return result.items[:per_page]

    async def get_commit(self, owner: str, repo: str, sha: str) -> GitHubCommit:
        """A single commit including its changed files."""
        data = await self._get("get_commit", f"/repos/{owner}/{repo}/commits/{sha}")
        return self._decode("get_commit", GitHubCommit, data)

    async def _get(self, operation: str, path: str,
                   params: Optional[Dict[str, Any]] = None) -> Any:
        client = await self._get_http_client()
        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            raise GitHubAPIError(operation, f"request failed: {e}", cause=e)

        if response.status_code != 200:
            raise GitHubAPIError(
                operation,
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(operation, "invalid JSON response", status_code=200, cause=e)

    @staticmethod
    def _decode(operation: str, model, data: Any):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GitHubAPIError(operation, "unexpected response shape", status_code=200, cause=e)
