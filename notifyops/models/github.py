"""
Pydantic models for GitHub webhook payloads and REST API responses.

Only the fields NotifyOps reads are declared; everything else is ignored.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .issue import CommitFile, CommitInfo, IssueComment, IssueDetails, RepositoryRef


class GitHubUser(BaseModel):
    login: str = ""


class GitHubLabel(BaseModel):
    name: str = ""


class GitHubRepository(BaseModel):
    full_name: str
    name: str = ""
    owner: GitHubUser = Field(default_factory=GitHubUser)

    def to_ref(self) -> RepositoryRef:
        owner = self.owner.login
        name = self.name
        if not owner or not name:
            return RepositoryRef.from_full_name(self.full_name)
        return RepositoryRef(full_name=self.full_name, owner=owner, name=name)


class GitHubIssue(BaseModel):
    number: int
    title: str = ""
    body: Optional[str] = None
    state: str = ""
    user: Optional[GitHubUser] = None
    assignee: Optional[GitHubUser] = None
    labels: List[GitHubLabel] = Field(default_factory=list)
    created_at: datetime
    html_url: str = ""
    repository_url: Optional[str] = None

    def to_details(self) -> IssueDetails:
        return IssueDetails(
            number=self.number,
            title=self.title,
            body=self.body or "",
            state=self.state,
            author=self.user.login if self.user else "",
            created_at=self.created_at,
            html_url=self.html_url,
            assignee=self.assignee.login if self.assignee else None,
            labels=tuple(label.name for label in self.labels),
        )

    def repository_from_url(self) -> Optional[RepositoryRef]:
        """Derive the repository from ``repository_url`` (``.../repos/{owner}/{name}``)."""
        if not self.repository_url or "/repos/" not in self.repository_url:
            return None
        full_name = self.repository_url.split("/repos/", 1)[1].strip("/")
        if full_name.count("/") != 1:
            return None
        return RepositoryRef.from_full_name(full_name)


class GitHubComment(BaseModel):
    user: Optional[GitHubUser] = None
    body: Optional[str] = None
    created_at: datetime

    def to_comment(self) -> IssueComment:
        return IssueComment(
            author=self.user.login if self.user else "",
            body=self.body or "",
            created_at=self.created_at,
        )


class IssuesEvent(BaseModel):
    """Payload of the ``issues`` event."""
    action: str = ""
    issue: GitHubIssue
    repository: Optional[GitHubRepository] = None


class IssueCommentEvent(BaseModel):
    """Payload of the ``issue_comment`` event."""
    action: str = ""
    issue: GitHubIssue
    comment: Optional[GitHubComment] = None
    repository: Optional[GitHubRepository] = None


class GitHubCommitAuthor(BaseModel):
    name: str = ""


class GitHubCommitDetail(BaseModel):
    author: Optional[GitHubCommitAuthor] = None
    message: str = ""


class GitHubCommitFile(BaseModel):
    filename: str
    status: str = ""
    additions: int = 0
    deletions: int = 0
    patch: Optional[str] = None

    def to_file(self) -> CommitFile:
        return CommitFile(
            filename=self.filename,
            status=self.status,
            additions=self.additions,
            deletions=self.deletions,
            patch=self.patch,
        )


class GitHubCommit(BaseModel):
    """A commit as returned by the commits and search APIs."""
    sha: str
    commit: GitHubCommitDetail = Field(default_factory=GitHubCommitDetail)
    files: List[GitHubCommitFile] = Field(default_factory=list)

    def to_commit(self) -> CommitInfo:
        author = self.commit.author.name if self.commit.author else ""
        return CommitInfo(sha=self.sha, author_name=author, message=self.commit.message)


class CommitSearchResult(BaseModel):
    total_count: int = 0
    items: List[GitHubCommit] = Field(default_factory=list)
