"""
Issue data models passed through the summarization pipeline.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .base import BaseModel


class FetchStatus(Enum):
    """Outcome of a single best-effort enrichment fetch."""
    FOUND = "found"
    UNAVAILABLE = "unavailable"
    NOT_ATTEMPTED = "not_attempted"


@dataclass(frozen=True)
class FetchOutcome(BaseModel):
    """Result marker for one enrichment sub-fetch."""
    status: FetchStatus = FetchStatus.NOT_ATTEMPTED
    reason: Optional[str] = None

    @classmethod
    def found(cls) -> "FetchOutcome":
        return cls(status=FetchStatus.FOUND)

    @classmethod
    def unavailable(cls, reason: str) -> "FetchOutcome":
        return cls(status=FetchStatus.UNAVAILABLE, reason=reason)

    @property
    def is_unavailable(self) -> bool:
        return self.status is FetchStatus.UNAVAILABLE


@dataclass(frozen=True)
class RepositoryRef(BaseModel):
    """Repository an issue belongs to."""
    full_name: str
    owner: str
    name: str

    @classmethod
    def from_full_name(cls, full_name: str) -> "RepositoryRef":
        owner, _, name = full_name.partition("/")
        return cls(full_name=full_name, owner=owner, name=name)


@dataclass(frozen=True)
class IssueDetails(BaseModel):
    """Core fields of an issue."""
    number: int
    title: str
    body: str
    state: str
    author: str
    created_at: datetime
    html_url: str
    assignee: Optional[str] = None
    labels: Tuple[str, ...] = ()


@dataclass(frozen=True)
class IssueComment(BaseModel):
    """A single comment on an issue."""
    author: str
    body: str
    created_at: datetime


@dataclass(frozen=True)
class CommitInfo(BaseModel):
    """A commit that references the issue."""
    sha: str
    author_name: str
    message: str

    @property
    def short_sha(self) -> str:
        return self.sha[:8]


@dataclass(frozen=True)
class CommitFile(BaseModel):
    """A file changed by a commit."""
    filename: str
    status: str
    additions: int
    deletions: int
    patch: Optional[str] = None


@dataclass(frozen=True)
class EnrichedIssue(BaseModel):
    """An issue plus the context gathered around it.

    ``comments`` are ordered most recent first. The three ``*_outcome`` fields
    distinguish an empty result from a fetch that failed.
    """
    issue: IssueDetails
    repository: RepositoryRef
    event_type: str
    action: str
    comments: Tuple[IssueComment, ...] = ()
    commits: Tuple[CommitInfo, ...] = ()
    files: Tuple[CommitFile, ...] = ()
    comments_outcome: FetchOutcome = field(default_factory=FetchOutcome)
    commits_outcome: FetchOutcome = field(default_factory=FetchOutcome)
    files_outcome: FetchOutcome = field(default_factory=FetchOutcome)

    @property
    def subject(self) -> str:
        """``owner/repo:number`` reference used in button values and logs."""
        return f"{self.repository.full_name}:{self.issue.number}"
