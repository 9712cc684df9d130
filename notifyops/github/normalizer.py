"""
Decoding of GitHub webhook payloads into pipeline input.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from ..exceptions import PayloadDecodeError
from ..models.github import IssuesEvent, IssueCommentEvent
from ..models.issue import IssueDetails, RepositoryRef

logger = logging.getLogger(__name__)

PROCESSABLE_ACTIONS: FrozenSet[str] = frozenset({
    "opened", "edited", "reopened", "closed", "created", "updated",
})

EVENT_DECODERS: Dict[str, Type[BaseModel]] = {
    "issues": IssuesEvent,
    "issue_comment": IssueCommentEvent,
}


class NormalizationStatus(Enum):
    ACCEPTED = "accepted"
    SKIPPED = "skipped"
    IGNORED = "ignored"


@dataclass(frozen=True)
class IssueReference:
    """An accepted event, before enrichment."""
    issue: IssueDetails
    repository: RepositoryRef
    event_type: str
    action: str


@dataclass(frozen=True)
class NormalizationResult:
    status: NormalizationStatus
    event_type: str
    action: str = ""
    reference: Optional[IssueReference] = None

    @property
    def accepted(self) -> bool:
        return self.status is NormalizationStatus.ACCEPTED


def should_process_action(action: str) -> bool:
    return action in PROCESSABLE_ACTIONS


class EventNormalizer:
    """Selects a decoder by event type and filters on the action allow-list.

    Unsupported event types are ``IGNORED`` and filtered actions ``SKIPPED``;
    neither is an error. Undecodable payloads raise ``PayloadDecodeError``.
    """

    def normalize(self, event_type: str, body: Union[bytes, str]) -> NormalizationResult:
        decoder = EVENT_DECODERS.get(event_type)
        if decoder is None:
            logger.info(f"Unsupported event type: {event_type!r}")
            return NormalizationResult(status=NormalizationStatus.IGNORED, event_type=event_type)

        try:
            event = decoder.model_validate_json(body)
        except ValidationError as e:
            raise PayloadDecodeError(event_type, f"{e.error_count()} validation error(s)", cause=e)

        action = event.action
        if not should_process_action(action):
            logger.debug(f"Skipping {event_type} event with action {action!r}")
            return NormalizationResult(
                status=NormalizationStatus.SKIPPED, event_type=event_type, action=action
            )

        repository = self._resolve_repository(event)
        if repository is None:
            raise PayloadDecodeError(event_type, "payload does not identify a repository")

        reference = IssueReference(
            issue=event.issue.to_details(),
            repository=repository,
            event_type=event_type,
            action=action,
        )
        return NormalizationResult(
            status=NormalizationStatus.ACCEPTED,
            event_type=event_type,
            action=action,
            reference=reference,
        )

    @staticmethod
    def _resolve_repository(event: Union[IssuesEvent, IssueCommentEvent]) -> Optional[RepositoryRef]:
        if event.repository is not None:
            return event.repository.to_ref()
        return event.issue.repository_from_url()
