"""
Prompt construction for issue summarization.

Both prompts are pure functions of the enriched issue and a prompt style.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List

from ..models.base import BaseModel
from ..models.issue import EnrichedIssue, FetchOutcome
from ..prompts.styles import PromptStyle
from ..prompts.fragments import (
    PERSONA_DESCRIPTIONS, ANALYSIS_METHODS, TONE_GUIDANCE, DETAIL_GUIDANCE,
    TITLE_HINTS, SUMMARY_HINTS, CODE_CONTEXT_HINTS, ANALYSIS_GUIDELINES,
    DEFAULT_TITLE_HINT, DEFAULT_SUMMARY_HINT, DEFAULT_CODE_CONTEXT_HINT,
    RESPONSE_SCHEMA_TEMPLATE
)
from ..prompts.styles import Personality, AnalysisFocus, Tone, DetailLevel


@dataclass
class SummarizationPrompt(BaseModel):
    """A complete summarization prompt."""
    system_prompt: str
    user_prompt: str
    estimated_tokens: int
    metadata: Dict[str, Any] = field(default_factory=dict)


def format_timestamp(value: datetime) -> str:
    """RFC 3339 with a ``Z`` suffix for UTC."""
    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return value.isoformat(timespec="seconds")


class PromptBuilder:
    """Builds the system and user prompts sent to the model."""

    # Token estimation (rough approximation: 1 token ≈ 4 characters)
    CHARS_PER_TOKEN = 4

    MAX_COMMENTS = 5
    MAX_COMMITS = 3
    MAX_PATCH_LENGTH = 2000

    def build_summarization_prompt(self, issue: EnrichedIssue,
                                   style: PromptStyle) -> SummarizationPrompt:
        system_prompt = self.build_system_prompt(style)
        user_prompt = self.build_user_prompt(issue)
        return SummarizationPrompt(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            estimated_tokens=self.estimate_token_count(system_prompt + user_prompt),
            metadata={
                "subject": issue.subject,
                "personality": style.personality.value,
                "comment_count": min(len(issue.comments), self.MAX_COMMENTS),
                "commit_count": min(len(issue.commits), self.MAX_COMMITS),
                "file_count": len(issue.files),
            },
        )

    def build_system_prompt(self, style: PromptStyle) -> str:
        """Five style fragments followed by the JSON response contract."""
        fragments = [
            self._persona(style.personality),
            self._analysis_method(style.analysis_focus),
            self._tone(style.tone),
            self._detail(style.detail_level),
            self._custom_fields(style),
        ]
        schema = RESPONSE_SCHEMA_TEMPLATE.format(
            title_hint=TITLE_HINTS.get(style.personality, DEFAULT_TITLE_HINT),
            summary_hint=SUMMARY_HINTS.get(style.personality, DEFAULT_SUMMARY_HINT),
            code_context_hint=CODE_CONTEXT_HINTS.get(style.personality, DEFAULT_CODE_CONTEXT_HINT),
            guidelines=ANALYSIS_GUIDELINES.get(
                style.personality, ANALYSIS_GUIDELINES[Personality.GENERIC]
            ),
        )
        return "\n\n".join(fragments + [schema])

    def build_user_prompt(self, enriched: EnrichedIssue) -> str:
        issue = enriched.issue
        parts: List[str] = [
            "## Issue Information\n",
            f"Repository: {enriched.repository.full_name}",
            f"Issue #{issue.number}: {issue.title}",
            f"State: {issue.state}",
            f"Created by: {issue.author}",
            f"Created at: {format_timestamp(issue.created_at)}",
        ]
        if issue.assignee:
            parts.append(f"Assigned to: {issue.assignee}")
        if issue.labels:
            parts.append(f"Labels: {', '.join(issue.labels)}")

        parts.append(f"\n## Issue Description\n{issue.body}")

        if enriched.comments:
            parts.append("\n## Recent Comments")
            for comment in enriched.comments[:self.MAX_COMMENTS]:
                parts.append(
                    f"\n### Comment by {comment.author} ({format_timestamp(comment.created_at)}):"
                )
                parts.append(comment.body)
        elif enriched.comments_outcome.is_unavailable:
            parts.append(self._unavailable("Recent Comments", "Comments", enriched.comments_outcome))

        if enriched.commits:
            parts.append("\n## Related Commits")
            for commit in enriched.commits[:self.MAX_COMMITS]:
                parts.append(f"\n### Commit: {commit.short_sha}")
                parts.append(f"Author: {commit.author_name}")
                parts.append(f"Message: {commit.message}")
        elif enriched.commits_outcome.is_unavailable:
            parts.append(self._unavailable("Related Commits", "Related commits", enriched.commits_outcome))

        if enriched.files:
            parts.append("\n## Code Changes")
            for changed in enriched.files:
                parts.append(f"\n### File: {changed.filename}")
                parts.append(f"Status: {changed.status}")
                parts.append(f"Additions: {changed.additions}, Deletions: {changed.deletions}")
                if changed.patch and len(changed.patch) < self.MAX_PATCH_LENGTH:
                    parts.append(f"Patch:\n```\n{changed.patch}\n```")
        elif enriched.files_outcome.is_unavailable:
            parts.append(self._unavailable("Code Changes", "File changes", enriched.files_outcome))

        parts.append("\n## Event Context\n")
        parts.append(f"Event Type: {enriched.event_type}")
        parts.append(f"Action: {enriched.action}")

        return "\n".join(parts)

    def estimate_token_count(self, text: str) -> int:
        return len(text) // self.CHARS_PER_TOKEN

    @staticmethod
    def _unavailable(heading: str, subject: str, outcome: FetchOutcome) -> str:
        return f"\n## {heading}\n{subject} could not be retrieved ({outcome.reason or 'unknown error'})."

    @staticmethod
    def _persona(personality: Personality) -> str:
        return PERSONA_DESCRIPTIONS.get(personality, PERSONA_DESCRIPTIONS[Personality.GENERIC])

    @staticmethod
    def _analysis_method(focus: AnalysisFocus) -> str:
        return ANALYSIS_METHODS.get(focus, ANALYSIS_METHODS[AnalysisFocus.GENERIC])

    @staticmethod
    def _tone(tone: Tone) -> str:
        return TONE_GUIDANCE.get(tone, TONE_GUIDANCE[Tone.GENERIC])

    @staticmethod
    def _detail(level: DetailLevel) -> str:
        return DETAIL_GUIDANCE.get(level, DETAIL_GUIDANCE[DetailLevel.GENERIC])

    @staticmethod
    def _custom_fields(style: PromptStyle) -> str:
        if not style.custom_fields:
            return ""
        lines = [f"- {key}: {value}" for key, value in style.custom_fields]
        return "Additional Context:\n" + "\n".join(lines)
