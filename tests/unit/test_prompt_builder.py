"""
Tests for prompt construction and prompt styles.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from notifyops.models.issue import CommitFile, CommitInfo, FetchOutcome, IssueComment
from notifyops.prompts import (
    PromptStyle, Personality, AnalysisFocus, Tone, DetailLevel, get_style
)
from notifyops.prompts.fragments import (
    PERSONA_DESCRIPTIONS, TONE_GUIDANCE, DEFAULT_TITLE_HINT, TITLE_HINTS
)
from notifyops.summarization.prompt_builder import PromptBuilder, format_timestamp


@pytest.fixture
def builder():
    return PromptBuilder()


class TestPromptStyle:
    """Tests for parsing style vocabulary."""

    def test_personality_parse_accepts_snake_case(self):
        assert Personality.parse("security_expert") is Personality.SECURITY_EXPERT
        assert Personality.parse("Senior Developer") is Personality.SENIOR_DEVELOPER

    def test_unknown_values_map_to_generic(self):
        style = PromptStyle.create("wizard", "vibes", "sarcastic", "epic")

        assert style.personality is Personality.GENERIC
        assert style.analysis_focus is AnalysisFocus.GENERIC
        assert style.tone is Tone.GENERIC
        assert style.detail_level is DetailLevel.GENERIC

    def test_custom_fields_keep_order(self):
        style = PromptStyle.create("master_analyst", "technical_impact", "professional",
                                   "moderate", {"Team": "Payments", "SLA": "4h"})

        assert list(style.fields_dict) == ["Team", "SLA"]
        assert style.to_dict()["personality"] == "MASTER ANALYST"


class TestFormatTimestamp:

    def test_utc_uses_z_suffix(self):
        value = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-03-01T12:30:00Z"

    def test_offset_is_kept(self):
        value = datetime(2024, 3, 1, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2024-03-01T12:30:00+02:00"


class TestSystemPrompt:
    """Tests for PromptBuilder.build_system_prompt."""

    def test_contains_style_fragments_and_schema(self, builder):
        prompt = builder.build_system_prompt(get_style("master_analyst"))

        assert prompt.startswith(PERSONA_DESCRIPTIONS[Personality.MASTER_ANALYST])
        assert TONE_GUIDANCE[Tone.PROFESSIONAL] in prompt
        assert '"suggested_fix"' in prompt
        assert DEFAULT_TITLE_HINT in prompt
        assert "Respond only with valid JSON" in prompt

    def test_persona_specific_hints(self, builder):
        prompt = builder.build_system_prompt(get_style("product_manager"))
        assert TITLE_HINTS[Personality.PRODUCT_MANAGER] in prompt
        assert DEFAULT_TITLE_HINT not in prompt

    def test_custom_fields_section(self, builder):
        prompt = builder.build_system_prompt(get_style("startup_focused"))

        assert "Additional Context:\n- Company Stage: Early-stage startup" in prompt

    def test_generic_style_still_renders(self, builder):
        prompt = builder.build_system_prompt(PromptStyle.create("x", "y", "z", "w"))

        assert PERSONA_DESCRIPTIONS[Personality.GENERIC] in prompt
        assert "Additional Context" not in prompt

    def test_is_deterministic(self, builder):
        style = get_style("security_critical")
        assert builder.build_system_prompt(style) == builder.build_system_prompt(style)


class TestUserPrompt:
    """Tests for PromptBuilder.build_user_prompt."""

    def test_issue_section(self, builder, enriched_issue):
        prompt = builder.build_user_prompt(enriched_issue)

        assert prompt.startswith("## Issue Information\n")
        assert "Repository: acme/webapp" in prompt
        assert "Issue #42: Login fails with SSO" in prompt
        assert "Created at: 2024-03-01T12:30:00Z" in prompt
        assert "Labels: bug, auth" in prompt
        assert "Assigned to" not in prompt
        assert "## Issue Description\nAfter the redirect we get a 500." in prompt

    def test_context_sections(self, builder, enriched_issue):
        prompt = builder.build_user_prompt(enriched_issue)

        assert "### Comment by bob (2024-03-01T12:30:00Z):" in prompt
        assert "### Commit: a1b2c3d4" in prompt
        assert "Author: Dana" in prompt
        assert "### File: auth/sso.py" in prompt
        assert "Additions: 4, Deletions: 1" in prompt
        assert "Patch:\n```\n@@ -1 +1 @@" in prompt
        assert prompt.endswith("Event Type: issues\nAction: opened")

    def test_empty_context_omits_sections(self, builder, bare_issue):
        prompt = builder.build_user_prompt(bare_issue)

        assert "## Recent Comments" not in prompt
        assert "## Related Commits" not in prompt
        assert "## Code Changes" not in prompt
        assert "could not be retrieved" not in prompt

    def test_unavailable_context_is_reported(self, builder, bare_issue):
        issue = replace(
            bare_issue,
            comments_outcome=FetchOutcome.unavailable("rate_limited"),
            commits_outcome=FetchOutcome.unavailable("network_error"),
        )
        prompt = builder.build_user_prompt(issue)

        assert "Comments could not be retrieved (rate_limited)." in prompt
        assert "Related commits could not be retrieved (network_error)." in prompt
        assert "File changes could not be retrieved" not in prompt

    def test_limits(self, builder, enriched_issue):
        created = enriched_issue.issue.created_at
        issue = replace(
            enriched_issue,
            comments=tuple(IssueComment(f"user{i}", f"comment {i}", created) for i in range(8)),
            commits=tuple(CommitInfo(f"{i:040d}", "Dana", f"commit {i}") for i in range(5)),
            files=(CommitFile("big.py", "modified", 500, 20, patch="x" * 2000),),
        )
        prompt = builder.build_user_prompt(issue)

        assert prompt.count("### Comment by") == 5
        assert prompt.count("### Commit:") == 3
        assert "### File: big.py" in prompt
        assert "Patch:" not in prompt

    def test_assignee_line(self, builder, enriched_issue):
        issue = replace(enriched_issue, issue=replace(enriched_issue.issue, assignee="carol"))
        assert "Assigned to: carol" in builder.build_user_prompt(issue)

    def test_summarization_prompt_metadata(self, builder, enriched_issue):
        prompt = builder.build_summarization_prompt(enriched_issue, get_style("quick_triage"))

        assert prompt.metadata["subject"] == "acme/webapp:42"
        assert prompt.metadata["personality"] == "SENIOR DEVELOPER"
        assert prompt.estimated_tokens > 0
