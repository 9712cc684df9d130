"""
Rendering of issue summaries into platform-agnostic notification documents.
"""

from typing import Dict

from ..models.issue import EnrichedIssue
from ..models.notification import (
    NotificationDocument, HeaderBlock, SectionBlock, ActionsBlock, Button, ButtonStyle,
    TextObject, TextFormat
)
from ..models.summary import IssueSummary, Priority, Category
from ..utils import truncate_text

FALLBACK_TEXT = "GitHub Issue Update"
GENERIC_GLYPH = "📋"

PRIORITY_GLYPHS: Dict[Priority, str] = {
    Priority.HIGH: "🔴",
    Priority.MEDIUM: "🟡",
    Priority.LOW: "🟢",
}

CATEGORY_GLYPHS: Dict[Category, str] = {
    Category.BUG: "🐛",
    Category.FEATURE: "✨",
    Category.ENHANCEMENT: "🚀",
    Category.DOCUMENTATION: "📚",
    Category.SECURITY: "🔒",
    Category.PERFORMANCE: "⚡",
    Category.INFRASTRUCTURE: "🏗️",
    Category.ARCHITECTURE: "🏛️",
    Category.TECHNICAL_DEBT: "🧹",
    Category.OTHER: "📋",
}

REVIEW_ACTION_ID = "review_issue"
SUGGEST_FIX_ACTION_ID = "suggest_fix"

# Slack block limits
MAX_HEADER_LENGTH = 150
MAX_SECTION_LENGTH = 3000


def priority_glyph(priority: str) -> str:
    member = Priority.lookup(priority)
    return PRIORITY_GLYPHS.get(member, GENERIC_GLYPH) if member else GENERIC_GLYPH


def category_glyph(category: str) -> str:
    member = Category.lookup(category)
    return CATEGORY_GLYPHS.get(member, GENERIC_GLYPH) if member else GENERIC_GLYPH


def format_action_items(summary: IssueSummary) -> str:
    if not summary.action_items:
        return "None specified"
    return "\n".join(f"• {item}" for item in summary.action_items)


class NotificationRenderer:
    """Builds the notification document for a summarized issue.

    Block order is fixed: header, key fields, summary, action items, code
    context, then the two action buttons.
    """

    def render(self, summary: IssueSummary, issue: EnrichedIssue) -> NotificationDocument:
        repo_name = issue.repository.full_name or "Unknown Repository"
        number = issue.issue.number
        button_value = f"{repo_name}:{number}"

        header = (
            f"{priority_glyph(summary.priority)} {category_glyph(summary.category)} "
            f"Issue #{number}: {summary.title}"
        )

        document = NotificationDocument(fallback_text=FALLBACK_TEXT)
        document.add(HeaderBlock(text=truncate_text(header, MAX_HEADER_LENGTH)))
        document.add(SectionBlock(fields=(
            self._markdown(f"*Repository:*\n{repo_name}"),
            self._markdown(f"*Priority:*\n{summary.priority.title()}"),
            self._markdown(f"*Category:*\n{summary.category.title()}"),
            self._markdown(f"*Confidence:*\n{summary.confidence_percent}%"),
        )))
        document.add(self._text_section("Summary", summary.summary))
        document.add(self._text_section("Action Items", format_action_items(summary)))
        document.add(self._text_section("Code Context", summary.code_context))
        document.add(ActionsBlock(buttons=(
            Button(
                text="Review Issue",
                action_id=REVIEW_ACTION_ID,
                value=button_value,
                url=issue.issue.html_url or None,
                style=ButtonStyle.PRIMARY,
            ),
            Button(
                text="Suggest Fix",
                action_id=SUGGEST_FIX_ACTION_ID,
                value=button_value,
                style=ButtonStyle.PRIMARY,
            ),
        )))
        return document

    @staticmethod
    def _markdown(text: str) -> TextObject:
        return TextObject(text=text, format=TextFormat.MARKDOWN)

    def _text_section(self, label: str, body: str) -> SectionBlock:
        return SectionBlock(text=self._markdown(truncate_text(f"*{label}:*\n{body}", MAX_SECTION_LENGTH)))
