"""
Summarization engine coordinating prompt building, the model call and parsing.
"""

import logging
from typing import Optional

from .claude_client import ClaudeClient, ClaudeOptions
from .prompt_builder import PromptBuilder
from .response_parser import ResponseParser
from ..exceptions import ResponseParseError, create_error_context
from ..models.issue import EnrichedIssue
from ..models.summary import IssueSummary
from ..monitoring import MetricsRecorder, NullMetrics
from ..prompts.styles import PromptStyle

logger = logging.getLogger(__name__)


class SummarizationEngine:
    """Produces an ``IssueSummary`` for an enriched issue."""

    def __init__(self,
                 claude_client: ClaudeClient,
                 options: Optional[ClaudeOptions] = None,
                 metrics: Optional[MetricsRecorder] = None,
                 prompt_builder: Optional[PromptBuilder] = None,
                 response_parser: Optional[ResponseParser] = None):
        self.claude_client = claude_client
        self.options = options or ClaudeOptions()
        self.metrics = metrics or NullMetrics()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.response_parser = response_parser or ResponseParser()

    async def summarize_issue(self, issue: EnrichedIssue, style: PromptStyle) -> IssueSummary:
        """Summarize ``issue`` using ``style``.

        Raises:
            LLMAPIError: The model call failed
            ResponseParseError: The response lacked a valid summary
        """
        prompt = self.prompt_builder.build_summarization_prompt(issue, style)
        logger.debug(
            f"Prompt for {issue.subject}: system={len(prompt.system_prompt)} chars, "
            f"user={len(prompt.user_prompt)} chars, ~{prompt.estimated_tokens} tokens"
        )

        response = await self.claude_client.create_summary(
            prompt=prompt.user_prompt,
            system_prompt=prompt.system_prompt,
            options=self.options,
        )

        try:
            summary = self.response_parser.parse(response.content)
        except ResponseParseError as e:
            self.metrics.record_llm_error("parse_error")
            logger.error(f"Failed to parse summary for {issue.subject}: {e}")
            e.context.update(create_error_context(subject=issue.subject, model=response.model))
            raise

        self.metrics.record_summary_generated(issue.repository.full_name)
        logger.info(
            f"Generated summary for {issue.subject}: priority={summary.priority}, "
            f"category={summary.category}, confidence={summary.confidence:.2f}"
        )
        return summary
