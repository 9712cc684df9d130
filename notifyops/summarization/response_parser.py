"""
Parsing of the model's JSON summary response.
"""

import logging
import re
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from ..exceptions import ResponseParseError
from ..models.summary import (
    IssueSummary, DEFAULT_PRIORITY, DEFAULT_CATEGORY, DEFAULT_CONFIDENCE,
    DEFAULT_CODE_CONTEXT, DEFAULT_SUGGESTED_FIX
)

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")


class RawSummary(BaseModel):
    """The JSON object the model is asked to return, before defaults."""
    title: str = ""
    summary: str = ""
    priority: Optional[str] = None
    category: Optional[str] = None
    action_items: Optional[List[str]] = None
    code_context: Optional[str] = None
    suggested_fix: Optional[str] = None
    confidence: Optional[float] = None


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```), if any."""
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


class ResponseParser:
    """Turns model output into an ``IssueSummary``.

    ``title`` and ``summary`` are mandatory; every other field is defaulted
    once those two are known to be present.
    """

    def parse(self, response_content: str) -> IssueSummary:
        cleaned = strip_code_fence(response_content)
        if not cleaned:
            raise ResponseParseError("empty response")

        try:
            raw = RawSummary.model_validate_json(cleaned)
        except ValidationError as e:
            logger.debug(f"Unparseable model response: {cleaned[:500]}")
            raise ResponseParseError(
                f"invalid JSON summary ({e.error_count()} error(s))",
                response_preview=cleaned,
                cause=e,
            )

        title = raw.title.strip()
        summary = raw.summary.strip()
        if not title or not summary:
            missing = [name for name, value in (("title", title), ("summary", summary)) if not value]
            raise ResponseParseError(
                f"missing required field(s): {', '.join(missing)}",
                response_preview=cleaned,
            )

        return IssueSummary(
            title=title,
            summary=summary,
            priority=self._text_or_default(raw.priority, DEFAULT_PRIORITY).lower(),
            category=self._text_or_default(raw.category, DEFAULT_CATEGORY).lower(),
            action_items=tuple(
                item.strip() for item in (raw.action_items or []) if item and item.strip()
            ),
            code_context=self._text_or_default(raw.code_context, DEFAULT_CODE_CONTEXT),
            suggested_fix=self._text_or_default(raw.suggested_fix, DEFAULT_SUGGESTED_FIX),
            confidence=self._confidence(raw.confidence),
        )

    @staticmethod
    def _text_or_default(value: Optional[str], default: str) -> str:
        if value is None or not value.strip():
            return default
        return value.strip()

    @staticmethod
    def _confidence(value: Optional[float]) -> float:
        if not value:
            return DEFAULT_CONFIDENCE
        return min(max(value, 0.0), 1.0)
