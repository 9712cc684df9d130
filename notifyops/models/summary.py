"""
AI-generated issue summary model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .base import BaseModel

DEFAULT_PRIORITY = "medium"
DEFAULT_CATEGORY = "other"
DEFAULT_CONFIDENCE = 0.5
DEFAULT_CODE_CONTEXT = "No specific code context available"
DEFAULT_SUGGESTED_FIX = "No fix suggestion provided."


class Priority(Enum):
    """Priority levels a summary can carry."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def lookup(cls, value: str) -> Optional["Priority"]:
        """Return the matching member, or None for values outside the vocabulary."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Category(Enum):
    """Issue categories a summary can carry."""
    BUG = "bug"
    FEATURE = "feature"
    ENHANCEMENT = "enhancement"
    DOCUMENTATION = "documentation"
    SECURITY = "security"
    PERFORMANCE = "performance"
    INFRASTRUCTURE = "infrastructure"
    ARCHITECTURE = "architecture"
    TECHNICAL_DEBT = "technical-debt"
    OTHER = "other"

    @classmethod
    def lookup(cls, value: str) -> Optional["Category"]:
        """Return the matching member, or None for values outside the vocabulary."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class IssueSummary(BaseModel):
    """Structured summary parsed from the model response.

    ``priority`` and ``category`` keep the model's own string so that values
    outside the vocabulary still render (with a generic glyph).
    """
    title: str
    summary: str
    priority: str = DEFAULT_PRIORITY
    category: str = DEFAULT_CATEGORY
    action_items: Tuple[str, ...] = field(default_factory=tuple)
    code_context: str = DEFAULT_CODE_CONTEXT
    suggested_fix: str = DEFAULT_SUGGESTED_FIX
    confidence: float = DEFAULT_CONFIDENCE

    @property
    def confidence_percent(self) -> int:
        return int(round(self.confidence * 100))
