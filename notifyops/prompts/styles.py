"""
Prompt style vocabulary.

Each axis of a style is a closed enum with a ``GENERIC`` member that stands
in for any value outside the vocabulary.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from ..models.base import BaseModel


class Personality(Enum):
    """Persona the model is asked to adopt."""
    MASTER_ANALYST = "MASTER ANALYST"
    SENIOR_DEVELOPER = "SENIOR DEVELOPER"
    DEVOPS_ENGINEER = "DEVOPS ENGINEER"
    PRODUCT_MANAGER = "PRODUCT MANAGER"
    SECURITY_EXPERT = "SECURITY EXPERT"
    GENERIC = "GENERIC"

    @classmethod
    def parse(cls, value: str) -> "Personality":
        normalized = value.strip().upper().replace("_", " ")
        try:
            return cls(normalized)
        except ValueError:
            return cls.GENERIC


class AnalysisFocus(Enum):
    TECHNICAL_IMPACT = "technical_impact"
    BUSINESS_VALUE = "business_value"
    SECURITY_FOCUS = "security_focus"
    PERFORMANCE_OPTIMIZATION = "performance_optimization"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: str) -> "AnalysisFocus":
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.GENERIC


class Tone(Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CONCISE = "concise"
    EDUCATIONAL = "educational"
    URGENT = "urgent"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: str) -> "Tone":
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.GENERIC


class DetailLevel(Enum):
    COMPREHENSIVE = "comprehensive"
    MODERATE = "moderate"
    CONCISE = "concise"
    EXECUTIVE = "executive"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: str) -> "DetailLevel":
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.GENERIC


@dataclass(frozen=True)
class PromptStyle(BaseModel):
    """How the model is instructed: persona, focus, tone, detail and extra context.

    ``custom_fields`` keeps insertion order so the rendered prompt is stable.
    """
    personality: Personality = Personality.MASTER_ANALYST
    analysis_focus: AnalysisFocus = AnalysisFocus.TECHNICAL_IMPACT
    tone: Tone = Tone.PROFESSIONAL
    detail_level: DetailLevel = DetailLevel.COMPREHENSIVE
    custom_fields: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def create(cls,
               personality: str,
               analysis_focus: str,
               tone: str,
               detail_level: str,
               custom_fields: Optional[Mapping[str, str]] = None) -> "PromptStyle":
        """Build a style from raw strings; unknown values map to ``GENERIC``."""
        return cls(
            personality=Personality.parse(personality),
            analysis_focus=AnalysisFocus.parse(analysis_focus),
            tone=Tone.parse(tone),
            detail_level=DetailLevel.parse(detail_level),
            custom_fields=tuple((custom_fields or {}).items()),
        )

    @property
    def fields_dict(self) -> Dict[str, str]:
        return dict(self.custom_fields)

    def to_dict(self) -> Dict[str, object]:
        return {
            "personality": self.personality.value,
            "analysis_focus": self.analysis_focus.value,
            "tone": self.tone.value,
            "detail_level": self.detail_level.value,
            "custom_fields": self.fields_dict,
        }
