"""
Named prompt styles that can be selected at runtime.
"""

from typing import Dict, List, Optional

from .styles import PromptStyle, Personality, AnalysisFocus, Tone, DetailLevel

DEFAULT_STYLE_NAME = "master_analyst"

PREDEFINED_STYLES: Dict[str, PromptStyle] = {
    "master_analyst": PromptStyle(
        Personality.MASTER_ANALYST, AnalysisFocus.TECHNICAL_IMPACT,
        Tone.PROFESSIONAL, DetailLevel.COMPREHENSIVE,
    ),
    "senior_developer": PromptStyle(
        Personality.SENIOR_DEVELOPER, AnalysisFocus.TECHNICAL_IMPACT,
        Tone.FRIENDLY, DetailLevel.MODERATE,
    ),
    "devops_engineer": PromptStyle(
        Personality.DEVOPS_ENGINEER, AnalysisFocus.TECHNICAL_IMPACT,
        Tone.PROFESSIONAL, DetailLevel.MODERATE,
    ),
    "product_manager": PromptStyle(
        Personality.PRODUCT_MANAGER, AnalysisFocus.BUSINESS_VALUE,
        Tone.FRIENDLY, DetailLevel.MODERATE,
    ),
    "security_expert": PromptStyle(
        Personality.SECURITY_EXPERT, AnalysisFocus.SECURITY_FOCUS,
        Tone.URGENT, DetailLevel.COMPREHENSIVE,
    ),
    "executive_summary": PromptStyle(
        Personality.MASTER_ANALYST, AnalysisFocus.BUSINESS_VALUE,
        Tone.PROFESSIONAL, DetailLevel.EXECUTIVE,
    ),
    "quick_triage": PromptStyle(
        Personality.SENIOR_DEVELOPER, AnalysisFocus.TECHNICAL_IMPACT,
        Tone.CONCISE, DetailLevel.CONCISE,
    ),
    "performance_focused": PromptStyle(
        Personality.DEVOPS_ENGINEER, AnalysisFocus.PERFORMANCE_OPTIMIZATION,
        Tone.PROFESSIONAL, DetailLevel.MODERATE,
    ),
    "educational": PromptStyle(
        Personality.SENIOR_DEVELOPER, AnalysisFocus.TECHNICAL_IMPACT,
        Tone.EDUCATIONAL, DetailLevel.COMPREHENSIVE,
    ),
    "startup_focused": PromptStyle(
        Personality.PRODUCT_MANAGER, AnalysisFocus.BUSINESS_VALUE,
        Tone.FRIENDLY, DetailLevel.MODERATE,
        custom_fields=(
            ("Company Stage", "Early-stage startup"),
            ("Focus", "Rapid iteration and user feedback"),
            ("Constraints", "Limited resources and tight timelines"),
        ),
    ),
    "enterprise_focused": PromptStyle(
        Personality.MASTER_ANALYST, AnalysisFocus.TECHNICAL_IMPACT,
        Tone.PROFESSIONAL, DetailLevel.COMPREHENSIVE,
        custom_fields=(
            ("Company Stage", "Enterprise organization"),
            ("Focus", "Stability, compliance, and scalability"),
            ("Constraints", "Complex approval processes and legacy systems"),
        ),
    ),
    "security_critical": PromptStyle(
        Personality.SECURITY_EXPERT, AnalysisFocus.SECURITY_FOCUS,
        Tone.URGENT, DetailLevel.COMPREHENSIVE,
        custom_fields=(
            ("Security Level", "Critical security environment"),
            ("Compliance", "Strict regulatory requirements"),
            ("Response Time", "Immediate action required"),
        ),
    ),
}

STYLE_NAMES = tuple(PREDEFINED_STYLES)


def get_style(name: str) -> Optional[PromptStyle]:
    """Look up a predefined style by name."""
    return PREDEFINED_STYLES.get(name)


def list_styles() -> List[str]:
    """All predefined style names, sorted."""
    return sorted(PREDEFINED_STYLES)
