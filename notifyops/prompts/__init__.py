"""
Prompt styles: vocabulary, named catalog and the current-style registry.
"""

from .styles import PromptStyle, Personality, AnalysisFocus, Tone, DetailLevel
from .catalog import PREDEFINED_STYLES, STYLE_NAMES, DEFAULT_STYLE_NAME, get_style, list_styles
from .registry import StyleRegistry, StyleSnapshot

__all__ = [
    # Vocabulary
    'PromptStyle',
    'Personality',
    'AnalysisFocus',
    'Tone',
    'DetailLevel',

    # Catalog
    'PREDEFINED_STYLES',
    'STYLE_NAMES',
    'DEFAULT_STYLE_NAME',
    'get_style',
    'list_styles',

    # Registry
    'StyleRegistry',
    'StyleSnapshot',
]
