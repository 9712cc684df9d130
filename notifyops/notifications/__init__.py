"""
Notification rendering.
"""

from .renderer import (
    NotificationRenderer, priority_glyph, category_glyph, format_action_items,
    REVIEW_ACTION_ID, SUGGEST_FIX_ACTION_ID, FALLBACK_TEXT, GENERIC_GLYPH
)

__all__ = [
    'NotificationRenderer',
    'priority_glyph',
    'category_glyph',
    'format_action_items',
    'REVIEW_ACTION_ID',
    'SUGGEST_FIX_ACTION_ID',
    'FALLBACK_TEXT',
    'GENERIC_GLYPH',
]
