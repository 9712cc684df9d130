"""
API routers.
"""

from .webhooks import create_webhook_router
from .styles import create_style_router, StyleUpdateRequest

__all__ = ['create_webhook_router', 'create_style_router', 'StyleUpdateRequest']
