"""
HTTP service for inbound webhooks and prompt style administration.
"""

from .server import WebhookServer

__all__ = ['WebhookServer']
