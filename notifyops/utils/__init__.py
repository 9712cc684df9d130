"""
Small text helpers.
"""

from .text import truncate_text, split_repository, mask_secret

__all__ = ['truncate_text', 'split_repository', 'mask_secret']
