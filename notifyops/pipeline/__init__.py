"""
Background issue processing.
"""

from .processor import IssueProcessor

__all__ = ['IssueProcessor']
