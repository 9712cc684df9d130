"""
GitHub integration: webhook verification, event decoding and context enrichment.
"""

from .signature import verify_signature, compute_signature
from .normalizer import (
    EventNormalizer, NormalizationResult, NormalizationStatus, IssueReference,
    PROCESSABLE_ACTIONS
)
from .client import GitHubClient
from .enricher import ContextEnricher

__all__ = [
    'verify_signature',
    'compute_signature',
    'EventNormalizer',
    'NormalizationResult',
    'NormalizationStatus',
    'IssueReference',
    'PROCESSABLE_ACTIONS',
    'GitHubClient',
    'ContextEnricher',
]
