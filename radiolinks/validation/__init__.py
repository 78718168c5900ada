"""
Validation framework for reconstructed duplex links.

Flags broken record partitions and links that need attention.
"""
from .validators import (
    DuplexLinkValidator,
    ValidationResult,
    ValidationIssue,
    IssueSeverity,
)

__all__ = [
    'DuplexLinkValidator',
    'ValidationResult',
    'ValidationIssue',
    'IssueSeverity',
]
