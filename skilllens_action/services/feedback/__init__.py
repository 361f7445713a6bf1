"""
Feedback Collection

Fetching, noise filtering and redaction of pull request review feedback.
"""

from .aggregator import collect_feedback
from .code_fences import redact_code_fences
from .noise_filter import is_noisy

__all__ = ["collect_feedback", "redact_code_fences", "is_noisy"]
