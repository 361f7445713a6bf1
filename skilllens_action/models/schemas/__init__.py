"""
SkillLens Data Models

Pydantic schemas for feedback items and the recommendation service contract.
"""

from .feedback import FeedbackItem, FeedbackType
from .recommendation import (
    RepositoryRef,
    RecommendationDefaults,
    RecommendationRequest,
    RecommendationResult,
    RecommendationRunResult,
)

__all__ = [
    # Feedback models
    "FeedbackItem",
    "FeedbackType",

    # Recommendation service models
    "RepositoryRef",
    "RecommendationDefaults",
    "RecommendationRequest",
    "RecommendationResult",
    "RecommendationRunResult",
]
