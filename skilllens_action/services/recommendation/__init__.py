from .recommendation_client import RecommendationClient

__all__ = ["RecommendationClient"]
