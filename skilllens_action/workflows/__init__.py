from .recommendation_workflow import run_recommendation_workflow

__all__ = ["run_recommendation_workflow"]
