"""Exceptions raised by the SkillLens action."""

from .skilllens_exceptions import (
    SkillLensException,
    ConfigurationException,
    MissingGitHubTokenException,
    GitHubAPIException,
    GitHubPRNotFoundException,
    GitHubAuthenticationException,
    GitHubPermissionException,
    IDTokenException,
    RecommendationServiceException,
    RecommendationNetworkException,
    RecommendationProxyException,
    get_error_message,
)

__all__ = [
    "SkillLensException",
    "ConfigurationException",
    "MissingGitHubTokenException",
    "GitHubAPIException",
    "GitHubPRNotFoundException",
    "GitHubAuthenticationException",
    "GitHubPermissionException",
    "IDTokenException",
    "RecommendationServiceException",
    "RecommendationNetworkException",
    "RecommendationProxyException",
    "get_error_message",
]
