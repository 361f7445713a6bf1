"""
SkillLens Action Exceptions

Custom exceptions for the feedback collection, recommendation and comment
publishing steps of the action.
"""

from http import HTTPStatus
from typing import Optional


class SkillLensException(Exception):
    """Base exception for SkillLens action errors."""
    def __init__(self, message: str, status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR):
        self.status_code = status_code
        self.message = message
        super().__init__(self.message)


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class ConfigurationException(SkillLensException):
    """Raised when a required action input or environment variable is missing."""
    def __init__(self, message: str):
        super().__init__(message=message, status_code=HTTPStatus.BAD_REQUEST)


class MissingGitHubTokenException(ConfigurationException):
    """Raised when neither GITHUB_TOKEN nor the github-token input is set."""
    def __init__(self):
        super().__init__(message="GITHUB_TOKEN is required")


# ============================================================================
# GITHUB API EXCEPTIONS
# ============================================================================

class GitHubAPIException(SkillLensException):
    """Base exception for GitHub API related errors."""
    def __init__(self, message: str, status_code: int = HTTPStatus.BAD_GATEWAY):
        super().__init__(message=message, status_code=status_code)


class GitHubPRNotFoundException(GitHubAPIException):
    """Raised when a Pull Request is not found on GitHub."""
    def __init__(self, repo_name: str, pr_number: int):
        message = f"Pull request #{pr_number} not found in repository {repo_name}"
        super().__init__(message=message, status_code=HTTPStatus.NOT_FOUND)


class GitHubAuthenticationException(GitHubAPIException):
    """Raised when GitHub API authentication fails."""
    def __init__(self, message: str = "GitHub API authentication failed"):
        super().__init__(message=message, status_code=HTTPStatus.UNAUTHORIZED)


class GitHubPermissionException(GitHubAPIException):
    """Raised when GitHub API operation is not permitted."""
    def __init__(self, message: str = "Insufficient permissions for GitHub operation"):
        super().__init__(message=message, status_code=HTTPStatus.FORBIDDEN)


# ============================================================================
# OIDC EXCEPTIONS
# ============================================================================

class IDTokenException(SkillLensException):
    """Raised when the runner cannot issue an OIDC identity token."""
    def __init__(self, message: str):
        super().__init__(message=message, status_code=HTTPStatus.UNAUTHORIZED)


# ============================================================================
# RECOMMENDATION SERVICE EXCEPTIONS
# ============================================================================

class RecommendationServiceException(SkillLensException):
    """Base exception for recommendation service errors."""
    def __init__(self, message: str, status_code: int = HTTPStatus.BAD_GATEWAY):
        super().__init__(message=message, status_code=status_code)


class RecommendationNetworkException(RecommendationServiceException):
    """Raised when the request to the recommendation service never completes."""
    def __init__(self, detail: str):
        super().__init__(message=f"Network error calling SkillLens API: {detail}")
        self.detail = detail


class RecommendationProxyException(RecommendationServiceException):
    """Raised when the recommendation service answers with a non-success status."""
    def __init__(self, status_code: int, response_text: str):
        super().__init__(
            message=f"Proxy error {status_code}: {response_text}",
            status_code=status_code,
        )
        self.response_text = response_text


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def get_error_message(exception: BaseException) -> str:
    """
    Extract a human readable message from any exception.

    Structured errors carry their own message; anything else falls back
    to its string form, or its repr when the string form is blank.
    """
    message: Optional[str] = getattr(exception, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exception) or repr(exception)
