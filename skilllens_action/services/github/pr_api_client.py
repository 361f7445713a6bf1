"""
GitHub API Client for Pull Request Feedback

Async client for the handful of REST calls the action needs: reading review
comments, reviews and conversation comments, and creating or updating the
managed conversation comment.
"""

from typing import Any, Dict, List, Optional

import httpx

from skilllens_action.exceptions.skilllens_exceptions import (
    GitHubAPIException,
    GitHubAuthenticationException,
    GitHubPermissionException,
    GitHubPRNotFoundException,
)
from skilllens_action.utils.logging import get_logger

logger = get_logger(__name__)

GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "SkillLens-Action/1.0"


class PRApiClient:
    """
    GitHub API client for pull request feedback operations.

    Every call reads or writes a single page; there is no pagination,
    retry or rate limit handling. HTTP errors are converted into typed
    GitHubAPIException subclasses and propagate to the caller.
    """

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: GitHub token used as bearer credential
            base_url: GitHub REST API base URL
            transport: Optional httpx transport, used by tests
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def list_review_comments(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        per_page: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        List inline review comments for a pull request (first page only).

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            per_page: Page size

        Returns:
            List of review comment objects
        """
        endpoint = f"/repos/{owner}/{repo}/pulls/{pr_number}/comments"

        try:
            return await self._make_api_request(
                method="GET",
                endpoint=endpoint,
                params={"per_page": per_page},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise GitHubPRNotFoundException(f"{owner}/{repo}", pr_number)
            raise self._handle_http_error(e, f"list review comments for {owner}/{repo}#{pr_number}")

    async def list_reviews(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        per_page: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        List reviews submitted on a pull request (first page only).

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            per_page: Page size

        Returns:
            List of review objects
        """
        endpoint = f"/repos/{owner}/{repo}/pulls/{pr_number}/reviews"

        try:
            return await self._make_api_request(
                method="GET",
                endpoint=endpoint,
                params={"per_page": per_page},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise GitHubPRNotFoundException(f"{owner}/{repo}", pr_number)
            raise self._handle_http_error(e, f"list reviews for {owner}/{repo}#{pr_number}")

    async def list_issue_comments(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        per_page: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        List conversation comments of a pull request (first page only).

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Pull request number
            per_page: Page size

        Returns:
            List of issue comment objects
        """
        endpoint = f"/repos/{owner}/{repo}/issues/{issue_number}/comments"

        try:
            return await self._make_api_request(
                method="GET",
                endpoint=endpoint,
                params={"per_page": per_page},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise GitHubPRNotFoundException(f"{owner}/{repo}", issue_number)
            raise self._handle_http_error(e, f"list comments for {owner}/{repo}#{issue_number}")

    async def create_issue_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        body: str,
    ) -> Dict[str, Any]:
        """
        Create a conversation comment on a pull request.

        Returns:
            Created comment object with id, body and html_url
        """
        endpoint = f"/repos/{owner}/{repo}/issues/{issue_number}/comments"

        try:
            return await self._make_api_request(
                method="POST",
                endpoint=endpoint,
                json_data={"body": body},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise GitHubPRNotFoundException(f"{owner}/{repo}", issue_number)
            if e.response.status_code == 403:
                raise GitHubPermissionException(
                    f"Insufficient permissions to comment on {owner}/{repo}#{issue_number}"
                )
            raise self._handle_http_error(e, f"create comment on {owner}/{repo}#{issue_number}")

    async def update_issue_comment(
        self,
        owner: str,
        repo: str,
        comment_id: int,
        body: str,
    ) -> Dict[str, Any]:
        """
        Replace the body of an existing conversation comment.

        Returns:
            Updated comment object
        """
        endpoint = f"/repos/{owner}/{repo}/issues/comments/{comment_id}"

        try:
            return await self._make_api_request(
                method="PATCH",
                endpoint=endpoint,
                json_data={"body": body},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 403:
                raise GitHubPermissionException(
                    f"Insufficient permissions to update comment {comment_id}"
                )
            raise self._handle_http_error(e, f"update comment {comment_id}")

    async def _make_api_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path (starting with /)
            params: Query parameters
            json_data: JSON request body

        Returns:
            Decoded JSON response

        Raises:
            httpx.HTTPStatusError: For non-success responses, handled by callers
            GitHubAPIException: If the request cannot be sent
        """
        url = f"{self.base_url}{endpoint}"
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": USER_AGENT,
        }

        try:
            async with httpx.AsyncClient(timeout=None, follow_redirects=True, transport=self._transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    json=json_data,
                )
                response.raise_for_status()
                return response.json()
        except httpx.RequestError as e:
            raise GitHubAPIException(f"Request to {endpoint} failed: {e}")

    def _handle_http_error(self, error: httpx.HTTPStatusError, operation: str) -> GitHubAPIException:
        """
        Convert HTTP status error to appropriate GitHub exception.

        Args:
            error: HTTP status error from httpx
            operation: Description of the operation that failed

        Returns:
            Appropriate GitHubAPIException subclass
        """
        status_code = error.response.status_code
        response_text = error.response.text

        if status_code == 401:
            return GitHubAuthenticationException()
        elif status_code == 403:
            return GitHubPermissionException(f"Permission denied to {operation}")
        else:
            message = f"GitHub API error during {operation}: {status_code}"
            if response_text:
                message += f" - {response_text}"
            return GitHubAPIException(message=message, status_code=status_code)
