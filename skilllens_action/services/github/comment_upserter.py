"""
Comment Upserter

Keeps a single SkillLens summary comment per pull request. The comment is
recognised by a hidden marker embedded in its body, which is the only
state carried from one run to the next.
"""

import logging
from typing import Any, Dict, List, Optional

from skilllens_action.services.github.pr_api_client import PRApiClient
from skilllens_action.utils.logging import get_logger

logger = get_logger(__name__)


def build_comment_body(marker: str, markdown: str) -> str:
    return f"{marker}\n\n{markdown}"


def find_marked_comment(comments: List[Dict[str, Any]], marker: str) -> Optional[Dict[str, Any]]:
    """
    Return the first comment whose body contains the marker.

    Several marked comments are not expected; if they exist the earliest
    one listed is used and the others are left alone.
    """
    for comment in comments:
        if marker in (comment.get("body") or ""):
            return comment
    return None


async def upsert_comment(
    client: PRApiClient,
    owner: str,
    repo: str,
    pr_number: int,
    marker: str,
    markdown: str,
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Update the marked comment or create it when it does not exist yet.

    The new body fully replaces the old one.

    Args:
        client: GitHub API client
        owner: Repository owner
        repo: Repository name
        pr_number: Pull request number
        marker: Hidden marker identifying the managed comment
        markdown: Comment content
        log: Run logger

    Returns:
        html_url of the updated or created comment
    """
    log = log or logger
    log.debug(f"Looking for existing comment with marker: {marker}")
    existing = await client.list_issue_comments(owner, repo, pr_number, per_page=100)
    found = find_marked_comment(existing, marker)

    full_body = build_comment_body(marker, markdown)

    if found:
        log.debug(f"Updating existing comment (ID: {found['id']})")
        await client.update_issue_comment(owner, repo, found["id"], full_body)
        log.debug(f"Updated comment URL: {found['html_url']}")
        return found["html_url"]

    log.debug("Creating new comment (no existing comment found)")
    created = await client.create_issue_comment(owner, repo, pr_number, full_body)
    log.debug(f"Created comment URL: {created['html_url']}")
    return created["html_url"]
