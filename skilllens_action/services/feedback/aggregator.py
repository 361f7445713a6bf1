"""
Feedback Aggregator

Collects inline review comments, review summaries and conversation comments
of a pull request and normalizes them into FeedbackItem records.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from skilllens_action.models.schemas.feedback import FeedbackItem
from skilllens_action.services.feedback.code_fences import redact_code_fences
from skilllens_action.services.feedback.noise_filter import is_noisy
from skilllens_action.services.github.pr_api_client import PRApiClient
from skilllens_action.utils.logging import get_logger

logger = get_logger(__name__)

PAGE_SIZE = 100


def _author(record: Dict[str, Any]) -> Optional[str]:
    return (record.get("user") or {}).get("login")


def _keep(body: Optional[str], log: logging.Logger) -> bool:
    return bool(body) and not is_noisy(body, log=log)


async def collect_feedback(
    client: PRApiClient,
    owner: str,
    repo: str,
    pr_number: int,
    log: Optional[logging.Logger] = None,
) -> List[FeedbackItem]:
    """
    Fetch and clean all review feedback of a pull request.

    The three sources are requested concurrently and only their first page
    of 100 records is read. Items are returned inline first, then reviews,
    then conversation comments, each in fetch order. Empty and noisy bodies
    are dropped and long code fences trimmed.

    Args:
        client: GitHub API client
        owner: Repository owner
        repo: Repository name
        pr_number: Pull request number
        log: Run logger; diagnostic traces go here

    Returns:
        Cleaned feedback items

    Raises:
        GitHubAPIException: If any of the three requests fails
    """
    log = log or logger
    log.debug(f"Fetching review data for PR #{pr_number} in {owner}/{repo}")

    inline, reviews, conversation = await asyncio.gather(
        client.list_review_comments(owner, repo, pr_number, per_page=PAGE_SIZE),
        client.list_reviews(owner, repo, pr_number, per_page=PAGE_SIZE),
        client.list_issue_comments(owner, repo, pr_number, per_page=PAGE_SIZE),
    )

    log.debug(
        f"Fetched {len(inline)} inline comment(s), {len(reviews)} review(s), "
        f"{len(conversation)} conversation comment(s)"
    )

    items: List[FeedbackItem] = []

    for comment in inline:
        body = comment.get("body")
        if _keep(body, log):
            items.append(FeedbackItem(
                type="inline",
                body=redact_code_fences(body, log=log),
                path=comment.get("path"),
                author=_author(comment),
                created_at=comment.get("created_at") or "",
            ))

    for review in reviews:
        body = review.get("body")
        if _keep(body, log):
            items.append(FeedbackItem(
                type="review",
                body=redact_code_fences(body, log=log),
                author=_author(review),
                # Pending reviews have no submission time
                created_at=review.get("submitted_at") or "",
            ))

    for comment in conversation:
        body = comment.get("body")
        if _keep(body, log):
            items.append(FeedbackItem(
                type="conversation",
                body=redact_code_fences(body, log=log),
                author=_author(comment),
                created_at=comment.get("created_at") or "",
            ))

    log.debug(f"Returning {len(items)} non-noisy review item(s) after filtering")
    return items
