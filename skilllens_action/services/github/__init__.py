"""
GitHub Integration Layer

REST client for pull request feedback and the idempotent summary comment.
"""

from .pr_api_client import PRApiClient
from .comment_upserter import upsert_comment

__all__ = ["PRApiClient", "upsert_comment"]
