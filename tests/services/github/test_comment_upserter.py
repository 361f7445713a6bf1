"""Tests for the idempotent PR comment upsert."""

import pytest
from unittest.mock import AsyncMock

from skilllens_action.services.github.comment_upserter import (
    build_comment_body,
    find_marked_comment,
    upsert_comment,
)

MARKER = "<!-- marker -->"


@pytest.mark.asyncio
async def test_upsert_creates_comment_when_none_exists():
    client = AsyncMock()
    client.list_issue_comments.return_value = []
    client.create_issue_comment.return_value = {
        "id": 1,
        "html_url": "https://github.com/test/comment/1",
    }

    url = await upsert_comment(client, "owner", "repo", 123, MARKER, "content")

    client.create_issue_comment.assert_awaited_once_with(
        "owner", "repo", 123, "<!-- marker -->\n\ncontent"
    )
    client.update_issue_comment.assert_not_called()
    assert url == "https://github.com/test/comment/1"


@pytest.mark.asyncio
async def test_upsert_updates_comment_when_marker_found():
    client = AsyncMock()
    client.list_issue_comments.return_value = [
        {"id": 11, "body": "Unrelated comment", "html_url": "https://github.com/test/comment/11"},
        {
            "id": 456,
            "body": "<!-- marker -->\nOld content",
            "html_url": "https://github.com/test/comment/456",
        },
    ]

    url = await upsert_comment(client, "owner", "repo", 123, MARKER, "new content")

    client.update_issue_comment.assert_awaited_once_with(
        "owner", "repo", 456, "<!-- marker -->\n\nnew content"
    )
    client.create_issue_comment.assert_not_called()
    assert url == "https://github.com/test/comment/456"


@pytest.mark.asyncio
async def test_upsert_propagates_api_errors():
    client = AsyncMock()
    client.list_issue_comments.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await upsert_comment(client, "owner", "repo", 123, MARKER, "content")


@pytest.mark.unit
def test_first_marked_comment_wins():
    comments = [
        {"id": 1, "body": None},
        {"id": 2, "body": f"{MARKER}\n\nfirst"},
        {"id": 3, "body": f"{MARKER}\n\nsecond"},
    ]

    assert find_marked_comment(comments, MARKER)["id"] == 2
    assert find_marked_comment(comments, "<!-- other -->") is None


@pytest.mark.unit
def test_comment_body_starts_with_marker():
    assert build_comment_body(MARKER, "## Topics") == "<!-- marker -->\n\n## Topics"
