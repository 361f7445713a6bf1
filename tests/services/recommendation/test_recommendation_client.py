"""Tests for the recommendation service client."""

import json

import httpx
import pytest

from skilllens_action.exceptions.skilllens_exceptions import (
    RecommendationNetworkException,
    RecommendationProxyException,
)
from skilllens_action.models.schemas.feedback import FeedbackItem
from skilllens_action.models.schemas.recommendation import (
    RecommendationDefaults,
    RecommendationRequest,
    RepositoryRef,
)
from skilllens_action.services.recommendation.recommendation_client import RecommendationClient

API_URL = "https://api.test.com/v1/recommendations"


@pytest.fixture
def recommendation_request():
    return RecommendationRequest(
        repo=RepositoryRef(owner="test-owner", name="test-repo", pr_number=123),
        reviews=[
            FeedbackItem(
                type="inline",
                body="Use a context manager here",
                path="app/db.py",
                author="reviewer",
                created_at="2023-01-01T00:00:00Z",
            ),
            FeedbackItem(type="review", body="Needs tests", created_at=""),
        ],
        defaults=RecommendationDefaults(language="English", max_topics=5, min_confidence=0.65),
    )


@pytest.mark.asyncio
async def test_posts_payload_with_bearer_token(recommendation_request):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={"topics": [{"name": "Python Basics"}], "commentMarkdown": "## Learn"},
        )

    client = RecommendationClient(API_URL, transport=httpx.MockTransport(handler))

    result = await client.get_recommendations(recommendation_request, "test-id-token")

    assert result.topics == [{"name": "Python Basics"}]
    assert result.comment_markdown == "## Learn"

    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == API_URL
    assert request.headers["Authorization"] == "Bearer test-id-token"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "repo": {"owner": "test-owner", "name": "test-repo", "prNumber": 123},
        "reviews": [
            {
                "type": "inline",
                "body": "Use a context manager here",
                "path": "app/db.py",
                "author": "reviewer",
                "created_at": "2023-01-01T00:00:00Z",
            },
            {"type": "review", "body": "Needs tests", "created_at": ""},
        ],
        "defaults": {"language": "English", "maxTopics": 5, "minConfidence": 0.65},
    }


@pytest.mark.asyncio
async def test_non_success_status_raises_proxy_error(recommendation_request):
    client = RecommendationClient(
        API_URL,
        transport=httpx.MockTransport(lambda request: httpx.Response(500, text="Internal server error")),
    )

    with pytest.raises(RecommendationProxyException) as exc_info:
        await client.get_recommendations(recommendation_request, "token")

    assert exc_info.value.message == "Proxy error 500: Internal server error"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_network_failure_raises_network_error(recommendation_request):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    client = RecommendationClient(API_URL, transport=httpx.MockTransport(handler))

    with pytest.raises(RecommendationNetworkException) as exc_info:
        await client.get_recommendations(recommendation_request, "token")

    assert exc_info.value.message == "Network error calling SkillLens API: Name or service not known"


@pytest.mark.asyncio
async def test_missing_fields_decode_to_empty_result(recommendation_request):
    client = RecommendationClient(
        API_URL,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"topics": None})),
    )

    result = await client.get_recommendations(recommendation_request, "token")

    assert result.topics == []
    assert result.comment_markdown is None


@pytest.mark.asyncio
async def test_redirect_is_followed(recommendation_request):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/recommendations":
            return httpx.Response(308, headers={"Location": "https://api.test.com/v2/recommendations"})
        return httpx.Response(200, json={"topics": [], "commentMarkdown": "## Topics"})

    client = RecommendationClient(API_URL, transport=httpx.MockTransport(handler))

    result = await client.get_recommendations(recommendation_request, "test-id-token")

    assert result.comment_markdown == "## Topics"


@pytest.mark.asyncio
@pytest.mark.parametrize("topics", [{"a": 1}, "opaque", 3])
async def test_non_list_topics_pass_through(recommendation_request, topics):
    client = RecommendationClient(
        API_URL,
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json={"topics": topics, "commentMarkdown": "x"})
        ),
    )

    result = await client.get_recommendations(recommendation_request, "test-id-token")

    assert result.topics == topics
