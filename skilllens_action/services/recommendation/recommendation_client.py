"""
SkillLens Recommendation Service Client

Sends the cleaned review feedback of a pull request to the recommendation
service and decodes the topics and comment markdown it returns.
"""

import logging
from typing import Optional

import httpx

from skilllens_action.exceptions.skilllens_exceptions import (
    RecommendationNetworkException,
    RecommendationProxyException,
)
from skilllens_action.models.schemas.recommendation import (
    RecommendationRequest,
    RecommendationResult,
)
from skilllens_action.utils.logging import get_logger

logger = get_logger(__name__)


class RecommendationClient:
    """Client for the single POST endpoint of the recommendation service."""

    def __init__(
        self,
        api_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self._transport = transport

    async def get_recommendations(
        self,
        request: RecommendationRequest,
        id_token: str,
        log: Optional[logging.Logger] = None,
    ) -> RecommendationResult:
        """
        Request learning recommendations for the given feedback.

        Args:
            request: Repository, feedback items and defaults
            id_token: OIDC token sent as bearer credential
            log: Run logger

        Returns:
            Decoded service response

        Raises:
            RecommendationNetworkException: If the request never completes
            RecommendationProxyException: If the service answers with a non-success status
        """
        log = log or logger
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {id_token}",
        }

        try:
            async with httpx.AsyncClient(timeout=None, follow_redirects=True, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    headers=headers,
                    json=request.to_payload(),
                )
        except httpx.RequestError as e:
            raise RecommendationNetworkException(str(e) or e.__class__.__name__) from e

        log.debug(f"Recommendation service responded with status {response.status_code}")

        if not response.is_success:
            raise RecommendationProxyException(response.status_code, response.text)

        return RecommendationResult.model_validate(response.json())
