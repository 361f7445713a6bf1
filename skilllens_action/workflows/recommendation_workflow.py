"""
SkillLens Recommendation Workflow

One run of the action: collect the review feedback of the triggering pull
request, ask the recommendation service for learning topics and publish
them as a single, updatable PR comment.
"""

import json
import logging
import os
from typing import Optional

from skilllens_action.core.actions_runtime import (
    ActionContext,
    get_id_token,
    set_failed,
    set_output,
)
from skilllens_action.core.config import ActionSettings, get_action_settings
from skilllens_action.exceptions.skilllens_exceptions import (
    MissingGitHubTokenException,
    RecommendationServiceException,
    get_error_message,
)
from skilllens_action.models.schemas.recommendation import (
    RecommendationDefaults,
    RecommendationRequest,
    RecommendationRunResult,
    RepositoryRef,
)
from skilllens_action.services.feedback.aggregator import collect_feedback
from skilllens_action.services.github.comment_upserter import upsert_comment
from skilllens_action.services.github.pr_api_client import PRApiClient
from skilllens_action.services.recommendation.recommendation_client import RecommendationClient
from skilllens_action.utils.logging import get_logger, get_run_logger

logger = get_logger(__name__)

TOPICS_OUTPUT = "topics-json"
COMMENT_URL_OUTPUT = "comment-url"


def _skipped(log: logging.Logger, message: str) -> RecommendationRunResult:
    log.info(message)
    return RecommendationRunResult(status="skipped", error_message=message)


def _failed(log: logging.Logger, message: str) -> RecommendationRunResult:
    set_failed(message, log=log)
    return RecommendationRunResult(status="failed", error_message=message)


def resolve_github_token(settings: ActionSettings) -> str:
    """
    GITHUB_TOKEN from the environment, else the github-token input.

    Raises:
        MissingGitHubTokenException: If neither is set
    """
    token = os.getenv("GITHUB_TOKEN") or settings.github_token
    if not token:
        raise MissingGitHubTokenException()
    return token


async def run_recommendation_workflow(
    settings: Optional[ActionSettings] = None,
    context: Optional[ActionContext] = None,
) -> RecommendationRunResult:
    """
    Run the action once.

    Early exits (no pull request, no feedback, no markdown returned) are
    successful runs with status "skipped". A recommendation service error
    ends the run as "failed" when fail-on-proxy-error is set and as
    "degraded" with a warning otherwise. Any other error is reported as
    the failure reason. Outputs are only set when a comment was published.

    Args:
        settings: Action settings; loaded from the environment when omitted
        context: Triggering event; loaded from the environment when omitted

    Returns:
        RecommendationRunResult describing how the run ended
    """
    log = logger
    try:
        if settings is None:
            settings = get_action_settings()
        log = get_run_logger(debug=settings.debug, log_format=settings.log_format.value)

        if context is None:
            context = ActionContext.from_env()
        pr_number = context.pr_number

        log.debug(f"Repository: {context.owner}/{context.repo}")
        log.debug(f"PR number: {pr_number if pr_number else 'not found'}")

        if not pr_number:
            return _skipped(log, "No PR number found in context; exiting.")

        token = resolve_github_token(settings)

        client = PRApiClient(token, base_url=settings.github_api_url)

        items = await collect_feedback(client, context.owner, context.repo, pr_number, log=log)
        if not items:
            log.debug("No review content found after fetching and filtering")
            return _skipped(log, "No review content to analyze; exiting.")

        id_token = await get_id_token(settings.oidc_audience)

        defaults = RecommendationDefaults(**settings.get_defaults())
        request = RecommendationRequest(
            repo=RepositoryRef(owner=context.owner, name=context.repo, pr_number=pr_number),
            reviews=items,
            defaults=defaults,
        )

        log.debug(f"OIDC Audience: {settings.oidc_audience}")
        log.debug(
            f"Defaults: language={defaults.language}, maxTopics={defaults.max_topics}, "
            f"minConfidence={defaults.min_confidence}"
        )
        log.debug(f"Fail on proxy error: {settings.fail_on_proxy_error}")
        log.debug(f"Calling SkillLens API with {len(items)} review item(s)")

        recommendation_client = RecommendationClient(settings.skilllens_api_url)
        try:
            result = await recommendation_client.get_recommendations(request, id_token, log=log)
        except RecommendationServiceException as e:
            log.debug(e.message)
            if settings.fail_on_proxy_error:
                return _failed(log, e.message)
            log.warning(e.message)
            return RecommendationRunResult(status="degraded", error_message=e.message)

        topic_count = len(result.topics) if isinstance(result.topics, list) else 0
        log.debug(f"API returned {topic_count} topic(s)")
        log.debug(f"Comment markdown length: {len(result.comment_markdown or '')} chars")

        if not result.comment_markdown:
            log.debug("No comment markdown in API response")
            return _skipped(log, "Proxy returned no commentMarkdown; nothing to post.")

        log.debug(f"Upserting comment with marker: {settings.comment_marker}")
        url = await upsert_comment(
            client,
            context.owner,
            context.repo,
            pr_number,
            settings.comment_marker,
            result.comment_markdown,
            log=log,
        )

        topics_json = json.dumps(result.topics, separators=(",", ":"), ensure_ascii=False)
        set_output(TOPICS_OUTPUT, topics_json)
        set_output(COMMENT_URL_OUTPUT, url)

        log.debug("Action completed successfully")
        return RecommendationRunResult(status="completed", topics_json=topics_json, comment_url=url)

    except Exception as e:
        return _failed(log, get_error_message(e))
