"""Shared fixtures for SkillLens action tests."""

import os

import pytest

from skilllens_action.core.actions_runtime import ActionContext
from skilllens_action.core.config import ActionSettings

RUNNER_VARIABLES = (
    "GITHUB_TOKEN",
    "GITHUB_OUTPUT",
    "GITHUB_API_URL",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_PATH",
    "GITHUB_EVENT_NAME",
    "ACTIONS_ID_TOKEN_REQUEST_URL",
    "ACTIONS_ID_TOKEN_REQUEST_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Keep the host's runner variables and action inputs out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("INPUT_") or name in RUNNER_VARIABLES:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def action_settings():
    return ActionSettings(
        skilllens_api_url="https://api.test.com/v1/recommendations",
        oidc_audience="skilllens.dev",
        default_language="English",
        max_topics=5,
        min_confidence=0.65,
        comment_marker="<!-- SkillLens:v0 -->",
        fail_on_proxy_error=False,
    )


@pytest.fixture
def pr_context():
    return ActionContext(
        owner="test-owner",
        repo="test-repo",
        payload={"pull_request": {"number": 123}},
        event_name="pull_request",
    )
