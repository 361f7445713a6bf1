"""
GitHub Actions Runtime

Access to what the Actions runner provides a step: the triggering event,
OIDC identity tokens, step outputs and failure reporting.
"""

import json
import logging
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import httpx

from skilllens_action.exceptions.skilllens_exceptions import IDTokenException
from skilllens_action.utils.logging import escape_command_data, get_logger

logger = get_logger(__name__)


@dataclass
class ActionContext:
    """Repository and event payload of the workflow run."""

    owner: str
    repo: str
    payload: Dict[str, Any] = field(default_factory=dict)
    event_name: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionContext":
        """Build the context from GITHUB_REPOSITORY and GITHUB_EVENT_PATH."""
        env = os.environ if environ is None else environ
        owner, _, repo = env.get("GITHUB_REPOSITORY", "").partition("/")

        payload: Dict[str, Any] = {}
        event_path = env.get("GITHUB_EVENT_PATH")
        if event_path and Path(event_path).exists():
            with open(event_path, "r", encoding="utf-8") as f:
                payload = json.load(f)

        return cls(
            owner=owner,
            repo=repo,
            payload=payload,
            event_name=env.get("GITHUB_EVENT_NAME", ""),
        )

    @property
    def pr_number(self) -> Optional[int]:
        """
        Number of the pull request the run belongs to.

        Taken from `pull_request.number` on pull request events and from
        `issue.number` on issue comment events; None for any other event.
        """
        for key in ("pull_request", "issue"):
            number = (self.payload.get(key) or {}).get("number")
            if number:
                return int(number)
        return None


async def get_id_token(
    audience: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Request a signed OIDC token for the given audience from the runner.

    Requires the workflow to grant `id-token: write`.

    Raises:
        IDTokenException: If the runner does not expose the token endpoint
            or the request fails
    """
    env = os.environ if environ is None else environ
    request_url = env.get("ACTIONS_ID_TOKEN_REQUEST_URL")
    request_token = env.get("ACTIONS_ID_TOKEN_REQUEST_TOKEN")
    if not request_url:
        raise IDTokenException("Unable to get ACTIONS_ID_TOKEN_REQUEST_URL env variable")
    if not request_token:
        raise IDTokenException("Unable to get ACTIONS_ID_TOKEN_REQUEST_TOKEN env variable")

    # The request URL already carries api-version; audience is added to it
    url = httpx.URL(request_url)
    if audience:
        url = url.copy_merge_params({"audience": audience})
    headers = {"Authorization": f"Bearer {request_token}", "Accept": "application/json"}

    try:
        async with httpx.AsyncClient(timeout=None, follow_redirects=True, transport=transport) as client:
            response = await client.get(url, headers=headers)
    except httpx.RequestError as e:
        raise IDTokenException(f"Failed to get ID Token: {e}") from e

    if not response.is_success:
        raise IDTokenException(
            f"Failed to get ID Token. Error Code: {response.status_code}. Error Message: {response.text}"
        )

    id_token = response.json().get("value")
    if not id_token:
        raise IDTokenException("Response json body do not have ID Token field")
    return id_token


def set_output(name: str, value: str, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Record a step output.

    Outputs are appended to the file named by GITHUB_OUTPUT using the
    multi-line delimiter syntax. Outside a runner the legacy
    `::set-output` command is printed instead.
    """
    env = os.environ if environ is None else environ
    output_path = env.get("GITHUB_OUTPUT")
    if not output_path:
        print(f"::set-output name={name}::{escape_command_data(value)}")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str, log: Optional[logging.Logger] = None) -> None:
    """Report the step as failed; the entry point turns this into exit code 1."""
    (log or logger).error(message)
