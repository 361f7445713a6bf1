"""
SkillLens Action Configuration

Settings for a single action run. Values come from the action inputs, which
the runner exposes as `INPUT_<NAME>` environment variables (the input name
upper-cased, hyphens kept), and from the standard GitHub environment.
"""

import math
from enum import Enum
from typing import Any, Optional, Union

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SKILLLENS_API_URL = "https://skilllens-25qt.onrender.com/v1/recommendations"
DEFAULT_COMMENT_MARKER = "<!-- SkillLens:v0 -->"


class LogFormat(str, Enum):
    """Output format of the action log."""
    ACTIONS = "actions"
    JSON = "json"


def _input_alias(name: str) -> AliasChoices:
    """Accept both the runner's hyphenated variable and an underscore form."""
    upper = name.upper()
    return AliasChoices(f"INPUT_{upper}", f"INPUT_{upper.replace('-', '_')}")


Number = Union[int, float]


def _parse_number(value: Any) -> Optional[Number]:
    """
    Read a numeric input leniently; it never fails the run.

    Blank is 0 and a non-numeric value is None, sent to the service as null.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


class ActionSettings(BaseSettings):
    """Action inputs for one run of the SkillLens recommendation step."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ============================================================================
    # RECOMMENDATION SERVICE
    # ============================================================================

    skilllens_api_url: str = Field(
        default=DEFAULT_SKILLLENS_API_URL,
        description="Recommendation service endpoint",
        validation_alias=_input_alias("skilllens-api-url"),
    )
    oidc_audience: str = Field(
        default="skilllens.dev",
        description="Audience of the OIDC token sent to the recommendation service",
        validation_alias=_input_alias("oidc-audience"),
    )
    default_language: str = Field(
        default="English",
        description="Preferred natural language for recommendations",
        validation_alias=_input_alias("default-language"),
    )
    max_topics: Optional[Number] = Field(
        default=5,
        description="Maximum number of recommended topics",
        validation_alias=_input_alias("max-topics"),
    )
    min_confidence: Optional[Number] = Field(
        default=0.65,
        description="Minimum confidence of a recommended topic",
        validation_alias=_input_alias("min-confidence"),
    )
    fail_on_proxy_error: bool = Field(
        default=False,
        description="Fail the step when the recommendation service errors",
        validation_alias=_input_alias("fail-on-proxy-error"),
    )

    # ============================================================================
    # GITHUB
    # ============================================================================

    comment_marker: str = Field(
        default=DEFAULT_COMMENT_MARKER,
        description="Hidden marker identifying the managed PR comment",
        validation_alias=_input_alias("comment-marker"),
    )
    github_token: Optional[str] = Field(
        default=None,
        description="Token override used when GITHUB_TOKEN is not set",
        validation_alias=_input_alias("github-token"),
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API base URL",
        validation_alias=AliasChoices("GITHUB_API_URL", "github_api_url"),
    )

    # ============================================================================
    # DIAGNOSTICS
    # ============================================================================

    debug: bool = Field(
        default=False,
        description="Emit diagnostic traces",
        validation_alias=_input_alias("debug"),
    )
    log_format: LogFormat = Field(
        default=LogFormat.ACTIONS,
        description="Log output format",
        validation_alias=_input_alias("log-format"),
    )

    # ============================================================================
    # VALIDATION
    # ============================================================================

    @field_validator("fail_on_proxy_error", "debug", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> bool:
        """Flags are enabled only by the literal string "true"."""
        if isinstance(v, bool):
            return v
        return str(v).strip() == "true"

    @field_validator("max_topics", "min_confidence", mode="before")
    @classmethod
    def parse_number(cls, v: Any) -> Any:
        return _parse_number(v)

    @field_validator("github_token", mode="before")
    @classmethod
    def blank_token_is_missing(cls, v: Any) -> Optional[str]:
        if v is None or not str(v).strip():
            return None
        return str(v).strip()

    @field_validator("log_format", mode="before")
    @classmethod
    def parse_log_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower() or LogFormat.ACTIONS
        return v

    def get_defaults(self) -> dict:
        """Recommendation defaults sent along with the feedback."""
        return {
            "language": self.default_language,
            "max_topics": self.max_topics,
            "min_confidence": self.min_confidence,
        }


# ============================================================================
# CONFIGURATION FACTORY
# ============================================================================

def get_action_settings() -> ActionSettings:
    """
    Load action settings from the environment.

    Inputs are read from the variables the runner sets for `with:` values:
    - INPUT_MAX-TOPICS=5
    - INPUT_FAIL-ON-PROXY-ERROR=true
    """
    return ActionSettings()
