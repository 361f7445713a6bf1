"""
Recommendation Service Schemas

Request and response contracts of the SkillLens recommendation service,
plus the result of one action run.
"""

from datetime import datetime, timezone
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .feedback import FeedbackItem


class RepositoryRef(BaseModel):
    """Repository and pull request the feedback belongs to."""

    model_config = ConfigDict(populate_by_name=True)

    owner: str = Field(..., description="Repository owner")
    name: str = Field(..., description="Repository name")
    pr_number: int = Field(..., alias="prNumber", description="Pull request number", ge=1)


class RecommendationDefaults(BaseModel):
    """Defaults applied by the service when the feedback does not decide."""

    model_config = ConfigDict(populate_by_name=True)

    language: str = Field(..., description="Preferred natural language")
    max_topics: Optional[Union[int, float]] = Field(..., alias="maxTopics", description="Maximum number of topics")
    min_confidence: Optional[Union[int, float]] = Field(..., alias="minConfidence", description="Minimum topic confidence")


class RecommendationRequest(BaseModel):
    """Input contract for the recommendation service."""

    repo: RepositoryRef
    reviews: List[FeedbackItem] = Field(default_factory=list)
    defaults: RecommendationDefaults

    def to_payload(self) -> dict:
        return {
            "repo": self.repo.model_dump(by_alias=True),
            "reviews": [item.to_payload() for item in self.reviews],
            "defaults": self.defaults.model_dump(by_alias=True),
        }


class RecommendationResult(BaseModel):
    """Output contract of the recommendation service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Topic records are passed through without schema validation
    topics: Any = Field(default_factory=list)
    comment_markdown: Optional[str] = Field(None, alias="commentMarkdown")

    @field_validator("topics", mode="before")
    @classmethod
    def null_topics_are_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class RecommendationRunResult(BaseModel):
    """Outcome of one action run."""

    status: Literal["completed", "skipped", "degraded", "failed"] = Field(
        ..., description="Final run status"
    )
    topics_json: Optional[str] = Field(None, description="JSON encoded topics output")
    comment_url: Optional[str] = Field(None, description="URL of the created or updated comment")
    error_message: Optional[str] = Field(None, description="Reason for a skipped, degraded or failed run")
    completed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Run completion timestamp")

    @property
    def failed(self) -> bool:
        return self.status == "failed"
