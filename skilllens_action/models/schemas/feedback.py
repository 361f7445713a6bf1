"""
Review Feedback Schemas

Pydantic schemas for the pull request feedback forwarded to the
recommendation service.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


FeedbackType = Literal["inline", "review", "conversation"]


class FeedbackItem(BaseModel):
    """
    One piece of reviewer feedback, tagged by where it was left.

    `inline` items are review comments tied to a file, `review` items are
    review summaries and `conversation` items are general PR comments.
    Only inline items carry a path.
    """

    type: FeedbackType = Field(..., description="Feedback category")
    body: str = Field(..., description="Feedback text with long code fences trimmed", min_length=1)
    path: Optional[str] = Field(None, description="File the inline comment is attached to")
    author: Optional[str] = Field(None, description="Login of the feedback author")
    created_at: str = Field("", description="Creation or submission timestamp")

    @model_validator(mode="after")
    def check_path_only_inline(self) -> "FeedbackItem":
        if self.path is not None and self.type != "inline":
            raise ValueError("Only inline feedback can reference a file path")
        return self

    def to_payload(self) -> dict:
        """Wire form; unset optional fields are left out."""
        return self.model_dump(exclude_none=True)
