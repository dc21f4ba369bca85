from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedbackRequest(BaseModel):
    feedback_type: str = Field(default="feedback", alias="feedbackType")
    title: str
    description: str = ""
    app_version: str = Field(default="unknown", alias="appVersion")

    model_config = ConfigDict(populate_by_name=True)


class IssueCreate(BaseModel):
    title: str
    body: str
    labels: list[str]


class IssueCreated(BaseModel):
    number: int
    html_url: str


class FeedbackResult(BaseModel):
    success: bool
    issue_number: Optional[int] = None
    issue_url: Optional[str] = None
    error: Optional[str] = None
