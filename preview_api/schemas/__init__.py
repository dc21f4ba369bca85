from preview_api.schemas.feedback import (
    FeedbackRequest,
    FeedbackResult,
    IssueCreate,
    IssueCreated,
)
from preview_api.schemas.metadata import MetadataRequest, PageMetadata

__all__ = [
    "FeedbackRequest",
    "FeedbackResult",
    "IssueCreate",
    "IssueCreated",
    "MetadataRequest",
    "PageMetadata",
]
