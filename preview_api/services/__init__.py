from preview_api.services.errors import (
    BodyReadError,
    FeedbackError,
    HTTPStatusError,
    MetadataFetchError,
    NetworkError,
)
from preview_api.services.feedback import FeedbackService
from preview_api.services.metadata import FetchPolicy, MetadataService, fetch_og_metadata

__all__ = [
    "BodyReadError",
    "FeedbackError",
    "FeedbackService",
    "FetchPolicy",
    "HTTPStatusError",
    "MetadataFetchError",
    "MetadataService",
    "NetworkError",
    "fetch_og_metadata",
]
