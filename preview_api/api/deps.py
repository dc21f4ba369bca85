from fastapi import Depends

from preview_api.config import Settings, get_settings
from preview_api.services.feedback import FeedbackService
from preview_api.services.metadata import FetchPolicy, MetadataService


async def get_metadata_service(
    settings: Settings = Depends(get_settings),
) -> MetadataService:
    return MetadataService(FetchPolicy.from_settings(settings))


async def get_feedback_service(
    settings: Settings = Depends(get_settings),
) -> FeedbackService:
    return FeedbackService.from_settings(settings)
