from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from preview_api.api.deps import get_feedback_service
from preview_api.schemas import FeedbackRequest, FeedbackResult
from preview_api.services.errors import FeedbackError
from preview_api.services.feedback import FeedbackService

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackResult)
async def submit_feedback(
    payload: FeedbackRequest,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> FeedbackResult:
    """Forward in-app feedback to the issue tracker."""
    try:
        return await service.submit(payload)
    except FeedbackError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message
        ) from exc
