from fastapi import APIRouter

from preview_api.api.v1 import feedback, metadata

api_router = APIRouter(prefix="/api")
api_router.include_router(metadata.router)
api_router.include_router(feedback.router)

__all__ = ["api_router"]
