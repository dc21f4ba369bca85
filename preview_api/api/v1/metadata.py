from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from preview_api.api.deps import get_metadata_service
from preview_api.schemas import MetadataRequest, PageMetadata
from preview_api.services.errors import MetadataFetchError
from preview_api.services.metadata import MetadataService

router = APIRouter(prefix="/metadata", tags=["metadata"])


async def _extract(service: MetadataService, url: str) -> PageMetadata:
    try:
        return await service.extract(url)
    except MetadataFetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message
        ) from exc


@router.get("", response_model=PageMetadata)
async def get_metadata(
    url: Annotated[str, Query(min_length=1)],
    service: Annotated[MetadataService, Depends(get_metadata_service)],
) -> PageMetadata:
    """Fetch a page and return its link preview."""
    return await _extract(service, url)


@router.post("", response_model=PageMetadata)
async def fetch_metadata(
    payload: MetadataRequest,
    service: Annotated[MetadataService, Depends(get_metadata_service)],
) -> PageMetadata:
    """Same as GET, with the URL in the request body."""
    return await _extract(service, payload.url)
