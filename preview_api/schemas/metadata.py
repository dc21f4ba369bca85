from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageMetadata(BaseModel):
    """Everything needed to render a link card for ``url``."""

    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    site_name: Optional[str] = None
    favicon: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class MetadataRequest(BaseModel):
    url: str = Field(min_length=1)
