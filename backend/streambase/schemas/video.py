"""Video Schemas: request bodies and response record for /api/videos.

Invariants:
    - title and url are required, stripped, and non-empty
    - duration_seconds, when present, is non-negative and fits an Integer column
    - Omitted optional fields are written as NULL on update (full replacement)
"""

from pydantic import BaseModel, Field, field_validator

from streambase.core.domain_types import MAX_INT_COLUMN


class VideoCreate(BaseModel):
    """Video creation: title and url required, the rest optional."""
    title: str = Field(min_length=1, max_length=255)
    url: str = Field(min_length=1, max_length=2048)
    description: str | None = Field(None, max_length=5000)
    duration_seconds: int | None = Field(None, ge=0, le=MAX_INT_COLUMN)

    @field_validator("title", "url", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        # length limits apply to the stripped value
        return v.strip() if isinstance(v, str) else v


class VideoUpdate(VideoCreate):
    pass


class VideoResponse(BaseModel):
    id: int
    title: str
    url: str
    description: str | None = None
    duration_seconds: int | None = None
