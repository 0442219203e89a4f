"""Video Routes: full CRUD on /api/videos."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from streambase.api.dependencies import get_video_service
from streambase.core.domain_types import MAX_INT_COLUMN, VideoId
from streambase.schemas.common import MessageResponse
from streambase.schemas.video import VideoCreate, VideoResponse, VideoUpdate
from streambase.services.video_service import VideoService

router = APIRouter(prefix="/api/videos", tags=["videos"])

# ids outside the int4 range can never match a row
VideoIdPath = Annotated[int, Path(ge=1, le=MAX_INT_COLUMN)]


@router.post(
    "", response_model=VideoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_video(
    body: VideoCreate, service: VideoService = Depends(get_video_service),
):
    return await service.create(body)


@router.get("", response_model=list[VideoResponse])
async def list_videos(service: VideoService = Depends(get_video_service)):
    return await service.list_all()


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: VideoIdPath, service: VideoService = Depends(get_video_service),
):
    return await service.get(VideoId(video_id))


@router.put("/{video_id}", response_model=VideoResponse)
async def update_video(
    video_id: VideoIdPath,
    body: VideoUpdate,
    service: VideoService = Depends(get_video_service),
):
    """Replace every field of an existing video."""
    return await service.update(VideoId(video_id), body)


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(
    video_id: VideoIdPath, service: VideoService = Depends(get_video_service),
):
    return await service.delete(VideoId(video_id))
