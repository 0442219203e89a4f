"""Video Handler: create, list, read, update, and delete for the videos table.

Invariants:
    - Every operation issues exactly one statement through the injected executor
    - An empty result for an id-scoped statement raises ResourceNotFoundError
    - Update replaces all four columns; omitted optional fields become NULL
"""

import logging

from streambase.core.domain_types import Row, VideoId
from streambase.core.errors import ResourceNotFoundError
from streambase.core.repository_protocols import StatementExecutor
from streambase.schemas.video import VideoCreate, VideoUpdate

logger = logging.getLogger(__name__)

INSERT_VIDEO = (
    "INSERT INTO videos (title, url, description, duration_seconds) "
    "VALUES ($1, $2, $3, $4) RETURNING *"
)
SELECT_VIDEOS = "SELECT * FROM videos ORDER BY id DESC"
SELECT_VIDEO = "SELECT * FROM videos WHERE id = $1"
UPDATE_VIDEO = (
    "UPDATE videos SET title = $1, url = $2, description = $3, "
    "duration_seconds = $4 WHERE id = $5 RETURNING *"
)
DELETE_VIDEO = "DELETE FROM videos WHERE id = $1 RETURNING *"


def _columns(body: VideoCreate) -> list[object]:
    return [body.title, body.url, body.description, body.duration_seconds]


class VideoService:
    """Resource handler for videos, bound to one executor per request."""

    def __init__(self, executor: StatementExecutor):
        self._executor = executor

    async def create(self, body: VideoCreate) -> Row:
        rows = await self._executor.execute(INSERT_VIDEO, _columns(body))
        video = rows[0]
        logger.info(
            "Video created", extra={"resource": "video", "resource_id": video["id"]},
        )
        return video

    async def list_all(self) -> list[Row]:
        return await self._executor.execute(SELECT_VIDEOS)

    async def get(self, video_id: VideoId) -> Row:
        rows = await self._executor.execute(SELECT_VIDEO, [video_id])
        return _first_or_404(rows, video_id)

    async def update(self, video_id: VideoId, body: VideoUpdate) -> Row:
        rows = await self._executor.execute(
            UPDATE_VIDEO, [*_columns(body), video_id],
        )
        video = _first_or_404(rows, video_id)
        logger.info(
            "Video updated", extra={"resource": "video", "resource_id": video_id},
        )
        return video

    async def delete(self, video_id: VideoId) -> dict[str, str]:
        rows = await self._executor.execute(DELETE_VIDEO, [video_id])
        _first_or_404(rows, video_id)
        logger.info(
            "Video deleted", extra={"resource": "video", "resource_id": video_id},
        )
        return {"message": "Video deleted successfully"}


def _first_or_404(rows: list[Row], video_id: VideoId) -> Row:
    if not rows:
        logger.info(
            "Video not found", extra={"resource": "video", "resource_id": video_id},
        )
        raise ResourceNotFoundError("Video", str(video_id))
    return rows[0]
