"""Video Handler: statement shape and full-replacement semantics."""

import pytest

from streambase.core.domain_types import VideoId
from streambase.core.errors import ResourceNotFoundError
from streambase.schemas.video import VideoCreate, VideoUpdate
from streambase.services.video_service import VideoService


async def test_create_binds_all_columns_in_order(recording_executor):
    recording_executor.results.append([{"id": 1}])
    await VideoService(recording_executor).create(
        VideoCreate(title="T", url="https://u", duration_seconds=5),
    )
    statement, params = recording_executor.calls[0]
    assert statement.startswith("INSERT INTO videos")
    assert params == ["T", "https://u", None, 5]


async def test_delete_empty_result_raises_not_found(recording_executor):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await VideoService(recording_executor).delete(VideoId(5))
    assert exc_info.value.to_response()["error"]["context"]["resource_id"] == "5"
    assert len(recording_executor.calls) == 1


async def test_list_returns_newest_first(executor):
    service = VideoService(executor)
    first = await service.create(VideoCreate(title="A", url="https://a"))
    second = await service.create(VideoCreate(title="B", url="https://b"))

    videos = await service.list_all()
    assert [v["id"] for v in videos] == [second["id"], first["id"]]


async def test_update_clears_omitted_optional_fields(executor):
    service = VideoService(executor)
    created = await service.create(VideoCreate(
        title="A", url="https://a", description="desc", duration_seconds=30,
    ))

    updated = await service.update(
        VideoId(created["id"]), VideoUpdate(title="A2", url="https://a2"),
    )
    assert updated["description"] is None
    assert updated["duration_seconds"] is None
    assert (await service.get(VideoId(created["id"])))["title"] == "A2"
