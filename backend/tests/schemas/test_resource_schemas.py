"""Resource Schemas: required fields, stripping, and optional defaults."""

import pytest
from pydantic import ValidationError

from streambase.schemas.user import UserCreate, UserUpdate
from streambase.schemas.video import VideoCreate, VideoUpdate


def test_user_create_strips_whitespace():
    user = UserCreate(name="  Ada ", email=" ada@x.io ")
    assert user.name == "Ada"
    assert user.email == "ada@x.io"


@pytest.mark.parametrize("payload", [
    {"email": "a@b.com"},
    {"name": "Ada"},
    {"name": "", "email": "a@b.com"},
    {"name": "Ada", "email": "   "},
])
def test_user_create_rejects_missing_or_blank(payload):
    with pytest.raises(ValidationError):
        UserCreate(**payload)


def test_user_update_requires_both_fields():
    with pytest.raises(ValidationError):
        UserUpdate(name="Only name")


def test_video_optional_fields_default_to_none():
    video = VideoCreate(title="T", url="https://u")
    assert video.description is None
    assert video.duration_seconds is None


@pytest.mark.parametrize("duration", [-5, 2_147_483_648, 10**30])
def test_video_rejects_duration_outside_column_range(duration):
    with pytest.raises(ValidationError):
        VideoCreate(title="T", url="https://u", duration_seconds=duration)


def test_video_accepts_largest_column_duration():
    video = VideoCreate(title="T", url="https://u", duration_seconds=2_147_483_647)
    assert video.duration_seconds == 2_147_483_647


def test_length_limits_apply_after_stripping():
    padded = "  " + "a" * 255 + "  "
    assert VideoCreate(title=padded, url="https://u").title == "a" * 255
    assert UserCreate(name=padded, email="a@x.io").name == "a" * 255


def test_video_update_requires_title_and_url():
    with pytest.raises(ValidationError):
        VideoUpdate(url="https://u")
    with pytest.raises(ValidationError):
        VideoUpdate(title="T", url=" ")
