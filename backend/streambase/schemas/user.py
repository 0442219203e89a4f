"""User Schemas: request bodies and response record for /api/users.

Invariants:
    - name and email are required, stripped before length checks, and non-empty on both create and update
"""

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """User creation: both fields required."""
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=320)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        # length limits apply to the stripped value
        return v.strip() if isinstance(v, str) else v


class UserUpdate(UserCreate):
    """User update: replaces name and email unconditionally."""
    pass


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
