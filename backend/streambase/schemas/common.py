"""Shared response bodies."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Confirmation body for operations that return no record (e.g. delete)."""
    message: str
