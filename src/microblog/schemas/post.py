# src/microblog/schemas/post.py
"""Post-related Pydantic schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Content is left untyped: the post ledger checks it, so a missing, blank
    or non-string body all get the same 400 response.
    """

    content: Any = Field(None, description="Post text")


class PostDelete(BaseModel):
    """Schema for deleting a post by identifier."""

    id: str | None = Field(None, description="Identifier of the post to delete")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_numeric_id(cls, v: object) -> object:
        """Accept numeric identifiers sent by older clients."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    content: str
    timestamp: str

    model_config = ConfigDict(from_attributes=True)


class PostCount(BaseModel):
    """Total number of posts."""

    count: int
