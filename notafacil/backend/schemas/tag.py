"""
Tag Schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TagCreate(BaseModel):
    """Schema for creating a tag."""

    name: str = Field(..., description="Tag name (1-50 characters)", examples=["trabajo"])
    color: str | None = Field(
        default=None,
        description="Hex color (#RGB or #RRGGBB); defaults to #cccccc",
        examples=["#ff8800"],
    )


class TagUpdate(BaseModel):
    """Schema for renaming or recoloring a tag. Omitted fields are left unchanged."""

    name: str | None = None
    color: str | None = None


class TagResponse(BaseModel):
    """Schema for tag in API responses."""

    id: str
    name: str
    color: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
