"""
Note Schemas.

Pydantic schemas for note API request/response validation.
Length rules are enforced by the domain, so violations surface with the
domain's messages as 400 responses rather than as 422 schema errors.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notafacil.backend.services.note_import import ImportMode


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        description="Note title (1-100 characters)",
        examples=["Plan del proyecto"],
    )
    content: str = Field(
        default="",
        description="Note content (up to 10000 characters)",
        examples=["Hitos y responsables del trimestre."],
    )
    tag_ids: list[str] = Field(
        default_factory=list,
        description="Ids of the tags attached to the note",
    )


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    tags: list[str] = Field(description="Tag ids in insertion order")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteImportRequest(BaseModel):
    """Schema for importing a previously exported document."""

    json_data: str = Field(
        ...,
        alias="jsonData",
        description="Export document: a JSON array of note records",
    )
    mode: ImportMode = Field(
        default=ImportMode.SKIP,
        description="What to do with notes whose id already exists",
    )

    model_config = ConfigDict(populate_by_name=True)


class ImportResultResponse(BaseModel):
    """Counters reported by an import."""

    imported: int
    updated: int
    skipped: int

    model_config = ConfigDict(from_attributes=True)
