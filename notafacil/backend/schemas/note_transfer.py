"""
Note Transfer Schema.

The wire record used by export and import:

    {"id": "...", "title": "...", "content": "...",
     "createdAt": "2024-05-01T10:00:00.000Z", "updatedAt": "...", "tags": ["..."]}

Timestamps are written as UTC with millisecond precision and a Z suffix.
Any ISO 8601 value is accepted on input; aware values are normalized to naive UTC.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from notafacil.backend.core.utils import to_iso_z, to_naive_utc
from notafacil.backend.domain.note import Note


class NoteRecord(BaseModel):
    """One exported note."""

    id: str | None = None
    title: str
    content: str = ""
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value) if value is not None else None

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime | None) -> str | None:
        return to_iso_z(value) if value is not None else None

    @classmethod
    def from_note(cls, note: Note) -> "NoteRecord":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
            tags=list(note.tags),
        )

    def to_note(self, **overrides: Any) -> Note:
        """
        Build a Note from this record.

        Raises:
            ValidationError: If the record breaks a note rule
        """
        fields = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "tags": tuple(self.tags),
        }
        fields.update({key: value for key, value in overrides.items() if value is not None})
        return Note(**fields)
