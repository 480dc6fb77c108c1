"""
Note Entity.

Immutable note value. Every change returns a new Note, and validation
runs on construction, so an invalid Note can never be observed.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any
from uuid import uuid4

from notafacil.backend.core.exceptions import ValidationError
from notafacil.backend.core.utils import utc_now
from notafacil.backend.domain.validation import validate_note


@dataclass(frozen=True)
class Note:
    """
    A titled text note labelled with tag ids.

    `tags` holds tag identifiers, not Tag objects. It is treated as a set
    by `with_tag`, but an initial sequence is kept as given.
    """

    title: str
    content: str = ""
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        result = validate_note(self.title, self.content)
        if not result.is_valid:
            raise ValidationError(result.first_error)

        # Frozen dataclass: fill defaults through object.__setattr__
        if self.id is None:
            object.__setattr__(self, "id", str(uuid4()))
        if self.created_at is None:
            object.__setattr__(self, "created_at", utc_now())
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)
        object.__setattr__(self, "tags", tuple(self.tags))

    def with_title(self, title: str) -> "Note":
        return replace(self, title=title, updated_at=utc_now())

    def with_content(self, content: str) -> "Note":
        return replace(self, content=content, updated_at=utc_now())

    def with_tag(self, tag_id: str) -> "Note":
        """Add a tag id. Adding a tag that is already present is a no-op."""
        if tag_id in self.tags:
            return self
        return replace(self, tags=self.tags + (tag_id,), updated_at=utc_now())

    def without_tag(self, tag_id: str) -> "Note":
        """Remove a tag id. `updated_at` moves even when the tag was absent."""
        return replace(
            self,
            tags=tuple(t for t in self.tags if t != tag_id),
            updated_at=utc_now(),
        )

    def has_tag(self, tag_id: str) -> bool:
        return tag_id in self.tags

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "tags": list(self.tags),
        }
