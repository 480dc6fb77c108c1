"""
Tag Entity.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any
from uuid import uuid4

from notafacil.backend.core.exceptions import ValidationError
from notafacil.backend.core.utils import utc_now
from notafacil.backend.domain.validation import validate_tag

DEFAULT_TAG_COLOR = "#cccccc"


@dataclass(frozen=True)
class Tag:
    """A named, coloured label. Notes refer to tags by id only."""

    name: str
    color: str = DEFAULT_TAG_COLOR
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        result = validate_tag(self.name, self.color)
        if not result.is_valid:
            raise ValidationError(result.first_error)

        if self.id is None:
            object.__setattr__(self, "id", str(uuid4()))
        if self.created_at is None:
            object.__setattr__(self, "created_at", utc_now())

    def with_name(self, name: str) -> "Tag":
        return replace(self, name=name)

    def with_color(self, color: str) -> "Tag":
        return replace(self, color=color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "created_at": self.created_at,
        }
