"""
Domain Validation Rules.

Pure functions shared by the entities and the use cases, so a rule
is written once and reports the same message wherever it is checked.
"""

import re
from dataclasses import dataclass, field

NOTE_TITLE_MAX_LENGTH = 100
NOTE_CONTENT_MAX_LENGTH = 10000
TAG_NAME_MAX_LENGTH = 50

HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-F]{3}){1,2}$", re.IGNORECASE)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation rule. Errors are kept in the order they were found."""

    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> str | None:
        return self.errors[0] if self.errors else None


def validate_note(title: str, content: str) -> ValidationResult:
    """
    Check note title and content.

    Order: title emptiness, title length, content length.
    A blank title is only reported as empty, never also as too long.
    """
    errors: list[str] = []

    if not title or not title.strip():
        errors.append("Note title cannot be empty")
    elif len(title) > NOTE_TITLE_MAX_LENGTH:
        errors.append(f"Note title cannot exceed {NOTE_TITLE_MAX_LENGTH} characters")

    if len(content) > NOTE_CONTENT_MAX_LENGTH:
        errors.append(f"Note content cannot exceed {NOTE_CONTENT_MAX_LENGTH} characters")

    return ValidationResult(tuple(errors))


def validate_tag(name: str, color: str) -> ValidationResult:
    """Check tag name and color."""
    errors: list[str] = []

    if not name or not name.strip():
        errors.append("Tag name cannot be empty")
    elif len(name) > TAG_NAME_MAX_LENGTH:
        errors.append(f"Tag name cannot exceed {TAG_NAME_MAX_LENGTH} characters")

    if not HEX_COLOR_PATTERN.match(color or ""):
        errors.append("Tag color must be a valid hex code (#RGB or #RRGGBB)")

    return ValidationResult(tuple(errors))
