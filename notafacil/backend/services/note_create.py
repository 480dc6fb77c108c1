"""
Note Create Service.
"""

from collections.abc import Iterable

from notafacil.backend.core.exceptions import ValidationError
from notafacil.backend.domain.note import Note
from notafacil.backend.domain.repositories import NoteRepository
from notafacil.backend.domain.validation import validate_note
from notafacil.backend.services.base import BaseService


class CreateNoteService(BaseService):
    """Validate input, build a Note and persist it."""

    def __init__(self, notes: NoteRepository) -> None:
        super().__init__()
        self.notes = notes

    async def execute(
        self,
        title: str,
        content: str = "",
        tag_ids: Iterable[str] | None = None,
    ) -> Note:
        """
        Create a note.

        Returns:
            The note as stored by the repository.

        Raises:
            ValidationError: If the title or content breaks a note rule
        """
        result = validate_note(title, content)
        if not result.is_valid:
            raise ValidationError(
                result.first_error,
                details={"errors": list(result.errors)},
            )

        note = Note(title=title, content=content, tags=tuple(tag_ids or ()))
        created = await self.notes.create(note)

        self._log_operation("Note created", note_id=created.id, tag_count=len(created.tags))
        return created
