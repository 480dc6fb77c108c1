"""
Note Service.

Single-note lookups and deletion. Searching, creating, exporting and
importing live in their own services.
"""

from notafacil.backend.core.exceptions import NotFoundError
from notafacil.backend.domain.note import Note
from notafacil.backend.domain.repositories import NoteRepository
from notafacil.backend.services.base import BaseService


class NoteService(BaseService):
    def __init__(self, notes: NoteRepository) -> None:
        super().__init__()
        self.notes = notes

    async def get_note(self, note_id: str) -> Note:
        """
        Raises:
            NotFoundError: If the note does not exist
        """
        note = await self.notes.find_by_id(note_id)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    async def delete_note(self, note_id: str) -> None:
        """Delete a note. Unknown ids are ignored."""
        await self.notes.delete(note_id)
        self._log_operation("Note deleted", note_id=note_id)
