"""
Note Export Service.

Serializes notes to the JSON transfer document read by the import service.
"""

import json
from collections.abc import Iterable

from notafacil.backend.domain.repositories import NoteRepository
from notafacil.backend.schemas.note_transfer import NoteRecord
from notafacil.backend.services.base import BaseService


class ExportNotesService(BaseService):
    """Export all notes, or a chosen subset, as an indented JSON array."""

    def __init__(self, notes: NoteRepository) -> None:
        super().__init__()
        self.notes = notes

    async def execute(self, note_ids: Iterable[str] | None = None) -> str:
        """
        Build the export document.

        Args:
            note_ids: Ids to export. None or empty exports every note.
                Unknown ids are skipped silently; output follows storage order.

        Returns:
            JSON text (2-space indent) of an array of note records
        """
        wanted = set(note_ids or ())
        notes = await self.notes.find_all()
        if wanted:
            notes = [note for note in notes if note.id in wanted]

        records = [
            NoteRecord.from_note(note).model_dump(mode="json", by_alias=True)
            for note in notes
        ]

        self._log_operation(
            "Notes exported",
            exported=len(records),
            requested=len(wanted) or None,
        )
        return json.dumps(records, indent=2, ensure_ascii=False)
