"""
Note Import Service.

Reads an export document and writes its notes back, creating unknown
notes and skipping or overwriting the ones that already exist.

The whole document is decoded before anything is written. Records are
then processed in order, one repository write at a time; when a record
is rejected the import stops and the records already written stay
written. Callers that need all-or-nothing behavior run the import
inside a transaction they roll back on error (the HTTP layer does).

Note rules are only checked for records that get written; a skipped
record only has to have the shape of an export record.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from notafacil.backend.core.exceptions import ImportDataError, ImportFormatError, ValidationError
from notafacil.backend.core.utils import utc_now
from notafacil.backend.domain.note import Note
from notafacil.backend.domain.repositories import NoteRepository
from notafacil.backend.schemas.note_transfer import NoteRecord
from notafacil.backend.services.base import BaseService


class ImportMode(str, Enum):
    """How to treat a record whose id is already stored."""

    SKIP = "skip"
    UPDATE = "update"


@dataclass
class ImportResult:
    imported: int = 0
    updated: int = 0
    skipped: int = 0


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in exc.errors()
    )


class ImportNotesService(BaseService):
    """Import notes from an export document."""

    def __init__(self, notes: NoteRepository) -> None:
        super().__init__()
        self.notes = notes

    async def execute(self, json_data: str, mode: ImportMode = ImportMode.SKIP) -> ImportResult:
        """
        Import notes.

        Raises:
            ImportFormatError: If the payload is not JSON or not an array
            ImportDataError: If a record is not a valid note
        """
        raw_records = self._decode(json_data)
        result = ImportResult()

        for index, raw in enumerate(raw_records):
            record = self._record(raw, index)
            existing = await self.notes.find_by_id(record.id) if record.id else None

            if existing is None:
                await self.notes.create(self._build(record, index))
                result.imported += 1
            elif mode is ImportMode.UPDATE:
                # Payload timestamps win; missing ones fall back to the stored creation time and now
                replacement = self._build(
                    record,
                    index,
                    created_at=record.created_at or existing.created_at,
                    updated_at=record.updated_at or utc_now(),
                )
                await self.notes.update(replacement)
                result.updated += 1
            else:
                result.skipped += 1

        self._log_operation(
            "Notes imported",
            mode=mode.value,
            imported=result.imported,
            updated=result.updated,
            skipped=result.skipped,
        )
        return result

    def _decode(self, json_data: str) -> list[Any]:
        try:
            data = json.loads(json_data)
        except (TypeError, ValueError) as e:
            raise ImportFormatError(f"Invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise ImportFormatError("Invalid data format: expected an array of notes")
        return data

    def _record(self, raw: Any, index: int) -> NoteRecord:
        try:
            return NoteRecord.model_validate(raw)
        except PydanticValidationError as e:
            self._log_debug("Rejected import record", record_index=index)
            raise ImportDataError(_describe(e), record_index=index) from e

    def _build(self, record: NoteRecord, index: int, **overrides: Any) -> Note:
        try:
            return record.to_note(**overrides)
        except ValidationError as e:
            self._log_debug("Rejected import record", record_index=index)
            raise ImportDataError(e.message, record_index=index) from e
