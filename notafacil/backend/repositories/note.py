"""
Note Repository.

SQL implementation of the NoteRepository protocol. Rows are mapped to
immutable Note entities on the way out; entities never leak ORM state.
"""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notafacil.backend.domain.note import Note
from notafacil.backend.models.note import NoteModel, NoteTagModel
from notafacil.backend.repositories.base import BaseRepository


def _tag_links(tag_ids: Iterable[str]) -> list[NoteTagModel]:
    return [
        NoteTagModel(tag_id=tag_id, position=position)
        for position, tag_id in enumerate(tag_ids)
    ]


def to_entity(row: NoteModel) -> Note:
    """Map a note row to a Note entity."""
    return Note(
        id=row.id,
        title=row.title,
        content=row.content,
        created_at=row.created_at,
        updated_at=row.updated_at,
        tags=tuple(row.tag_ids),
    )


class SqlNoteRepository(BaseRepository[NoteModel]):
    """Note persistence backed by the `notes` and `note_tags` tables."""

    model = NoteModel

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    def _ordered(self):
        return select(NoteModel).order_by(NoteModel.created_at, NoteModel.id)

    async def _fetch(self, statement) -> list[Note]:
        result = await self.session.execute(statement)
        return [to_entity(row) for row in result.scalars().unique().all()]

    async def find_by_id(self, note_id: str) -> Note | None:
        row = await self._execute_db_operation(
            "find note by id", self.get_by_id_or_none(note_id)
        )
        return to_entity(row) if row is not None else None

    async def find_all(self) -> list[Note]:
        return await self._execute_db_operation("find all notes", self._fetch(self._ordered()))

    async def find_by_title(self, text: str) -> list[Note]:
        """Case-insensitive substring match on the title. LIKE wildcards in `text` match literally."""
        statement = self._ordered().where(NoteModel.title.icontains(text, autoescape=True))
        return await self._execute_db_operation("find notes by title", self._fetch(statement))

    async def find_by_tag(self, tag_id: str) -> list[Note]:
        statement = (
            self._ordered()
            .join(NoteTagModel, NoteTagModel.note_id == NoteModel.id)
            .where(NoteTagModel.tag_id == tag_id)
        )
        return await self._execute_db_operation("find notes by tag", self._fetch(statement))

    async def create(self, note: Note) -> Note:
        return await self._execute_db_operation("create note", self._create(note))

    async def _create(self, note: Note) -> Note:
        row = NoteModel(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
            tag_links=_tag_links(note.tags),
        )
        self.session.add(row)
        await self.session.flush()
        return to_entity(row)

    async def update(self, note: Note) -> Note:
        """
        Replace the stored note with the same id.

        Raises:
            NotFoundError: If no note has this id
        """
        return await self._execute_db_operation("update note", self._update(note))

    async def _update(self, note: Note) -> Note:
        row = await self.get_by_id(note.id)
        row.title = note.title
        row.content = note.content
        row.created_at = note.created_at
        row.updated_at = note.updated_at

        # Flush the removals first so re-added (note_id, position) keys do not collide
        row.tag_links.clear()
        await self.session.flush()
        row.tag_links.extend(_tag_links(note.tags))
        await self.session.flush()
        return to_entity(row)

    async def delete(self, note_id: str) -> None:
        await self._execute_db_operation("delete note", self._delete(note_id))

    async def _delete(self, note_id: str) -> None:
        row = await self.get_by_id_or_none(note_id)
        if row is None:
            return
        await self.session.delete(row)
        await self.session.flush()
