"""
Tag Repository.

SQL implementation of the TagRepository protocol.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notafacil.backend.domain.tag import Tag
from notafacil.backend.models.note import NoteModel, NoteTagModel
from notafacil.backend.models.tag import TagModel
from notafacil.backend.repositories.base import BaseRepository


def to_entity(row: TagModel) -> Tag:
    """Map a tag row to a Tag entity."""
    return Tag(id=row.id, name=row.name, color=row.color, created_at=row.created_at)


class SqlTagRepository(BaseRepository[TagModel]):
    """Tag persistence backed by the `tags` table."""

    model = TagModel

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def find_by_id(self, tag_id: str) -> Tag | None:
        row = await self._execute_db_operation("find tag by id", self.get_by_id_or_none(tag_id))
        return to_entity(row) if row is not None else None

    async def find_all(self) -> list[Tag]:
        return await self._execute_db_operation("find all tags", self._find_all())

    async def _find_all(self) -> list[Tag]:
        result = await self.session.execute(
            select(TagModel).order_by(TagModel.name)
        )
        return [to_entity(row) for row in result.scalars().all()]

    async def find_by_name(self, name: str) -> Tag | None:
        return await self._execute_db_operation("find tag by name", self._find_by_name(name))

    async def _find_by_name(self, name: str) -> Tag | None:
        result = await self.session.execute(
            select(TagModel).where(TagModel.name == name)
        )
        row = result.scalar_one_or_none()
        return to_entity(row) if row is not None else None

    async def create(self, tag: Tag) -> Tag:
        return await self._execute_db_operation("create tag", self._create(tag))

    async def _create(self, tag: Tag) -> Tag:
        row = TagModel(id=tag.id, name=tag.name, color=tag.color, created_at=tag.created_at)
        self.session.add(row)
        await self.session.flush()
        return to_entity(row)

    async def update(self, tag: Tag) -> Tag:
        """
        Raises:
            NotFoundError: If no tag has this id
        """
        return await self._execute_db_operation("update tag", self._update(tag))

    async def _update(self, tag: Tag) -> Tag:
        row = await self.get_by_id(tag.id)
        row.name = tag.name
        row.color = tag.color
        await self.session.flush()
        return to_entity(row)

    async def delete(self, tag_id: str) -> None:
        await self._execute_db_operation("delete tag", self._delete(tag_id))

    async def _delete(self, tag_id: str) -> None:
        # Drop the tag from notes through the ORM so loaded notes stay consistent
        result = await self.session.execute(
            select(NoteModel)
            .join(NoteTagModel, NoteTagModel.note_id == NoteModel.id)
            .where(NoteTagModel.tag_id == tag_id)
        )
        for note_row in result.scalars().unique().all():
            note_row.tag_links = [link for link in note_row.tag_links if link.tag_id != tag_id]

        row = await self.get_by_id_or_none(tag_id)
        if row is not None:
            await self.session.delete(row)
        await self.session.flush()
