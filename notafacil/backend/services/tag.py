"""
Tag Service.

Tag management: list, look up, create, rename/recolor and delete tags.
Tag names are unique.
"""

from notafacil.backend.core.exceptions import ConflictError, NotFoundError
from notafacil.backend.domain.repositories import TagRepository
from notafacil.backend.domain.tag import DEFAULT_TAG_COLOR, Tag
from notafacil.backend.services.base import BaseService


class TagService(BaseService):
    """Use cases over tags."""

    def __init__(self, tags: TagRepository) -> None:
        super().__init__()
        self.tags = tags

    async def list_tags(self) -> list[Tag]:
        return await self.tags.find_all()

    async def get_tag(self, tag_id: str) -> Tag:
        """
        Raises:
            NotFoundError: If the tag does not exist
        """
        tag = await self.tags.find_by_id(tag_id)
        if tag is None:
            raise NotFoundError("Tag not found")
        return tag

    async def create_tag(self, name: str, color: str | None = None) -> Tag:
        """
        Create a tag.

        Raises:
            ValidationError: If the name or color is invalid
            ConflictError: If another tag already has this name
        """
        tag = Tag(name=name, color=color or DEFAULT_TAG_COLOR)
        await self._ensure_name_free(tag.name)

        created = await self.tags.create(tag)
        self._log_operation("Tag created", tag_id=created.id, name=created.name)
        return created

    async def update_tag(
        self,
        tag_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> Tag:
        """
        Rename and/or recolor a tag. None leaves a field unchanged.

        Raises:
            NotFoundError: If the tag does not exist
            ValidationError: If the new name or color is invalid
            ConflictError: If another tag already has the new name
        """
        tag = await self.get_tag(tag_id)

        if name is not None and name != tag.name:
            tag = tag.with_name(name)
            await self._ensure_name_free(tag.name, exclude_id=tag.id)
        if color is not None:
            tag = tag.with_color(color)

        updated = await self.tags.update(tag)
        self._log_operation("Tag updated", tag_id=updated.id)
        return updated

    async def delete_tag(self, tag_id: str) -> None:
        """Delete a tag and detach it from every note. Unknown ids are ignored."""
        await self.tags.delete(tag_id)
        self._log_operation("Tag deleted", tag_id=tag_id)

    async def _ensure_name_free(self, name: str, exclude_id: str | None = None) -> None:
        existing = await self.tags.find_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"Tag '{name}' already exists")
