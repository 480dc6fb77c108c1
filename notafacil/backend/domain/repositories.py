"""
Repository Protocols.

Storage contracts the use cases depend on. The SQL adapters in
notafacil.backend.repositories implement them; tests use in-memory fakes.
"""

from typing import Protocol, runtime_checkable

from notafacil.backend.domain.note import Note
from notafacil.backend.domain.tag import Tag


@runtime_checkable
class NoteRepository(Protocol):
    """Persistence contract for notes."""

    async def find_by_id(self, note_id: str) -> Note | None:
        """Return the note with this id, or None."""
        ...

    async def find_all(self) -> list[Note]:
        """Return every note in storage order (oldest first)."""
        ...

    async def find_by_title(self, text: str) -> list[Note]:
        """Return notes whose title contains `text`, ignoring case."""
        ...

    async def find_by_tag(self, tag_id: str) -> list[Note]:
        """Return notes carrying `tag_id`."""
        ...

    async def create(self, note: Note) -> Note:
        """
        Persist a new note.

        Returns:
            The stored note, which callers should treat as authoritative.
        """
        ...

    async def update(self, note: Note) -> Note:
        """
        Replace the stored note with the same id.

        Raises:
            NotFoundError: If no note has this id
        """
        ...

    async def delete(self, note_id: str) -> None:
        """Delete a note. Deleting an unknown id is a no-op."""
        ...


@runtime_checkable
class TagRepository(Protocol):
    """Persistence contract for tags."""

    async def find_by_id(self, tag_id: str) -> Tag | None:
        ...

    async def find_all(self) -> list[Tag]:
        ...

    async def find_by_name(self, name: str) -> Tag | None:
        """Return the tag with exactly this name, or None."""
        ...

    async def create(self, tag: Tag) -> Tag:
        ...

    async def update(self, tag: Tag) -> Tag:
        """
        Raises:
            NotFoundError: If no tag has this id
        """
        ...

    async def delete(self, tag_id: str) -> None:
        """Delete a tag and drop it from every note. Unknown ids are a no-op."""
        ...
