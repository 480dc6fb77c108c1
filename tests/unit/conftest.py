"""
Unit Test Fixtures.

Fixtures for unit tests. Use cases run against in-memory repositories
that honor the repository protocols; nothing touches a real database.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from notafacil.backend.core.exceptions import NotFoundError
from notafacil.backend.domain.note import Note
from notafacil.backend.domain.tag import Tag


# =============================================================================
# In-Memory Repositories
# =============================================================================


class InMemoryNoteRepository:
    """
    NoteRepository backed by a dict.

    Storage order is insertion order; updates keep a note's position.
    Every call is recorded in `calls` as the method name.
    """

    def __init__(self, notes: list[Note] | None = None) -> None:
        self._notes: dict[str, Note] = {note.id: note for note in notes or []}
        self.calls: list[str] = []

    def seed(self, *notes: Note) -> None:
        """Store notes directly, without recording calls."""
        for note in notes:
            self._notes[note.id] = note

    async def find_by_id(self, note_id: str) -> Note | None:
        self.calls.append("find_by_id")
        return self._notes.get(note_id)

    async def find_all(self) -> list[Note]:
        self.calls.append("find_all")
        return list(self._notes.values())

    async def find_by_title(self, text: str) -> list[Note]:
        self.calls.append("find_by_title")
        needle = text.lower()
        return [note for note in self._notes.values() if needle in note.title.lower()]

    async def find_by_tag(self, tag_id: str) -> list[Note]:
        self.calls.append("find_by_tag")
        return [note for note in self._notes.values() if tag_id in note.tags]

    async def create(self, note: Note) -> Note:
        self.calls.append("create")
        self._notes[note.id] = note
        return note

    async def update(self, note: Note) -> Note:
        self.calls.append("update")
        if note.id not in self._notes:
            raise NotFoundError("Note not found")
        self._notes[note.id] = note
        return note

    async def delete(self, note_id: str) -> None:
        self.calls.append("delete")
        self._notes.pop(note_id, None)

    @property
    def writes(self) -> list[str]:
        return [call for call in self.calls if call in ("create", "update", "delete")]


class InMemoryTagRepository:
    """TagRepository backed by a dict. Deleting a tag also detaches it from `notes`, if given."""

    def __init__(
        self,
        tags: list[Tag] | None = None,
        notes: InMemoryNoteRepository | None = None,
    ) -> None:
        self._tags: dict[str, Tag] = {tag.id: tag for tag in tags or []}
        self._notes = notes

    def seed(self, *tags: Tag) -> None:
        for tag in tags:
            self._tags[tag.id] = tag

    async def find_by_id(self, tag_id: str) -> Tag | None:
        return self._tags.get(tag_id)

    async def find_all(self) -> list[Tag]:
        return sorted(self._tags.values(), key=lambda tag: tag.name)

    async def find_by_name(self, name: str) -> Tag | None:
        return next((tag for tag in self._tags.values() if tag.name == name), None)

    async def create(self, tag: Tag) -> Tag:
        self._tags[tag.id] = tag
        return tag

    async def update(self, tag: Tag) -> Tag:
        if tag.id not in self._tags:
            raise NotFoundError("Tag not found")
        self._tags[tag.id] = tag
        return tag

    async def delete(self, tag_id: str) -> None:
        self._tags.pop(tag_id, None)
        if self._notes is not None:
            for note in await self._notes.find_by_tag(tag_id):
                await self._notes.update(note.without_tag(tag_id))


@pytest.fixture
def note_repository() -> InMemoryNoteRepository:
    """Empty in-memory note repository."""
    return InMemoryNoteRepository()


@pytest.fixture
def tag_repository(note_repository: InMemoryNoteRepository) -> InMemoryTagRepository:
    """Empty in-memory tag repository wired to `note_repository`."""
    return InMemoryTagRepository(notes=note_repository)


# =============================================================================
# Note Factories
# =============================================================================


FIXED_TIME = datetime(2024, 5, 1, 10, 0, 0)


@pytest.fixture
def make_note():
    """
    Build Notes with stable defaults.

    Usage:
        def test_something(make_note):
            note = make_note("Plan", tags=("t1",))
    """

    def _make(
        title: str = "Nota",
        content: str = "",
        tags: tuple[str, ...] = (),
        id: str | None = None,
        created_at: datetime = FIXED_TIME,
    ) -> Note:
        return Note(
            id=id,
            title=title,
            content=content,
            tags=tags,
            created_at=created_at,
            updated_at=created_at,
        )

    return _make


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.get_logger", return_value=mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
