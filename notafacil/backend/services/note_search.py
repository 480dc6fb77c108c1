"""
Note Search Service.

Free-text search over titles and/or content, optionally filtered by tags.
"""

from collections.abc import Iterable
from enum import Enum

from notafacil.backend.domain.note import Note
from notafacil.backend.domain.repositories import NoteRepository
from notafacil.backend.services.base import BaseService


class SearchScope(str, Enum):
    """Which note fields the search text is matched against."""

    TITLE_ONLY = "title"
    CONTENT_ONLY = "content"
    BOTH = "both"


class SearchNotesService(BaseService):
    """
    Search notes.

    - No text and no tags: every note, unfiltered.
    - Text: case-insensitive containment in the title (repository query),
      the content (filtered in memory), or both. With BOTH, title matches
      come first, followed by content-only matches.
    - Tags: keep notes carrying at least one of the requested tags.
    """

    def __init__(self, notes: NoteRepository) -> None:
        super().__init__()
        self.notes = notes

    async def execute(
        self,
        search_text: str = "",
        tag_ids: Iterable[str] = (),
        scope: SearchScope = SearchScope.TITLE_ONLY,
    ) -> list[Note]:
        wanted_tags = set(tag_ids)
        self._log_debug(
            "Searching notes",
            has_text=bool(search_text),
            tag_count=len(wanted_tags),
            scope=scope.value,
        )

        if not search_text and not wanted_tags:
            return await self.notes.find_all()

        if search_text:
            results = await self._match_text(search_text, scope)
        else:
            results = await self.notes.find_all()

        if wanted_tags:
            results = [note for note in results if wanted_tags.intersection(note.tags)]

        self._log_debug("Search completed", result_count=len(results))
        return results

    async def _match_text(self, text: str, scope: SearchScope) -> list[Note]:
        results: list[Note] = []

        if scope in (SearchScope.TITLE_ONLY, SearchScope.BOTH):
            results.extend(await self.notes.find_by_title(text))

        if scope in (SearchScope.CONTENT_ONLY, SearchScope.BOTH):
            needle = text.lower()
            seen = {note.id for note in results}
            for note in await self.notes.find_all():
                if note.id not in seen and needle in note.content.lower():
                    results.append(note)

        return results
