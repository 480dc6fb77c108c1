"""
Notes API Endpoints.

REST API endpoints for searching, creating, exporting and importing notes.
"""

from fastapi import APIRouter, Query, Response

from notafacil.backend.core.dependencies import NoteRepo, RequestId
from notafacil.backend.schemas.base import ApiResponse, ResponseMetadata
from notafacil.backend.schemas.note import (
    ImportResultResponse,
    NoteCreate,
    NoteImportRequest,
    NoteResponse,
)
from notafacil.backend.services.note import NoteService
from notafacil.backend.services.note_create import CreateNoteService
from notafacil.backend.services.note_export import ExportNotesService
from notafacil.backend.services.note_import import ImportNotesService
from notafacil.backend.services.note_search import SearchNotesService, SearchScope

router = APIRouter()


def _split_ids(value: str | None) -> list[str]:
    """Parse a comma-separated id list, ignoring blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="Search notes",
    description=(
        "List notes, optionally filtered by text (matched against title, content "
        "or both) and by tags (a note matches if it carries any of them)."
    ),
)
async def search_notes(
    notes: NoteRepo,
    request_id: RequestId,
    search: str = Query(default="", description="Text to look for (case-insensitive)"),
    tags: str | None = Query(default=None, description="Comma-separated tag ids"),
    scope: SearchScope = Query(default=SearchScope.TITLE_ONLY, description="Fields to search"),
) -> ApiResponse[list[NoteResponse]]:
    """Search notes."""
    service = SearchNotesService(notes)
    results = await service.execute(search_text=search, tag_ids=_split_ids(tags), scope=scope)
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in results],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
    description="Create a new note with a title, optional content and tag ids.",
)
async def create_note(
    data: NoteCreate,
    notes: NoteRepo,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    service = CreateNoteService(notes)
    note = await service.execute(title=data.title, content=data.content, tag_ids=data.tag_ids)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/export",
    summary="Export notes",
    description="Download notes as a JSON array. Without `ids`, every note is exported.",
    response_class=Response,
    responses={200: {"content": {"application/json": {}}}},
)
async def export_notes(
    notes: NoteRepo,
    ids: str | None = Query(default=None, description="Comma-separated note ids"),
) -> Response:
    """Export notes as a raw JSON document."""
    service = ExportNotesService(notes)
    document = await service.execute(note_ids=_split_ids(ids))
    return Response(content=document, media_type="application/json")


@router.post(
    "/import",
    response_model=ApiResponse[ImportResultResponse],
    summary="Import notes",
    description=(
        "Import a document produced by the export endpoint. Notes with unknown ids "
        "are created; existing ones are skipped or overwritten depending on `mode`."
    ),
)
async def import_notes(
    data: NoteImportRequest,
    notes: NoteRepo,
    request_id: RequestId,
) -> ApiResponse[ImportResultResponse]:
    """Import notes."""
    service = ImportNotesService(notes)
    result = await service.execute(data.json_data, mode=data.mode)
    return ApiResponse(
        data=ImportResultResponse.model_validate(result),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(
    note_id: str,
    notes: NoteRepo,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    service = NoteService(notes)
    note = await service.get_note(note_id)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{note_id}",
    status_code=204,
    summary="Delete a note",
    description="Permanently delete a note. Deleting an unknown note succeeds.",
)
async def delete_note(
    note_id: str,
    notes: NoteRepo,
) -> None:
    """Delete a note."""
    service = NoteService(notes)
    await service.delete_note(note_id)
