"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from notafacil.backend.core.database import get_db_session
from notafacil.backend.repositories.note import SqlNoteRepository
from notafacil.backend.repositories.tag import SqlTagRepository

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


def get_note_repository(db: DbSession) -> SqlNoteRepository:
    """Note repository bound to the request's session."""
    return SqlNoteRepository(db)


def get_tag_repository(db: DbSession) -> SqlTagRepository:
    """Tag repository bound to the request's session."""
    return SqlTagRepository(db)


NoteRepo = Annotated[SqlNoteRepository, Depends(get_note_repository)]
TagRepo = Annotated[SqlTagRepository, Depends(get_tag_repository)]
