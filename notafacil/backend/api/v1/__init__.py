"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from notafacil.backend.api.v1.endpoints import notes, tags

router = APIRouter()

router.include_router(notes.router, prefix="/notes", tags=["notes"])
router.include_router(tags.router, prefix="/tags", tags=["tags"])
