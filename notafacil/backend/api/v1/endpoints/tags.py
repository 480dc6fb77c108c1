"""
Tags API Endpoints.

REST API endpoints for tag management.
"""

from fastapi import APIRouter

from notafacil.backend.core.dependencies import RequestId, TagRepo
from notafacil.backend.schemas.base import ApiResponse, ResponseMetadata
from notafacil.backend.schemas.tag import TagCreate, TagResponse, TagUpdate
from notafacil.backend.services.tag import TagService

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[TagResponse]],
    summary="List tags",
    description="List every tag, ordered by name.",
)
async def list_tags(
    tags: TagRepo,
    request_id: RequestId,
) -> ApiResponse[list[TagResponse]]:
    service = TagService(tags)
    result = await service.list_tags()
    return ApiResponse(
        data=[TagResponse.model_validate(tag) for tag in result],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[TagResponse],
    status_code=201,
    summary="Create a tag",
)
async def create_tag(
    data: TagCreate,
    tags: TagRepo,
    request_id: RequestId,
) -> ApiResponse[TagResponse]:
    service = TagService(tags)
    tag = await service.create_tag(name=data.name, color=data.color)
    return ApiResponse(
        data=TagResponse.model_validate(tag),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{tag_id}",
    response_model=ApiResponse[TagResponse],
    summary="Get a tag",
)
async def get_tag(
    tag_id: str,
    tags: TagRepo,
    request_id: RequestId,
) -> ApiResponse[TagResponse]:
    service = TagService(tags)
    tag = await service.get_tag(tag_id)
    return ApiResponse(
        data=TagResponse.model_validate(tag),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{tag_id}",
    response_model=ApiResponse[TagResponse],
    summary="Update a tag",
    description="Rename and/or recolor a tag. Only provided fields are updated.",
)
async def update_tag(
    tag_id: str,
    data: TagUpdate,
    tags: TagRepo,
    request_id: RequestId,
) -> ApiResponse[TagResponse]:
    service = TagService(tags)
    tag = await service.update_tag(tag_id, name=data.name, color=data.color)
    return ApiResponse(
        data=TagResponse.model_validate(tag),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{tag_id}",
    status_code=204,
    summary="Delete a tag",
    description="Delete a tag and remove it from every note.",
)
async def delete_tag(
    tag_id: str,
    tags: TagRepo,
) -> None:
    service = TagService(tags)
    await service.delete_tag(tag_id)
