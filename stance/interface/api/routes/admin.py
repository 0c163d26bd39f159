"""Admin routes: content management and comment moderation.

Every endpoint requires an admin capability token (see access.require_admin).
"""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status

from stance.application.usecase.base import CamelModel
from stance.application.usecase.content import (
    AdminContentView,
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
    GetAdminContentRequest,
    GetAdminContentUseCase,
    ListAdminContentsUseCase,
    SaveContentRequest,
    SaveContentUseCase,
)
from stance.application.usecase.moderation import (
    DeleteDiscussionItemRequest,
    DeleteDiscussionItemResponse,
    DeleteDiscussionItemUseCase,
    ListDiscussionItemsUseCase,
    ModerationItemView,
    UpdateDiscussionStatusRequest,
    UpdateDiscussionStatusResponse,
    UpdateDiscussionStatusUseCase,
)
from stance.domain.error import NotFoundError, ValidationError
from stance.domain.service import AdminTokenService
from stance.domain.value import DiscussionKind, DiscussionStatus
from stance.interface.api.access import require_admin

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ContentAPIRequest(CamelModel):
    """API request for creating or updating a content."""

    title: str
    description: Optional[str] = None
    video_url: str
    status: Optional[str] = None


class DiscussionStatusAPIRequest(CamelModel):
    """API request for changing a comment or reply status."""

    status: DiscussionStatus
    type: DiscussionKind = DiscussionKind.COMMENT


# ============================================================================
# Contents
# ============================================================================


@router.get("/contents", response_model=list[AdminContentView])
async def list_contents(
    request: Request,
    list_admin_contents_use_case: FromDishka[ListAdminContentsUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> list[AdminContentView]:
    """List every content, drafts included, newest first."""
    require_admin(request, admin_token_service)
    response = await list_admin_contents_use_case.execute()
    return response.contents


@router.post(
    "/contents",
    response_model=AdminContentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_content(
    body: ContentAPIRequest,
    request: Request,
    save_content_use_case: FromDishka[SaveContentUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> AdminContentView:
    """Create a content from a YouTube URL.

    Raises:
        HTTPException: 400 on an invalid title, description or video URL
    """
    require_admin(request, admin_token_service)
    try:
        return await save_content_use_case.execute(
            SaveContentRequest(
                title=body.title,
                description=body.description,
                video_url=body.video_url,
                status=body.status,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/contents/{content_id}", response_model=AdminContentView)
async def get_content(
    content_id: UUID,
    request: Request,
    get_admin_content_use_case: FromDishka[GetAdminContentUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> AdminContentView:
    """Get one content, whatever its status."""
    require_admin(request, admin_token_service)
    try:
        return await get_admin_content_use_case.execute(
            GetAdminContentRequest(content_id=content_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/contents/{content_id}", response_model=AdminContentView)
async def update_content(
    content_id: UUID,
    body: ContentAPIRequest,
    request: Request,
    save_content_use_case: FromDishka[SaveContentUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> AdminContentView:
    """Replace title, description, video and status of a content."""
    require_admin(request, admin_token_service)
    try:
        return await save_content_use_case.execute(
            SaveContentRequest(
                content_id=content_id,
                title=body.title,
                description=body.description,
                video_url=body.video_url,
                status=body.status,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/contents/{content_id}", response_model=DeleteContentResponse)
async def delete_content(
    content_id: UUID,
    request: Request,
    delete_content_use_case: FromDishka[DeleteContentUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> DeleteContentResponse:
    """Delete a content with all of its votes, comments, replies and likes."""
    require_admin(request, admin_token_service)
    try:
        return await delete_content_use_case.execute(
            DeleteContentRequest(content_id=content_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ============================================================================
# Comments and replies
# ============================================================================


@router.get("/comments", response_model=list[ModerationItemView])
async def list_comments(
    request: Request,
    list_discussion_items_use_case: FromDishka[ListDiscussionItemsUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> list[ModerationItemView]:
    """List every comment and reply, any status, newest first."""
    require_admin(request, admin_token_service)
    response = await list_discussion_items_use_case.execute()
    return response.items


@router.put("/comments/{item_id}", response_model=UpdateDiscussionStatusResponse)
async def update_comment_status(
    item_id: UUID,
    body: DiscussionStatusAPIRequest,
    request: Request,
    update_discussion_status_use_case: FromDishka[UpdateDiscussionStatusUseCase],
    admin_token_service: FromDishka[AdminTokenService],
) -> UpdateDiscussionStatusResponse:
    """Flag, restore or soft delete a comment or reply.

    Raises:
        HTTPException: 400 for a transition out of DELETED, 404 if missing
    """
    require_admin(request, admin_token_service)
    try:
        return await update_discussion_status_use_case.execute(
            UpdateDiscussionStatusRequest(
                item_id=item_id, type=body.type, status=body.status
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/comments/{item_id}", response_model=DeleteDiscussionItemResponse)
async def delete_comment(
    item_id: UUID,
    request: Request,
    delete_discussion_item_use_case: FromDishka[DeleteDiscussionItemUseCase],
    admin_token_service: FromDishka[AdminTokenService],
    type: DiscussionKind = Query(default=DiscussionKind.COMMENT),
) -> DeleteDiscussionItemResponse:
    """Hard delete a comment (with its replies and likes) or a reply."""
    require_admin(request, admin_token_service)
    try:
        return await delete_discussion_item_use_case.execute(
            DeleteDiscussionItemRequest(item_id=item_id, type=type)
        )
    except NotFoundError as e:
        logfire.warn("Delete of missing discussion item", item_id=str(item_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
