"""Comment, reply and like routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from stance.application.usecase.base import CamelModel
from stance.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from stance.domain.error import ForbiddenError, NotFoundError, ValidationError
from stance.domain.service import IdentityResolver
from stance.domain.value import Stance
from stance.interface.api.access import resolve_identity

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for posting a comment."""

    content_id: UUID
    author_name: str
    content: str
    user_vote: Optional[Stance] = None


class CreateReplyAPIRequest(CamelModel):
    """API request for posting a reply."""

    author_name: str
    content: str
    user_vote: Optional[Stance] = None


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_resolver: FromDishka[IdentityResolver],
) -> CreateCommentResponse:
    """Post a comment. The caller must have voted on the content first.

    Raises:
        HTTPException: 400 on bad lengths, 403 without a vote, 404 if the
            content is missing or not published
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                content_id=body.content_id,
                identity=resolve_identity(request, identity_resolver),
                author_name=body.author_name,
                content=body.content,
                user_vote=body.user_vote,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ForbiddenError as e:
        logfire.info("Comment rejected, no vote", content_id=str(body.content_id))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/{comment_id}/replies",
    response_model=CreateReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: UUID,
    body: CreateReplyAPIRequest,
    request: Request,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    identity_resolver: FromDishka[IdentityResolver],
) -> CreateReplyResponse:
    """Reply to a comment. The caller must have voted on its content.

    Raises:
        HTTPException: 400 on bad lengths, 403 without a vote, 404 if the
            comment is missing or not active
    """
    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                comment_id=comment_id,
                identity=resolve_identity(request, identity_resolver),
                author_name=body.author_name,
                content=body.content,
                user_vote=body.user_vote,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{comment_id}/likes", response_model=ToggleLikeResponse)
async def toggle_like(
    comment_id: UUID,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    identity_resolver: FromDishka[IdentityResolver],
) -> ToggleLikeResponse:
    """Like a comment, or take the like back.

    Raises:
        HTTPException: 404 if the comment is missing or not active, 403 if
            likes are vote-gated and the caller has not voted
    """
    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(
                comment_id=comment_id,
                identity=resolve_identity(request, identity_resolver),
            )
        )
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
