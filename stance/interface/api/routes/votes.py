"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from stance.application.usecase.base import CamelModel
from stance.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    CheckVoteRequest,
    CheckVoteResponse,
    CheckVoteUseCase,
)
from stance.domain.error import ConflictError, NotFoundError
from stance.domain.service import IdentityResolver
from stance.domain.value import Stance
from stance.interface.api.access import resolve_identity

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(CamelModel):
    """API request for casting a vote."""

    content_id: UUID
    vote_type: Stance


class CheckVoteAPIRequest(CamelModel):
    """API request for checking the caller's vote."""

    content_id: UUID


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    body: CastVoteAPIRequest,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    identity_resolver: FromDishka[IdentityResolver],
) -> CastVoteResponse:
    """Cast or change the caller's vote on a content.

    Raises:
        HTTPException: 404 if the content is missing or not published,
            409 if the content was deleted while the vote was written
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                content_id=body.content_id,
                vote_type=body.vote_type,
                identity=resolve_identity(request, identity_resolver),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/check", response_model=CheckVoteResponse)
async def check_vote(
    body: CheckVoteAPIRequest,
    request: Request,
    check_vote_use_case: FromDishka[CheckVoteUseCase],
    identity_resolver: FromDishka[IdentityResolver],
) -> CheckVoteResponse:
    """Get the caller's stance (or null) and the current tally."""
    return await check_vote_use_case.execute(
        CheckVoteRequest(
            content_id=body.content_id,
            identity=resolve_identity(request, identity_resolver),
        )
    )
