"""Public content routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from stance.application.usecase.content import (
    ContentSummary,
    GetContentRequest,
    GetContentResponse,
    GetContentUseCase,
    ListContentsRequest,
    ListContentsUseCase,
)
from stance.domain.error import NotFoundError

router = APIRouter(prefix="/contents", tags=["contents"], route_class=DishkaRoute)


@router.get("", response_model=list[ContentSummary])
async def list_contents(
    list_contents_use_case: FromDishka[ListContentsUseCase],
) -> list[ContentSummary]:
    """List published contents, newest first, with tallies and comment counts."""
    response = await list_contents_use_case.execute(
        ListContentsRequest(published_only=True)
    )
    return response.contents


@router.get("/{content_id}", response_model=GetContentResponse)
async def get_content(
    content_id: UUID,
    get_content_use_case: FromDishka[GetContentUseCase],
) -> GetContentResponse:
    """Get a published content with its tally and discussion.

    Counts one view per call.

    Raises:
        HTTPException: 404 if the content is missing or not published
    """
    try:
        return await get_content_use_case.execute(
            GetContentRequest(content_id=content_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
