"""Toggle like use case."""

from typing import Literal
from uuid import UUID

from stance.application.usecase.base import BaseUseCase, CamelModel
from stance.domain.service import LikeService
from stance.domain.value import CommentId, VisitorIdentity


class ToggleLikeRequest(CamelModel):
    """Toggle like request."""

    comment_id: UUID
    identity: str


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    success: bool = True
    action: Literal["liked", "unliked"]
    likes_count: int
    is_liked: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or un-liking a comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        result = await self.like_service.toggle_like(
            CommentId(request.comment_id), VisitorIdentity(request.identity)
        )
        return ToggleLikeResponse(
            action="liked" if result.liked else "unliked",
            likes_count=result.likes_count,
            is_liked=result.liked,
        )
