"""Moderation use cases."""

from .delete_discussion_item import (
    DeleteDiscussionItemRequest,
    DeleteDiscussionItemResponse,
    DeleteDiscussionItemUseCase,
)
from .list_discussion_items import (
    ListDiscussionItemsResponse,
    ListDiscussionItemsUseCase,
    ModerationItemView,
)
from .update_discussion_status import (
    UpdateDiscussionStatusRequest,
    UpdateDiscussionStatusResponse,
    UpdateDiscussionStatusUseCase,
)

__all__ = [
    "DeleteDiscussionItemRequest",
    "DeleteDiscussionItemResponse",
    "DeleteDiscussionItemUseCase",
    "ListDiscussionItemsResponse",
    "ListDiscussionItemsUseCase",
    "ModerationItemView",
    "UpdateDiscussionStatusRequest",
    "UpdateDiscussionStatusResponse",
    "UpdateDiscussionStatusUseCase",
]
