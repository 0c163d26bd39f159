"""Domain services."""

from .admin_token_service import AdminTokenService
from .base import Service
from .comment_service import CommentService, CommentThread
from .content_service import CascadeDeleteResult, ContentService
from .identity_service import IdentityResolver
from .like_service import LikeService, LikeToggle
from .moderation_service import ModerationItem, ModerationService
from .vote_service import VoteService

__all__ = [
    "AdminTokenService",
    "CascadeDeleteResult",
    "CommentService",
    "CommentThread",
    "ContentService",
    "IdentityResolver",
    "LikeService",
    "LikeToggle",
    "ModerationItem",
    "ModerationService",
    "Service",
    "VoteService",
]
