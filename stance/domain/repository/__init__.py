"""Repository interfaces for Stance domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from stance.domain.repository.comment import CommentRepository
from stance.domain.repository.content import ContentRepository
from stance.domain.repository.like import LikeRepository
from stance.domain.repository.reply import ReplyRepository
from stance.domain.repository.transaction import TransactionManager
from stance.domain.repository.vote import VoteRepository

__all__ = [
    "ContentRepository",
    "VoteRepository",
    "CommentRepository",
    "ReplyRepository",
    "LikeRepository",
    "TransactionManager",
]
