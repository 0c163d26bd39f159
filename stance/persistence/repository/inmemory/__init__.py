"""In-memory repository implementations for testing."""

from .base import InMemoryTable, InMemoryTransactionManager
from .comment import InMemoryCommentRepository
from .content import InMemoryContentRepository
from .like import InMemoryLikeRepository
from .reply import InMemoryReplyRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryContentRepository",
    "InMemoryLikeRepository",
    "InMemoryReplyRepository",
    "InMemoryTable",
    "InMemoryTransactionManager",
    "InMemoryVoteRepository",
]
