"""PostgreSQL repository implementations."""

from stance.persistence.repository.comment import PostgresCommentRepository
from stance.persistence.repository.common import PostgresTransactionManager
from stance.persistence.repository.content import PostgresContentRepository
from stance.persistence.repository.like import PostgresLikeRepository
from stance.persistence.repository.reply import PostgresReplyRepository
from stance.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresContentRepository",
    "PostgresVoteRepository",
    "PostgresCommentRepository",
    "PostgresReplyRepository",
    "PostgresLikeRepository",
    "PostgresTransactionManager",
]
