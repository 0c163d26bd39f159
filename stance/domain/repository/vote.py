"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stance.domain.model.vote import Vote
from stance.domain.value import ContentId, Stance, VisitorIdentity


class VoteRepository(ABC):
    """Repository for Vote entity (the vote ledger).

    Implementations must enforce uniqueness of (content_id, identity) with a
    storage-level constraint, not with read-then-write checks.
    """

    @abstractmethod
    async def find_by_content_and_identity(
        self, content_id: ContentId, identity: VisitorIdentity
    ) -> Optional[Vote]:
        """Find the current vote of one identity on one content.

        Args:
            content_id: The content ID
            identity: The visitor identity

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content(self, content_id: ContentId) -> List[Vote]:
        """Find all current votes on a content item.

        Args:
            content_id: The content ID

        Returns:
            List of votes
        """
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            ConflictError: If a vote already exists for (content_id, identity)
        """
        pass

    @abstractmethod
    async def update_stance(
        self, content_id: ContentId, identity: VisitorIdentity, stance: Stance
    ) -> Optional[Vote]:
        """Overwrite the stance of an existing vote unconditionally.

        Args:
            content_id: The content ID
            identity: The visitor identity
            stance: New stance

        Returns:
            The updated vote, None if no vote exists
        """
        pass

    @abstractmethod
    async def delete_by_content(self, content_id: ContentId) -> int:
        """Delete every vote on a content item.

        Args:
            content_id: The content ID

        Returns:
            Number of deleted votes
        """
        pass
