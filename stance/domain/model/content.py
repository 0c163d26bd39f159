"""Content aggregate root.

A content item is an embedded video that visitors vote on and discuss.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stance.domain.model.common import DomainModel
from stance.domain.value import ContentId, ContentStatus


class Content(DomainModel):
    """Content aggregate root.

    Owns its votes and comments. Only PUBLISHED content is visible to the
    public and accepts votes and comments.
    """

    id: ContentId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    video_url: str
    video_id: str
    thumbnail_url: Optional[str] = None
    is_shorts: bool = False
    status: ContentStatus = ContentStatus.DRAFT
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_published(self) -> bool:
        """Whether the public may see, vote on and discuss this content."""
        return self.status == ContentStatus.PUBLISHED
