"""Vote entity.

A vote is one visitor's current stance on one content item.
"""

from datetime import datetime

from pydantic import Field

from stance.domain.model.common import DomainModel
from stance.domain.value import ContentId, Stance, VisitorIdentity, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (content, identity) (database unique constraint)
    - Re-voting overwrites the stance instead of adding a row
    - Never deleted in normal flow (only by the content cascade)
    """

    id: VoteId
    content_id: ContentId
    identity: VisitorIdentity
    stance: Stance
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
