"""Domain value objects for Stance.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Iterable

from pydantic import Field, field_validator

from stance.domain.value.common import RootValueObject, ValueObject


class Stance(str, Enum):
    """Two-valued vote outcome."""

    AGREE = "AGREE"
    DISAGREE = "DISAGREE"


class ContentStatus(str, Enum):
    """Publication status of a content item."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class DiscussionStatus(str, Enum):
    """Moderation status of a comment or reply.

    ACTIVE <-> FLAGGED, and either of them -> DELETED (terminal).
    """

    ACTIVE = "ACTIVE"
    FLAGGED = "FLAGGED"
    DELETED = "DELETED"

    def can_transition_to(self, target: "DiscussionStatus") -> bool:
        """Check whether moderation may move an item to ``target``."""
        if self == target:
            return True
        return target in _STATUS_TRANSITIONS[self]


_STATUS_TRANSITIONS: dict[DiscussionStatus, frozenset[DiscussionStatus]] = {
    DiscussionStatus.ACTIVE: frozenset(
        {DiscussionStatus.FLAGGED, DiscussionStatus.DELETED}
    ),
    DiscussionStatus.FLAGGED: frozenset(
        {DiscussionStatus.ACTIVE, DiscussionStatus.DELETED}
    ),
    DiscussionStatus.DELETED: frozenset(),
}


class DiscussionKind(str, Enum):
    """Kind of discussion item addressed by moderation."""

    COMMENT = "comment"
    REPLY = "reply"


IDENTITY_MAX_LENGTH = 255


class VisitorIdentity(RootValueObject[str]):
    """Weak per-visitor identity.

    Derived from the client address by the transport layer. It is trivially
    spoofable and shared by visitors behind the same NAT, so it only serves
    as a best-effort anti-duplicate key for votes and likes. Nothing in the
    domain assumes it is an IP address.
    """

    @field_validator("root")
    @classmethod
    def validate_identity(cls, v: str) -> str:
        """Validate identity is not empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > IDENTITY_MAX_LENGTH:
            raise ValueError(f"Identity must be 1-{IDENTITY_MAX_LENGTH} characters")
        return v


class Tally(ValueObject):
    """Aggregate of a content's current votes."""

    agree: int = Field(default=0, ge=0)
    disagree: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    agree_percentage: int = Field(default=0, ge=0, le=100)

    @classmethod
    def from_stances(cls, stances: Iterable[Stance]) -> "Tally":
        """Count stances and compute the agree percentage.

        The percentage is rounded half up and is 0 when there are no votes.
        """
        agree = 0
        disagree = 0
        for stance in stances:
            if stance == Stance.AGREE:
                agree += 1
            else:
                disagree += 1

        total = agree + disagree
        return cls(
            agree=agree,
            disagree=disagree,
            total=total,
            agree_percentage=agree_percentage(agree, total),
        )


def agree_percentage(agree: int, total: int) -> int:
    """Return round_half_up(agree / total * 100), or 0 when total is 0."""
    if total <= 0:
        return 0
    # floor(100 * agree / total + 0.5) in exact integer arithmetic
    return (200 * agree + total) // (2 * total)


_VIDEO_ID_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/shorts/([^&\n?#]+)"),
)


class VideoRef(ValueObject):
    """Embeddable video reference parsed from a YouTube URL."""

    url: str
    video_id: str
    is_shorts: bool = False

    @classmethod
    def from_url(cls, url: str) -> "VideoRef":
        """Parse a watch, short-link, embed or shorts URL.

        Raises:
            ValueError: If no video id can be extracted
        """
        url = url.strip()
        for pattern in _VIDEO_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return cls(url=url, video_id=match.group(1), is_shorts="/shorts/" in url)
        raise ValueError(f"Not a recognised YouTube URL: {url}")

    @property
    def thumbnail_url(self) -> str:
        """High quality thumbnail served by YouTube."""
        return f"https://img.youtube.com/vi/{self.video_id}/hqdefault.jpg"
