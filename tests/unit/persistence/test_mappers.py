"""Unit tests for row <-> domain model mappers."""

from uuid import uuid4

from stance.domain.value import DiscussionStatus, Stance
from stance.persistence.mappers import (
    comment_to_dict,
    content_to_dict,
    row_to_comment,
    row_to_content,
)
from tests.conftest import make_comment, make_content


class TestMappers:
    """Tests for the hand-written mappers."""

    def test_content_survives_a_round_trip(self):
        content = make_content()

        assert row_to_content(content_to_dict(content)) == content

    def test_enums_and_identity_are_flattened(self):
        comment = make_comment(uuid4(), identity="203.0.113.5", stance=Stance.DISAGREE)

        data = comment_to_dict(comment)

        assert data["identity"] == "203.0.113.5"
        assert data["stance"] == "DISAGREE"
        assert data["status"] == "ACTIVE"

    def test_string_ids_from_the_driver_are_parsed(self):
        comment = make_comment(uuid4(), status=DiscussionStatus.FLAGGED)
        row = comment_to_dict(comment)
        row["id"] = str(row["id"])
        row["content_id"] = str(row["content_id"])

        mapped = row_to_comment(row)

        assert mapped.id == comment.id
        assert mapped.content_id == comment.content_id
        assert mapped.status == DiscussionStatus.FLAGGED
