"""
Tests for docubot.comments.upsert
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from docubot.comments.upsert import (
    CommentUpsertCoordinator,
    NeedsCreate,
    NeedsUpdate,
    plan_comment_upsert,
)
from docubot.exceptions import UpstreamUnavailableError
from docubot.models import ExistingComment


@pytest.fixture
def transport():
    transport = MagicMock()
    transport.list_comments = AsyncMock(return_value=[])
    transport.create_comment = AsyncMock(return_value={})
    transport.update_comment = AsyncMock(return_value={})
    return transport


class TestPlan:
    """Update-vs-create decision."""

    def test_marker_match_needs_update(self, marker):
        comments = [ExistingComment(id=1, body="LGTM"), ExistingComment(id=42, body=f"{marker}\nold body")]
        assert plan_comment_upsert(comments, marker) == NeedsUpdate(comment_id=42)

    def test_no_match_needs_create(self, marker):
        comments = [ExistingComment(id=1, body="Another comment")]
        assert plan_comment_upsert(comments, marker) == NeedsCreate()

    def test_empty_list_needs_create(self, marker):
        assert plan_comment_upsert([], marker) == NeedsCreate()

    def test_first_match_wins_in_given_order(self, marker):
        comments = [ExistingComment(id=9, body=f"x {marker}"), ExistingComment(id=3, body=marker)]
        assert plan_comment_upsert(comments, marker) == NeedsUpdate(comment_id=9)

    def test_substring_containment(self):
        comments = [ExistingComment(id=5, body="## Documentation Update Suggestions\n...")]
        assert plan_comment_upsert(comments, "Documentation Update Suggestions") == NeedsUpdate(comment_id=5)


class TestCoordinator:
    """Exactly one write per invocation."""

    async def test_updates_existing_bot_comment(self, transport, marker):
        transport.list_comments.return_value = [ExistingComment(id=42, body=f"{marker} old")]

        plan = await CommentUpsertCoordinator(transport, marker).upsert(7, "new body")

        assert plan == NeedsUpdate(comment_id=42)
        transport.list_comments.assert_awaited_once_with(7)
        transport.update_comment.assert_awaited_once_with(42, "new body")
        transport.create_comment.assert_not_called()

    async def test_creates_comment_when_none_found(self, transport, marker):
        transport.list_comments.return_value = [ExistingComment(id=1, body="Another comment")]

        plan = await CommentUpsertCoordinator(transport, marker).upsert(3, "fresh body")

        assert plan == NeedsCreate()
        transport.create_comment.assert_awaited_once_with(3, "fresh body")
        transport.update_comment.assert_not_called()

    async def test_write_failure_propagates(self, transport, marker):
        transport.list_comments.return_value = [ExistingComment(id=42, body=marker)]
        transport.update_comment.side_effect = UpstreamUnavailableError("GitHub", "403 Forbidden")

        with pytest.raises(UpstreamUnavailableError):
            await CommentUpsertCoordinator(transport, marker).upsert(7, "body")

        transport.update_comment.assert_awaited_once()
        transport.create_comment.assert_not_called()

    async def test_list_failure_issues_no_write(self, transport, marker):
        transport.list_comments.side_effect = UpstreamUnavailableError("GitHub", "boom")

        with pytest.raises(UpstreamUnavailableError):
            await CommentUpsertCoordinator(transport, marker).upsert(7, "body")

        transport.create_comment.assert_not_called()
        transport.update_comment.assert_not_called()

    def test_empty_marker_is_rejected(self, transport):
        with pytest.raises(ValueError):
            CommentUpsertCoordinator(transport, "")
