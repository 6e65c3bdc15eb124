"""
Comment upsert coordinator
Keeps a single bot comment per pull request: update it if present, create it otherwise
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, Union

from ..models import ExistingComment

logger = logging.getLogger(__name__)


class CommentTransport(Protocol):
    """Comment operations required from the issue/PR transport"""

    async def list_comments(self, issue_number: int) -> Sequence[ExistingComment]:
        ...

    async def create_comment(self, issue_number: int, body: str) -> Any:
        ...

    async def update_comment(self, comment_id: Union[int, str], body: str) -> Any:
        ...


@dataclass(frozen=True)
class NeedsUpdate:
    """A previous bot comment exists and must be replaced"""
    comment_id: Union[int, str]


@dataclass(frozen=True)
class NeedsCreate:
    """No previous bot comment, a new one must be created"""


UpsertPlan = Union[NeedsUpdate, NeedsCreate]


def plan_comment_upsert(comments: Sequence[ExistingComment], marker: str) -> UpsertPlan:
    """
    Decide between updating and creating.

    The first comment (in the order given) whose body contains the marker wins.
    """
    for comment in comments:
        if marker in (comment.body or ""):
            return NeedsUpdate(comment_id=comment.id)
    return NeedsCreate()


class CommentUpsertCoordinator:
    """
    Issues exactly one comment write per invocation.

    Failures from the transport propagate to the caller; nothing is retried.
    """

    def __init__(self, transport: CommentTransport, marker: str):
        if not marker:
            raise ValueError("Comment marker must be a non-empty string")
        self.transport = transport
        self.marker = marker

    async def upsert(self, issue_number: int, body: str) -> UpsertPlan:
        """
        Update the existing bot comment on the issue, or create a new one.

        Args:
            issue_number: Issue or pull request number
            body: Newly formatted comment body

        Returns:
            UpsertPlan: The action that was carried out
        """
        comments = await self.transport.list_comments(issue_number)
        plan = plan_comment_upsert(comments, self.marker)

        if isinstance(plan, NeedsUpdate):
            logger.info(f"Updating existing comment {plan.comment_id} on #{issue_number}")
            await self.transport.update_comment(plan.comment_id, body)
        else:
            logger.info(f"Creating new comment on #{issue_number}")
            await self.transport.create_comment(issue_number, body)

        return plan


__all__ = ["CommentTransport", "NeedsUpdate", "NeedsCreate", "UpsertPlan", "plan_comment_upsert", "CommentUpsertCoordinator"]
