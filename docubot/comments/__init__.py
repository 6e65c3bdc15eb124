"""
PR comment package for Docubot
"""

from .formatter import DEFAULT_COMMENT_MARKER, SUGGESTIONS_INTRO, format_comment
from .upsert import (
    CommentTransport,
    CommentUpsertCoordinator,
    NeedsCreate,
    NeedsUpdate,
    plan_comment_upsert,
)

__all__ = [
    "DEFAULT_COMMENT_MARKER",
    "SUGGESTIONS_INTRO",
    "format_comment",
    "CommentTransport",
    "CommentUpsertCoordinator",
    "NeedsCreate",
    "NeedsUpdate",
    "plan_comment_upsert",
]
