"""
Data models for Docubot
"""

from .docubot_models import (
    ImpactLevel,
    SuggestionType,
    Severity,
    ContextRecord,
    Suggestion,
    SuggestionSet,
    ExistingComment,
    PullRequestFile,
    PullRequestData,
)

__all__ = [
    "ImpactLevel",
    "SuggestionType",
    "Severity",
    "ContextRecord",
    "Suggestion",
    "SuggestionSet",
    "ExistingComment",
    "PullRequestFile",
    "PullRequestData",
]
