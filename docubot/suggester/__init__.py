"""
Documentation suggester package
Prompting, LLM output recovery and suggestion enrichment
"""

from .escaper import escape_newlines_in_strings
from .recovery_parser import ParseTier, recover_suggestion_set, recover_with_outcome
from .enricher import enrich_suggestions
from .llm_suggester import generate_suggestions
from .search_query import build_base_query, build_search_query

__all__ = [
    "escape_newlines_in_strings",
    "ParseTier",
    "recover_suggestion_set",
    "recover_with_outcome",
    "enrich_suggestions",
    "generate_suggestions",
    "build_base_query",
    "build_search_query"
]
