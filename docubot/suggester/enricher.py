"""
Suggestion enricher
Attaches line ranges from retrieved context records to LLM suggestions
"""

import logging
from typing import Dict, Sequence

from ..models import ContextRecord, SuggestionSet

logger = logging.getLogger(__name__)


def enrich_suggestions(suggestion_set: SuggestionSet, docs_context: Sequence[ContextRecord]) -> SuggestionSet:
    """
    Replace model-reported line numbers with those of the first context record
    whose file matches the suggestion's target file exactly.

    Suggestions without a matching record end up with no line range.

    Args:
        suggestion_set: Parsed LLM response
        docs_context: Context records in retrieval order

    Returns:
        SuggestionSet: Copy with the same suggestions, in the same order, enriched
    """
    first_by_file: Dict[str, ContextRecord] = {}
    for record in docs_context:
        first_by_file.setdefault(record.file, record)

    enriched = []
    for suggestion in suggestion_set.suggestions:
        record = first_by_file.get(suggestion.target_file)
        enriched.append(suggestion.model_copy(update={
            "start_line": record.start_line if record else None,
            "end_line": record.end_line if record else None,
        }))

    matched = sum(1 for s in enriched if s.start_line is not None)
    logger.debug(f"Attached line ranges to {matched}/{len(enriched)} suggestions")

    return suggestion_set.model_copy(update={"suggestions": enriched})


__all__ = ["enrich_suggestions"]
