"""
Recovery parser for LLM suggestion output
Turns untrusted free-text model output into a SuggestionSet, falling back
through a fixed ladder of strategies down to a safe empty result
"""

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from pydantic import ValidationError

from ..models import ImpactLevel, SuggestionSet
from .escaper import escape_newlines_in_strings

logger = logging.getLogger(__name__)

PARSE_FAILURE_SUMMARY = "Unable to generate suggestions due to parsing error."

_FENCE_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


class ParseTier(str, Enum):
    """Steps of the recovery ladder, in the order they are tried"""
    FENCE_EXTRACT = "fence_extract"
    BACKTICK_PURGE = "backtick_purge"
    DIRECT_PARSE = "direct_parse"
    BRACE_EXTRACT_PARSE = "brace_extract_parse"
    SAFE_FALLBACK = "safe_fallback"


@dataclass(frozen=True)
class ParseOutcome:
    """Parsed result together with the tier that produced it"""
    tier: ParseTier
    result: SuggestionSet


def empty_suggestion_set() -> SuggestionSet:
    """Canonical result for output that could not be recovered"""
    return SuggestionSet(
        impact_level=ImpactLevel.NONE,
        summary=PARSE_FAILURE_SUMMARY,
        suggestions=[],
    )


def extract_fenced_block(text: str) -> str:
    """Return the content of the first Markdown code fence, or the whole text"""
    match = _FENCE_PATTERN.search(text)
    return match.group(1) if match else text


def purge_backticks(text: str) -> str:
    """Remove stray triple backticks left by partial or nested fences"""
    return text.replace("```", "").strip()


def _decode(candidate: str) -> Optional[SuggestionSet]:
    try:
        return SuggestionSet.model_validate(json.loads(candidate))
    except (ValueError, RecursionError, ValidationError) as e:
        logger.debug(f"Candidate did not decode as a suggestion set: {e}")
        return None


def try_direct_parse(text: str) -> Optional[SuggestionSet]:
    """Decode the whole text as a suggestion set"""
    return _decode(text.strip())


def try_brace_extract_parse(text: str) -> Optional[SuggestionSet]:
    """Decode the slice between the first '{' and the last '}' inclusive"""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        logger.warning("No JSON braces found in LLM output")
        return None
    return _decode(text[start:end + 1])


PARSE_STRATEGIES: Tuple[Tuple[ParseTier, Callable[[str], Optional[SuggestionSet]]], ...] = (
    (ParseTier.DIRECT_PARSE, try_direct_parse),
    (ParseTier.BRACE_EXTRACT_PARSE, try_brace_extract_parse),
)


def prepare_candidate(raw_text: str) -> str:
    """Apply the text clean-up tiers: fence extraction, backtick purge, escaping"""
    fenced = extract_fenced_block(raw_text)
    purged = purge_backticks(fenced)
    return escape_newlines_in_strings(purged)


def recover_with_outcome(raw_text: Optional[str]) -> ParseOutcome:
    """
    Run the recovery ladder and report which tier produced the result.

    Never raises: output that no strategy can decode yields the canonical
    empty suggestion set tagged ``SAFE_FALLBACK``.

    Args:
        raw_text: Raw text of a single model response

    Returns:
        ParseOutcome: Parsed suggestion set and the tier that produced it
    """
    candidate = prepare_candidate(raw_text or "")

    for tier, strategy in PARSE_STRATEGIES:
        result = strategy(candidate)
        if result is not None:
            if tier is not ParseTier.DIRECT_PARSE:
                logger.info(f"Recovered LLM output using {tier.value}")
            return ParseOutcome(tier=tier, result=result)

    logger.warning("All parse strategies failed, returning empty suggestion set")
    return ParseOutcome(tier=ParseTier.SAFE_FALLBACK, result=empty_suggestion_set())


def recover_suggestion_set(raw_text: Optional[str]) -> SuggestionSet:
    """Parse raw model text into a SuggestionSet, never raising"""
    return recover_with_outcome(raw_text).result


__all__ = [
    "PARSE_FAILURE_SUMMARY",
    "ParseTier",
    "ParseOutcome",
    "empty_suggestion_set",
    "extract_fenced_block",
    "purge_backticks",
    "prepare_candidate",
    "try_direct_parse",
    "try_brace_extract_parse",
    "PARSE_STRATEGIES",
    "recover_with_outcome",
    "recover_suggestion_set",
]
