"""
LLM suggester
Prompts the model with the PR diff and documentation context, then recovers
and enriches the structured suggestions from its free-text response
"""

import logging
from typing import Sequence

from ..llm.llm_client import DocubotLLMClient, JSON_MIME_TYPE, extract_response_text
from ..models import ContextRecord, SuggestionSet
from .enricher import enrich_suggestions
from .prompts import RESPONSE_SCHEMA, DocubotPrompts as prompts
from .recovery_parser import recover_with_outcome

logger = logging.getLogger(__name__)


async def generate_suggestions(
    llm_client: DocubotLLMClient,
    pr_title: str,
    pr_body: str,
    diff: str,
    docs_context: Sequence[ContextRecord],
    prompt_instruction: str = "",
    comment_intro: str = ""
) -> SuggestionSet:
    """
    Generate documentation suggestions for a pull request

    Args:
        llm_client: LLM client
        pr_title: Pull request title
        pr_body: Pull request description
        diff: Concatenated file patches
        docs_context: Documentation chunks from vector search
        prompt_instruction: Optional tone guidance for the comment intro
        comment_intro: Planned comment intro the model should match

    Returns:
        SuggestionSet: Parsed suggestions with line ranges from the context

    Raises:
        MissingCandidateError: If the model returned no content
        UpstreamUnavailableError: If the LLM call failed
    """
    prompt = prompts.suggestion_prompt(pr_title, pr_body, diff, docs_context, prompt_instruction, comment_intro)

    response = await llm_client.generate(
        prompt,
        response_mime_type=JSON_MIME_TYPE,
        response_schema=RESPONSE_SCHEMA
    )

    raw_text = extract_response_text(response)
    logger.debug(f"Raw LLM response:\n{raw_text}")

    outcome = recover_with_outcome(raw_text)
    logger.info(f"Parsed LLM response via {outcome.tier.value}: impact={outcome.result.impact_level.value}, "
                f"suggestions={len(outcome.result.suggestions)}")

    return enrich_suggestions(outcome.result, docs_context)


__all__ = ["generate_suggestions"]
