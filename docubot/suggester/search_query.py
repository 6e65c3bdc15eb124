"""
Search query builder
Condenses a pull request into a short query for documentation vector search
"""

import logging
from typing import Sequence

from ..llm.llm_client import DocubotLLMClient, TEXT_MIME_TYPE, extract_response_text
from ..models import PullRequestData, PullRequestFile
from .prompts import MAX_QUERY_CHARS, MAX_QUERY_FILES, DocubotPrompts as prompts

logger = logging.getLogger(__name__)

MAX_BASE_QUERY_CHARS = 5000
QUERY_TEMPERATURE = 0.0


def build_base_query(pr: PullRequestData) -> str:
    """Raw PR text used when no refined query is available"""
    file_lines = [f"{f.filename}: {f.patch or ''}" for f in pr.files[:MAX_QUERY_FILES]]
    return "\n".join([pr.title, pr.body, *file_lines])[:MAX_BASE_QUERY_CHARS]


def heuristic_query(pr_title: str, pr_body: str, files: Sequence[PullRequestFile]) -> str:
    """Query assembled from title, file names and body when the model returns nothing"""
    pieces = [
        pr_title or "PR changes",
        ", ".join(f.filename for f in files[:MAX_QUERY_FILES]),
        pr_body or "",
    ]
    return " | ".join(p for p in pieces if p)[:MAX_QUERY_CHARS]


async def build_search_query(llm_client: DocubotLLMClient, pr_title: str, pr_body: str,
                             files: Sequence[PullRequestFile]) -> str:
    """
    Ask the model for a focused documentation search query

    Returns:
        str: Query of at most 200 characters
    """
    prompt = prompts.search_query_prompt(pr_title, pr_body, files)
    logger.info(f"Search query prompt length: {len(prompt)}, files considered: {min(len(files), MAX_QUERY_FILES)}")

    response = await llm_client.generate(prompt, response_mime_type=TEXT_MIME_TYPE, temperature=QUERY_TEMPERATURE)
    text = extract_response_text(response)

    if text:
        return text[:MAX_QUERY_CHARS]

    logger.info("LLM returned an empty search query, using heuristic fallback")
    return heuristic_query(pr_title, pr_body, files)


__all__ = ["build_base_query", "heuristic_query", "build_search_query"]
