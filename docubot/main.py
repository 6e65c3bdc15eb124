#!/usr/bin/env python3
"""
Main entry point for Docubot
Suggests documentation updates for a pull request and posts them as a single PR comment
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from .config import load_bot_config, set_output, setup_logging
from .database import create_vector_search_repository
from .github import GitHubClient
from .llm import create_llm_client
from .workflow import DocubotWorkflow

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Suggest documentation updates for a pull request")
    parser.add_argument("--pr-number", type=int, help="Pull request number (default: from action inputs or event payload)")
    parser.add_argument("--repo", help="Repository as owner/repo (default: from action inputs or GITHUB_REPOSITORY)")
    parser.add_argument("--dry-run", action="store_true", default=None,
                        help="Print the comment instead of posting it")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    return parser.parse_args(argv)

async def run(args: argparse.Namespace) -> None:
    """Run the workflow for the configured pull request"""
    config = load_bot_config(pr_number=args.pr_number, repository=args.repo, dry_run=args.dry_run)

    logger.info("=" * 60)
    logger.info("Docubot")
    logger.info("=" * 60)
    logger.info(f"Repository: {config.repository}")
    logger.info(f"PR: #{config.pr_number}")
    logger.info(f"Search function: {config.match_function}")
    logger.info("=" * 60)

    llm_client = create_llm_client()
    workflow = DocubotWorkflow(
        github_client=GitHubClient(config.github_token, config.repository, api_url=config.github_api_url),
        search_repository=create_vector_search_repository(
            config.supabase_url, config.supabase_key, match_function=config.match_function
        ),
        llm_client=llm_client,
        comment_marker=config.comment_marker,
        top_k=config.top_k,
        prompt_instruction=config.prompt_instruction,
        dry_run=config.dry_run
    )

    final_state = await workflow.execute(config.repository, config.pr_number)
    suggestion_set = final_state["suggestion_set"]

    if config.dry_run:
        print("=" * 60)
        print(final_state["comment_body"])
        print("=" * 60)
        print("💡 Dry run: comment was not posted")
    else:
        logger.info(f"Comment {final_state['comment_action']} on PR #{config.pr_number}")

    set_output("suggestions_count", len(suggestion_set.suggestions))
    set_output("impact_level", suggestion_set.impact_level.value)

    logger.info("✅ Analysis complete!")
    logger.info(f"   Impact: {suggestion_set.impact_level.value}")
    logger.info(f"   Suggestions: {len(suggestion_set.suggestions)}")

def main(argv: Optional[List[str]] = None) -> None:
    """Main function for Docubot"""
    args = parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        asyncio.run(run(args))
    except Exception as e:
        logger.error(f"Bot failed: {str(e)}")
        if os.getenv("GITHUB_ACTIONS"):
            print(f"::error::Bot failed: {str(e)}")
        if args.log_level == "DEBUG":
            import traceback
            traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    main()
