"""
Documentation Suggestion Workflow for Docubot
LangGraph pipeline that turns a pull request into a single documentation suggestion comment
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from langgraph.graph import StateGraph, END

from .comments import CommentUpsertCoordinator, NeedsUpdate, SUGGESTIONS_INTRO, format_comment
from .comments.formatter import DEFAULT_COMMENT_MARKER
from .database import VectorSearchRepository
from .github import GitHubClient
from .llm.llm_client import DocubotLLMClient
from .models import ContextRecord, PullRequestData, SuggestionSet
from .suggester import build_base_query, build_search_query, generate_suggestions

logger = logging.getLogger(__name__)

@dataclass
class DocubotState:
    """State for the documentation suggestion workflow"""
    repository: str
    pr_number: int

    # Step 1: Fetch PR
    pull_request: Optional[PullRequestData] = None

    # Step 2-3: Search documentation
    search_query: str = ""
    docs_context: List[ContextRecord] = field(default_factory=list)

    # Step 4: Generate suggestions
    suggestion_set: Optional[SuggestionSet] = None

    # Step 5-6: Format and publish
    comment_body: str = ""
    comment_action: str = ""

class DocubotWorkflow:
    """
    LangGraph workflow for suggesting documentation updates on a pull request.

    Steps run strictly in sequence:
    1. Fetch PR - title, body and changed files
    2. Build search query - LLM-refined, raw PR text on failure
    3. Search documentation - vector search for related chunks
    4. Generate suggestions - LLM call, output recovery and line-range enrichment
    5. Format comment
    6. Publish comment - update the previous bot comment or create one (skipped in dry run)

    Any error other than a failed query refinement aborts the run before a
    comment is written.
    """

    def __init__(self,
                 github_client: GitHubClient,
                 search_repository: VectorSearchRepository,
                 llm_client: DocubotLLMClient,
                 comment_marker: str = DEFAULT_COMMENT_MARKER,
                 top_k: int = 5,
                 prompt_instruction: str = "",
                 dry_run: bool = False):
        """
        Initialize workflow

        Args:
            github_client: GitHub REST client for the target repository
            search_repository: Documentation vector search
            llm_client: LLM client
            comment_marker: Substring identifying the bot's own comments
            top_k: Number of documentation chunks to retrieve
            prompt_instruction: Optional tone guidance for the comment intro
            dry_run: Format the comment without posting it
        """
        self.github_client = github_client
        self.search_repository = search_repository
        self.llm_client = llm_client
        self.coordinator = CommentUpsertCoordinator(github_client, comment_marker)
        self.comment_marker = comment_marker
        self.top_k = top_k
        self.prompt_instruction = prompt_instruction
        self.dry_run = dry_run

        self.workflow = self._build_workflow()

        logger.info("Initialized Docubot Workflow")
        logger.info(f"Top K: {top_k}")
        logger.info(f"Dry run: {'enabled' if dry_run else 'disabled'}")

    def _build_workflow(self) -> StateGraph:
        """Build the LangGraph workflow"""
        workflow = StateGraph(DocubotState)

        workflow.add_node("fetch_pull_request", self._fetch_pull_request)
        workflow.add_node("build_search_query", self._build_search_query)
        workflow.add_node("search_documentation", self._search_documentation)
        workflow.add_node("generate_suggestions", self._generate_suggestions)
        workflow.add_node("format_comment", self._format_comment)
        workflow.add_node("publish_comment", self._publish_comment)

        workflow.set_entry_point("fetch_pull_request")
        workflow.add_edge("fetch_pull_request", "build_search_query")
        workflow.add_edge("build_search_query", "search_documentation")
        workflow.add_edge("search_documentation", "generate_suggestions")
        workflow.add_edge("generate_suggestions", "format_comment")
        workflow.add_conditional_edges("format_comment", self._route_after_format, {
            "publish_comment": "publish_comment",
            "end": END
        })
        workflow.add_edge("publish_comment", END)

        return workflow

    async def execute(self, repository: str, pr_number: int) -> Dict[str, Any]:
        """
        Run the workflow for one pull request

        Args:
            repository: Repository full name (owner/repo)
            pr_number: Pull request number

        Returns:
            Dict[str, Any]: Final state values
        """
        try:
            app = self.workflow.compile()
            final_state = await app.ainvoke({"repository": repository, "pr_number": pr_number})

            logger.info(f"Docubot completed for PR {repository}#{pr_number}")
            return final_state

        except Exception as e:
            logger.error(f"Docubot failed: {str(e)}")
            raise

    def _route_after_format(self, state: DocubotState) -> str:
        """Skip publishing in dry-run mode"""
        return "end" if self.dry_run else "publish_comment"

    async def _fetch_pull_request(self, state: DocubotState) -> Dict[str, Any]:
        """Step 1: Fetch PR details and changed files"""
        logger.info(f"Step 1: Fetching PR #{state.pr_number}")
        pull_request = await self.github_client.get_pull_request(state.pr_number)
        logger.info(f"  - {len(pull_request.files)} changed files")
        return {"pull_request": pull_request}

    async def _build_search_query(self, state: DocubotState) -> Dict[str, Any]:
        """Step 2: Summarize the PR into a focused search query"""
        pr = state.pull_request
        logger.info("Step 2: Generating focused search query with LLM")
        try:
            query = await build_search_query(self.llm_client, pr.title, pr.body, pr.files)
            logger.info(f"Search query: {query}")
        except Exception as e:
            logger.warning(f"Falling back to raw PR text for documentation search: {str(e)}")
            query = build_base_query(pr)
        return {"search_query": query}

    async def _search_documentation(self, state: DocubotState) -> Dict[str, Any]:
        """Step 3: Retrieve related documentation chunks"""
        logger.info("Step 3: Searching for relevant documentation")
        docs_context = await self.search_repository.search(state.search_query, self.top_k)

        logger.info(f"Found {len(docs_context)} relevant documentation chunks")
        for i, doc in enumerate(docs_context, 1):
            logger.info(f"  {i}. {doc.file} (lines {doc.start_line}-{doc.end_line}) - score: {doc.score:.3f}")

        return {"docs_context": docs_context}

    async def _generate_suggestions(self, state: DocubotState) -> Dict[str, Any]:
        """Step 4: Ask the LLM for suggestions and enrich them with line ranges"""
        pr = state.pull_request
        logger.info("Step 4: Generating suggestions with LLM")
        suggestion_set = await generate_suggestions(
            self.llm_client,
            pr.title,
            pr.body,
            pr.build_diff(),
            state.docs_context,
            prompt_instruction=self.prompt_instruction,
            comment_intro=SUGGESTIONS_INTRO
        )
        logger.info(f"Impact: {suggestion_set.impact_level.value}, Suggestions: {len(suggestion_set.suggestions)}")
        return {"suggestion_set": suggestion_set}

    async def _format_comment(self, state: DocubotState) -> Dict[str, Any]:
        """Step 5: Render the comment body"""
        return {"comment_body": format_comment(state.suggestion_set, self.comment_marker)}

    async def _publish_comment(self, state: DocubotState) -> Dict[str, Any]:
        """Step 6: Update the previous bot comment or create a new one"""
        logger.info("Step 6: Posting comment to PR")
        plan = await self.coordinator.upsert(state.pr_number, state.comment_body)
        return {"comment_action": "updated" if isinstance(plan, NeedsUpdate) else "created"}

__all__ = ["DocubotState", "DocubotWorkflow"]
