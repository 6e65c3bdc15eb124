"""
Tests for docubot.workflow
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from langchain_core.messages import AIMessage

from docubot.exceptions import MissingCandidateError, UpstreamUnavailableError
from docubot.models import ExistingComment
from docubot.suggester import build_base_query
from docubot.workflow import DocubotWorkflow


@pytest.fixture
def github_client(pull_request):
    client = MagicMock()
    client.get_pull_request = AsyncMock(return_value=pull_request)
    client.list_comments = AsyncMock(return_value=[])
    client.create_comment = AsyncMock(return_value={"id": 1})
    client.update_comment = AsyncMock(return_value={"id": 1})
    return client


@pytest.fixture
def search_repository(guide_context):
    repository = MagicMock()
    repository.search = AsyncMock(return_value=guide_context)
    return repository


def make_workflow(github_client, search_repository, llm_client, **kwargs):
    return DocubotWorkflow(
        github_client=github_client,
        search_repository=search_repository,
        llm_client=llm_client,
        **kwargs
    )


async def test_creates_comment_when_none_exists(github_client, search_repository, make_llm_client, suggestion_json, marker):
    llm_client = make_llm_client(json_text=suggestion_json, query_text="setup target docs")
    workflow = make_workflow(github_client, search_repository, llm_client, top_k=3)

    final_state = await workflow.execute("octo/site", 7)

    search_repository.search.assert_awaited_once_with("setup target docs", 3)
    github_client.create_comment.assert_awaited_once()
    github_client.update_comment.assert_not_awaited()

    issue_number, body = github_client.create_comment.call_args.args
    assert issue_number == 7
    assert body.startswith(marker)
    assert "docs/guide.md" in body
    assert "(lines 10-20)" in body
    assert final_state["comment_action"] == "created"
    assert final_state["suggestion_set"].suggestions[0].start_line == 10


async def test_updates_existing_bot_comment(github_client, search_repository, make_llm_client, suggestion_json, marker):
    github_client.list_comments.return_value = [
        ExistingComment(id=11, body="Looks good to me"),
        ExistingComment(id=55, body=f"{marker}\nold suggestions"),
    ]
    workflow = make_workflow(github_client, search_repository, make_llm_client(json_text=suggestion_json))

    final_state = await workflow.execute("octo/site", 7)

    github_client.update_comment.assert_awaited_once()
    assert github_client.update_comment.call_args.args[0] == 55
    github_client.create_comment.assert_not_awaited()
    assert final_state["comment_action"] == "updated"


async def test_dry_run_does_not_touch_comments(github_client, search_repository, make_llm_client, suggestion_json):
    workflow = make_workflow(github_client, search_repository, make_llm_client(json_text=suggestion_json), dry_run=True)

    final_state = await workflow.execute("octo/site", 7)

    assert final_state["comment_body"]
    github_client.list_comments.assert_not_awaited()
    github_client.create_comment.assert_not_awaited()
    github_client.update_comment.assert_not_awaited()


async def test_query_failure_falls_back_to_pr_text(github_client, search_repository, pull_request, suggestion_json):
    async def _generate(prompt, response_mime_type="application/json", response_schema=None, temperature=None):
        if response_mime_type == "text/plain":
            raise UpstreamUnavailableError("LLM", "rate limited")
        return AIMessage(content=suggestion_json)

    llm_client = MagicMock()
    llm_client.generate = AsyncMock(side_effect=_generate)
    workflow = make_workflow(github_client, search_repository, llm_client)

    final_state = await workflow.execute("octo/site", 7)

    assert final_state["search_query"] == build_base_query(pull_request)
    search_repository.search.assert_awaited_once_with(build_base_query(pull_request), 5)
    github_client.create_comment.assert_awaited_once()


async def test_llm_failure_aborts_without_writing(github_client, search_repository):
    llm_client = MagicMock()
    llm_client.generate = AsyncMock(side_effect=UpstreamUnavailableError("LLM", "service unavailable"))
    workflow = make_workflow(github_client, search_repository, llm_client)

    with pytest.raises(UpstreamUnavailableError):
        await workflow.execute("octo/site", 7)

    github_client.create_comment.assert_not_awaited()
    github_client.update_comment.assert_not_awaited()


async def test_search_failure_aborts_without_writing(github_client, search_repository, make_llm_client, suggestion_json):
    search_repository.search.side_effect = UpstreamUnavailableError("Vector search", "timeout")
    workflow = make_workflow(github_client, search_repository, make_llm_client(json_text=suggestion_json))

    with pytest.raises(UpstreamUnavailableError):
        await workflow.execute("octo/site", 7)

    github_client.list_comments.assert_not_awaited()
    github_client.create_comment.assert_not_awaited()


async def test_missing_candidate_aborts(github_client, search_repository):
    async def _generate(prompt, response_mime_type="application/json", response_schema=None, temperature=None):
        if response_mime_type == "text/plain":
            return AIMessage(content="setup docs")
        return AIMessage(content=[])

    llm_client = MagicMock()
    llm_client.generate = AsyncMock(side_effect=_generate)
    workflow = make_workflow(github_client, search_repository, llm_client)

    with pytest.raises(MissingCandidateError):
        await workflow.execute("octo/site", 7)

    github_client.create_comment.assert_not_awaited()


async def test_garbled_output_still_posts_fallback(github_client, search_repository, make_llm_client):
    workflow = make_workflow(github_client, search_repository, make_llm_client(json_text="not json at all"))

    final_state = await workflow.execute("octo/site", 7)

    assert final_state["suggestion_set"].suggestions == []
    body = github_client.create_comment.call_args.args[1]
    assert "didn't spot any doc updates" in body


def test_empty_marker_is_rejected(github_client, search_repository, make_llm_client):
    with pytest.raises(ValueError):
        make_workflow(github_client, search_repository, make_llm_client(), comment_marker="")
