"""
Tests for docubot.suggester.llm_suggester and docubot.suggester.search_query
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from langchain_core.messages import AIMessage

from docubot.exceptions import MissingCandidateError
from docubot.models import ImpactLevel, PullRequestFile
from docubot.suggester.llm_suggester import generate_suggestions
from docubot.suggester.prompts import RESPONSE_SCHEMA
from docubot.suggester.search_query import build_base_query, build_search_query, heuristic_query


RAW_JSON_WITH_NEWLINE = """
{
  "impact_level": "low",
  "summary": "Update intro",
  "suggestions": [
    {
      "target_file": "docs/guide.md",
      "target_section": "Intro",
      "type": "update",
      "rationale": "Keep docs in sync",
      "suggested_text": "First line
Second line",
      "severity": "info",
      "start_line": 999
    }
  ]
}
""".strip()


class TestGenerateSuggestions:

    async def test_parses_sanitizes_and_attaches_line_numbers(self, make_llm_client, guide_context):
        client = make_llm_client(json_text=f"```json\n{RAW_JSON_WITH_NEWLINE}\n```")

        result = await generate_suggestions(client, "Add guide updates", "PR body", "diff content", guide_context)

        assert result.impact_level is ImpactLevel.LOW
        assert len(result.suggestions) == 1
        assert result.suggestions[0].target_file == "docs/guide.md"
        assert result.suggestions[0].suggested_text == "First line\nSecond line"
        assert result.suggestions[0].start_line == 10
        assert result.suggestions[0].end_line == 20

        client.generate.assert_awaited_once()
        kwargs = client.generate.call_args.kwargs
        assert kwargs["response_mime_type"] == "application/json"
        assert kwargs["response_schema"] is RESPONSE_SCHEMA

    async def test_string_line_range_from_model_is_replaced(self, make_llm_client, guide_context):
        payload = RAW_JSON_WITH_NEWLINE.replace('"start_line": 999', '"start_line": "10-20"')
        client = make_llm_client(json_text=payload)

        result = await generate_suggestions(client, "Title", "Body", "diff", guide_context)

        assert len(result.suggestions) == 1
        assert result.suggestions[0].start_line == 10
        assert result.suggestions[0].end_line == 20

    async def test_prompt_includes_context_and_truncated_diff(self, make_llm_client, guide_context):
        client = make_llm_client(json_text='{"impact_level": "none", "summary": "ok", "suggestions": []}')

        await generate_suggestions(client, "Title", "", "x" * 20000, guide_context, prompt_instruction="Be playful")

        prompt = client.generate.call_args.args[0]
        assert "PR Description: (empty)" in prompt
        assert "[1] docs/guide.md (lines 10-20) - score: 0.900" in prompt
        assert "x" * 10000 in prompt
        assert "x" * 10001 not in prompt
        assert "Be playful" in prompt

    async def test_prompt_without_context(self, make_llm_client):
        client = make_llm_client(json_text='{"impact_level": "none", "summary": "ok", "suggestions": []}')

        await generate_suggestions(client, "Title", "Body", "diff", [])

        assert "No relevant documentation found." in client.generate.call_args.args[0]

    async def test_garbled_output_returns_empty_result(self, make_llm_client, guide_context):
        client = make_llm_client(json_text="I cannot help with that.")

        result = await generate_suggestions(client, "Title", "Body", "diff", guide_context)

        assert result.impact_level is ImpactLevel.NONE
        assert result.suggestions == []

    async def test_missing_candidate_is_terminal(self, guide_context):
        client = MagicMock()
        client.generate = AsyncMock(return_value=None)

        with pytest.raises(MissingCandidateError):
            await generate_suggestions(client, "Title", "Body", "diff", guide_context)


class TestSearchQuery:

    async def test_uses_trimmed_model_output(self, make_llm_client, pull_request):
        client = make_llm_client(query_text="  Makefile setup target docs \n")

        query = await build_search_query(client, pull_request.title, pull_request.body, pull_request.files)

        assert query == "Makefile setup target docs"
        assert client.generate.call_args.kwargs["response_mime_type"] == "text/plain"
        assert client.generate.call_args.kwargs["temperature"] == 0

    async def test_truncates_long_query(self, make_llm_client, pull_request):
        client = make_llm_client(query_text="q" * 500)

        query = await build_search_query(client, pull_request.title, pull_request.body, pull_request.files)

        assert len(query) == 200

    async def test_empty_output_uses_heuristic(self, make_llm_client, pull_request):
        client = make_llm_client(query_text="")

        query = await build_search_query(client, pull_request.title, pull_request.body, pull_request.files)

        assert query == "Add setup step | Makefile, src/app.py | Adds a make target"

    def test_heuristic_default(self):
        assert heuristic_query("", "", []) == "PR changes"

    def test_heuristic_limits_files(self):
        files = [PullRequestFile(filename=f"f{i}.py") for i in range(8)]
        assert heuristic_query("T", "", files) == "T | f0.py, f1.py, f2.py, f3.py, f4.py"

    def test_base_query(self, pull_request):
        query = build_base_query(pull_request)

        assert query.startswith("Add setup step\nAdds a make target\nMakefile: +setup:")
        assert "src/app.py: +print('hi')" in query
