"""
Shared fixtures for Docubot tests.
"""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock
from langchain_core.messages import AIMessage

from docubot.comments.formatter import DEFAULT_COMMENT_MARKER
from docubot.models import ContextRecord, PullRequestData, PullRequestFile


@pytest.fixture
def suggestion_payload():
    """A well-formed suggestion set as the model would return it."""
    return {
        "impact_level": "low",
        "summary": "Update the guide intro",
        "comment_intro": "Hi there! A couple of doc tweaks could help.",
        "suggestions": [
            {
                "target_file": "docs/guide.md",
                "target_section": "Intro",
                "type": "update",
                "rationale": "Keep docs in sync",
                "suggested_text": "Run `make setup` first.",
                "severity": "info",
            }
        ],
    }


@pytest.fixture
def suggestion_json(suggestion_payload):
    return json.dumps(suggestion_payload, indent=2)


@pytest.fixture
def guide_context():
    return [
        ContextRecord(
            file="docs/guide.md",
            chunk_index=0,
            start_line=10,
            end_line=20,
            text="Guide section",
            score=0.9,
        )
    ]


@pytest.fixture
def pull_request():
    return PullRequestData(
        number=7,
        title="Add setup step",
        body="Adds a make target",
        files=[
            PullRequestFile(filename="Makefile", status="modified", patch="+setup:\n+\tpip install -e ."),
            PullRequestFile(filename="src/app.py", status="added", patch="+print('hi')"),
        ],
    )


@pytest.fixture
def marker():
    return DEFAULT_COMMENT_MARKER


@pytest.fixture
def make_llm_client():
    """Build a fake LLM client whose generate() answers by response MIME type.

    Usage:
        client = make_llm_client(json_text='{...}', query_text="setup docs")
    """
    def _make(json_text="", query_text="documentation search query"):
        async def _generate(prompt, response_mime_type="application/json", response_schema=None, temperature=None):
            if response_mime_type == "text/plain":
                return AIMessage(content=query_text)
            return AIMessage(content=json_text)

        client = MagicMock()
        client.generate = AsyncMock(side_effect=_generate)
        return client
    return _make
