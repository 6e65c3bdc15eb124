"""
Tests for docubot.comments.formatter
"""

from docubot.comments.formatter import SUGGESTIONS_INTRO, format_comment
from docubot.models import SuggestionSet


def test_minimal_message_without_suggestions(marker):
    comment = format_comment(SuggestionSet(impact_level="none", summary="All good", suggestions=[]), marker)

    assert comment.startswith(marker)
    assert "📚 Documentation Check-In" in comment
    assert "All good" in comment
    assert "didn't spot any doc updates needed" in comment
    assert SUGGESTIONS_INTRO in comment


def test_renders_suggestion_details(marker):
    suggestion_set = SuggestionSet(
        impact_level="medium",
        summary="Add onboarding notes",
        suggestions=[{
            "target_file": "docs/readme.md",
            "target_section": "Onboarding",
            "type": "add",
            "rationale": "PR adds a new setup step",
            "suggested_text": "New setup instructions",
            "severity": "critical",
            "start_line": 4,
            "end_line": 8,
        }],
    )

    comment = format_comment(suggestion_set, marker)

    assert "Suggestion 1" in comment
    assert "docs/readme.md" in comment
    assert "lines 4-8" in comment
    assert "🚨" in comment
    assert "New setup instructions" in comment
    assert "didn't spot" not in comment


def test_omits_line_range_when_unknown(marker):
    suggestion_set = SuggestionSet(
        impact_level="low",
        summary="s",
        suggestions=[{
            "target_file": "docs/b.md",
            "target_section": "Usage",
            "type": "update",
            "rationale": "r",
            "suggested_text": "t",
            "severity": "warning",
        }],
    )

    comment = format_comment(suggestion_set, marker)

    assert "lines" not in comment
    assert "⚠️" in comment


def test_uses_model_comment_intro(marker):
    suggestion_set = SuggestionSet(impact_level="none", summary="s", comment_intro="Howdy, docs look fine!")

    comment = format_comment(suggestion_set, marker)

    assert "Howdy, docs look fine!" in comment
    assert SUGGESTIONS_INTRO not in comment
