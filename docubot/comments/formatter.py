"""
PR comment formatter
Renders a SuggestionSet as the Markdown body of the bot's pull request comment
"""

from typing import List

from ..models import Severity, Suggestion, SuggestionSet

DEFAULT_COMMENT_MARKER = "<!-- docubot:documentation-suggestions -->"
COMMENT_TITLE = "📚 Documentation Check-In"
SUGGESTIONS_INTRO = "Here are a few documentation updates that could keep the docs in step with this PR."
NO_SUGGESTIONS_MESSAGE = "Thanks for the update! I didn't spot any doc updates needed for this PR."

SEVERITY_ICONS = {
    Severity.INFO: "ℹ️",
    Severity.WARNING: "⚠️",
    Severity.CRITICAL: "🚨",
}


def _format_location(suggestion: Suggestion) -> str:
    location = f"`{suggestion.target_file}`"
    if suggestion.start_line is not None and suggestion.end_line is not None:
        location += f" (lines {suggestion.start_line}-{suggestion.end_line})"
    return location


def _format_suggestion(index: int, suggestion: Suggestion) -> str:
    icon = SEVERITY_ICONS.get(suggestion.severity, "")
    return f"""### {icon} Suggestion {index}: {suggestion.target_section}

**File:** {_format_location(suggestion)}
**Change:** {suggestion.type.value} · **Severity:** {suggestion.severity.value}

{suggestion.rationale}

<details>
<summary>Suggested text</summary>

```markdown
{suggestion.suggested_text}
```

</details>
"""


def format_comment(suggestion_set: SuggestionSet, marker: str = DEFAULT_COMMENT_MARKER) -> str:
    """
    Build the comment body for a suggestion set.

    The marker is embedded in every body so later runs can find and update
    this comment instead of posting a new one.
    """
    intro = (suggestion_set.comment_intro or "").strip() or SUGGESTIONS_INTRO
    parts: List[str] = [
        marker,
        f"## {COMMENT_TITLE}",
        "",
        intro,
        "",
        f"**Summary:** {suggestion_set.summary}",
        f"**Impact:** {suggestion_set.impact_level.value}",
        "",
    ]

    if not suggestion_set.suggestions:
        parts.append(NO_SUGGESTIONS_MESSAGE)
    else:
        for i, suggestion in enumerate(suggestion_set.suggestions, 1):
            parts.append(_format_suggestion(i, suggestion))
            parts.append("---")

    parts.append("")
    parts.append("*This comment is updated automatically on every push to this PR.*")
    return "\n".join(parts)


__all__ = ["DEFAULT_COMMENT_MARKER", "COMMENT_TITLE", "SUGGESTIONS_INTRO", "NO_SUGGESTIONS_MESSAGE", "SEVERITY_ICONS", "format_comment"]
