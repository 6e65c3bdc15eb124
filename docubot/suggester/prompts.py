"""
Prompts for the documentation suggester
"""

from typing import Any, Dict, List, Sequence

from ..models import ContextRecord, PullRequestFile

MAX_DIFF_CHARS = 10000
MAX_INSTRUCTION_CHARS = 2000
MAX_QUERY_CHARS = 200
MAX_QUERY_FILES = 5
MAX_QUERY_PATCH_CHARS = 1200

_SUGGESTION_FIELDS = ["target_file", "target_section", "type", "rationale", "suggested_text", "severity"]

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "impact_level": {"type": "string", "enum": ["none", "low", "medium", "high"]},
        "summary": {"type": "string"},
        "comment_intro": {"type": "string"},
        "suggestions": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "properties": {
                    "target_file": {"type": "string"},
                    "target_section": {"type": "string"},
                    "type": {"type": "string", "enum": ["update", "add", "remove"]},
                    "rationale": {"type": "string"},
                    "suggested_text": {"type": "string"},
                    "severity": {"type": "string", "enum": ["info", "warning", "critical"]},
                },
                "required": _SUGGESTION_FIELDS,
            },
        },
    },
    "required": ["impact_level", "summary", "suggestions"],
}


class DocubotPrompts:
    """Collection of prompts for the documentation suggester"""

    @staticmethod
    def suggestion_system_prompt() -> str:
        """System prompt describing the expected JSON output"""
        return """You are a documentation assistant analyzing code changes.
Your job is to suggest documentation updates based on PR diffs and relevant documentation context.

**IMPORTANT**: Output ONLY valid JSON without any markdown fences and ensure all double quotes inside string values are escaped (e.g., \\" inside suggested_text).

Output format:
{
  "impact_level": "none" | "low" | "medium" | "high",
  "summary": "Brief summary of suggested changes",
  "comment_intro": "1-sentence intro to use in the PR comment (match the requested tone/audience)",
  "suggestions": [
    {
      "target_file": "path/to/doc.md",
      "target_section": "Section name",
      "type": "update" | "add" | "remove",
      "rationale": "Why this change is needed",
      "suggested_text": "Proposed documentation text",
      "severity": "info" | "warning" | "critical"
    }
  ]
}

Rules:
- Only suggest changes if the PR actually affects documentation
- Use the documentation file paths exactly as they appear in the context
- Keep suggestions concise and actionable
- Provide comment_intro as a single friendly sentence that matches the requested tone/audience
- If a custom tone guidance is provided, apply it ONLY to comment_intro. For suggested_text, match the tone/style of the supplied documentation context and keep it clear for readers.
- If no changes needed, return impact_level: "none" and an empty suggestions array"""

    @staticmethod
    def build_system_prompt(prompt_instruction: str = "", comment_intro: str = "") -> str:
        """System prompt with optional tone guidance and planned intro line"""
        instruction = prompt_instruction.strip()[:MAX_INSTRUCTION_CHARS]
        intro = comment_intro.strip()

        prompt = DocubotPrompts.suggestion_system_prompt()
        if instruction:
            prompt += ("\n\nTone guidance (for comment_intro only; suggested_text should follow the tone/style "
                       f"of the provided documentation context, not this guidance):\n{instruction}")
        if intro:
            prompt += f"\n\nPlanned PR comment intro (match this tone/voice):\n{intro}"
        return prompt

    @staticmethod
    def format_docs_context(docs_context: Sequence[ContextRecord]) -> str:
        """Numbered list of retrieved documentation chunks"""
        if not docs_context:
            return "No relevant documentation found."
        return "\n\n".join(
            f"[{i}] {doc.file} (lines {doc.start_line}-{doc.end_line}) - score: {doc.score:.3f}\n{doc.text}"
            for i, doc in enumerate(docs_context, 1)
        )

    @staticmethod
    def suggestion_user_prompt(pr_title: str, pr_body: str, diff: str, docs_context: Sequence[ContextRecord]) -> str:
        """User prompt with PR details, truncated diff and documentation context"""
        return f"""PR Title: {pr_title}
PR Description: {pr_body or '(empty)'}

Diff (truncated to {MAX_DIFF_CHARS} chars):
{diff[:MAX_DIFF_CHARS]}

Relevant Documentation Context:
{DocubotPrompts.format_docs_context(docs_context)}

Based on this PR, suggest documentation updates."""

    @staticmethod
    def suggestion_prompt(pr_title: str, pr_body: str, diff: str, docs_context: Sequence[ContextRecord],
                          prompt_instruction: str = "", comment_intro: str = "") -> str:
        """Complete single-turn prompt sent to the model"""
        system_prompt = DocubotPrompts.build_system_prompt(prompt_instruction, comment_intro)
        user_prompt = DocubotPrompts.suggestion_user_prompt(pr_title, pr_body, diff, docs_context)
        return f"{system_prompt}\n\n---\n\n{user_prompt}"

    @staticmethod
    def search_query_prompt(pr_title: str, pr_body: str, files: Sequence[PullRequestFile]) -> str:
        """Prompt asking for a short documentation search query"""
        snippets: List[str] = [
            f"File: {f.filename}\nDiff: {(f.patch or '')[:MAX_QUERY_PATCH_CHARS]}"
            for f in files[:MAX_QUERY_FILES]
        ]
        return "\n".join([
            "Summarize this PR into a concise documentation search query.",
            f"Output a single sentence, <={MAX_QUERY_CHARS} characters, no bullet points.",
            "Focus on key components, APIs, or docs topics that would help review the PR.",
            f"PR title: {pr_title}",
            f"PR body: {pr_body or '(empty)'}",
            "Files and diffs (truncated):",
            "\n\n".join(snippets) or "(no diff available)",
        ])


__all__ = ["DocubotPrompts", "RESPONSE_SCHEMA", "MAX_DIFF_CHARS", "MAX_QUERY_CHARS", "MAX_QUERY_FILES"]
