"""
Docubot Data Models
Pydantic models for the data flowing through the documentation suggestion pipeline
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImpactLevel(str, Enum):
    """How strongly a PR affects the documentation"""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SuggestionType(str, Enum):
    """Kind of documentation change being suggested"""
    UPDATE = "update"
    ADD = "add"
    REMOVE = "remove"


class Severity(str, Enum):
    """Severity of a single suggestion"""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class ContextRecord(BaseModel):
    """Documentation chunk returned by vector search, with file/line provenance"""
    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="Documentation file path the chunk came from")
    chunk_index: int = Field(default=0, description="Index of the chunk within the file")
    start_line: int = Field(default=0, description="First line of the chunk")
    end_line: int = Field(default=0, description="Last line of the chunk")
    text: str = Field(default="", description="Chunk content")
    score: float = Field(default=0.0, description="Similarity score, higher is more relevant")


class Suggestion(BaseModel):
    """Single documentation update suggested by the LLM"""
    target_file: str = Field(..., description="Path to the documentation file")
    target_section: str = Field(..., description="Section name inside the file")
    type: SuggestionType = Field(..., description="Type of change (update, add, remove)")
    rationale: str = Field(..., description="Why this change is needed")
    suggested_text: str = Field(..., description="Proposed documentation text")
    severity: Severity = Field(..., description="Severity (info, warning, critical)")
    start_line: Optional[int] = Field(default=None, description="Start line, set by enrichment only")
    end_line: Optional[int] = Field(default=None, description="End line, set by enrichment only")

    @field_validator("start_line", "end_line", mode="before")
    @classmethod
    def _drop_untrusted_line(cls, value):
        # lines from the model are overwritten by enrichment, malformed ones are dropped
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None


class SuggestionSet(BaseModel):
    """Structured LLM response: impact assessment plus ordered suggestions"""
    impact_level: ImpactLevel = Field(..., description="Overall documentation impact of the PR")
    summary: str = Field(..., description="Brief summary of suggested changes")
    comment_intro: Optional[str] = Field(default=None, description="One-sentence intro for the PR comment")
    suggestions: List[Suggestion] = Field(default_factory=list, description="Ordered suggestions")


class ExistingComment(BaseModel):
    """Comment already present on an issue or pull request"""
    id: Union[int, str] = Field(..., description="Opaque comment identifier")
    body: str = Field(default="", description="Comment body")


class PullRequestFile(BaseModel):
    """File entry from the pull request files listing"""
    filename: str
    status: str = "modified"
    patch: Optional[str] = None


class PullRequestData(BaseModel):
    """Pull request details needed to build prompts"""
    number: int
    title: str = ""
    body: str = ""
    files: List[PullRequestFile] = Field(default_factory=list)

    def build_diff(self) -> str:
        """Concatenate file patches into a single diff text"""
        return "\n\n".join(f"--- {f.filename}\n{f.patch or ''}" for f in self.files)


__all__ = [
    "ImpactLevel", "SuggestionType", "Severity",
    "ContextRecord", "Suggestion", "SuggestionSet", "ExistingComment",
    "PullRequestFile", "PullRequestData",
]
