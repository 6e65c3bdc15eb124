"""
Exception hierarchy for Docubot
Terminal errors that abort a run before any comment is written
"""


class DocubotError(Exception):
    """Base exception for all Docubot errors"""


class ConfigurationError(DocubotError):
    """A required input or environment variable is missing or invalid"""


class UpstreamUnavailableError(DocubotError):
    """
    An upstream collaborator (vector search, LLM or GitHub) failed.

    The originating exception is chained as ``__cause__`` and its message is
    kept in ``str(error)``.
    """

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service} request failed: {message}")


class MissingCandidateError(DocubotError):
    """The LLM responded without any candidate content to recover text from"""


__all__ = [
    "DocubotError",
    "ConfigurationError",
    "UpstreamUnavailableError",
    "MissingCandidateError",
]
