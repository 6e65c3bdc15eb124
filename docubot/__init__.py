"""
Docubot - Documentation update suggestions for pull requests
"""

from .workflow import DocubotWorkflow, DocubotState

__version__ = "0.1.0"

__all__ = [
    "DocubotWorkflow",
    "DocubotState",
    "__version__"
]
