"""
LLM package for Docubot
"""

from .llm_client import (
    DocubotLLMClient,
    extract_response_text,
    create_llm_client
)
from .embedding_client import (
    DocubotEmbeddingClient,
    create_embedding_client
)

__all__ = [
    "DocubotLLMClient",
    "extract_response_text",
    "create_llm_client",
    "DocubotEmbeddingClient",
    "create_embedding_client"
]
