"""
Database package for Docubot
"""

from typing import Optional

from ..llm.embedding_client import DocubotEmbeddingClient, create_embedding_client
from .supabase_client import SupabaseClient, create_supabase_client
from .vector_search_repository import VectorSearchRepository

def create_vector_search_repository(url: Optional[str] = None,
                                    key: Optional[str] = None,
                                    match_function: str = "match_documentation_chunks",
                                    embedding_client: Optional[DocubotEmbeddingClient] = None) -> VectorSearchRepository:
    """Create vector search repository with auto-configured clients"""
    return VectorSearchRepository(
        create_supabase_client(url, key),
        embedding_client or create_embedding_client(),
        match_function=match_function
    )

__all__ = [
    "VectorSearchRepository",
    "SupabaseClient",
    "create_supabase_client",
    "create_vector_search_repository"
]
