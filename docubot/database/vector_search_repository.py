"""
Vector Search Repository for Docubot
Finds documentation chunks related to a pull request using vector embeddings
"""

import logging
from typing import Any, Dict, List

from ..exceptions import UpstreamUnavailableError
from ..llm.embedding_client import DocubotEmbeddingClient
from ..models import ContextRecord
from .supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

class VectorSearchRepository:
    """
    Repository for vector-based documentation search

    The Supabase function is expected to accept ``query_embedding`` and
    ``match_count`` and return rows with ``file``, ``chunk_index``,
    ``start_line``, ``end_line``, ``text`` and ``similarity`` columns.
    """

    def __init__(self,
                 supabase_client: SupabaseClient,
                 embedding_client: DocubotEmbeddingClient,
                 match_function: str = "match_documentation_chunks"):
        """
        Initialize vector search repository

        Args:
            supabase_client: Supabase client
            embedding_client: Embedding client for query vectors
            match_function: Name of the similarity search SQL function
        """
        self.supabase_client = supabase_client
        self.embedding_client = embedding_client
        self.match_function = match_function

        logger.info(f"Initialized VectorSearchRepository (function: {match_function})")

    @staticmethod
    def _to_record(row: Dict[str, Any]) -> ContextRecord:
        return ContextRecord(
            file=row.get("file") or "unknown",
            chunk_index=row.get("chunk_index") or 0,
            start_line=row.get("start_line") or 0,
            end_line=row.get("end_line") or 0,
            text=row.get("text") or "",
            score=row.get("similarity") or row.get("score") or 0.0
        )

    async def search(self, query_text: str, top_k: int = 5) -> List[ContextRecord]:
        """
        Find documentation chunks similar to the query text

        Args:
            query_text: Text to search for
            top_k: Maximum number of results

        Returns:
            List[ContextRecord]: Matches ordered by descending score, empty when nothing matches
        """
        query_embedding = await self.embedding_client.embed_text(query_text)

        try:
            rows = self.supabase_client.rpc(
                self.match_function,
                {
                    "query_embedding": query_embedding,
                    "match_count": top_k
                }
            )
        except Exception as e:
            logger.error(f"Error searching documentation chunks: {str(e)}")
            raise UpstreamUnavailableError("Vector search", str(e)) from e

        records = sorted((self._to_record(row) for row in rows), key=lambda r: r.score, reverse=True)
        logger.info(f"Found {len(records)} documentation chunks for query: '{query_text[:50]}...'")

        return records[:top_k]

__all__ = ["VectorSearchRepository"]
