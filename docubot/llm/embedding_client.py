"""
Embedding Client for Docubot
Generates query embeddings for documentation vector search
"""

import logging
from typing import List, Optional

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from ..config.llm_config import LLMConfig, get_llm_config
from ..exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)

class DocubotEmbeddingClient:
    """
    Embedding client for generating query vectors
    Uses OpenAI embeddings through LangChain
    """

    def __init__(self,
                 config: Optional[LLMConfig] = None,
                 embeddings: Optional[Embeddings] = None):
        """
        Initialize embedding client

        Args:
            config: Optional LLM configuration (embedding model and key)
            embeddings: Optional pre-built LangChain embeddings, mainly for tests
        """
        if embeddings is not None:
            self.embeddings = embeddings
            self.model = getattr(embeddings, "model", "custom")
            return

        config = config or get_llm_config()
        if not config.embedding_api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required for embeddings")

        self.model = config.embedding_model
        self.embeddings = OpenAIEmbeddings(
            model=self.model,
            api_key=config.embedding_api_key,
            max_retries=0
        )

        logger.info(f"Initialized embedding client with model: {self.model}")

    async def embed_text(self, text: str) -> List[float]:
        """
        Generate embedding for a single text

        Args:
            text: Text to embed

        Returns:
            List[float]: Vector embedding
        """
        try:
            embedding = await self.embeddings.aembed_query(text.strip())
        except Exception as e:
            logger.error(f"Error generating embedding for text: {str(e)}")
            raise UpstreamUnavailableError("Embedding", str(e)) from e

        if not embedding:
            raise UpstreamUnavailableError("Embedding", "Failed to generate query embedding")
        return embedding

def create_embedding_client(config: Optional[LLMConfig] = None) -> DocubotEmbeddingClient:
    """Factory function to create embedding client"""
    return DocubotEmbeddingClient(config)

__all__ = ["DocubotEmbeddingClient", "create_embedding_client"]
