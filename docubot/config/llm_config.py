"""
LLM Configuration for Docubot
Supports Grok and OpenAI chat models through the OpenAI-compatible interface
"""

import os
import logging
from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum

logger = logging.getLogger(__name__)

class LLMProvider(str, Enum):
    """Supported LLM providers"""
    GROK = "grok"
    OPENAI = "openai"

class LLMConfig(BaseModel):
    """LLM Configuration model"""
    model_config = {"protected_namespaces": ()}

    provider: LLMProvider = Field(default=LLMProvider.OPENAI)
    llm_model: str = Field(default="gpt-4o-mini")
    api_key: Optional[str] = Field(default=None)
    base_url: Optional[str] = Field(default=None)
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    max_tokens: int = Field(default=8192, gt=0)
    request_timeout: int = Field(default=120, gt=0)
    embedding_model: str = Field(default="text-embedding-3-small")
    embedding_api_key: Optional[str] = Field(default=None)

def get_llm_config() -> LLMConfig:
    """
    Get LLM configuration from environment variables
    Auto-detects provider based on API key format if not explicitly set

    Returns:
        LLMConfig: Configured LLM settings
    """
    grok_api_key = os.getenv("GROK_API_KEY")
    openai_api_key = os.getenv("OPENAI_API_KEY")

    provider_env = os.getenv("DOCUBOT_LLM_PROVIDER", "").lower()

    if provider_env == "openai":
        provider = LLMProvider.OPENAI
    elif provider_env == "grok":
        provider = LLMProvider.GROK
    elif grok_api_key and grok_api_key.startswith("xai-"):
        provider = LLMProvider.GROK
        logger.info("Auto-detected Grok provider based on xAI API key format")
    else:
        provider = LLMProvider.OPENAI
        logger.info("Using default OpenAI provider")

    common = dict(
        temperature=float(os.getenv("DOCUBOT_LLM_TEMPERATURE", "0.1")),
        max_tokens=int(os.getenv("DOCUBOT_LLM_MAX_TOKENS", "8192")),
        request_timeout=int(os.getenv("DOCUBOT_LLM_TIMEOUT", "120")),
        embedding_model=os.getenv("DOCUBOT_EMBEDDING_MODEL", "text-embedding-3-small"),
        # Embeddings always go through OpenAI, even when chat uses Grok
        embedding_api_key=openai_api_key,
    )

    if provider == LLMProvider.GROK:
        # Ignore empty env vars so the base URL is never blank
        return LLMConfig(
            provider=provider,
            llm_model=os.getenv("DOCUBOT_LLM_MODEL", "grok-3-mini"),
            api_key=grok_api_key,
            base_url=os.getenv("GROK_BASE_URL") or "https://api.x.ai/v1",
            **common
        )

    return LLMConfig(
        provider=provider,
        llm_model=os.getenv("DOCUBOT_LLM_MODEL", "gpt-4o-mini"),
        api_key=openai_api_key,
        base_url=os.getenv("OPENAI_BASE_URL") or None,
        **common
    )

def setup_logging(level: str = "INFO") -> None:
    """
    Setup logging configuration for the application

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if level.upper() == "DEBUG":
        logging.getLogger("docubot").setLevel(logging.DEBUG)
        logging.getLogger("langchain").setLevel(logging.INFO)
    else:
        # Keep third-party clients quiet in normal operation
        logging.getLogger("langchain").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

__all__ = ["LLMProvider", "LLMConfig", "get_llm_config", "setup_logging"]
