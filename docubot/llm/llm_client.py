"""
LLM Client for Docubot
Provides a single generate() call over Grok or OpenAI chat models using LangChain
"""

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, HumanMessage
from langchain_openai import ChatOpenAI

from ..config.llm_config import LLMConfig, LLMProvider, get_llm_config
from ..exceptions import MissingCandidateError, UpstreamUnavailableError

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
TEXT_MIME_TYPE = "text/plain"

class DocubotLLMClient:
    """
    Unified LLM client for Docubot
    Wraps a LangChain chat model and maps the requested response MIME type
    onto the provider's response_format option
    """

    def __init__(self, config: Optional[LLMConfig] = None, llm: Optional[BaseChatModel] = None):
        """
        Initialize LLM client

        Args:
            config: Optional LLM configuration, read from the environment when omitted
            llm: Optional pre-built chat model, mainly for tests
        """
        self.config = config or get_llm_config()
        self.llm = llm or self._initialize_llm()

        logger.info(f"Initialized LLM client with provider: {self.config.provider.value}, model: {self.config.llm_model}")

    def _initialize_llm(self) -> ChatOpenAI:
        """
        Initialize the chat model for the configured provider

        Returns:
            ChatOpenAI: Configured model (Grok uses the OpenAI-compatible API)
        """
        if not self.config.api_key:
            key_name = "GROK_API_KEY" if self.config.provider == LLMProvider.GROK else "OPENAI_API_KEY"
            raise ValueError(f"{key_name} environment variable is required for {self.config.provider.value}")

        return ChatOpenAI(
            model=self.config.llm_model,
            api_key=self.config.api_key,
            base_url=self.config.base_url,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            # Failures are terminal for the run, so no client-side retries
            max_retries=0,
            timeout=self.config.request_timeout
        )

    def _response_format(self, response_mime_type: str, response_schema: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if response_mime_type != JSON_MIME_TYPE:
            return None
        if response_schema is None:
            return {"type": "json_object"}
        return {
            "type": "json_schema",
            "json_schema": {"name": "suggestion_set", "schema": response_schema}
        }

    async def generate(
        self,
        prompt: str,
        response_mime_type: str = JSON_MIME_TYPE,
        response_schema: Optional[Dict[str, Any]] = None,
        temperature: Optional[float] = None
    ) -> AIMessage:
        """
        Send a single-turn prompt to the model

        Args:
            prompt: Full prompt text (system instructions included)
            response_mime_type: "application/json" or "text/plain"
            response_schema: Optional JSON schema for structured JSON output
            temperature: Optional sampling temperature overriding the configured one

        Returns:
            AIMessage: Raw model response
        """
        model = self.llm
        bind_kwargs: Dict[str, Any] = {}
        response_format = self._response_format(response_mime_type, response_schema)
        if response_format is not None:
            bind_kwargs["response_format"] = response_format
        if temperature is not None:
            bind_kwargs["temperature"] = temperature
        if bind_kwargs:
            model = model.bind(**bind_kwargs)

        try:
            return await model.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"Error generating LLM response: {str(e)}")
            raise UpstreamUnavailableError("LLM", str(e)) from e

def extract_response_text(response: Optional[AIMessage]) -> str:
    """
    Concatenate the text parts of a model response

    Text parts are joined with newlines and the result is trimmed. A response
    that carries no content at all is a missing candidate, which is different
    from present-but-malformed text.

    Raises:
        MissingCandidateError: If the response has no content
    """
    if response is None or response.content is None:
        raise MissingCandidateError("No response content from LLM")

    content = response.content
    if isinstance(content, str):
        return content.strip()

    if not content:
        raise MissingCandidateError("No response content from LLM")

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text") or "")
    return "\n".join(parts).strip()

def create_llm_client(config: Optional[LLMConfig] = None) -> DocubotLLMClient:
    """
    Factory function to create LLM client

    Args:
        config: Optional LLM configuration

    Returns:
        DocubotLLMClient: Configured LLM client
    """
    return DocubotLLMClient(config)

__all__ = ["DocubotLLMClient", "extract_response_text", "create_llm_client", "JSON_MIME_TYPE", "TEXT_MIME_TYPE"]
