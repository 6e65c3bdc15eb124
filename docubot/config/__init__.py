"""
Configuration package for Docubot
"""

from .llm_config import (
    LLMProvider,
    LLMConfig,
    get_llm_config,
    setup_logging
)
from .action_config import (
    BotConfig,
    get_input,
    load_bot_config,
    set_output
)

__all__ = [
    "LLMProvider",
    "LLMConfig",
    "get_llm_config",
    "setup_logging",
    "BotConfig",
    "get_input",
    "load_bot_config",
    "set_output"
]
