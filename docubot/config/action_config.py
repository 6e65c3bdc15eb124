"""
Run configuration for Docubot
Reads GitHub Action inputs (INPUT_<NAME>) with plain environment variables as fallback
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..comments.formatter import DEFAULT_COMMENT_MARKER
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class BotConfig(BaseModel):
    """Settings for a single pull request run"""
    github_token: str
    repository: str = Field(..., description="Repository full name (owner/repo)")
    pr_number: int = Field(..., gt=0)
    top_k: int = Field(default=5, gt=0)
    prompt_instruction: str = Field(default="", description="Tone guidance for the comment intro")
    comment_marker: str = Field(default=DEFAULT_COMMENT_MARKER, min_length=1)
    supabase_url: str
    supabase_key: str
    match_function: str = Field(default="match_documentation_chunks")
    github_api_url: str = Field(default="https://api.github.com")
    dry_run: bool = False


def get_input(name: str, required: bool = False) -> str:
    """
    Read an action input.

    Looks up ``INPUT_<NAME>`` first (how GitHub Actions passes inputs), then
    ``<NAME>`` so the bot can be run locally from a .env file.
    """
    env_name = name.upper().replace("-", "_")
    value = os.getenv(f"INPUT_{env_name}") or os.getenv(env_name) or ""
    value = value.strip()
    if not value and required:
        raise ConfigurationError(f"Required input '{name}' not provided")
    return value


def _load_event_payload() -> Dict[str, Any]:
    event_path = os.getenv("GITHUB_EVENT_PATH")
    if not event_path or not os.path.exists(event_path):
        return {}
    with open(event_path) as f:
        return json.load(f)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Input '{name}' must be an integer, got '{value}'")


def load_bot_config(pr_number: Optional[int] = None, repository: Optional[str] = None,
                    dry_run: Optional[bool] = None) -> BotConfig:
    """
    Build the run configuration from action inputs and the GitHub event payload

    Args:
        pr_number: Explicit PR number, overrides inputs and event payload
        repository: Explicit owner/repo, overrides inputs and environment
        dry_run: Explicit dry-run flag, overrides the DRY_RUN input

    Returns:
        BotConfig: Validated configuration
    """
    if not os.getenv("GITHUB_ACTIONS"):
        load_dotenv()

    event = _load_event_payload()

    if pr_number is None:
        raw_pr = get_input("pr_number") or str((event.get("pull_request") or {}).get("number") or "")
        pr_number = _parse_int("pr_number", raw_pr) if raw_pr else 0

    repository = (repository or get_input("repo") or os.getenv("GITHUB_REPOSITORY")
                  or (event.get("repository") or {}).get("full_name") or "")

    if not pr_number or not repository:
        raise ConfigurationError("Could not determine PR number or repository")
    if "/" not in repository:
        raise ConfigurationError(f"Repository must be in owner/repo form, got '{repository}'")

    if dry_run is None:
        dry_run = get_input("dry_run").lower() == "true"

    config = BotConfig(
        github_token=get_input("github_token", required=True),
        repository=repository,
        pr_number=pr_number,
        top_k=_parse_int("top_k", get_input("top_k") or "5"),
        prompt_instruction=get_input("prompt_instruction"),
        comment_marker=get_input("comment_marker") or DEFAULT_COMMENT_MARKER,
        supabase_url=get_input("supabase_url", required=True),
        supabase_key=get_input("supabase_service_role_key", required=True),
        match_function=get_input("match_function") or "match_documentation_chunks",
        github_api_url=os.getenv("GITHUB_API_URL") or "https://api.github.com",
        dry_run=dry_run,
    )

    logger.info(f"Loaded configuration for {config.repository}#{config.pr_number} (top_k={config.top_k}, dry_run={config.dry_run})")
    if config.prompt_instruction:
        logger.info("Custom prompt instruction detected (not printed for safety)")

    return config


def set_output(name: str, value: Any) -> None:
    """Write a GitHub Action output, or log it when running outside Actions"""
    output_path = os.getenv("GITHUB_OUTPUT")
    if not output_path:
        logger.info(f"Output {name}={value}")
        return
    with open(output_path, "a") as f:
        f.write(f"{name}={value}\n")


__all__ = ["BotConfig", "get_input", "load_bot_config", "set_output"]
