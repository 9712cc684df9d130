"""
Environment variable handling for NotifyOps configuration.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .settings import (
    AppConfig, ServerConfig, GitHubConfig, LLMConfig, SlackConfig, PipelineConfig, LogLevel
)
from .constants import (
    DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT, DEFAULT_GITHUB_BASE_URL, DEFAULT_LLM_MODEL,
    DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, DEFAULT_PROMPT_STYLE,
    DEFAULT_MAX_CONCURRENT_PIPELINES
)

logger = logging.getLogger(__name__)


class EnvironmentLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load_config(dotenv: bool = True) -> AppConfig:
        """Load configuration from environment variables (and ``.env`` if present)."""
        if dotenv:
            load_dotenv()

        server = ServerConfig(
            host=os.getenv('SERVER_HOST', DEFAULT_SERVER_HOST),
            port=EnvironmentLoader._get_int('SERVER_PORT', DEFAULT_SERVER_PORT)
        )

        github = GitHubConfig(
            webhook_secret=os.getenv('GITHUB_WEBHOOK_SECRET', ''),
            access_token=os.getenv('GITHUB_ACCESS_TOKEN', ''),
            base_url=os.getenv('GITHUB_BASE_URL', DEFAULT_GITHUB_BASE_URL).rstrip('/')
        )

        llm = LLMConfig(
            api_key=os.getenv('ANTHROPIC_API_KEY', ''),
            model=os.getenv('LLM_MODEL') or DEFAULT_LLM_MODEL,
            max_tokens=EnvironmentLoader._get_int('LLM_MAX_TOKENS', DEFAULT_MAX_TOKENS),
            temperature=EnvironmentLoader._get_float('LLM_TEMPERATURE', DEFAULT_TEMPERATURE),
            base_url=os.getenv('LLM_BASE_URL') or None,
            prompt_style=os.getenv('PROMPT_STYLE') or DEFAULT_PROMPT_STYLE
        )

        slack = SlackConfig(
            bot_token=os.getenv('SLACK_BOT_TOKEN', ''),
            channel_id=os.getenv('SLACK_CHANNEL_ID', '')
        )

        pipeline = PipelineConfig(
            max_concurrent=EnvironmentLoader._get_int(
                'MAX_CONCURRENT_PIPELINES', DEFAULT_MAX_CONCURRENT_PIPELINES
            )
        )

        log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
        log_level = LogLevel.INFO
        try:
            log_level = LogLevel(log_level_str)
        except ValueError:
            logger.warning(f"Unknown LOG_LEVEL {log_level_str!r}, using INFO")

        return AppConfig(
            server=server,
            github=github,
            llm=llm,
            slack=slack,
            pipeline=pipeline,
            log_level=log_level
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Read an integer variable, falling back to ``default`` when unset or invalid."""
        raw: Optional[str] = os.getenv(key)
        if raw is None or raw.strip() == '':
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Invalid integer for {key}: {raw!r}, using {default}")
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Read a float variable, falling back to ``default`` when unset or invalid."""
        raw: Optional[str] = os.getenv(key)
        if raw is None or raw.strip() == '':
            return default
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Invalid number for {key}: {raw!r}, using {default}")
            return default
