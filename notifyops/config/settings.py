"""
Configuration settings for NotifyOps.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .constants import (
    DEFAULT_GITHUB_BASE_URL, DEFAULT_LLM_MODEL, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE,
    DEFAULT_PROMPT_STYLE, DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT,
    DEFAULT_MAX_CONCURRENT_PIPELINES
)


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServerConfig:
    """HTTP server settings."""
    host: str = DEFAULT_SERVER_HOST
    port: int = DEFAULT_SERVER_PORT


@dataclass
class GitHubConfig:
    """GitHub webhook and REST API settings."""
    webhook_secret: str = ""
    access_token: str = ""
    base_url: str = DEFAULT_GITHUB_BASE_URL

    @property
    def verification_enabled(self) -> bool:
        return bool(self.webhook_secret)


@dataclass
class LLMConfig:
    """Chat-completion backend settings."""
    api_key: str = ""
    model: str = DEFAULT_LLM_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    base_url: Optional[str] = None
    prompt_style: str = DEFAULT_PROMPT_STYLE


@dataclass
class SlackConfig:
    bot_token: str = ""
    channel_id: str = ""


@dataclass
class PipelineConfig:
    """Background processing limits."""
    max_concurrent: int = DEFAULT_MAX_CONCURRENT_PIPELINES


@dataclass
class AppConfig:
    """Top-level service configuration."""
    server: ServerConfig = field(default_factory=ServerConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    slack: SlackConfig = field(default_factory=SlackConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    log_level: LogLevel = LogLevel.INFO
