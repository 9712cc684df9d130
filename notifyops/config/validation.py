"""
Configuration validation for NotifyOps.
"""

from typing import Iterable, List, Optional

from .settings import AppConfig
from ..exceptions import ConfigurationError
from ..prompts.catalog import STYLE_NAMES


class ConfigValidator:
    """Validates configuration settings."""

    @staticmethod
    def validate_config(config: AppConfig,
                        style_names: Optional[Iterable[str]] = None) -> List[str]:
        """Validate the entire configuration, returning every problem found."""
        errors = []

        errors.extend(ConfigValidator._validate_required_fields(config))
        errors.extend(ConfigValidator._validate_numeric_ranges(config))
        errors.extend(ConfigValidator._validate_prompt_style(
            config, STYLE_NAMES if style_names is None else style_names
        ))

        return errors

    @staticmethod
    def ensure_valid(config: AppConfig) -> AppConfig:
        """Raise ``ConfigurationError`` listing every problem, or return ``config``."""
        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(errors),
                errors=errors
            )
        return config

    @staticmethod
    def _validate_required_fields(config: AppConfig) -> List[str]:
        """Validate required configuration fields."""
        errors = []

        if not config.github.access_token:
            errors.append("GITHUB_ACCESS_TOKEN is required")
        if not config.llm.api_key:
            errors.append("ANTHROPIC_API_KEY is required")
        if not config.slack.bot_token:
            errors.append("SLACK_BOT_TOKEN is required")
        if not config.slack.channel_id:
            errors.append("SLACK_CHANNEL_ID is required")

        return errors

    @staticmethod
    def _validate_numeric_ranges(config: AppConfig) -> List[str]:
        """Validate numeric configuration values are in reasonable ranges."""
        errors = []

        if not (1 <= config.server.port <= 65535):
            errors.append(f"Server port {config.server.port} is not in valid range (1-65535)")

        if not (0.0 <= config.llm.temperature <= 1.0):
            errors.append(f"LLM temperature {config.llm.temperature} must be between 0 and 1")

        if config.llm.max_tokens <= 0:
            errors.append("LLM max tokens must be positive")

        if config.pipeline.max_concurrent <= 0:
            errors.append("MAX_CONCURRENT_PIPELINES must be positive")

        return errors

    @staticmethod
    def _validate_prompt_style(config: AppConfig, style_names: Iterable[str]) -> List[str]:
        names = list(style_names)
        if config.llm.prompt_style not in names:
            return [
                f"Unknown PROMPT_STYLE {config.llm.prompt_style!r} "
                f"(available: {', '.join(sorted(names))})"
            ]
        return []
