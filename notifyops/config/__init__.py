"""
Configuration management for NotifyOps.
"""

from .settings import (
    AppConfig, ServerConfig, GitHubConfig, LLMConfig, SlackConfig, PipelineConfig, LogLevel
)
from .environment import EnvironmentLoader
from .validation import ConfigValidator

__all__ = [
    'AppConfig',
    'ServerConfig',
    'GitHubConfig',
    'LLMConfig',
    'SlackConfig',
    'PipelineConfig',
    'LogLevel',
    'EnvironmentLoader',
    'ConfigValidator',
]
