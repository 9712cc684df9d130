"""
Issue summarization: prompt construction, the Claude API call and response parsing.
"""

from .engine import SummarizationEngine
from .claude_client import ClaudeClient, ClaudeResponse, ClaudeOptions
from .prompt_builder import PromptBuilder, SummarizationPrompt
from .response_parser import ResponseParser, RawSummary, strip_code_fence

__all__ = [
    'SummarizationEngine',
    'ClaudeClient',
    'ClaudeResponse',
    'ClaudeOptions',
    'PromptBuilder',
    'SummarizationPrompt',
    'ResponseParser',
    'RawSummary',
    'strip_code_fence',
]
