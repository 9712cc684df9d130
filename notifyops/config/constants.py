"""
Configuration defaults for NotifyOps.
"""

DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 8080

DEFAULT_GITHUB_BASE_URL = "https://api.github.com"

DEFAULT_LLM_MODEL = "claude-sonnet-4-5"
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7
DEFAULT_PROMPT_STYLE = "master_analyst"

DEFAULT_MAX_CONCURRENT_PIPELINES = 8

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
