"""
Main application entry point for NotifyOps.

Wires the webhook server to the enrichment, summarization and notification
components and serves it with uvicorn.
"""

import asyncio
import logging
import sys
from typing import Optional

from slack_sdk.web.async_client import AsyncWebClient

from .config import AppConfig, EnvironmentLoader, ConfigValidator
from .config.constants import LOG_FORMAT
from .exceptions import ConfigurationError
from .github import EventNormalizer, GitHubClient, ContextEnricher
from .monitoring import InMemoryMetrics
from .notifications import NotificationRenderer
from .pipeline import IssueProcessor
from .prompts import StyleRegistry
from .slack import SlackNotifier, InteractionHandler
from .summarization import SummarizationEngine, ClaudeClient, ClaudeOptions
from .utils import mask_secret
from .webhook_service import WebhookServer


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )


class NotifyOpsApp:
    """Main application class wiring every NotifyOps component."""

    def __init__(self):
        self.config: Optional[AppConfig] = None
        self.metrics = InMemoryMetrics()
        self.github_client: Optional[GitHubClient] = None
        self.claude_client: Optional[ClaudeClient] = None
        self.processor: Optional[IssueProcessor] = None
        self.webhook_server: Optional[WebhookServer] = None

        configure_logging()
        self.logger = logging.getLogger(__name__)

    def initialize(self, config: Optional[AppConfig] = None) -> None:
        """Load and validate configuration, then build all components.

        Raises:
            ConfigurationError: If required settings are missing or invalid
        """
        self.logger.info("Initializing NotifyOps...")

        self.config = config or EnvironmentLoader.load_config()
        logging.getLogger().setLevel(self.config.log_level.value)
        ConfigValidator.ensure_valid(self.config)
        self.logger.info("Configuration loaded successfully")

        self.github_client = GitHubClient(
            access_token=self.config.github.access_token,
            base_url=self.config.github.base_url
        )
        enricher = ContextEnricher(self.github_client, metrics=self.metrics)

        self.claude_client = ClaudeClient(
            api_key=self.config.llm.api_key,
            base_url=self.config.llm.base_url,
            metrics=self.metrics
        )
        engine = SummarizationEngine(
            self.claude_client,
            options=ClaudeOptions(
                model=self.config.llm.model,
                max_tokens=self.config.llm.max_tokens,
                temperature=self.config.llm.temperature
            ),
            metrics=self.metrics
        )
        self.logger.info(
            f"LLM model: {self.config.llm.model} | API key: {mask_secret(self.config.llm.api_key)}"
        )

        notifier = SlackNotifier(
            AsyncWebClient(token=self.config.slack.bot_token),
            channel_id=self.config.slack.channel_id,
            metrics=self.metrics
        )
        styles = StyleRegistry(initial=self.config.llm.prompt_style)
        self.logger.info(f"Prompt style: {styles.snapshot().name}")

        self.processor = IssueProcessor(
            engine,
            NotificationRenderer(),
            notifier,
            styles,
            metrics=self.metrics,
            max_concurrent=self.config.pipeline.max_concurrent
        )
        interaction_handler = InteractionHandler(
            notifier, enricher, engine, styles, metrics=self.metrics
        )

        self.webhook_server = WebhookServer(
            self.config,
            normalizer=EventNormalizer(),
            enricher=enricher,
            processor=self.processor,
            interaction_handler=interaction_handler,
            styles=styles,
            metrics=self.metrics,
            close_hooks=[self.github_client.close, self.claude_client.close]
        )
        self.logger.info("All components initialized successfully")

    async def start(self) -> None:
        """Serve HTTP until uvicorn exits (SIGINT/SIGTERM)."""
        if self.webhook_server is None:
            raise RuntimeError("Application not initialized. Call initialize() first.")

        await self.webhook_server.start_server()
        self.logger.info(
            f"NotifyOps is listening on http://{self.config.server.host}:{self.config.server.port}"
        )
        await self.webhook_server.wait_closed()
        self.logger.info("NotifyOps stopped cleanly")

    async def stop(self) -> None:
        """Stop the server; in-flight pipeline runs drain in the app lifespan."""
        if self.webhook_server is not None:
            await self.webhook_server.stop_server()


async def main() -> None:
    """Main entry point for NotifyOps."""
    app = NotifyOpsApp()

    try:
        app.initialize()
    except ConfigurationError as e:
        logging.error("Invalid configuration:")
        for problem in e.errors:
            logging.error(f"  - {problem}")
        sys.exit(1)

    try:
        await app.start()
    except KeyboardInterrupt:
        await app.stop()
    except Exception as e:
        logging.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


def run() -> None:
    asyncio.run(main())
