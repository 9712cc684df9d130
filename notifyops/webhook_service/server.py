"""
FastAPI webhook server for NotifyOps.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from .. import __version__
from ..config.settings import AppConfig
from ..exceptions import WebhookError
from ..github.enricher import ContextEnricher
from ..github.normalizer import EventNormalizer
from ..monitoring import InMemoryMetrics, MetricsRecorder
from ..pipeline.processor import IssueProcessor
from ..prompts.registry import StyleRegistry
from ..slack.interactions import InteractionHandler
from .routes import create_webhook_router, create_style_router

logger = logging.getLogger(__name__)

CloseHook = Callable[[], Awaitable[None]]

SHUTDOWN_DRAIN_TIMEOUT = 30.0


class WebhookServer:
    """FastAPI server for the webhook, interactive and admin endpoints."""

    def __init__(self,
                 config: AppConfig,
                 normalizer: EventNormalizer,
                 enricher: ContextEnricher,
                 processor: IssueProcessor,
                 interaction_handler: InteractionHandler,
                 styles: StyleRegistry,
                 metrics: MetricsRecorder,
                 close_hooks: Optional[List[CloseHook]] = None):
        """Initialize webhook server.

        Args:
            config: Application configuration
            normalizer: Decoder for inbound tracker events
            enricher: Fetches comments, commits and files for an issue
            processor: Background summarize/render/notify pipeline
            interaction_handler: Handler for chat-platform button callbacks
            styles: Current prompt style registry
            metrics: Metrics recorder; an InMemoryMetrics is exposed on /metrics
            close_hooks: Coroutines awaited at shutdown, after the pipeline drains
        """
        self.config = config
        self.normalizer = normalizer
        self.enricher = enricher
        self.processor = processor
        self.interaction_handler = interaction_handler
        self.styles = styles
        self.metrics = metrics
        self.close_hooks = list(close_hooks or [])
        self.server: Optional[uvicorn.Server] = None
        self._server_task: Optional[asyncio.Task] = None

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            logger.info("Webhook server starting up")
            yield
            logger.info("Webhook server shutting down")
            await self.shutdown()

        self.app = FastAPI(
            title="NotifyOps API",
            description="GitHub issue summaries delivered to Slack",
            version=__version__,
            docs_url="/docs",
            openapi_url="/openapi.json",
            lifespan=lifespan
        )

        self._setup_routes()
        self._setup_error_handlers()

    def _setup_routes(self) -> None:
        """Configure API routes."""

        @self.app.get("/health", tags=["Health"])
        async def health_check():
            """Report liveness and the number of in-flight pipeline runs."""
            return {
                "status": "healthy",
                "version": __version__,
                "time": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
                "pending_runs": self.processor.pending,
            }

        @self.app.get("/metrics", tags=["Health"])
        async def metrics_snapshot():
            if isinstance(self.metrics, InMemoryMetrics):
                return self.metrics.snapshot()
            return {}

        @self.app.get("/", tags=["Info"])
        async def root():
            """API information."""
            return {
                "name": "NotifyOps API",
                "version": __version__,
                "docs": "/docs",
                "endpoints": {
                    "github_webhook": "/webhook/github",
                    "slack_interactions": "/webhook/slack",
                    "prompt_styles": "/api/prompt-styles",
                    "health": "/health",
                    "metrics": "/metrics",
                },
            }

        self.app.include_router(create_webhook_router(
            webhook_secret=self.config.github.webhook_secret,
            normalizer=self.normalizer,
            enricher=self.enricher,
            processor=self.processor,
            interaction_handler=self.interaction_handler,
            metrics=self.metrics,
        ))
        self.app.include_router(create_style_router(self.styles))

    def _setup_error_handlers(self) -> None:
        """Configure global error handlers."""

        @self.app.exception_handler(WebhookError)
        async def webhook_error_handler(request: Request, exc: WebhookError):
            logger.warning(f"Rejected request to {request.url.path}: [{exc.error_code}] {exc}")
            return error_response(request, 400, exc.error_code, exc.user_message or str(exc))

        @self.app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())}
            )

        @self.app.exception_handler(Exception)
        async def general_error_handler(request: Request, exc: Exception):
            logger.error(f"Unhandled error in {request.url.path}: {exc}", exc_info=True)
            return error_response(request, 500, "INTERNAL_SERVER_ERROR",
                                  "An unexpected error occurred")

    async def shutdown(self) -> None:
        """Drain in-flight pipeline runs, then run the close hooks."""
        await self.processor.drain(timeout=SHUTDOWN_DRAIN_TIMEOUT)
        for hook in self.close_hooks:
            try:
                await hook()
            except Exception as e:
                logger.warning(f"Close hook failed during shutdown: {e}")
        self.close_hooks.clear()

    def _build_uvicorn_server(self) -> uvicorn.Server:
        return uvicorn.Server(uvicorn.Config(
            app=self.app,
            host=self.config.server.host,
            port=self.config.server.port,
            log_level=self.config.log_level.value.lower(),
            loop="asyncio",
        ))

    async def start_server(self) -> None:
        """Run uvicorn as a background task; returns once the task is scheduled."""
        if self._server_task is not None:
            logger.warning("Webhook server is already running")
            return

        self.server = self._build_uvicorn_server()
        self._server_task = asyncio.create_task(self.server.serve())
        logger.info(f"Serving NotifyOps API on {self.config.server.host}:{self.config.server.port}")

    async def wait_closed(self) -> None:
        """Block until the background server task finishes."""
        if self._server_task is not None:
            await self._server_task

    async def stop_server(self) -> None:
        """Ask uvicorn to exit and wait for the lifespan drain to finish."""
        task = self._server_task
        if self.server is None or task is None:
            logger.warning("Webhook server is not running")
            return

        self.server.should_exit = True
        done, _ = await asyncio.wait({task}, timeout=SHUTDOWN_DRAIN_TIMEOUT + 10.0)
        if not done:
            logger.warning("uvicorn did not exit in time; cancelling the server task")
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        self.server = None
        self._server_task = None
        logger.info("Webhook server stopped")

    def get_app(self) -> FastAPI:
        return self.app


def error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    """JSON error body shared by the exception handlers."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "request_id": request.headers.get("X-Request-ID"),
        },
    )
