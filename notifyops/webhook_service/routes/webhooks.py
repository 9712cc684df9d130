"""
Inbound webhook routes: GitHub events and Slack interactive callbacks.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse, Response
from starlette.requests import ClientDisconnect

from ...exceptions import WebhookError, PayloadDecodeError, InteractionPayloadError
from ...github.enricher import ContextEnricher
from ...github.normalizer import EventNormalizer, NormalizationStatus
from ...github.signature import verify_signature
from ...monitoring import MetricsRecorder
from ...pipeline.processor import IssueProcessor
from ...slack.interactions import InteractionHandler, parse_interaction_payload

logger = logging.getLogger(__name__)


def create_webhook_router(webhook_secret: str,
                          normalizer: EventNormalizer,
                          enricher: ContextEnricher,
                          processor: IssueProcessor,
                          interaction_handler: InteractionHandler,
                          metrics: MetricsRecorder) -> APIRouter:
    """Create the router for ``/webhook/github`` and ``/webhook/slack``."""
    router = APIRouter(prefix="/webhook", tags=["Webhooks"])

    if not webhook_secret:
        logger.warning("GITHUB_WEBHOOK_SECRET is not set; webhook signatures will not be verified")

    @router.post("/github")
    async def github_webhook(
        request: Request,
        x_github_event: str = Header(""),
        x_github_delivery: str = Header(""),
        x_hub_signature_256: Optional[str] = Header(None),
    ):
        """Receive a GitHub event, enrich it and hand it to background processing."""
        start = time.monotonic()

        try:
            body = await request.body()
        except ClientDisconnect as e:
            raise WebhookError(
                "Failed to read request body",
                error_code="UNREADABLE_BODY",
                user_message="Failed to read request body",
                cause=e,
            )

        if not verify_signature(body, x_hub_signature_256, webhook_secret):
            logger.error(f"Invalid webhook signature (delivery {x_github_delivery})")
            metrics.record_github_webhook(x_github_event, "", "unauthorized", time.monotonic() - start)
            return JSONResponse(
                status_code=401,
                content={"error": "INVALID_SIGNATURE", "message": "Invalid signature"},
            )

        logger.info(f"Received GitHub webhook: event={x_github_event!r} delivery={x_github_delivery}")

        try:
            result = normalizer.normalize(x_github_event, body)
        except PayloadDecodeError as e:
            logger.error(f"Failed to process webhook {x_github_delivery}: {e}")
            metrics.record_github_webhook(x_github_event, "", "error", time.monotonic() - start)
            return JSONResponse(
                status_code=500,
                content={"error": e.error_code, "message": "Failed to process webhook"},
            )

        if result.status is NormalizationStatus.IGNORED:
            return {"status": "ignored", "event_type": x_github_event}

        if result.status is NormalizationStatus.SKIPPED:
            metrics.record_github_webhook(
                x_github_event, result.action, "skipped", time.monotonic() - start
            )
            return {"status": "skipped", "action": result.action}

        enriched = await enricher.enrich(result.reference)
        processor.dispatch(enriched)

        metrics.record_github_webhook(x_github_event, result.action, "success", time.monotonic() - start)
        return {
            "status": "accepted",
            "delivery_id": x_github_delivery,
            "issue": enriched.subject,
        }

    @router.post("/slack")
    async def slack_interaction(request: Request):
        """Receive a Slack interactive callback (form field ``payload``)."""
        try:
            form = await request.form()
        except (ClientDisconnect, ValueError, AssertionError) as e:
            raise InteractionPayloadError("form body could not be parsed", cause=e)

        raw = form.get("payload")
        payload = parse_interaction_payload(raw if isinstance(raw, str) else None)

        outcome = await interaction_handler.handle(payload)
        logger.info(
            f"Interaction {outcome.action_id or '<none>'} finished: {outcome.status}"
            + (f" ({outcome.error_code})" if outcome.error_code else "")
        )
        return Response(status_code=200)

    return router
