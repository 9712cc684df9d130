"""
Prompt style administration routes.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...exceptions import UnknownPromptStyleError
from ...prompts.registry import StyleRegistry

logger = logging.getLogger(__name__)


class StyleUpdateRequest(BaseModel):
    """Body of ``POST /api/prompt-style``."""
    style: str


def create_style_router(styles: StyleRegistry) -> APIRouter:
    """Create the router for listing and switching prompt styles."""
    router = APIRouter(prefix="/api", tags=["Prompt styles"])

    @router.get("/prompt-styles")
    async def list_prompt_styles():
        snapshot = styles.snapshot()
        return {
            "available_styles": styles.available_styles(),
            "current_style": snapshot.name,
            "version": snapshot.version,
        }

    @router.post("/prompt-style")
    async def set_prompt_style(request: StyleUpdateRequest):
        try:
            snapshot = styles.select(request.style)
        except UnknownPromptStyleError as e:
            logger.warning(f"Rejected unknown prompt style {request.style!r}")
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid prompt style", "available_styles": e.available},
            )
        return {
            "message": "Prompt style changed successfully",
            "style": snapshot.name,
            "version": snapshot.version,
        }

    return router
