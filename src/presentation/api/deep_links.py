from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from application.navigation.external_uri_handler import ExternalUriHandler

logger = logging.getLogger(__name__)


class DeepLinkRequest(BaseModel):
    uri: str = ""


def build_deep_link_router(uri_handler: ExternalUriHandler) -> APIRouter:
    router = APIRouter(prefix="/api")

    @router.post("/deep-links")
    async def deliver_deep_link(payload: DeepLinkRequest) -> dict:
        uri = payload.uri.strip()
        if not uri:
            raise HTTPException(status_code=400, detail="Missing uri")
        uri_handler.on_new_uri(uri)
        delivered = uri_handler.pending_uri is None
        logger.info("Deep link %s received (delivered=%s)", uri, delivered)
        return {"status": "ok", "delivered": delivered}

    return router
