"""FastAPI application receiving booking webhooks."""

from __future__ import annotations

import json
import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from booking_notifier.config import NotifierConfig
from booking_notifier.webhook.dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/api/webhook"


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return create_app(NotifierConfig.from_env())


def create_app(
    config: NotifierConfig,
    dispatcher: NotificationDispatcher | None = None,
) -> FastAPI:
    """Create the webhook app.

    The webhook route answers 200 whenever the payload was accepted, even if
    the LINE push itself failed; 500 only when the body is unusable or the
    notifier is misconfigured.
    """
    app = FastAPI(docs_url=None, redoc_url=None)
    notifier = dispatcher or NotificationDispatcher(config)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(WEBHOOK_PATH)
    async def booking_webhook(request: Request) -> JSONResponse:
        try:
            payload = json.loads(await request.body())
            if not isinstance(payload, dict):
                raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
            result = await notifier.dispatch(payload)
        except Exception:
            logger.exception("Webhook processing failed")
            return JSONResponse(
                {"status": "error", "message": "Internal Server Error"},
                status_code=500,
            )

        logger.info(
            "Webhook processed: event=%s dispatch=%s",
            payload.get("event", "unknown"), result.status.value,
        )
        return JSONResponse(
            {"status": "success", "message": "Webhook received and processed."},
            status_code=200,
        )

    return app
