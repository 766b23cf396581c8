"""Webhook API: telemetry ingestion from game servers.

Not session-gated: the webhook id in the path is the credential. Not rate
limited. One delivery runs in one database transaction.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from tracker.api.v1.dependencies import get_webhook_ingestion_service
from tracker.application.use_cases.telemetry import WebhookIngestionService
from tracker.schemas.telemetry import WebhookResponse

router = APIRouter()


@router.post(
    "/{webhook_id}",
    response_model=WebhookResponse,
    responses={
        400: {"description": "Payload failed schema validation"},
        403: {"description": "Server is not active"},
        404: {"description": "Unknown webhook id"},
    },
)
async def receive_webhook(
    webhook_id: str,
    request: Request,
    service: Annotated[WebhookIngestionService, Depends(get_webhook_ingestion_service)],
) -> WebhookResponse:
    """Accept a telemetry delivery: {ServerDate, Players: [...]}.

    The body is read raw so the webhook id is checked before the payload.
    """
    body = await request.body()
    result = await service.ingest_body(webhook_id, body)
    return WebhookResponse(
        success=True,
        message=f"Processed {len(result.player_names)} players",
        players=list(result.player_names),
    )
