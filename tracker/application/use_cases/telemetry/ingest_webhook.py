"""Webhook ingestion: webhook id -> server -> validate -> resolve players -> append snapshots."""

from __future__ import annotations

import json
import logging
from typing import Any

from tracker.application.dtos.server import ServerResult
from tracker.application.dtos.telemetry import IngestionResult
from tracker.application.interfaces.repositories import IServerRepository
from tracker.application.services.webhook_payload_validator import (
    SCHEMA_NAME,
    WebhookPayloadValidator,
)
from tracker.application.use_cases.telemetry.player_identity import PlayerIdentityResolver
from tracker.application.use_cases.telemetry.snapshot_writer import (
    SnapshotWriter,
    snapshot_fields,
)
from tracker.domain.exceptions import (
    ResourceNotFoundException,
    SchemaValidationException,
    ServerInactiveException,
)

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def _root_error(message: str) -> SchemaValidationException:
    return SchemaValidationException(SCHEMA_NAME, [{"field": "(root)", "message": message}])


class WebhookIngestionService:
    """Accepts one webhook delivery for the server identified by its webhook id.

    Checks run in order: unknown webhook id (not found), inactive server,
    payload schema. Only then are entries processed, sequentially in array
    order. Every accepted delivery appends one snapshot per entry, even when
    the values equal the previous delivery.
    """

    def __init__(
        self,
        server_repo: IServerRepository,
        validator: WebhookPayloadValidator,
        identity_resolver: PlayerIdentityResolver,
        snapshot_writer: SnapshotWriter,
    ) -> None:
        self.server_repo = server_repo
        self.validator = validator
        self.identity_resolver = identity_resolver
        self.snapshot_writer = snapshot_writer

    async def _active_server(self, webhook_id: str) -> ServerResult:
        server = await self.server_repo.get_by_webhook_id(webhook_id)
        if server is None:
            raise ResourceNotFoundException("webhook", webhook_id)
        if not server.is_active:
            raise ServerInactiveException()
        return server

    async def ingest_body(self, webhook_id: str, body: bytes) -> IngestionResult:
        """Ingest a raw request body; undecodable JSON is a schema failure at the root.

        NaN and Infinity literals are rejected as invalid JSON.
        """
        server = await self._active_server(webhook_id)
        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except RecursionError:
            raise _root_error("Invalid JSON: nested too deeply") from None
        except (UnicodeDecodeError, ValueError) as e:
            raise _root_error(f"Invalid JSON: {e}") from None
        return await self._process(server, payload)

    async def ingest(self, webhook_id: str, payload: Any) -> IngestionResult:
        """Process a decoded delivery.

        Raises:
            ResourceNotFoundException: No server has this webhook id.
            ServerInactiveException: Server is deactivated.
            SchemaValidationException: Payload does not match the schema.
        """
        server = await self._active_server(webhook_id)
        return await self._process(server, payload)

    async def _process(self, server: ServerResult, payload: Any) -> IngestionResult:
        validated = self.validator.validate(payload)

        names: list[str] = []
        players_created = 0
        for entry in validated.players:
            resolved = await self.identity_resolver.resolve(
                server_id=server.id, steam_id=entry.steam_id, name=entry.name
            )
            if resolved.created:
                players_created += 1
            await self.snapshot_writer.append(
                snapshot_fields(resolved.player.id, validated.server_date, entry)
            )
            names.append(entry.name)

        logger.info(
            "Webhook received for server %s: %d players processed (%d new)",
            server.id,
            len(names),
            players_created,
        )
        return IngestionResult(
            server_id=server.id,
            player_names=tuple(names),
            players_created=players_created,
            snapshots_created=len(names),
        )
