"""Telemetry use cases: webhook ingestion, identity resolution, snapshot append."""

from tracker.application.use_cases.telemetry.ingest_webhook import WebhookIngestionService
from tracker.application.use_cases.telemetry.player_identity import PlayerIdentityResolver
from tracker.application.use_cases.telemetry.snapshot_writer import SnapshotWriter

__all__ = [
    "PlayerIdentityResolver",
    "SnapshotWriter",
    "WebhookIngestionService",
]
