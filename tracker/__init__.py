"""Game server player telemetry tracker: webhook ingestion and multi-tenant dashboard API."""

__version__ = "1.0.0"
