"""HTTP API routes (mounted at /api)."""

from tracker.api.v1.router import api_router

__all__ = ["api_router"]
