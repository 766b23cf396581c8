"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from tracker.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from tracker.api.v1.endpoints import (
    account,
    admins,
    auth,
    health,
    players,
    servers,
    webhook,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(webhook.router, prefix="/webhook", tags=["webhook"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(account.router, prefix="/auth", tags=["account"])
api_router.include_router(servers.router, prefix="/servers", tags=["servers"])
api_router.include_router(players.router, prefix="/servers", tags=["players"])
api_router.include_router(admins.router, prefix="/servers", tags=["admins"])
