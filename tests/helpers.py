"""Shared request helpers and payloads for API tests."""

import copy
from typing import Any

from httpx import AsyncClient

PASSWORD = "correct-horse-battery"

PLAYER_BOB: dict[str, Any] = {
    "Name": "Bob",
    "ID": "S1",
    "Health": 100,
    "Blood": 5000,
    "Shock": 0,
    "Water": 1000,
    "Energy": 1000,
    "HeatComfort": 0,
    "Stamina": 100,
    "Wetness": 0,
    "EnvironmentTemp": 15,
    "Playtime": 3600,
    "DistanceWalked": 500,
    "KilledZombies": 3,
    "Position": [1, 2, 3],
    "Diseases": [],
}


def webhook_payload(*players: dict[str, Any], server_date: str = "2024-01-01 12:00") -> dict:
    """Build a webhook body; defaults to a single entry for Bob."""
    entries = players or (PLAYER_BOB,)
    return {"ServerDate": server_date, "Players": [copy.deepcopy(p) for p in entries]}


def player(name: str, steam_id: str, **overrides: Any) -> dict[str, Any]:
    entry = copy.deepcopy(PLAYER_BOB)
    entry.update({"Name": name, "ID": steam_id, **overrides})
    return entry


async def register_admin(
    client: AsyncClient,
    email: str,
    name: str = "Test Admin",
    password: str = PASSWORD,
) -> dict[str, str]:
    """Register through the API and return bearer headers for the new session."""
    response = await client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    # Authenticate by header only so several admins can share one client.
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
