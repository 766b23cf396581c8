"""API tests for the player list and snapshot history."""

from dataclasses import replace
from datetime import timedelta

from httpx import AsyncClient

from tests.fakes import InMemoryStore
from tests.helpers import player, webhook_payload


async def _deliver(client: AsyncClient, server: dict, *players: dict) -> None:
    response = await client.post(
        f"/api/webhook/{server['webhook_id']}", json=webhook_payload(*players)
    )
    assert response.status_code == 200, response.text


async def test_member_lists_players_with_latest_snapshot(
    client: AsyncClient, alice: dict[str, str], carol: dict[str, str], server: dict
) -> None:
    await client.post(
        f"/api/servers/{server['id']}/admins", json={"email": "carol@example.com"}, headers=alice
    )
    await _deliver(client, server, player("Bob", "S1", Health=100))
    await _deliver(client, server, player("Bob", "S1", Health=42))

    response = await client.get(f"/api/servers/{server['id']}/players", headers=carol)
    assert response.status_code == 200
    (row,) = response.json()
    assert row["name"] == "Bob"
    assert row["steam_id"] == "S1"
    assert row["latest_snapshot"]["health"] == 42


async def test_players_ordered_by_last_seen(
    client: AsyncClient, alice: dict[str, str], server: dict
) -> None:
    await _deliver(client, server, player("Bob", "S1"))
    await _deliver(client, server, player("Eve", "S2"))
    names = [
        row["name"]
        for row in (await client.get(f"/api/servers/{server['id']}/players", headers=alice)).json()
    ]
    assert names == ["Eve", "Bob"]


async def test_non_member_cannot_list_players(
    client: AsyncClient, carol: dict[str, str], server: dict
) -> None:
    response = await client.get(f"/api/servers/{server['id']}/players", headers=carol)
    assert response.status_code == 404


async def test_snapshots_newest_first_with_limit(
    client: AsyncClient, alice: dict[str, str], server: dict, store: InMemoryStore
) -> None:
    for health in (10, 20, 30):
        await _deliver(client, server, player("Bob", "S1", Health=health))
    (bob,) = store.players.values()
    url = f"/api/servers/{server['id']}/players/{bob.id}/snapshots"

    everything = await client.get(url, headers=alice)
    assert [s["health"] for s in everything.json()] == [30, 20, 10]

    limited = await client.get(url, params={"limit": 2}, headers=alice)
    assert [s["health"] for s in limited.json()] == [30, 20]


async def test_snapshots_days_window(
    client: AsyncClient, alice: dict[str, str], server: dict, store: InMemoryStore
) -> None:
    await _deliver(client, server, player("Bob", "S1", Health=10))
    await _deliver(client, server, player("Bob", "S1", Health=20))
    old, recent = store.snapshots
    store.snapshots = [replace(old, created_at=old.created_at - timedelta(days=3)), recent]
    (bob,) = store.players.values()
    url = f"/api/servers/{server['id']}/players/{bob.id}/snapshots"

    response = await client.get(url, params={"days": 1}, headers=alice)
    assert [s["health"] for s in response.json()] == [20]
    response = await client.get(url, params={"days": 7}, headers=alice)
    assert [s["health"] for s in response.json()] == [20, 10]


async def test_snapshot_query_bounds(
    client: AsyncClient, alice: dict[str, str], server: dict, store: InMemoryStore
) -> None:
    await _deliver(client, server)
    (bob,) = store.players.values()
    url = f"/api/servers/{server['id']}/players/{bob.id}/snapshots"
    assert (await client.get(url, params={"limit": 0}, headers=alice)).status_code == 400
    assert (await client.get(url, params={"limit": 10001}, headers=alice)).status_code == 400
    assert (await client.get(url, params={"days": 0}, headers=alice)).status_code == 400


async def test_player_from_other_server_is_404(
    client: AsyncClient, alice: dict[str, str], server: dict, store: InMemoryStore
) -> None:
    other = (await client.post("/api/servers", json={"name": "Other"}, headers=alice)).json()
    await _deliver(client, server)
    (bob,) = store.players.values()
    response = await client.get(
        f"/api/servers/{other['id']}/players/{bob.id}/snapshots", headers=alice
    )
    assert response.status_code == 404
