"""Identity resolution: (server_id, steam_id) -> durable player record."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from tracker.application.dtos.telemetry import PlayerResult
from tracker.application.interfaces.repositories import IPlayerRepository
from tracker.shared.utils.datetime import utc_now


@dataclass(frozen=True)
class ResolvedPlayer:
    """Player plus whether this call created it."""

    player: PlayerResult
    created: bool


class PlayerIdentityResolver:
    """Creates a player on first sight on a server; afterwards only bumps last_seen.

    The name is recorded when the player is first seen and is not updated by
    later deliveries, even if the in-game name changes.
    """

    def __init__(
        self,
        player_repo: IPlayerRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.player_repo = player_repo
        self._clock = clock

    async def resolve(self, server_id: str, steam_id: str, name: str) -> ResolvedPlayer:
        now = self._clock()
        existing = await self.player_repo.get_by_steam_id(server_id, steam_id)
        if existing is None:
            created = await self.player_repo.create_player(
                server_id=server_id, steam_id=steam_id, name=name, last_seen=now
            )
            return ResolvedPlayer(player=created, created=True)
        touched = await self.player_repo.touch_last_seen(existing.id, now)
        return ResolvedPlayer(player=touched or existing, created=False)
