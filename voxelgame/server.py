"""The game server: tracks connected players and announces arrivals."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from voxelgame.event_handler import EventHandler, send_event
from voxelgame.events import PlayerAdded, PlayerLeaving
from voxelgame.network import NetworkHandler
from voxelgame.world import World

_POLL_INTERVAL = 0.001


@dataclass
class Player:
    """A player in the game."""

    player_id: int


class Server:
    """Owns the world and the players connected over the network."""

    def __init__(self, network: Any = None) -> None:
        self.world = World()
        self.network = network if network is not None else NetworkHandler(True)
        self.peers: dict[int, Any] = {}
        self.players: dict[int, Player] = {}
        self.player_ids: dict[Any, int] = {}
        self._max_player_id = 0
        self.event_handler = EventHandler(self.network, self)
        print("server initialised")

    def add_player(self, peer: Any) -> int:
        """Register a new player for a peer and tell every peer about it."""
        self._max_player_id += 1
        player_id = self._max_player_id
        self.players[player_id] = Player(player_id)
        self.peers[player_id] = peer
        self.player_ids[peer] = player_id
        for other in self.peers.values():
            send_event(other, PlayerAdded(player_id, other is peer))
        return player_id

    def remove_player(self, peer: Any) -> int:
        """Forget the player of a peer and tell the remaining peers."""
        player_id = self.player_ids.pop(peer)
        del self.players[player_id]
        del self.peers[player_id]
        for other in self.peers.values():
            send_event(other, PlayerLeaving(player_id))
        return player_id

    def run(self) -> None:
        """Process network events forever."""
        while True:
            self.event_handler.poll_events()
            time.sleep(_POLL_INTERVAL)