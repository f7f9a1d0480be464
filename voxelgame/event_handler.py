"""Turns network activity into game events and processes them."""

from __future__ import annotations

from typing import Any

from voxelgame.events import (
    EventDecodeError,
    NetworkedEvent,
    PeerConnected,
    PeerDisconnected,
    PlayerAdded,
    PlayerLeaving,
    decode_event,
    encode_event,
)
from voxelgame.network import NetworkEvent, NetworkEventType

GameEvent = PeerConnected | PeerDisconnected | PlayerAdded | PlayerLeaving


def send_event(peer: Any, event: NetworkedEvent) -> None:
    """Encode an event and send it to a peer."""
    peer.send(encode_event(event))


class EventHandler:
    """Dispatches events for a server, or for a client when ``server`` is None."""

    def __init__(self, network: Any, server: Any = None) -> None:
        self.network = network
        self.server = server

    @property
    def is_server(self) -> bool:
        return self.server is not None

    def poll_events(self) -> list[GameEvent]:
        """Process every pending network event; return the game events handled."""
        handled = []
        for network_event in self.network.poll_events():
            event = self.dispatch(network_event)
            if event is not None:
                handled.append(event)
        return handled

    def dispatch(self, network_event: NetworkEvent) -> GameEvent | None:
        """Process one network event and return the game event it became."""
        kind = network_event.type
        if kind is NetworkEventType.CONNECT:
            event: GameEvent = PeerConnected(network_event.peer)
            if self.server is not None:
                self.server.add_player(event.peer)
            return event
        if kind is NetworkEventType.DISCONNECT:
            event = PeerDisconnected(network_event.peer)
            if self.server is not None:
                self.server.remove_player(event.peer)
            return event
        if kind is NetworkEventType.RECEIVE:
            try:
                decoded = decode_event(network_event.data)
            except EventDecodeError:
                return None
            if decoded is not None:
                print(decoded.message())
            return decoded
        return None