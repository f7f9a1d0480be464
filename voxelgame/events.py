"""Game events and their wire encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Union

_UINT_MAX = 0xFFFFFFFF

# Payload layouts: an unsigned int followed by a bool padded to int alignment.
_PLAYER_ADDED = struct.Struct("<I?3x")
_PLAYER_LEAVING = struct.Struct("<I")


class EventType(IntEnum):
    """Event kinds carried in the first byte of a packet."""

    CONNECTION_REQUEST = 0
    PLAYER_ADDED = 1
    PLAYER_LEAVING = 2


class EventDecodeError(ValueError):
    """Raised when a packet does not hold a valid event."""


def _check_player_id(player_id: int) -> None:
    if not 0 <= player_id <= _UINT_MAX:
        raise ValueError(f"player id {player_id} does not fit in 32 bits")


@dataclass(frozen=True)
class PeerConnected:
    """A remote peer opened a connection."""

    peer: Any


@dataclass(frozen=True)
class PeerDisconnected:
    """A remote peer closed its connection."""

    peer: Any


@dataclass(frozen=True)
class PlayerAdded:
    """A player joined; ``is_local_player`` tells the receiver it is them."""

    player_id: int
    is_local_player: bool
    type: ClassVar[EventType] = EventType.PLAYER_ADDED

    def message(self) -> str:
        """The line printed when this event is processed."""
        if self.is_local_player:
            return f"player ID: {self.player_id}"
        return f"player with ID {self.player_id} has joined the game"


@dataclass(frozen=True)
class PlayerLeaving:
    """A player left the game."""

    player_id: int
    type: ClassVar[EventType] = EventType.PLAYER_LEAVING

    def message(self) -> str:
        """The line printed when this event is processed."""
        return f"player with ID {self.player_id} has left the game"


NetworkedEvent = Union[PlayerAdded, PlayerLeaving]


def encode_event(event: NetworkedEvent) -> bytes:
    """Serialise an event into a packet: type byte followed by its payload."""
    if isinstance(event, PlayerAdded):
        _check_player_id(event.player_id)
        payload = _PLAYER_ADDED.pack(event.player_id, bool(event.is_local_player))
    elif isinstance(event, PlayerLeaving):
        _check_player_id(event.player_id)
        payload = _PLAYER_LEAVING.pack(event.player_id)
    else:
        raise TypeError(f"{type(event).__name__} is not sent over the network")
    return bytes([event.type]) + payload


def decode_event(data: bytes) -> NetworkedEvent | None:
    """Parse a packet into an event; a connection request carries none."""
    if not data:
        raise EventDecodeError("empty packet")
    try:
        kind = EventType(data[0])
    except ValueError:
        raise EventDecodeError(f"unknown event type {data[0]}") from None
    payload = bytes(data[1:])
    if kind is EventType.CONNECTION_REQUEST:
        return None
    layout = _PLAYER_ADDED if kind is EventType.PLAYER_ADDED else _PLAYER_LEAVING
    if len(payload) < layout.size:
        raise EventDecodeError(
            f"{kind.name} payload needs {layout.size} bytes, got {len(payload)}"
        )
    if kind is EventType.PLAYER_ADDED:
        player_id, is_local = _PLAYER_ADDED.unpack_from(payload)
        return PlayerAdded(player_id, is_local)
    (player_id,) = _PLAYER_LEAVING.unpack_from(payload)
    return PlayerLeaving(player_id)