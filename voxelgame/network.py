"""Packet transport between the game server and its clients."""

from __future__ import annotations

import enum
import selectors
import socket
import struct
from dataclasses import dataclass

DEFAULT_PORT = 7776
MAX_PEERS = 32
DEFAULT_CONNECT_TIMEOUT = 5.0

_HEADER = struct.Struct("!I")
_RECV_SIZE = 65536


class NetworkError(Exception):
    """Raised when a host cannot be created or a packet cannot be sent."""


class NetworkEventType(enum.Enum):
    """What happened on the network."""

    NONE = 0
    CONNECT = 1
    DISCONNECT = 2
    RECEIVE = 3


class Peer:
    """The other end of one connection; packets sent to it keep their bounds."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._buffer = bytearray()
        try:
            self.address = sock.getpeername()
        except OSError:
            self.address = None

    def send(self, data: bytes) -> None:
        """Send one packet reliably and in order."""
        payload = bytes(data)
        try:
            self._sock.sendall(_HEADER.pack(len(payload)) + payload)
        except OSError as exc:
            raise NetworkError(f"failed to send to {self.address}") from exc

    def _feed(self, chunk: bytes) -> list[bytes]:
        self._buffer += chunk
        packets = []
        while len(self._buffer) >= _HEADER.size:
            (length,) = _HEADER.unpack_from(self._buffer)
            end = _HEADER.size + length
            if len(self._buffer) < end:
                break
            packets.append(bytes(self._buffer[_HEADER.size:end]))
            del self._buffer[:end]
        return packets

    def __repr__(self) -> str:
        return f"Peer(address={self.address!r})"


@dataclass(frozen=True)
class NetworkEvent:
    """One connection, disconnection or received packet."""

    type: NetworkEventType
    peer: Peer | None = None
    data: bytes = b""


class NetworkHandler:
    """A listening server host or a client host connected to one server."""

    def __init__(
        self,
        is_server: bool,
        host: str | None = None,
        port: int = DEFAULT_PORT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        self.is_server = is_server
        self._selector = selectors.DefaultSelector()
        self._listener: socket.socket | None = None
        self._server: Peer | None = None
        self._peers: dict[socket.socket, Peer] = {}
        self._closed = False

        if is_server:
            try:
                listener = socket.create_server((host or "", port), backlog=MAX_PEERS)
            except OSError as exc:
                self._selector.close()
                raise NetworkError(
                    "An error occurred while trying to create a server host."
                ) from exc
            listener.setblocking(False)
            self._listener = listener
            self._selector.register(listener, selectors.EVENT_READ)
            self.address = listener.getsockname()[:2]
        else:
            self.address = (host or "localhost", port)
            try:
                sock = socket.create_connection(self.address, timeout=connect_timeout)
            except OSError:
                print("connection failed")
            else:
                sock.settimeout(None)
                self._server = self._add_peer(sock)
                print("connection succeeded")

    def _add_peer(self, sock: socket.socket) -> Peer:
        sock.setblocking(True)
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        peer = Peer(sock)
        self._peers[sock] = peer
        self._selector.register(sock, selectors.EVENT_READ, peer)
        return peer

    def _drop(self, peer: Peer) -> None:
        sock = peer._sock
        if self._peers.pop(sock, None) is None:
            return
        self._selector.unregister(sock)
        sock.close()
        if peer is self._server:
            self._server = None

    def _accept(self) -> list[NetworkEvent]:
        assert self._listener is not None
        events = []
        while True:
            try:
                conn, _ = self._listener.accept()
            except (BlockingIOError, InterruptedError):
                return events
            except OSError:
                return events
            if len(self._peers) >= MAX_PEERS:
                conn.close()
                continue
            events.append(NetworkEvent(NetworkEventType.CONNECT, self._add_peer(conn)))

    def _receive(self, peer: Peer) -> list[NetworkEvent]:
        try:
            chunk = peer._sock.recv(_RECV_SIZE)
        except OSError:
            chunk = b""
        if not chunk:
            self._drop(peer)
            return [NetworkEvent(NetworkEventType.DISCONNECT, peer)]
        return [
            NetworkEvent(NetworkEventType.RECEIVE, peer, packet)
            for packet in peer._feed(chunk)
        ]

    def poll_events(self) -> list[NetworkEvent]:
        """Collect every pending event without waiting."""
        if self._closed:
            return []
        events: list[NetworkEvent] = []
        for key, _ in self._selector.select(timeout=0):
            if key.fileobj is self._listener:
                events.extend(self._accept())
            elif key.data._sock in self._peers:
                events.extend(self._receive(key.data))
        return events

    def server(self) -> Peer | None:
        """The server peer of a connected client, or None."""
        return self._server

    def close(self) -> None:
        """Close every connection and the listening socket."""
        if self._closed:
            return
        self._closed = True
        for peer in list(self._peers.values()):
            self._drop(peer)
        if self._listener is not None:
            self._selector.unregister(self._listener)
            self._listener.close()
            self._listener = None
        self._selector.close()

    def __enter__(self) -> NetworkHandler:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()