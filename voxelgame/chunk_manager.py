"""Lazy generation and lookup of chunks by position."""

from __future__ import annotations

from collections.abc import Sequence

from voxelgame.chunk import Chunk, Position


def _as_position(position: Sequence[int]) -> Position:
    x, y, z = position
    return int(x), int(y), int(z)


class ChunkManager:
    """Holds generated chunks keyed by their chunk position."""

    def __init__(self) -> None:
        self._chunks: dict[Position, Chunk] = {}
        origin = (0, 0, 0)
        self.generate_chunk(origin)
        print(self.get_chunk(origin).get_block((1, 2, 3)).name)

    def get_chunk(self, position: Sequence[int]) -> Chunk:
        """Return the chunk at a position, generating it if needed."""
        key = _as_position(position)
        self.generate_chunk(key)
        return self._chunks[key]

    def generate_chunk(self, position: Sequence[int]) -> None:
        """Create the chunk at a position unless it already exists."""
        key = _as_position(position)
        if key not in self._chunks:
            self._chunks[key] = Chunk(key)

    def is_chunk_generated(self, position: Sequence[int]) -> bool:
        """Whether a chunk exists at the position."""
        return _as_position(position) in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)