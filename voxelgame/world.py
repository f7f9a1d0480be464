"""The game world."""

from __future__ import annotations

from voxelgame.chunk_manager import ChunkManager


class World:
    """Owns the chunks that make up the world."""

    def __init__(self) -> None:
        self.chunk_manager = ChunkManager()