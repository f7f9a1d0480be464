"""Fixed-size cubes of blocks."""

from __future__ import annotations

from collections.abc import Sequence

from voxelgame.block import Block

CHUNK_SIZE = 32
CHUNK_VOLUME = CHUNK_SIZE**3

Position = tuple[int, int, int]


def _as_position(position: Sequence[int]) -> Position:
    x, y, z = position
    return int(x), int(y), int(z)


def block_index(position: Sequence[int]) -> int:
    """Flat index of a block inside a chunk from its local coordinates."""
    x, y, z = _as_position(position)
    for axis, value in zip("xyz", (x, y, z)):
        if not 0 <= value < CHUNK_SIZE:
            raise IndexError(f"{axis}={value} lies outside the chunk")
    return x + y * CHUNK_SIZE + z * CHUNK_SIZE * CHUNK_SIZE


def block_position(index: int) -> Position:
    """Local coordinates of a block inside a chunk from its flat index."""
    if not 0 <= index < CHUNK_VOLUME:
        raise IndexError(f"block index {index} lies outside the chunk")
    rest, x = divmod(index, CHUNK_SIZE)
    z, y = divmod(rest, CHUNK_SIZE)
    return x, y, z


class Chunk:
    """A cube of CHUNK_SIZE blocks per side placed at a chunk position."""

    def __init__(self, position: Sequence[int]) -> None:
        self.position: Position = _as_position(position)
        palette = (Block(0), Block(1))
        self._blocks: list[Block] = [palette[i % 2] for i in range(CHUNK_VOLUME)]

    def print_position(self) -> None:
        """Print the chunk position to standard output."""
        x, y, z = self.position
        print(f"ivec3({x}, {y}, {z})")

    def get_block(self, position: Sequence[int]) -> Block:
        """Return the block at the given local coordinates."""
        return self._blocks[block_index(position)]

    def __repr__(self) -> str:
        return f"Chunk(position={self.position!r})"