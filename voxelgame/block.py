"""Block types that make up the voxel world."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_NAMES: dict[int, str] = {
    0: "air",
    1: "dirt",
}


@dataclass(frozen=True)
class Block:
    """A single voxel, identified by an unsigned 8-bit block id."""

    block_id: int

    def __post_init__(self) -> None:
        if not isinstance(self.block_id, int) or isinstance(self.block_id, bool):
            raise TypeError(f"block id must be an int, not {type(self.block_id).__name__}")
        if not 0 <= self.block_id <= 0xFF:
            raise ValueError(f"block id {self.block_id} does not fit in 8 bits")

    @property
    def name(self) -> str:
        """The registered name of this block's type."""
        try:
            return BLOCK_NAMES[self.block_id]
        except KeyError:
            raise LookupError(f"no block type registered for id {self.block_id}") from None