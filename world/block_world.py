"""World mutator interface plus a sparse in-memory block world."""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from world.coords import AIR, BlockId, Box, Coord


class BlockWorld:
    """Base class for anything that can receive block placements.

    Calls are fire-and-forget: implementations report nothing back.
    """

    __slots__ = ()

    def place_one(self, block: BlockId, at: Coord) -> None:
        """Place ``block`` at ``at``. Subclasses must implement this."""
        raise NotImplementedError

    def fill_box(self, block: BlockId, box: Box) -> None:
        """Fill every cell of ``box`` with ``block``. Subclasses must implement this."""
        raise NotImplementedError


class VoxelWorld(BlockWorld):
    """Sparse voxel storage keyed by lattice coordinate.

    Air is never stored; writing :data:`AIR` clears a cell. Every mutator
    call is also appended to :attr:`calls` so callers can inspect what a
    fill actually issued.
    """

    __slots__ = ("_data", "calls")

    def __init__(self) -> None:
        self._data: Dict[Coord, BlockId] = {}
        self.calls: List[Tuple[str, BlockId, object]] = []

    # Internal utilities -------------------------------------------------
    def _write(self, coord: Coord, block: BlockId) -> None:
        if block == AIR:
            self._data.pop(coord, None)
        else:
            self._data[coord] = int(block)

    # Mutator API --------------------------------------------------------
    def place_one(self, block: BlockId, at: Coord) -> None:
        coord = (int(at[0]), int(at[1]), int(at[2]))
        self.calls.append(("place", block, coord))
        self._write(coord, block)

    def fill_box(self, block: BlockId, box: Box) -> None:
        self.calls.append(("fill", block, box))
        for coord in box.iter_coords():
            self._write(coord, block)

    # Queries ------------------------------------------------------------
    def get(self, x: int, y: int, z: int) -> BlockId:
        return self._data.get((x, y, z), AIR)

    def is_air(self, x: int, y: int, z: int) -> bool:
        return self.get(x, y, z) == AIR

    def __len__(self) -> int:
        return len(self._data)

    def iter_blocks(self) -> Iterator[Tuple[int, int, int, BlockId]]:
        for (x, y, z), block in sorted(self._data.items()):
            yield x, y, z, block

    def coords_of(self, block: BlockId) -> set:
        return {coord for coord, value in self._data.items() if value == block}

    def bounds(self) -> Optional[Tuple[Coord, Coord]]:
        if not self._data:
            return None
        xs = [c[0] for c in self._data]
        ys = [c[1] for c in self._data]
        zs = [c[2] for c in self._data]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def fill_calls(self) -> List[Tuple[BlockId, Box]]:
        return [(block, box) for kind, block, box in self.calls if kind == "fill"]  # type: ignore[misc]

    def clear_calls(self) -> None:
        self.calls.clear()
