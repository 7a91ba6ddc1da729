"""Lattice coordinates, world bounds and axis-aligned boxes."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

Coord = Tuple[int, int, int]
BlockId = int

AIR: BlockId = 0

HORIZONTAL_LIMIT = 30_000_000
MIN_Y = -64
MAX_Y = 320


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def normalize(value: float) -> int:
    """Clamp a raw axis value into the horizontal world limit and round it.

    Clamping first keeps infinities finite, so this always returns a value.
    """
    clamped = max(-HORIZONTAL_LIMIT, min(HORIZONTAL_LIMIT, float(value)))
    return round_half_up(clamped)


def validate(x: int, y: int, z: int) -> bool:
    return (
        -HORIZONTAL_LIMIT <= x <= HORIZONTAL_LIMIT
        and MIN_Y <= y <= MAX_Y
        and -HORIZONTAL_LIMIT <= z <= HORIZONTAL_LIMIT
    )


def safe_coord(x: float, y: float, z: float) -> Optional[Coord]:
    """Normalize each component; return the coordinate only if it is in bounds."""
    nx, ny, nz = normalize(x), normalize(y), normalize(z)
    if validate(nx, ny, nz):
        return nx, ny, nz
    return None


def normalize_point(point: Optional[Sequence[float]]) -> Optional[Coord]:
    """Normalize a 3-sequence into a lattice coordinate (no bounds check)."""
    if point is None:
        return None
    if len(point) != 3:
        raise ValueError("point must contain three values")
    return normalize(point[0]), normalize(point[1]), normalize(point[2])


@dataclass(frozen=True)
class Box:
    """Inclusive axis-aligned coordinate range ``lo..hi``."""

    lo: Coord
    hi: Coord

    def __post_init__(self) -> None:
        if len(self.lo) != 3 or len(self.hi) != 3:
            raise ValueError("box corners must contain three integers")
        if any(self.lo[axis] > self.hi[axis] for axis in range(3)):
            raise ValueError("box lo corner must not exceed hi corner")

    @staticmethod
    def spanning(a: Coord, b: Coord) -> "Box":
        return Box(
            (min(a[0], b[0]), min(a[1], b[1]), min(a[2], b[2])),
            (max(a[0], b[0]), max(a[1], b[1]), max(a[2], b[2])),
        )

    def size(self) -> Coord:
        return (
            self.hi[0] - self.lo[0] + 1,
            self.hi[1] - self.lo[1] + 1,
            self.hi[2] - self.lo[2] + 1,
        )

    def volume(self) -> int:
        sx, sy, sz = self.size()
        return sx * sy * sz

    def contains(self, coord: Coord) -> bool:
        return all(self.lo[axis] <= coord[axis] <= self.hi[axis] for axis in range(3))

    def iter_coords(self) -> Iterator[Coord]:
        for x in range(self.lo[0], self.hi[0] + 1):
            for y in range(self.lo[1], self.hi[1] + 1):
                for z in range(self.lo[2], self.hi[2] + 1):
                    yield x, y, z
