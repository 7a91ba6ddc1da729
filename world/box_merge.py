from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Set, Tuple

from world.block_world import BlockWorld
from world.coords import BlockId, Box, Coord


def _axis_grid(values: Iterable[int]) -> Tuple[List[int], Dict[int, int]]:
    """Sorted distinct axis values plus the value -> grid index lookup."""
    ordered = sorted(set(values))
    return ordered, {v: i for i, v in enumerate(ordered)}


def _grow(values: List[int], lo: int, accepts: Callable[[int], bool]) -> int:
    """Extend a grid index range upward from ``lo`` while the next slab is filled.

    A step is only taken onto a value that is exactly one more than the
    current upper bound, so a box never spans a gap in raw coordinates.
    """
    hi = lo
    while hi + 1 < len(values) and values[hi + 1] == values[hi] + 1 and accepts(values[hi + 1]):
        hi += 1
    return hi


def merge_boxes(coords: Iterable[Coord]) -> List[Box]:
    """
    Cover a set of lattice coordinates with disjoint axis-aligned boxes.

    Strategy:
      1) Deduplicate into a membership set.
      2) Build the sorted distinct X, Y and Z values; candidate box bounds
         are contiguous runs of these grid indices.
      3) Visit remaining cells in ascending (ix, iy, iz) order. From each one
         grow greedily along X, then Y (X fixed), then Z (X and Y fixed).
      4) Emit the box and remove its members before moving on.

    The fixed X -> Y -> Z order keeps this linear in the output size; it is
    not a minimum decomposition. Every input coordinate ends up in exactly
    one box and no box covers a coordinate that was not in the input.
    """
    remaining: Set[Coord] = {(int(c[0]), int(c[1]), int(c[2])) for c in coords}
    if not remaining:
        return []

    xs, x_index = _axis_grid(c[0] for c in remaining)
    ys, y_index = _axis_grid(c[1] for c in remaining)
    zs, z_index = _axis_grid(c[2] for c in remaining)

    boxes: List[Box] = []

    # Lexicographic order of raw coordinates equals grid index order, so this
    # walks only the cells that are present instead of the whole grid.
    for start in sorted(remaining):
        if start not in remaining:
            continue
        ix, iy, iz = x_index[start[0]], y_index[start[1]], z_index[start[2]]
        x0, y0, z0 = start

        ix_hi = _grow(xs, ix, lambda x: (x, y0, z0) in remaining)
        x_range = range(x0, xs[ix_hi] + 1)

        iy_hi = _grow(ys, iy, lambda y: all((x, y, z0) in remaining for x in x_range))
        y_range = range(y0, ys[iy_hi] + 1)

        iz_hi = _grow(
            zs,
            iz,
            lambda z: all((x, y, z) in remaining for x in x_range for y in y_range),
        )

        box = Box(start, (xs[ix_hi], ys[iy_hi], zs[iz_hi]))
        for coord in box.iter_coords():
            if coord not in remaining:
                raise AssertionError(f"box {box} covers {coord}, which is not pending")
            remaining.remove(coord)
        boxes.append(box)

    return boxes


def optimized_fill(coords: Iterable[Coord], block: BlockId, world: BlockWorld) -> int:
    """Fill ``coords`` with ``block`` using as few box fills as the merge finds.

    Returns the number of ``fill_box`` calls issued. Empty input issues none.
    """
    boxes = merge_boxes(coords)
    for box in boxes:
        world.fill_box(block, box)
    return len(boxes)
