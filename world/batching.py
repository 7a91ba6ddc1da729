"""Chunked dispatch of large coordinate sets into the box merger."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Set

from engine import config
from engine.progress import ProgressReporter
from world.block_world import BlockWorld
from world.box_merge import optimized_fill
from world.coords import BlockId, Coord

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_REPORT_EVERY = 8


def unique_in_order(coords: Iterable[Coord]) -> List[Coord]:
    """Drop repeated coordinates, keeping first occurrences in order."""
    seen: Set[Coord] = set()
    out: List[Coord] = []
    for c in coords:
        key = (int(c[0]), int(c[1]), int(c[2]))
        if key not in seen:
            seen.add(key)
            out.append(key)
    return out


def iter_chunks(coords: Sequence[Coord], chunk_size: int) -> Iterator[Sequence[Coord]]:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    for start in range(0, len(coords), chunk_size):
        yield coords[start:start + chunk_size]


def dispatch_fill(
    coords: Iterable[Coord],
    block: BlockId,
    world: BlockWorld,
    reporter: Optional[ProgressReporter] = None,
    *,
    chunk_size: Optional[int] = None,
) -> int:
    """Compact and fill ``coords`` chunk by chunk; return the total box count.

    Coordinates are deduplicated across the whole input first so chunks
    never overlap. Each chunk is merged on its own; boxes are not joined
    across chunk boundaries.
    """
    if chunk_size is None:
        chunk_size = config.get_int("batching.chunk_size", DEFAULT_CHUNK_SIZE)
    chunk_size = max(1, int(chunk_size))
    report_every = max(1, config.get_int("batching.report_every", DEFAULT_REPORT_EVERY))

    unique = unique_in_order(coords)
    if not unique:
        return 0

    total_chunks = (len(unique) + chunk_size - 1) // chunk_size
    total_boxes = 0
    done = 0
    for index, chunk in enumerate(iter_chunks(unique, chunk_size), start=1):
        total_boxes += optimized_fill(chunk, block, world)
        done += len(chunk)
        if reporter is not None and index < total_chunks and index % report_every == 0:
            reporter.report(f"chunk {index}/{total_chunks}: blocks={done}/{len(unique)} boxes={total_boxes}")

    if reporter is not None:
        reporter.report(f"filled {len(unique)} blocks with {total_boxes} boxes in {total_chunks} chunk(s)")
    return total_boxes
