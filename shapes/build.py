"""Apply sampled shapes to a block world."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from engine import config
from engine.progress import ProgressReporter
from shapes.sampling import is_path, sample
from shapes.specs import FillPolicy, ShapeSpec
from world.batching import dispatch_fill
from world.block_world import BlockWorld
from world.coords import AIR, BlockId, Coord


@dataclass
class PassResult:
    block: BlockId
    positions: int
    boxes: int = 0
    placed: int = 0


@dataclass
class BuildResult:
    kind: str
    policy: FillPolicy
    passes: List[PassResult] = field(default_factory=list)

    @property
    def total_boxes(self) -> int:
        return sum(p.boxes for p in self.passes)

    @property
    def total_placed(self) -> int:
        return sum(p.placed for p in self.passes)


def _apply(
    coords: List[Coord],
    block: BlockId,
    world: BlockWorld,
    reporter: Optional[ProgressReporter],
    compact: bool,
) -> PassResult:
    result = PassResult(block=block, positions=len(coords))
    if compact:
        result.boxes = dispatch_fill(coords, block, world, reporter)
    else:
        for coord in coords:
            world.place_one(block, coord)
        result.placed = len(coords)
    return result


def build(
    spec: ShapeSpec,
    block: BlockId,
    world: BlockWorld,
    policy: FillPolicy = FillPolicy.SOLID,
    reporter: Optional[ProgressReporter] = None,
    *,
    empty_block: Optional[BlockId] = None,
    compact: bool = True,
) -> BuildResult:
    """Sample ``spec`` and write it into ``world``.

    HOLLOW runs two passes on volume shapes: the solid volume is first
    filled with ``empty_block`` (air unless configured otherwise), then the
    shell is filled with ``block``. Paths always take a single pass.
    ``compact=False`` places coordinates one by one instead of merging them
    into box fills.
    """
    if empty_block is None:
        empty_block = config.get_int("build.empty_block", AIR)
    kind = type(spec).kind or type(spec).__name__
    result = BuildResult(kind=kind, policy=policy)

    if policy is FillPolicy.HOLLOW and not is_path(spec):
        clear = sample(spec, FillPolicy.SOLID)
        result.passes.append(_apply(clear, empty_block, world, reporter, compact))
        shell = sample(spec, FillPolicy.OUTLINE)
        result.passes.append(_apply(shell, block, world, reporter, compact))
    else:
        coords = sample(spec, policy)
        result.passes.append(_apply(coords, block, world, reporter, compact))

    if reporter is not None:
        sizes = "+".join(str(p.positions) for p in result.passes)
        reporter.report(
            f"{kind} ({policy.value}): positions={sizes} boxes={result.total_boxes} placed={result.total_placed}"
        )
    return result


def build_all(entries, world: BlockWorld, reporter: Optional[ProgressReporter] = None) -> List[BuildResult]:
    """Build every ``ShapeEntry`` in order."""
    return [build(e.spec, e.block, world, e.policy, reporter) for e in entries]
