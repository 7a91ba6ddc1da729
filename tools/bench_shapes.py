"""Benchmark shape sampling and box-merge compaction."""
from __future__ import annotations

import argparse
import os
import sys
import time
from typing import List, Optional

from engine.progress import ProgressReporter
from shapes.sampling import sample
from shapes.spec_io import ShapeEntry, load_from_file
from shapes.specs import FillPolicy
from world.batching import dispatch_fill
from world.block_world import VoxelWorld


def _resolve_shapes_path(path: str) -> str:
    if os.path.exists(path):
        return path
    candidate = os.path.join("config", "shapes", path)
    if os.path.exists(candidate):
        return candidate
    raise FileNotFoundError(f"Shape file '{path}' not found (checked current directory and config/shapes)")


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark shape sampling and box merging")
    parser.add_argument("--shapes", required=True, help="Shape json filename or path")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in FillPolicy],
        default=None,
        help="Override the fill policy of every shape",
    )
    parser.add_argument("--chunk", type=int, default=None, help="Batch chunk size (default: config)")
    parser.add_argument("--quiet", action="store_true", help="Suppress per-chunk progress output")
    return parser.parse_args(argv)


def _bench_entry(entry: ShapeEntry, policy: FillPolicy, chunk: Optional[int], reporter: ProgressReporter) -> None:
    t_start = time.perf_counter()
    coords = sample(entry.spec, policy)
    sample_time = time.perf_counter() - t_start

    world = VoxelWorld()
    t_merge = time.perf_counter()
    boxes = dispatch_fill(coords, entry.block, world, reporter, chunk_size=chunk)
    merge_time = time.perf_counter() - t_merge

    ratio = (len(coords) / boxes) if boxes else 0.0
    print(
        f"[bench] {type(entry.spec).kind:<12} {policy.value:<8} "
        f"positions={len(coords):<8} boxes={boxes:<7} ratio={ratio:6.2f} "
        f"sample={sample_time * 1000:8.2f} ms merge={merge_time * 1000:8.2f} ms"
    )


def main(argv: List[str]) -> int:
    args = _parse_args(argv)
    shapes_path = _resolve_shapes_path(args.shapes)
    entries = load_from_file(shapes_path)
    reporter = ProgressReporter("[fill]", echo=not args.quiet)

    print("Shapes:", shapes_path)
    print("Entries:", len(entries))
    t_total = time.perf_counter()
    for entry in entries:
        policy = FillPolicy(args.policy) if args.policy else entry.policy
        _bench_entry(entry, policy, args.chunk, reporter)
    print(f"Total time: {time.perf_counter() - t_total:.3f} s")
    return 0


def _cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_cli())
