"""Variable-degree Bezier curves sampled onto the lattice."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from shapes.samplers import PathCollector, PointLike
from world.coords import Coord, round_half_up

DEFAULT_STEP = 0.01


def binomial(n: int, k: int) -> int:
    if k < 0 or k > n:
        return 0
    result = 1
    for i in range(k):
        # exact: result * (n - i) is always divisible by i + 1 here
        result = result * (n - i) // (i + 1)
    return result


def bezier_point(points: Sequence[Sequence[float]], t: float) -> Tuple[float, float, float]:
    """Evaluate the Bezier curve through ``points`` at ``t`` (Bernstein form)."""
    n = len(points) - 1
    x = y = z = 0.0
    for i, p in enumerate(points):
        weight = binomial(n, i) * (1.0 - t) ** (n - i) * t ** i
        x += weight * p[0]
        y += weight * p[1]
        z += weight * p[2]
    return x, y, z


def bezier_positions(
    start: PointLike,
    controls: Optional[Sequence[Sequence[float]]],
    end: PointLike,
    step: float = DEFAULT_STEP,
) -> List[Coord]:
    """Lattice path along a Bezier curve with any number of control points.

    ``t`` advances in increments of ``step`` and lands exactly on 1.0, so the
    first coordinate is the rounded start and the last the rounded end.
    """
    if start is None or end is None or step <= 0:
        return []
    points = [tuple(float(v) for v in start)]
    for control in controls or ():
        if control is None:
            return []
        points.append(tuple(float(v) for v in control))
    points.append(tuple(float(v) for v in end))
    if any(len(p) != 3 for p in points):
        raise ValueError("bezier points must contain three values")

    steps = max(1, round_half_up(1.0 / step))
    out = PathCollector()
    for i in range(steps + 1):
        x, y, z = bezier_point(points, i / steps)
        out.add(round_half_up(x), round_half_up(y), round_half_up(z))
    return out.positions
