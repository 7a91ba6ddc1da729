"""Lattice samplers for volume shapes, lines and helices.

Every sampler returns coordinates in generation order. Out-of-bounds
coordinates are dropped. Volume samplers emit a coordinate at most once;
path samplers only suppress consecutive repeats. Non-positive radii or
heights (after rounding) and missing centers yield an empty list.
"""
from __future__ import annotations

import math
import random
from typing import Callable, Iterator, List, Optional, Sequence, Set, Tuple, Union

from shapes.specs import Axis
from world.coords import Box, Coord, normalize_point, round_half_up, validate

PointLike = Optional[Sequence[float]]


class VolumeCollector:
    """Accumulates in-bounds coordinates, each at most once."""

    __slots__ = ("positions", "_seen")

    def __init__(self) -> None:
        self.positions: List[Coord] = []
        self._seen: Set[Coord] = set()

    def add(self, x: int, y: int, z: int) -> None:
        if not validate(x, y, z):
            return
        key = (x, y, z)
        if key in self._seen:
            return
        self._seen.add(key)
        self.positions.append(key)


class PathCollector:
    """Accumulates in-bounds coordinates, skipping consecutive repeats."""

    __slots__ = ("positions",)

    def __init__(self) -> None:
        self.positions: List[Coord] = []

    def add(self, x: int, y: int, z: int) -> None:
        if not validate(x, y, z):
            return
        key = (x, y, z)
        if self.positions and self.positions[-1] == key:
            return
        self.positions.append(key)


def _disk(num: int, den: int, inner_sq: float = 0.0) -> Iterator[Tuple[int, int]]:
    """Yield lattice offsets (u, v) with ``inner_sq <= u² + v² <= num / den``.

    The outer radius is given as an exact fraction so callers with rational
    radii (cone, paraboloid) can compare without rounding.
    """
    reach = math.isqrt(num // den)
    for u in range(-reach, reach + 1):
        max_v = math.isqrt((num - u * u * den) // den)
        for v in range(-max_v, max_v + 1):
            if u * u + v * v < inner_sq:
                continue
            yield u, v


# ---- Line -------------------------------------------------------------------

def line_positions(start: PointLike, end: PointLike) -> List[Coord]:
    """Digital line between two points.

    When at least two axes share the same endpoint value the line is a run
    along one axis (or a single cell) and is produced as an inclusive box.
    Otherwise a 3D Bresenham walk is used, driven by the largest delta.
    """
    a = normalize_point(start)
    b = normalize_point(end)
    if a is None or b is None:
        return []

    out = PathCollector()
    x0, y0, z0 = a
    x1, y1, z1 = b

    if (x0 == x1) + (y0 == y1) + (z0 == z1) >= 2:
        for x, y, z in Box.spanning(a, b).iter_coords():
            out.add(x, y, z)
        return out.positions

    dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
    dy, sy = abs(y1 - y0), (1 if y0 < y1 else -1)
    dz, sz = abs(z1 - z0), (1 if z0 < z1 else -1)
    dm = max(dx, dy, dz)
    ex = ey = ez = dm // 2

    for _ in range(dm + 1):
        out.add(x0, y0, z0)
        ex -= dx
        if ex < 0:
            ex += dm
            x0 += sx
        ey -= dy
        if ey < 0:
            ey += dm
            y0 += sy
        ez -= dz
        if ez < 0:
            ez += dm
            z0 += sz

    return out.positions


# ---- Circle -----------------------------------------------------------------

def _plane_mapper(center: Coord, orientation: Axis) -> Callable[[int, int], Coord]:
    cx, cy, cz = center
    if orientation is Axis.X:
        return lambda u, v: (cx, cy + u, cz + v)
    if orientation is Axis.Y:
        return lambda u, v: (cx + u, cy, cz + v)
    return lambda u, v: (cx + u, cy + v, cz)


def _coerce_axis(orientation: Union[Axis, str]) -> Axis:
    if isinstance(orientation, Axis):
        return orientation
    return Axis(str(orientation).strip().lower())


def circle_positions(
    center: PointLike,
    radius: float,
    orientation: Union[Axis, str] = Axis.Y,
    hollow: bool = False,
) -> List[Coord]:
    """Flat circle perpendicular to ``orientation``.

    Hollow circles use the midpoint circle algorithm and contain only the
    8-way symmetric boundary.
    """
    c = normalize_point(center)
    r = round_half_up(radius)
    if c is None or r <= 0:
        return []
    to_world = _plane_mapper(c, _coerce_axis(orientation))
    out = VolumeCollector()

    if not hollow:
        for u, v in _disk(r * r, 1):
            out.add(*to_world(u, v))
        return out.positions

    x, y, err = r, 0, 0
    while x >= y:
        for u, v in ((x, y), (y, x), (-y, x), (-x, y), (-x, -y), (-y, -x), (y, -x), (x, -y)):
            out.add(*to_world(u, v))
        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1
    return out.positions


# ---- Sphere -----------------------------------------------------------------

def sphere_positions(
    center: PointLike,
    radius: float,
    hollow: bool = False,
    density: float = 1.0,
    rng: Optional[random.Random] = None,
) -> List[Coord]:
    """Ball of lattice points with ``x² + y² + z² <= r²``.

    The shell keeps points with distance² >= (r - 1)². ``density`` below 1
    keeps each point with that probability (clamped to 0.1..1.0).
    """
    c = normalize_point(center)
    r = round_half_up(radius)
    if c is None or r <= 0:
        return []
    density = max(0.1, min(1.0, float(density)))
    if density < 1.0 and rng is None:
        rng = random.Random()

    cx, cy, cz = c
    r2 = r * r
    inner2 = (r - 1) * (r - 1) if hollow else 0
    out = VolumeCollector()

    for x in range(-r, r + 1):
        x2 = x * x
        max_y = math.isqrt(r2 - x2)
        for y in range(-max_y, max_y + 1):
            xy2 = x2 + y * y
            max_z = math.isqrt(r2 - xy2)
            for z in range(-max_z, max_z + 1):
                if xy2 + z * z < inner2:
                    continue
                if density < 1.0 and rng.random() >= density:
                    continue
                out.add(cx + x, cy + y, cz + z)
    return out.positions


# ---- Cuboid -----------------------------------------------------------------

def cuboid_positions(corner1: PointLike, corner2: PointLike, hollow: bool = False) -> List[Coord]:
    """Inclusive box between two opposite corners given in any order."""
    a = normalize_point(corner1)
    b = normalize_point(corner2)
    if a is None or b is None:
        return []
    box = Box.spanning(a, b)
    (x0, y0, z0), (x1, y1, z1) = box.lo, box.hi
    out = VolumeCollector()
    for x, y, z in box.iter_coords():
        if hollow and not (x in (x0, x1) or y in (y0, y1) or z in (z0, z1)):
            continue
        out.add(x, y, z)
    return out.positions


# ---- Layered solids ---------------------------------------------------------

def cylinder_positions(
    center: PointLike,
    radius: float,
    height: float,
    hollow: bool = False,
    layers: int = 0,
) -> List[Coord]:
    """Vertical cylinder stacked upward from the base center.

    Hollow cylinders are open tubes (ring of width 1 on every layer).
    ``layers > 0`` caps how many layers are generated.
    """
    c = normalize_point(center)
    r = round_half_up(radius)
    h = round_half_up(height)
    if c is None or r <= 0 or h <= 0:
        return []
    layer_count = min(int(layers), h) if layers and layers > 0 else h

    cx, cy, cz = c
    inner2 = (r - 1) * (r - 1) if hollow else 0
    ring = list(_disk(r * r, 1, inner2))
    out = VolumeCollector()
    for i in range(layer_count):
        for u, v in ring:
            out.add(cx + u, cy + i, cz + v)
    return out.positions


def cone_positions(center: PointLike, radius: float, height: float, hollow: bool = False) -> List[Coord]:
    """Cone whose layer radius shrinks linearly from ``radius`` to 0."""
    c = normalize_point(center)
    r = round_half_up(radius)
    h = round_half_up(height)
    if c is None or r <= 0 or h <= 0:
        return []

    cx, cy, cz = c
    out = VolumeCollector()
    for y in range(h):
        # current radius is r * (h - y) / h, kept as an exact fraction
        num = r * r * (h - y) * (h - y)
        den = h * h
        inner2 = 0.0
        if hollow:
            inner = max(0.0, r * (h - y) / h - 1.0)
            inner2 = inner * inner
        for u, v in _disk(num, den, inner2):
            out.add(cx + u, cy + y, cz + v)
    return out.positions


def paraboloid_positions(center: PointLike, radius: float, height: float, hollow: bool = False) -> List[Coord]:
    """Dish opening upward; layer radius² = 4 * focal * y with focal = r² / 4h."""
    c = normalize_point(center)
    r = round_half_up(radius)
    h = round_half_up(height)
    if c is None or r <= 0 or h <= 0:
        return []

    cx, cy, cz = c
    out = VolumeCollector()
    for y in range(h):
        num = r * r * y
        current = math.isqrt(num // h)
        if current > r:
            continue
        inner2 = max(0, current - 1) ** 2 if hollow else 0
        for u, v in _disk(num, h, inner2):
            out.add(cx + u, cy + y, cz + v)
    return out.positions


def hyperboloid_positions(
    center: PointLike,
    base_radius: float,
    waist_radius: float,
    height: float,
    hollow: bool = False,
) -> List[Coord]:
    """Cooling-tower shape, symmetric about half height.

    Layer radius is ``waist * sqrt(1 + (t * (base - waist) / waist)²)`` with
    ``t`` running from -1 at the base to 1 at the top.
    """
    c = normalize_point(center)
    base = round_half_up(base_radius)
    waist = round_half_up(waist_radius)
    h = round_half_up(height)
    if c is None or base <= 0 or waist <= 0 or h <= 0:
        return []

    cx, cy, cz = c
    half = h // 2
    spread = base - waist
    out = VolumeCollector()
    for y in range(h):
        t = (y - half) / half if half else 0.0
        current = round_half_up(waist * math.sqrt(1.0 + (t * spread / waist) ** 2))
        inner2 = max(0, current - 1) ** 2 if hollow else 0
        for u, v in _disk(current * current, 1, inner2):
            out.add(cx + u, cy + y, cz + v)
    return out.positions


# ---- Torus ------------------------------------------------------------------

def torus_positions(
    center: PointLike,
    major_radius: float,
    minor_radius: float,
    hollow: bool = False,
) -> List[Coord]:
    """Horizontal torus around the vertical axis through ``center``."""
    c = normalize_point(center)
    major = round_half_up(major_radius)
    minor = round_half_up(minor_radius)
    if c is None or major <= 0 or minor <= 0:
        return []

    cx, cy, cz = c
    reach = major + minor
    minor2 = minor * minor
    inner2 = (minor - 1) * (minor - 1) if hollow else 0
    out = VolumeCollector()

    for x in range(-reach, reach + 1):
        for z in range(-reach, reach + 1):
            # distance from the circle running through the tube centers
            tube = abs(math.sqrt(x * x + z * z) - major)
            if tube > minor:
                continue
            tube2 = tube * tube
            max_y = int(math.floor(math.sqrt(max(0.0, minor2 - tube2))))
            for y in range(-max_y, max_y + 1):
                d2 = tube2 + y * y
                if d2 > minor2 or (hollow and d2 < inner2):
                    continue
                out.add(cx + x, cy + y, cz + z)
    return out.positions


# ---- Ellipsoid --------------------------------------------------------------

def ellipsoid_positions(
    center: PointLike,
    radius_x: float,
    radius_y: float,
    radius_z: float,
    hollow: bool = False,
    shell: float = 0.8,
) -> List[Coord]:
    """Axis-aligned ellipsoid.

    Membership is tested exactly as ``x²ry²rz² + y²rx²rz² + z²rx²ry² <=
    rx²ry²rz²``. The hollow shell keeps points whose normalized distance
    lies in ``[shell, 1.0]``; radii differ per axis so a fixed fraction is
    used instead of a one-block offset.
    """
    c = normalize_point(center)
    rx = round_half_up(radius_x)
    ry = round_half_up(radius_y)
    rz = round_half_up(radius_z)
    if c is None or rx <= 0 or ry <= 0 or rz <= 0:
        return []

    cx, cy, cz = c
    a2, b2, c2 = rx * rx, ry * ry, rz * rz
    threshold = a2 * b2 * c2
    out = VolumeCollector()

    for x in range(-rx, rx + 1):
        rem_x = threshold - x * x * b2 * c2
        for y in range(-ry, ry + 1):
            rem_xy = rem_x - y * y * a2 * c2
            if rem_xy < 0:
                continue
            max_z = math.isqrt(rem_xy // (a2 * b2))
            for z in range(-max_z, max_z + 1):
                if hollow:
                    dist = math.sqrt(x * x / a2 + y * y / b2 + z * z / c2)
                    if dist < shell:
                        continue
                out.add(cx + x, cy + y, cz + z)
    return out.positions


# ---- Helix ------------------------------------------------------------------

def helix_positions(
    center: PointLike,
    radius: float,
    height: float,
    turns: float,
    clockwise: bool = True,
) -> List[Coord]:
    """Spiral path rising from the base center.

    The step count is the larger of ``2 * height`` and the 3D arc length
    (rounded up) so consecutive samples stay lattice-adjacent.
    """
    c = normalize_point(center)
    r = round_half_up(radius)
    h = round_half_up(height)
    if c is None or r <= 0 or h <= 0:
        return []

    cx, cy, cz = c
    total_angle = float(turns) * 2.0 * math.pi
    direction = 1.0 if clockwise else -1.0
    steps = max(2 * h, int(math.ceil(math.hypot(total_angle * r, h))))
    out = PathCollector()

    for i in range(steps + 1):
        angle = i * total_angle / steps * direction
        out.add(
            cx + round_half_up(r * math.cos(angle)),
            cy + round_half_up(i * h / steps),
            cz + round_half_up(r * math.sin(angle)),
        )
    return out.positions
