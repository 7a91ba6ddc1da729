import itertools
import math
import random

from shapes.samplers import (
    circle_positions,
    cone_positions,
    cuboid_positions,
    cylinder_positions,
    ellipsoid_positions,
    helix_positions,
    hyperboloid_positions,
    line_positions,
    paraboloid_positions,
    sphere_positions,
    torus_positions,
)
from shapes.specs import Axis
from world.coords import HORIZONTAL_LIMIT, MAX_Y

import pytest

CENTER = (0, 70, 0)


def _layers(coords):
    counts = {}
    for _, y, _ in coords:
        counts[y] = counts.get(y, 0) + 1
    return [counts[y] for y in sorted(counts)]


def _chebyshev(a, b):
    return max(abs(a[i] - b[i]) for i in range(3))


# ---- Sphere -----------------------------------------------------------------

def test_sphere_axis_extremes():
    coords = set(sphere_positions(CENTER, 3))
    for point in [(3, 70, 0), (-3, 70, 0), (0, 73, 0), (0, 67, 0), (0, 70, 3), (0, 70, -3)]:
        assert point in coords
    assert (4, 70, 0) not in coords


def test_sphere_octahedral_symmetry():
    coords = set(sphere_positions(CENTER, 5))
    for x, y, z in coords:
        offset = (x - CENTER[0], y - CENTER[1], z - CENTER[2])
        for perm in itertools.permutations(offset):
            for signs in itertools.product((1, -1), repeat=3):
                ox, oy, oz = (perm[i] * signs[i] for i in range(3))
                assert (CENTER[0] + ox, CENTER[1] + oy, CENTER[2] + oz) in coords


def test_sphere_small_counts():
    assert len(sphere_positions(CENTER, 1)) == 7
    assert len(sphere_positions(CENTER, 0.4)) == 0


def test_sphere_shell_band():
    r = 6
    for x, y, z in sphere_positions(CENTER, r, hollow=True):
        d2 = x * x + (y - 70) ** 2 + z * z
        assert (r - 1) ** 2 <= d2 <= r * r


def test_sphere_density_is_seeded_subset():
    solid = set(sphere_positions(CENTER, 6))
    thin_a = sphere_positions(CENTER, 6, density=0.5, rng=random.Random(7))
    thin_b = sphere_positions(CENTER, 6, density=0.5, rng=random.Random(7))
    assert thin_a == thin_b
    assert set(thin_a) <= solid
    assert 0 < len(thin_a) < len(solid)


def test_sphere_drops_out_of_bounds():
    coords = sphere_positions((0, 318, 0), 4)
    assert coords
    assert max(y for _, y, _ in coords) == MAX_Y


def test_infinite_center_is_clamped_to_world_edge():
    coords = sphere_positions((float("inf"), 70, 0), 2)
    assert coords
    assert max(x for x, _, _ in coords) == HORIZONTAL_LIMIT
    assert min(x for x, _, _ in coords) == HORIZONTAL_LIMIT - 2


# ---- Cuboid -----------------------------------------------------------------

def test_cuboid_corner_order_invariance():
    a, b = (4, 64, -2), (0, 69, 3)
    assert cuboid_positions(a, b) == cuboid_positions(b, a)
    assert cuboid_positions(a, b, hollow=True) == cuboid_positions(b, a, hollow=True)
    mixed = (0, 69, -2), (4, 64, 3)
    assert cuboid_positions(*mixed) == cuboid_positions(a, b)


def test_cuboid_counts():
    assert len(cuboid_positions((0, 64, 0), (2, 66, 2))) == 27
    shell = cuboid_positions((0, 64, 0), (2, 66, 2), hollow=True)
    assert len(shell) == 26
    assert (1, 65, 1) not in shell


# ---- Line -------------------------------------------------------------------

def test_line_along_single_axis():
    assert line_positions((0, 0, 0), (0, 0, 5)) == [(0, 0, z) for z in range(6)]


def test_line_single_point():
    assert line_positions((3, 70, 3), (3, 70, 3)) == [(3, 70, 3)]


def test_line_bresenham_all_axes_differ():
    coords = line_positions((0, 0, 0), (3, 2, 5))
    assert len(coords) == 6
    assert coords[0] == (0, 0, 0)
    assert coords[-1] == (3, 2, 5)
    for a, b in zip(coords, coords[1:]):
        assert _chebyshev(a, b) == 1


def test_line_reverse_direction():
    coords = line_positions((3, 2, 5), (0, 0, 0))
    assert coords[0] == (3, 2, 5)
    assert coords[-1] == (0, 0, 0)
    assert len(coords) == 6


# ---- Circle -----------------------------------------------------------------

def test_solid_circle_orientation_planes():
    flat = circle_positions(CENTER, 2, Axis.Y)
    assert len(flat) == 13
    assert {y for _, y, _ in flat} == {70}
    wall = circle_positions(CENTER, 2, Axis.X)
    assert {x for x, _, _ in wall} == {0}
    facing = circle_positions(CENTER, 2, "z")
    assert {z for _, _, z in facing} == {0}


def test_hollow_circle_is_symmetric_outline():
    ring = set(circle_positions(CENTER, 5, Axis.Y, hollow=True))
    assert (0, 70, 0) not in ring
    for u, v in [(5, 0), (-5, 0), (0, 5), (0, -5)]:
        assert (u, 70, v) in ring
    for x, _, z in ring:
        assert (z, 70, x) in ring
        assert (-x, 70, z) in ring
        assert x * x + z * z <= 25


# ---- Layered solids ---------------------------------------------------------

def test_cylinder_layers_and_ring():
    coords = cylinder_positions(CENTER, 3, 4)
    assert {y for _, y, _ in coords} == {70, 71, 72, 73}
    capped = cylinder_positions(CENTER, 3, 4, layers=2)
    assert {y for _, y, _ in capped} == {70, 71}
    tube = set(cylinder_positions(CENTER, 3, 4, hollow=True))
    assert (0, 71, 0) not in tube
    assert (1, 71, 1) not in tube
    assert (3, 71, 0) in tube


def test_cylinder_clipped_at_build_limit():
    coords = cylinder_positions((0, 318, 0), 2, 10)
    assert {y for _, y, _ in coords} == {318, 319, 320}


def test_cone_layers_shrink():
    counts = _layers(cone_positions(CENTER, 4, 4))
    assert counts[0] == len(circle_positions(CENTER, 4))
    assert counts == sorted(counts, reverse=True)
    assert counts[-1] == 5


def test_paraboloid_layers_grow():
    coords = paraboloid_positions(CENTER, 4, 4)
    counts = _layers(coords)
    assert counts[0] == 1
    assert counts[1] == 13
    assert counts == sorted(counts)
    assert max(abs(x) for x, _, _ in coords) <= 4


def test_paraboloid_shell_layer():
    shell = paraboloid_positions(CENTER, 4, 4, hollow=True)
    assert (0, 71, 0) not in shell
    assert len([c for c in shell if c[1] == 71]) == 12


def test_hyperboloid_symmetric_about_waist():
    counts = _layers(hyperboloid_positions(CENTER, 6, 3, 7))
    assert counts == list(reversed(counts))
    assert min(counts) == counts[3]


def test_hyperboloid_single_layer():
    coords = hyperboloid_positions(CENTER, 6, 3, 1)
    assert coords == circle_positions(CENTER, 3)


# ---- Torus ------------------------------------------------------------------

def test_torus_has_hole():
    ring = set(torus_positions(CENTER, 5, 2))
    assert (0, 70, 0) not in ring
    assert (5, 70, 0) in ring
    assert (7, 70, 0) in ring
    assert (8, 70, 0) not in ring
    assert (5, 72, 0) in ring
    hollow = set(torus_positions(CENTER, 5, 2, hollow=True))
    assert (5, 70, 0) not in hollow
    assert (7, 70, 0) in hollow


# ---- Ellipsoid --------------------------------------------------------------

def test_ellipsoid_extremes():
    coords = set(ellipsoid_positions(CENTER, 5, 3, 4))
    for point in [(5, 70, 0), (-5, 70, 0), (0, 73, 0), (0, 67, 0), (0, 70, 4), (0, 70, -4)]:
        assert point in coords
    assert (6, 70, 0) not in coords
    assert (0, 74, 0) not in coords


def test_ellipsoid_shell_band():
    rx, ry, rz = 6, 3, 4
    shell = ellipsoid_positions(CENTER, rx, ry, rz, hollow=True)
    assert (0, 70, 0) not in shell
    for x, y, z in shell:
        dist = math.sqrt((x / rx) ** 2 + ((y - 70) / ry) ** 2 + (z / rz) ** 2)
        assert 0.8 - 1e-9 <= dist <= 1.0 + 1e-9


def test_ellipsoid_with_equal_radii_is_sphere():
    assert set(ellipsoid_positions(CENTER, 4, 4, 4)) == set(sphere_positions(CENTER, 4))


# ---- Helix ------------------------------------------------------------------

def test_helix_path():
    coords = helix_positions(CENTER, 5, 10, 2)
    assert coords[0] == (5, 70, 0)
    assert {y for _, y, _ in coords} == set(range(70, 81))
    for a, b in zip(coords, coords[1:]):
        assert a != b
        assert _chebyshev(a, b) == 1


def test_helix_direction():
    cw = helix_positions(CENTER, 6, 8, 1, clockwise=True)
    ccw = helix_positions(CENTER, 6, 8, 1, clockwise=False)
    assert cw[0] == ccw[0] == (6, 70, 0)
    # first step swings toward +z clockwise and -z counter-clockwise
    assert cw[1] == (6, 70, 1)
    assert ccw[1] == (6, 70, -1)


# ---- Shared edge policy -----------------------------------------------------

@pytest.mark.parametrize(
    "call",
    [
        lambda: sphere_positions(CENTER, 0),
        lambda: sphere_positions(None, 3),
        lambda: circle_positions(CENTER, -1),
        lambda: cylinder_positions(CENTER, 3, 0),
        lambda: cone_positions(CENTER, 0, 4),
        lambda: torus_positions(CENTER, 0, 2),
        lambda: torus_positions(CENTER, 4, 0),
        lambda: ellipsoid_positions(CENTER, 3, 0, 3),
        lambda: helix_positions(CENTER, 3, -2, 1),
        lambda: paraboloid_positions(CENTER, 3, 0),
        lambda: hyperboloid_positions(CENTER, 4, 0, 6),
        lambda: cuboid_positions(None, (1, 1, 1)),
        lambda: line_positions((0, 0, 0), None),
    ],
)
def test_invalid_parameters_give_empty(call):
    assert call() == []


@pytest.mark.parametrize(
    "coords",
    [
        sphere_positions(CENTER, 5, hollow=True),
        circle_positions(CENTER, 7, Axis.Z, hollow=True),
        cylinder_positions(CENTER, 4, 3),
        cone_positions(CENTER, 5, 5),
        torus_positions(CENTER, 6, 3),
        ellipsoid_positions(CENTER, 5, 2, 3),
        paraboloid_positions(CENTER, 5, 5),
        hyperboloid_positions(CENTER, 5, 3, 6),
    ],
)
def test_volume_samplers_emit_each_coordinate_once(coords):
    assert coords
    assert len(coords) == len(set(coords))
