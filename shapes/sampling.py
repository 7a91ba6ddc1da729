"""Single entry point mapping a shape spec + fill policy to coordinates."""
from __future__ import annotations

import random
from typing import Callable, Dict, List, Type

from engine import config
from shapes import curves, samplers
from shapes.specs import (
    BezierSpec,
    CircleSpec,
    ConeSpec,
    CuboidSpec,
    CylinderSpec,
    EllipsoidSpec,
    FillPolicy,
    HelixSpec,
    HyperboloidSpec,
    LineSpec,
    ParaboloidSpec,
    ShapeSpec,
    SphereSpec,
    TorusSpec,
)
from world.coords import Coord

Sampler = Callable[[ShapeSpec, bool], List[Coord]]


def _sphere(spec: SphereSpec, hollow: bool) -> List[Coord]:
    rng = random.Random(spec.seed) if spec.seed is not None else None
    return samplers.sphere_positions(spec.center, spec.radius, hollow, spec.density, rng)


def _ellipsoid(spec: EllipsoidSpec, hollow: bool) -> List[Coord]:
    shell = config.get_float("shapes.ellipsoid_shell", 0.8)
    return samplers.ellipsoid_positions(spec.center, spec.radius_x, spec.radius_y, spec.radius_z, hollow, shell)


def _bezier(spec: BezierSpec, hollow: bool) -> List[Coord]:
    step = config.get_float("shapes.bezier_step", curves.DEFAULT_STEP)
    return curves.bezier_positions(spec.start, spec.controls, spec.end, step)


_SAMPLERS: Dict[Type[ShapeSpec], Sampler] = {
    LineSpec: lambda s, hollow: samplers.line_positions(s.start, s.end),
    CircleSpec: lambda s, hollow: samplers.circle_positions(s.center, s.radius, s.orientation, hollow),
    SphereSpec: _sphere,
    CuboidSpec: lambda s, hollow: samplers.cuboid_positions(s.corner1, s.corner2, hollow),
    CylinderSpec: lambda s, hollow: samplers.cylinder_positions(s.center, s.radius, s.height, hollow, s.layers),
    ConeSpec: lambda s, hollow: samplers.cone_positions(s.center, s.radius, s.height, hollow),
    TorusSpec: lambda s, hollow: samplers.torus_positions(s.center, s.major_radius, s.minor_radius, hollow),
    EllipsoidSpec: _ellipsoid,
    HelixSpec: lambda s, hollow: samplers.helix_positions(s.center, s.radius, s.height, s.turns, s.clockwise),
    ParaboloidSpec: lambda s, hollow: samplers.paraboloid_positions(s.center, s.radius, s.height, hollow),
    HyperboloidSpec: lambda s, hollow: samplers.hyperboloid_positions(
        s.center, s.base_radius, s.waist_radius, s.height, hollow
    ),
    BezierSpec: _bezier,
}


def is_path(spec: ShapeSpec) -> bool:
    return type(spec).is_path


def sample(spec: ShapeSpec, policy: FillPolicy = FillPolicy.SOLID) -> List[Coord]:
    """Sample ``spec`` under ``policy``.

    OUTLINE and HOLLOW both return the shell; clearing the interior for
    HOLLOW is left to the caller. Paths ignore the policy.
    """
    sampler = _SAMPLERS.get(type(spec))
    if sampler is None:
        raise TypeError(f"no sampler registered for {type(spec).__name__}")
    return sampler(spec, policy is not FillPolicy.SOLID)
