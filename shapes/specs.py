"""Shape parameter records, one frozen dataclass per shape family."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple

Point = Tuple[float, float, float]


class FillPolicy(Enum):
    SOLID = "solid"        # interior + surface
    OUTLINE = "outline"    # boundary only
    HOLLOW = "hollow"      # clear the volume, then place the boundary


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


@dataclass(frozen=True)
class ShapeSpec:
    kind: ClassVar[str] = ""
    # Curves ignore the fill policy.
    is_path: ClassVar[bool] = False


@dataclass(frozen=True)
class LineSpec(ShapeSpec):
    kind: ClassVar[str] = "line"
    is_path: ClassVar[bool] = True
    start: Optional[Point]
    end: Optional[Point]


@dataclass(frozen=True)
class CircleSpec(ShapeSpec):
    kind: ClassVar[str] = "circle"
    center: Optional[Point]
    radius: float
    orientation: Axis = Axis.Y


@dataclass(frozen=True)
class SphereSpec(ShapeSpec):
    kind: ClassVar[str] = "sphere"
    center: Optional[Point]
    radius: float
    density: float = 1.0
    seed: Optional[int] = None


@dataclass(frozen=True)
class CuboidSpec(ShapeSpec):
    kind: ClassVar[str] = "cuboid"
    corner1: Optional[Point]
    corner2: Optional[Point]


@dataclass(frozen=True)
class CylinderSpec(ShapeSpec):
    kind: ClassVar[str] = "cylinder"
    center: Optional[Point]
    radius: float
    height: float
    layers: int = 0


@dataclass(frozen=True)
class ConeSpec(ShapeSpec):
    kind: ClassVar[str] = "cone"
    center: Optional[Point]
    radius: float
    height: float


@dataclass(frozen=True)
class TorusSpec(ShapeSpec):
    kind: ClassVar[str] = "torus"
    center: Optional[Point]
    major_radius: float
    minor_radius: float


@dataclass(frozen=True)
class EllipsoidSpec(ShapeSpec):
    kind: ClassVar[str] = "ellipsoid"
    center: Optional[Point]
    radius_x: float
    radius_y: float
    radius_z: float


@dataclass(frozen=True)
class HelixSpec(ShapeSpec):
    kind: ClassVar[str] = "helix"
    is_path: ClassVar[bool] = True
    center: Optional[Point]
    radius: float
    height: float
    turns: float
    clockwise: bool = True


@dataclass(frozen=True)
class ParaboloidSpec(ShapeSpec):
    kind: ClassVar[str] = "paraboloid"
    center: Optional[Point]
    radius: float
    height: float


@dataclass(frozen=True)
class HyperboloidSpec(ShapeSpec):
    kind: ClassVar[str] = "hyperboloid"
    center: Optional[Point]
    base_radius: float
    waist_radius: float
    height: float


@dataclass(frozen=True)
class BezierSpec(ShapeSpec):
    kind: ClassVar[str] = "bezier"
    is_path: ClassVar[bool] = True
    start: Optional[Point]
    end: Optional[Point]
    controls: Tuple[Point, ...] = field(default_factory=tuple)


SPEC_TYPES = (
    LineSpec,
    CircleSpec,
    SphereSpec,
    CuboidSpec,
    CylinderSpec,
    ConeSpec,
    TorusSpec,
    EllipsoidSpec,
    HelixSpec,
    ParaboloidSpec,
    HyperboloidSpec,
    BezierSpec,
)

SPEC_BY_KIND = {cls.kind: cls for cls in SPEC_TYPES}
