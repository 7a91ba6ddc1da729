# shapes/spec_io.py
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple, Union
import math
import json

from shapes.specs import SPEC_BY_KIND, Axis, FillPolicy, ShapeSpec

# Fields holding a 3D point; everything else on a spec is a scalar.
_POINT_FIELDS = {"center", "start", "end", "corner1", "corner2"}


@dataclass
class ShapeEntry:
    spec: ShapeSpec
    policy: FillPolicy = FillPolicy.SOLID
    block: int = 1

# ---------- Serialization helpers ----------

Number = Union[int, float]


def _encode_number(value: Any) -> Number:
    """Return ints for whole numbers to keep JSON tidy, otherwise floats."""
    try:
        fval = float(value)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Value '{value}' must be numeric") from exc
    if math.isfinite(fval) and abs(fval - round(fval)) < 1e-9:
        return int(round(fval))
    return fval


def _to_tuple(values: Any, expected_len: int, name: str, default: Optional[Tuple[float, ...]] = None) -> Tuple[float, ...]:
    """Convert a sequence into a tuple of floats of the given length."""
    if values is None:
        if default is None:
            raise ValueError(f"Missing required field '{name}'")
        return tuple(float(v) for v in default)
    if not isinstance(values, (list, tuple)) or len(values) != expected_len:
        raise ValueError(f"Field '{name}' must be a sequence of length {expected_len}")
    try:
        return tuple(float(values[i]) for i in range(expected_len))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{name}' must contain numeric values") from exc


def _to_scalar(value: Any, name: str, kind: type) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() not in ("", "0", "false", "no")
        return bool(value)
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{name}' must be {kind.__name__}") from exc


def spec_to_dict(spec: ShapeSpec) -> Dict[str, Any]:
    """Convert a shape spec into a JSON-serializable dictionary."""
    out: Dict[str, Any] = {"kind": type(spec).kind}
    for f in fields(spec):
        value = getattr(spec, f.name)
        if value is None:
            continue
        if f.name in _POINT_FIELDS:
            out[f.name] = [_encode_number(v) for v in value]
        elif f.name == "controls":
            out[f.name] = [[_encode_number(v) for v in p] for p in value]
        elif isinstance(value, Axis):
            out[f.name] = value.value
        elif isinstance(value, bool):
            out[f.name] = value
        else:
            out[f.name] = _encode_number(value)
    return out


def spec_from_dict(data: Dict[str, Any], path: str = "shape") -> ShapeSpec:
    """Create a shape spec from a dictionary (inverse of spec_to_dict)."""
    if not isinstance(data, dict):
        raise TypeError(f"{path} must be a JSON object/dict")

    kind_val = data.get("kind") or data.get("shape") or data.get("type")
    if not isinstance(kind_val, str):
        raise ValueError(f"{path} must define 'kind'")
    cls = SPEC_BY_KIND.get(kind_val.strip().lower())
    if cls is None:
        raise ValueError(f"{path}.kind '{kind_val}' is not supported; expected one of {sorted(SPEC_BY_KIND)}")

    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        name = f"{path}.{f.name}"
        if f.name not in data:
            continue  # dataclass defaults apply; missing required fields fail below
        raw = data[f.name]
        if f.name in _POINT_FIELDS:
            kwargs[f.name] = _to_tuple(raw, 3, name)
        elif f.name == "controls":
            if not isinstance(raw, list):
                raise ValueError(f"Field '{name}' must be a list of points")
            kwargs[f.name] = tuple(_to_tuple(p, 3, f"{name}[{i}]") for i, p in enumerate(raw))
        elif f.name == "orientation":
            try:
                kwargs[f.name] = Axis(str(raw).strip().lower())
            except ValueError as exc:
                raise ValueError(f"Field '{name}' must be one of x/y/z") from exc
        elif f.name == "seed":
            kwargs[f.name] = None if raw is None else _to_scalar(raw, name, int)
        elif f.name == "clockwise":
            kwargs[f.name] = _to_scalar(raw, name, bool)
        elif f.name == "layers":
            kwargs[f.name] = _to_scalar(raw, name, int)
        else:
            kwargs[f.name] = _to_scalar(raw, name, float)

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValueError(f"{path} is missing required fields for '{cls.kind}': {exc}") from exc


def _policy_from(value: Any, path: str) -> FillPolicy:
    if value is None:
        return FillPolicy.SOLID
    try:
        return FillPolicy(str(value).strip().lower())
    except ValueError as exc:
        raise ValueError(f"{path}.policy must be one of solid/outline/hollow") from exc


def entries_from_dict(data: Dict[str, Any]) -> List[ShapeEntry]:
    if not isinstance(data, dict):
        raise TypeError("Shape file must be a JSON object/dict")
    shapes_data = data.get("shapes", [])
    if not isinstance(shapes_data, list):
        raise ValueError("Field 'shapes' must be a list")

    entries: List[ShapeEntry] = []
    for idx, node in enumerate(shapes_data):
        path = f"shapes[{idx}]"
        spec = spec_from_dict(node, path)
        policy = _policy_from(node.get("policy"), path)
        block = _to_scalar(node.get("block", 1), f"{path}.block", int)
        entries.append(ShapeEntry(spec=spec, policy=policy, block=block))
    return entries


def entries_to_dict(entries: List[ShapeEntry]) -> Dict[str, Any]:
    shapes = []
    for entry in entries:
        node = spec_to_dict(entry.spec)
        node["policy"] = entry.policy.value
        node["block"] = int(entry.block)
        shapes.append(node)
    return {"version": 1, "shapes": shapes}


def save_to_file(entries: List[ShapeEntry], path: str, *, indent: int = 2) -> None:
    """Serialize shape entries to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(entries_to_dict(entries), f, indent=indent)


def load_from_file(path: str) -> List[ShapeEntry]:
    """Load shape entries from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return entries_from_dict(data)
