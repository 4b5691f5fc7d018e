"""Inspection parameter file parser (YAML, ``api_version: 1``)."""

from __future__ import annotations

import math
import pathlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional, Tuple

import yaml

from .bounds import AxisBounds

if TYPE_CHECKING:  # pragma: no cover
    from .engine import InspectionFormation
    from .trajectory import LoggerLike

Point3D = Tuple[float, float, float]

DEFAULT_DISTANCE_M = 3.0
DEFAULT_RELATIVE_ANGLE_RAD = 0.7
DEFAULT_ZONE_TOLERANCE_M = 1.0
DEFAULT_DISTANCE_STEP_M = 0.5
DEFAULT_ANGLE_STEP_RAD = 0.1


class InspectionConfigError(RuntimeError):
    """Raised when the inspection parameter file is invalid."""


@dataclass(frozen=True)
class InspectionParameters:
    angle_step_rad: float = DEFAULT_ANGLE_STEP_RAD
    distance_step_m: float = DEFAULT_DISTANCE_STEP_M
    distance_bounds: Optional[AxisBounds] = None


@dataclass
class InspectionConfig:
    parameters: InspectionParameters = field(default_factory=InspectionParameters)
    inspection_point: Point3D = (0.0, 0.0, 0.0)
    distance_m: float = DEFAULT_DISTANCE_M
    relative_angle_rad: float = DEFAULT_RELATIVE_ANGLE_RAD
    zone_tolerance_m: float = DEFAULT_ZONE_TOLERANCE_M

    def build_formation(self, logger: Optional["LoggerLike"] = None) -> "InspectionFormation":
        from .engine import InspectionFormation

        return InspectionFormation(
            self.parameters,
            inspection_point=self.inspection_point,
            standoff_distance=self.distance_m,
            relative_angle=self.relative_angle_rad,
            zone_tolerance=self.zone_tolerance_m,
            logger=logger,
        )


def load_inspection_config(path: pathlib.Path) -> InspectionConfig:
    try:
        text = pathlib.Path(path).read_text()
    except OSError as exc:
        raise InspectionConfigError(f"Cannot read inspection file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise InspectionConfigError(f"Inspection file {path} is not valid YAML: {exc}") from exc
    return parse_inspection_config(data)


def parse_inspection_config(data: object) -> InspectionConfig:
    if not isinstance(data, dict):
        raise InspectionConfigError("Inspection file must contain a mapping")
    if data.get("api_version") != 1:
        raise InspectionConfigError("Inspection 'api_version' must be 1")

    section = data.get("inspection", {})
    if not isinstance(section, dict):
        raise InspectionConfigError("'inspection' must be a mapping")

    point = _parse_point(section.get("point", (0.0, 0.0, 0.0)))
    distance = _coerce_float(section, "distance_m", DEFAULT_DISTANCE_M)
    angle = _coerce_float(section, "relative_angle_rad", DEFAULT_RELATIVE_ANGLE_RAD)
    if distance < 0:
        raise InspectionConfigError("Inspection 'distance_m' must be non-negative")
    tolerance = _coerce_float(section, "zone_tolerance_m", DEFAULT_ZONE_TOLERANCE_M)
    if tolerance < 0:
        raise InspectionConfigError("Inspection 'zone_tolerance_m' must be non-negative")

    steps = section.get("steps", {})
    if not isinstance(steps, dict):
        raise InspectionConfigError("Inspection 'steps' must be a mapping")
    distance_step = _coerce_float(steps, "distance_m", DEFAULT_DISTANCE_STEP_M)
    angle_step = _coerce_float(steps, "angle_rad", DEFAULT_ANGLE_STEP_RAD)

    bounds = _parse_bounds(section.get("distance_bounds"))
    if bounds is not None and not bounds.contains(distance):
        raise InspectionConfigError(
            f"Inspection 'distance_m'={distance:.2f} is outside distance_bounds "
            f"[{bounds.minimum}, {bounds.maximum}]"
        )

    return InspectionConfig(
        parameters=InspectionParameters(
            angle_step_rad=angle_step,
            distance_step_m=distance_step,
            distance_bounds=bounds,
        ),
        inspection_point=point,
        distance_m=distance,
        relative_angle_rad=angle,
        zone_tolerance_m=tolerance,
    )


def _coerce_float(container: Dict[str, object], key: str, default: float) -> float:
    value = container.get(key, default)
    try:
        result = float(value)
    except (TypeError, ValueError) as exc:
        raise InspectionConfigError(f"Inspection parameter '{key}' must be a number") from exc
    if not math.isfinite(result):
        raise InspectionConfigError(f"Inspection parameter '{key}' must be finite")
    return result


def _parse_point(value: object) -> Point3D:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InspectionConfigError("Inspection 'point' must be a list of 3 numbers")
    try:
        x, y, z = (float(v) for v in value)
    except (TypeError, ValueError) as exc:
        raise InspectionConfigError("Inspection 'point' has invalid values") from exc
    if not all(math.isfinite(v) for v in (x, y, z)):
        raise InspectionConfigError("Inspection 'point' must be finite")
    return (x, y, z)


def _parse_bounds(value: object) -> Optional[AxisBounds]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise InspectionConfigError("Inspection 'distance_bounds' must be [minimum, maximum]")
    try:
        return AxisBounds.from_pair([float(v) for v in value])
    except (TypeError, ValueError) as exc:
        raise InspectionConfigError(f"Inspection 'distance_bounds' is invalid: {exc}") from exc


__all__ = [
    "InspectionConfigError",
    "InspectionParameters",
    "InspectionConfig",
    "load_inspection_config",
    "parse_inspection_config",
]
