"""Inspection formation state: inspection point, standoff distance and relative angle."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .config import (
    DEFAULT_DISTANCE_M,
    DEFAULT_RELATIVE_ANGLE_RAD,
    DEFAULT_ZONE_TOLERANCE_M,
    InspectionParameters,
)
from .geometry import Vector3, as_vector, in_inspection_zone, point_on_circle
from .trajectory import GoalSequence, LoggerLike, default_logger


class InspectionFormation:
    """Owns the inspection parameters of one vehicle and fits goals onto its circle.

    Setters only update the stored values. Callers refresh their goals
    explicitly with :meth:`refresh` once they are done changing parameters.
    """

    def __init__(
        self,
        parameters: Optional[InspectionParameters] = None,
        *,
        inspection_point: Vector3 = (0.0, 0.0, 0.0),
        standoff_distance: float = DEFAULT_DISTANCE_M,
        relative_angle: float = DEFAULT_RELATIVE_ANGLE_RAD,
        zone_tolerance: float = DEFAULT_ZONE_TOLERANCE_M,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        self._params = parameters or InspectionParameters()
        self._logger: LoggerLike = logger or default_logger(__name__)
        if not math.isfinite(zone_tolerance) or zone_tolerance < 0:
            raise ValueError("zone_tolerance must be a finite, non-negative number")
        self._zone_tolerance = float(zone_tolerance)
        self._point = np.zeros(3)
        self._distance = DEFAULT_DISTANCE_M
        self._angle = DEFAULT_RELATIVE_ANGLE_RAD
        self.set_inspection_point(inspection_point)
        self.set_standoff_distance(standoff_distance)
        self.set_relative_angle(relative_angle)

    @property
    def parameters(self) -> InspectionParameters:
        return self._params

    @property
    def zone_tolerance(self) -> float:
        return self._zone_tolerance

    # Inspection point ---------------------------------------------------

    @property
    def inspection_point(self) -> np.ndarray:
        return self._point.copy()

    def set_inspection_point(self, point: Vector3) -> None:
        vec = as_vector(point)
        if not np.all(np.isfinite(vec)):
            raise ValueError("inspection point must be finite")
        self._point = vec.copy()
        self._logger.debug(f"Inspection point set to ({vec[0]:.2f}, {vec[1]:.2f}, {vec[2]:.2f})")

    # Standoff distance --------------------------------------------------

    @property
    def standoff_distance(self) -> float:
        return self._distance

    def set_standoff_distance(self, distance: float) -> None:
        distance = float(distance)
        if not math.isfinite(distance):
            raise ValueError("standoff distance must be finite")
        bounds = self._params.distance_bounds
        if bounds is not None and not bounds.contains(distance):
            clamped = bounds.clamp(distance)
            self._logger.warning(
                f"Standoff distance {distance:.2f}m outside [{bounds.minimum}, {bounds.maximum}], "
                f"clamped to {clamped:.2f}m"
            )
            distance = clamped
        if distance < 0.0:
            self._logger.warning(f"Standoff distance {distance:.2f}m is negative, clamped to 0.00m")
            distance = 0.0
        elif distance == 0.0:
            self._logger.warning("Standoff distance is zero; inspection circle is degenerate")
        self._distance = distance
        self._logger.debug(f"Standoff distance set to {distance:.2f}m")

    def increment_standoff_distance(self, increase: bool) -> None:
        step = self._params.distance_step_m
        self.set_standoff_distance(self._distance + step if increase else self._distance - step)

    # Relative angle -----------------------------------------------------

    @property
    def relative_angle(self) -> float:
        return self._angle

    def set_relative_angle(self, angle: float) -> None:
        angle = float(angle)
        if not math.isfinite(angle):
            raise ValueError("relative angle must be finite")
        self._angle = angle
        self._logger.debug(f"Relative angle set to {angle:.3f}rad")

    def increment_relative_angle(self, increase: bool) -> None:
        step = self._params.angle_step_rad
        self.set_relative_angle(self._angle + step if increase else self._angle - step)

    # Geometry -----------------------------------------------------------

    def project(self, point: Vector3) -> np.ndarray:
        return point_on_circle(point, self._point, self._distance, self._angle)

    def refresh(self, goals: GoalSequence) -> None:
        """Fit every goal position onto the current inspection circle."""

        for idx, position in enumerate(goals.positions()):
            goals.replace_position(idx, self.project(position))
        self._logger.debug(f"Refreshed {len(goals)} goals onto the inspection circle")

    def is_inspection_zone(self, position: Vector3) -> bool:
        return in_inspection_zone(position, self._point, self._distance, self._zone_tolerance)


__all__ = ["InspectionFormation"]
