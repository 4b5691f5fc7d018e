"""Inspection mission planners built on top of the trajectory planner base."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List, Optional, Union

import numpy as np

from .engine import InspectionFormation
from .geometry import Vector3, as_vector, azimuth_about, slot_position, wrap_angle, yaw_towards
from .trajectory import LoggerLike, State, TrajectoryPlanner, TrajectorySolver

# Entry points closer than this to the slot skip the orbit arc.
ARC_EPS_RAD = 1e-6


class MissionPlannerError(RuntimeError):
    """Raised when a mission planner cannot produce goals."""


class MissionPlannerInspection(TrajectoryPlanner, ABC):
    """Abstract inspection planner. Concrete missions provide the three hooks below."""

    def __init__(
        self,
        formation: InspectionFormation,
        *,
        solver: Optional[TrajectorySolver] = None,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        super().__init__(solver=solver, logger=logger)
        self.formation = formation

    # Mission hooks ------------------------------------------------------

    @abstractmethod
    def initial_trajectory(self, initial_pose: State) -> List[State]:
        """Return an initial, not necessarily optimal, list of states from ``initial_pose``."""
        raise NotImplementedError

    @abstractmethod
    def checks(self) -> bool:
        """Return True if the mission can be planned."""
        raise NotImplementedError

    @abstractmethod
    def initial_orientation(self, trajectory: List[State]) -> None:
        """Set the yaw of every state of ``trajectory`` in place."""
        raise NotImplementedError

    # Formation delegation -----------------------------------------------

    def set_point_to_inspect(self, point: Vector3) -> None:
        self.formation.set_inspection_point(point)

    def get_point_to_inspect(self) -> np.ndarray:
        return self.formation.inspection_point

    def set_distance_to_inspect(self, distance: float) -> None:
        self.formation.set_standoff_distance(distance)

    def inc_distance_to_inspect(self, increase: bool) -> None:
        self.formation.increment_standoff_distance(increase)

    def get_distance_to_inspect(self) -> float:
        return self.formation.standoff_distance

    def set_relative_angle(self, angle: float) -> None:
        self.formation.set_relative_angle(angle)

    def inc_relative_angle(self, increase: bool) -> None:
        self.formation.increment_relative_angle(increase)

    def get_relative_angle(self) -> float:
        return self.formation.relative_angle

    def point_on_circle(self, point: Vector3) -> np.ndarray:
        return self.formation.project(point)

    def refresh_goals(self) -> None:
        self.formation.refresh(self.goals)

    def is_inspection_zone(self, pose: Union[State, Vector3]) -> bool:
        position = pose.position if isinstance(pose, State) else pose
        return self.formation.is_inspection_zone(position)

    # Planning -----------------------------------------------------------

    def plan(self, initial_pose: State) -> List[State]:
        """Build goals from ``initial_pose`` and solve.

        Goals are loaded as built so the approach leg is kept; call
        :meth:`refresh_goals` after changing the inspection parameters.
        """

        if not self.checks():
            raise MissionPlannerError(f"{type(self).__name__} checks failed; refusing to plan")
        trajectory = self.initial_trajectory(initial_pose)
        if not trajectory:
            raise MissionPlannerError(f"{type(self).__name__} produced an empty initial trajectory")
        self.initial_orientation(trajectory)
        self.set_goals(trajectory)
        self.logger.info(
            f"Planned {len(self.goals)} inspection goals "
            f"(distance={self.formation.standoff_distance:.2f}m, "
            f"angle={self.formation.relative_angle:.3f}rad)"
        )
        return self.solve()


class OrbitInspectionPlanner(MissionPlannerInspection):
    """Approach the inspection circle from the initial pose, then orbit to the slot.

    The approach leg runs straight to the circle point that shares the initial
    azimuth; the orbit follows the shorter arc from there to the vehicle's
    slot, split into ``orbit_samples`` segments.
    """

    def __init__(
        self,
        formation: InspectionFormation,
        *,
        approach_samples: int = 5,
        orbit_samples: int = 12,
        solver: Optional[TrajectorySolver] = None,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        super().__init__(formation, solver=solver, logger=logger)
        if approach_samples < 0:
            raise ValueError("approach_samples must be non-negative")
        if orbit_samples < 1:
            raise ValueError("orbit_samples must be at least 1")
        self.approach_samples = int(approach_samples)
        self.orbit_samples = int(orbit_samples)

    def checks(self) -> bool:
        formation = self.formation
        params = formation.parameters
        ok = True
        if not formation.standoff_distance > 0.0:
            self.logger.error(f"Standoff distance must be positive (got {formation.standoff_distance:.2f}m)")
            ok = False
        if not (math.isfinite(params.distance_step_m) and params.distance_step_m > 0.0):
            self.logger.error("Distance step must be a positive number")
            ok = False
        if not (math.isfinite(params.angle_step_rad) and params.angle_step_rad > 0.0):
            self.logger.error("Angle step must be a positive number")
            ok = False
        return ok

    def initial_trajectory(self, initial_pose: State) -> List[State]:
        center = self.formation.inspection_point
        distance = self.formation.standoff_distance
        start = as_vector(initial_pose.position)
        entry_azimuth = azimuth_about(start, center)
        entry = slot_position(center, distance, entry_azimuth)

        trajectory: List[State] = []
        for i in range(1, self.approach_samples + 1):
            alpha = i / float(self.approach_samples + 1)
            trajectory.append(State(start + alpha * (entry - start)))

        sweep = wrap_angle(self.formation.relative_angle - entry_azimuth)
        if abs(sweep) <= ARC_EPS_RAD:
            trajectory.append(State(self.formation.project(start)))
            return trajectory
        step = sweep / self.orbit_samples
        for i in range(self.orbit_samples + 1):
            trajectory.append(State(slot_position(center, distance, entry_azimuth + i * step)))
        return trajectory

    def initial_orientation(self, trajectory: List[State]) -> None:
        center = self.formation.inspection_point
        for state in trajectory:
            state.yaw_rad = yaw_towards(state.position, center)


__all__ = [
    "MissionPlannerError",
    "MissionPlannerInspection",
    "OrbitInspectionPlanner",
]
