"""Core inspection formation logic (ROS-agnostic)."""

from .bounds import AxisBounds
from .config import (
    InspectionConfig,
    InspectionConfigError,
    InspectionParameters,
    load_inspection_config,
    parse_inspection_config,
)
from .engine import InspectionFormation
from .geometry import in_inspection_zone, point_on_circle
from .phase import InspectionPhase, PhaseGate
from .planner import MissionPlannerError, MissionPlannerInspection, OrbitInspectionPlanner
from .trajectory import GoalSequence, State, TrajectoryPlanner, TrajectorySolver

__all__ = [
    "AxisBounds",
    "InspectionConfig",
    "InspectionConfigError",
    "InspectionParameters",
    "load_inspection_config",
    "parse_inspection_config",
    "InspectionFormation",
    "point_on_circle",
    "in_inspection_zone",
    "InspectionPhase",
    "PhaseGate",
    "MissionPlannerError",
    "MissionPlannerInspection",
    "OrbitInspectionPlanner",
    "GoalSequence",
    "State",
    "TrajectoryPlanner",
    "TrajectorySolver",
]
