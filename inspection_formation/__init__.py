"""Inspection formation package exposing the goal geometry engine and planners."""

from .core import (
    GoalSequence,
    InspectionConfig,
    InspectionConfigError,
    InspectionFormation,
    InspectionParameters,
    InspectionPhase,
    MissionPlannerError,
    MissionPlannerInspection,
    OrbitInspectionPlanner,
    PhaseGate,
    State,
    load_inspection_config,
)

__all__ = [
    "InspectionFormation",
    "InspectionParameters",
    "InspectionConfig",
    "InspectionConfigError",
    "load_inspection_config",
    "GoalSequence",
    "State",
    "MissionPlannerError",
    "MissionPlannerInspection",
    "OrbitInspectionPlanner",
    "InspectionPhase",
    "PhaseGate",
]
