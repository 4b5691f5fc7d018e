"""Command-line access to the inspection formation geometry.

Loads an inspection parameter YAML file and prints JSON so shell scripts and
ground-station tooling can query projected goals, zone membership or a full
orbit plan without importing the package.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .core import (
    InspectionConfigError,
    InspectionPhase,
    MissionPlannerError,
    OrbitInspectionPlanner,
    PhaseGate,
    State,
    load_inspection_config,
)
from .core.geometry import distance_to

logger = logging.getLogger("inspection_formation")


def _point_payload(values: Sequence[float]) -> List[float]:
    return [round(float(v), 6) for v in values]


def _state_payload(state: State) -> Dict[str, Any]:
    return {"position": _point_payload(state.position), "yaw_rad": round(state.yaw_rad, 6)}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_project(args: argparse.Namespace) -> Dict[str, Any]:
    formation = load_inspection_config(Path(args.file)).build_formation(logger=logger)
    projected = formation.project(args.point)
    return {
        "input": _point_payload(args.point),
        "projected": _point_payload(projected),
        "distance_m": round(distance_to(projected, formation.inspection_point), 6),
    }


def cmd_zone(args: argparse.Namespace) -> Dict[str, Any]:
    formation = load_inspection_config(Path(args.file)).build_formation(logger=logger)
    gate = PhaseGate(formation, logger=logger)
    phase = gate.update(args.point)
    return {
        "position": _point_payload(args.point),
        "distance_m": round(distance_to(args.point, formation.inspection_point), 6),
        "in_zone": phase is InspectionPhase.ORBIT,
        "phase": phase.value,
    }


def cmd_plan(args: argparse.Namespace) -> Dict[str, Any]:
    formation = load_inspection_config(Path(args.file)).build_formation(logger=logger)
    planner = OrbitInspectionPlanner(
        formation,
        approach_samples=args.approach_samples,
        orbit_samples=args.samples,
        logger=logger,
    )
    solution = planner.plan(State(args.point))
    return {
        "inspection_point": _point_payload(formation.inspection_point),
        "distance_m": formation.standoff_distance,
        "relative_angle_rad": formation.relative_angle,
        "goals": [_state_payload(state) for state in solution],
    }


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the inspection formation geometry")
    parser.add_argument("--file", required=True, help="Path to inspection parameters YAML")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    project = subparsers.add_parser("project", help="Fit a point onto the inspection circle")
    project.add_argument("point", nargs=3, type=float, metavar=("X", "Y", "Z"))
    project.set_defaults(handler=cmd_project)

    zone = subparsers.add_parser("zone", help="Check whether a position is inside the inspection zone")
    zone.add_argument("point", nargs=3, type=float, metavar=("X", "Y", "Z"))
    zone.set_defaults(handler=cmd_zone)

    plan = subparsers.add_parser("plan", help="Plan an orbit from an initial position")
    plan.add_argument("point", nargs=3, type=float, metavar=("X", "Y", "Z"))
    plan.add_argument("--samples", type=int, default=12, help="Number of orbit segments")
    plan.add_argument("--approach-samples", type=int, default=5, help="Number of approach states")
    plan.set_defaults(handler=cmd_plan)

    return parser


def main(argv: List[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        payload = args.handler(args)
    except (InspectionConfigError, MissionPlannerError, ValueError) as exc:
        logger.error(str(exc))
        return 1
    print(json.dumps(payload))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
