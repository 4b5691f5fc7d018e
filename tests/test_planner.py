import math
from typing import List
from unittest import mock

import numpy as np
import pytest

from inspection_formation.core import (
    InspectionFormation,
    InspectionParameters,
    MissionPlannerError,
    MissionPlannerInspection,
    OrbitInspectionPlanner,
    State,
)
from inspection_formation.core.geometry import distance_to


def _planner(**kwargs):
    formation = InspectionFormation(
        InspectionParameters(angle_step_rad=0.1, distance_step_m=0.5),
        inspection_point=(1.0, 2.0, 0.0),
        standoff_distance=3.0,
        relative_angle=0.0,
        logger=mock.Mock(),
    )
    return OrbitInspectionPlanner(formation, logger=mock.Mock(), **kwargs)


def test_mission_hooks_must_be_overridden():
    class Incomplete(MissionPlannerInspection):
        def initial_trajectory(self, initial_pose: State) -> List[State]:
            return [initial_pose]

    with pytest.raises(TypeError):
        Incomplete(InspectionFormation())


def _unique(states):
    return {tuple(np.round(state.position, 6)) for state in states}


def test_plan_keeps_approach_leg_and_ends_at_slot():
    planner = _planner(approach_samples=3, orbit_samples=8)
    solution = planner.plan(State((1.0, 10.0, 5.0)))
    assert len(solution) == 3 + 8 + 1
    assert len(planner.goals) == len(solution)
    assert len(_unique(solution)) == len(solution)
    np.testing.assert_allclose(solution[3].position, (1.0, 5.0, 0.0), atol=1e-9)
    for state in solution[3:]:
        assert distance_to(state.position, (1.0, 2.0, 0.0)) == pytest.approx(3.0)
    np.testing.assert_allclose(solution[-1].position, (4.0, 2.0, 0.0), atol=1e-9)


def test_start_at_slot_azimuth_skips_orbit_arc():
    planner = _planner(approach_samples=5, orbit_samples=4)
    solution = planner.plan(State((20.0, 2.0, 0.0)))
    assert len(solution) == 6
    assert len(_unique(solution)) == 6
    np.testing.assert_allclose(solution[-1].position, (4.0, 2.0, 0.0), atol=1e-9)


def test_orbit_arc_takes_shorter_way_without_repeating_entry():
    planner = _planner(approach_samples=0, orbit_samples=4)
    solution = planner.plan(State((-10.0, 2.0, 0.0)))
    assert len(solution) == 5
    assert len(_unique(solution)) == 5
    np.testing.assert_allclose(solution[0].position, (-2.0, 2.0, 0.0), atol=1e-9)
    np.testing.assert_allclose(solution[-1].position, (4.0, 2.0, 0.0), atol=1e-9)


def test_goals_face_the_inspection_point():
    planner = _planner(approach_samples=2, orbit_samples=4)
    solution = planner.plan(State((1.0, 10.0, 0.0)))
    assert solution[0].yaw_rad == pytest.approx(-math.pi / 2)
    for state in solution:
        to_center = np.array([1.0, 2.0]) - state.position[:2]
        heading = np.array([math.cos(state.yaw_rad), math.sin(state.yaw_rad)])
        assert float(np.dot(to_center, heading)) == pytest.approx(np.linalg.norm(to_center))


def test_refresh_goals_after_parameter_change():
    planner = _planner(approach_samples=1, orbit_samples=4)
    planner.plan(State((1.0, 10.0, 0.0)))
    before = planner.goals.positions()
    planner.inc_distance_to_inspect(True)
    planner.set_relative_angle(0.5)
    for old, new in zip(before, planner.goals.positions()):
        np.testing.assert_array_equal(old, new)
    planner.refresh_goals()
    slot = (1.0 + 3.5 * math.cos(0.5), 2.0 + 3.5 * math.sin(0.5), 0.0)
    for position in planner.goals.positions():
        np.testing.assert_allclose(position, slot, atol=1e-9)


def test_delegating_accessors():
    planner = _planner()
    planner.set_point_to_inspect((0.0, 0.0, 1.0))
    planner.set_distance_to_inspect(2.0)
    planner.inc_relative_angle(True)
    planner.inc_relative_angle(False)
    np.testing.assert_array_equal(planner.get_point_to_inspect(), [0.0, 0.0, 1.0])
    assert planner.get_distance_to_inspect() == 2.0
    assert planner.get_relative_angle() == pytest.approx(0.0)
    np.testing.assert_allclose(planner.point_on_circle((0.0, 5.0, 9.0)), (2.0, 0.0, 1.0), atol=1e-9)


def test_zone_check_accepts_states_and_positions():
    planner = _planner()
    assert planner.is_inspection_zone(State((4.0, 2.0, 0.0)))
    assert planner.is_inspection_zone((1.0, 5.5, 0.0))
    assert not planner.is_inspection_zone((1.0, 2.0, 0.0))


def test_plan_refuses_when_checks_fail():
    planner = _planner()
    planner.set_distance_to_inspect(0.0)
    assert planner.checks() is False
    with pytest.raises(MissionPlannerError, match="checks failed"):
        planner.plan(State((5.0, 5.0, 5.0)))
    planner.logger.error.assert_called()


def test_plan_rejects_empty_initial_trajectory():
    class Empty(MissionPlannerInspection):
        def initial_trajectory(self, initial_pose: State) -> List[State]:
            return []

        def checks(self) -> bool:
            return True

        def initial_orientation(self, trajectory: List[State]) -> None:
            pass

    planner = Empty(InspectionFormation(logger=mock.Mock()), logger=mock.Mock())
    with pytest.raises(MissionPlannerError, match="empty"):
        planner.plan(State((0.0, 0.0, 0.0)))


def test_plan_hands_goals_to_solver():
    solver = mock.Mock()
    solver.solve.side_effect = lambda goals: list(reversed(goals))
    planner = _planner(approach_samples=0, orbit_samples=2, solver=solver)
    solution = planner.plan(State((1.0, 10.0, 0.0)))
    solver.solve.assert_called_once()
    goals = solver.solve.call_args[0][0]
    assert len(goals) == 3
    np.testing.assert_allclose(solution[-1].position, goals[0].position)
    assert len(planner.last_solution) == 3


@pytest.mark.parametrize("kwargs", [{"approach_samples": -1}, {"orbit_samples": 0}])
def test_invalid_sampling(kwargs):
    with pytest.raises(ValueError):
        _planner(**kwargs)
