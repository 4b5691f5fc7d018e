"""Trajectory-planning boundary: goal states, the goal container and the planner base.

The optimal-control solver itself lives outside this package; planners only
hand it the goal states through the :class:`TrajectorySolver` protocol.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Protocol, Sequence

import numpy as np

from .geometry import Vector3, as_vector


class LoggerLike(Protocol):
    def info(self, msg: str) -> None: ...

    def warning(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...

    def debug(self, msg: str) -> None: ...


def default_logger(name: str) -> LoggerLike:
    return logging.getLogger(name)


@dataclass(eq=False)
class State:
    position: np.ndarray
    yaw_rad: float = 0.0
    stamp_s: Optional[float] = None

    def __post_init__(self) -> None:
        self.position = as_vector(self.position)
        self.yaw_rad = float(self.yaw_rad)

    def copy(self) -> "State":
        return State(self.position.copy(), self.yaw_rad, self.stamp_s)


class GoalSequence:
    """Ordered goal states owned by a trajectory planner.

    Outside code reads copies; positions are only rewritten through
    :meth:`replace_position` so nobody holds an aliased, mutable goal.
    """

    def __init__(self, states: Iterable[State] = ()) -> None:
        self._goals: List[State] = [state.copy() for state in states]

    def __len__(self) -> int:
        return len(self._goals)

    def __iter__(self) -> Iterator[State]:
        return (goal.copy() for goal in self._goals)

    def __getitem__(self, index: int) -> State:
        return self._goals[index].copy()

    def positions(self) -> List[np.ndarray]:
        return [goal.position.copy() for goal in self._goals]

    def load(self, states: Iterable[State]) -> None:
        self._goals = [state.copy() for state in states]

    def clear(self) -> None:
        self._goals = []

    def replace_position(self, index: int, position: Vector3) -> None:
        self._goals[index].position = as_vector(position).copy()


class TrajectorySolver(Protocol):
    def solve(self, goals: Sequence[State]) -> Sequence[State]: ...


class TrajectoryPlanner:
    """Holds the goal sequence and forwards it to an optional external solver."""

    def __init__(
        self,
        *,
        solver: Optional[TrajectorySolver] = None,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        self.solver = solver
        self.logger: LoggerLike = logger or default_logger(type(self).__module__)
        self.goals = GoalSequence()
        self._last_solution: List[State] = []

    @property
    def last_solution(self) -> List[State]:
        return [state.copy() for state in self._last_solution]

    def set_goals(self, states: Iterable[State]) -> None:
        self.goals.load(states)

    def solve(self) -> List[State]:
        """Run the external solver on the current goals (identity when none is set)."""

        goals = list(self.goals)
        if self.solver is None:
            self._last_solution = goals
        else:
            self._last_solution = [state.copy() for state in self.solver.solve(goals)]
            self.logger.debug(f"Solver returned {len(self._last_solution)} states for {len(goals)} goals")
        return self.last_solution


__all__ = [
    "LoggerLike",
    "default_logger",
    "State",
    "GoalSequence",
    "TrajectorySolver",
    "TrajectoryPlanner",
]
