"""Mission-phase gate driven by the inspection zone check."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .engine import InspectionFormation
from .geometry import Vector3, distance_to
from .trajectory import LoggerLike, default_logger


class InspectionPhase(Enum):
    APPROACH = "approach"
    ORBIT = "orbit"


class PhaseGate:
    """Tracks whether a vehicle should approach the circle or orbit on it.

    Call :meth:`update` once per control cycle with the vehicle position.
    """

    def __init__(self, formation: InspectionFormation, logger: Optional[LoggerLike] = None) -> None:
        self._formation = formation
        self._logger: LoggerLike = logger or default_logger(__name__)
        self._phase = InspectionPhase.APPROACH

    @property
    def phase(self) -> InspectionPhase:
        return self._phase

    def reset(self) -> None:
        self._phase = InspectionPhase.APPROACH

    def update(self, position: Vector3) -> InspectionPhase:
        in_zone = self._formation.is_inspection_zone(position)
        next_phase = InspectionPhase.ORBIT if in_zone else InspectionPhase.APPROACH
        if next_phase is not self._phase:
            dist = distance_to(position, self._formation.inspection_point)
            self._logger.info(
                f"Inspection phase {self._phase.value} -> {next_phase.value} "
                f"(distance={dist:.2f}m, standoff={self._formation.standoff_distance:.2f}m)"
            )
            self._phase = next_phase
        return self._phase


__all__ = ["InspectionPhase", "PhaseGate"]
