from unittest import mock

from inspection_formation.core import InspectionFormation, InspectionPhase, PhaseGate


def test_phase_follows_zone_membership():
    logger = mock.Mock()
    formation = InspectionFormation(standoff_distance=3.0, zone_tolerance=1.0, logger=mock.Mock())
    gate = PhaseGate(formation, logger=logger)
    assert gate.phase is InspectionPhase.APPROACH

    assert gate.update((10.0, 0.0, 0.0)) is InspectionPhase.APPROACH
    assert gate.update((3.5, 0.0, 0.0)) is InspectionPhase.ORBIT
    assert gate.update((0.0, 2.0, 0.0)) is InspectionPhase.ORBIT
    assert gate.update((0.0, 1.5, 0.0)) is InspectionPhase.APPROACH
    assert logger.info.call_count == 2


def test_phase_reacts_to_distance_change():
    formation = InspectionFormation(standoff_distance=3.0, logger=mock.Mock())
    gate = PhaseGate(formation, logger=mock.Mock())
    assert gate.update((3.0, 0.0, 0.0)) is InspectionPhase.ORBIT
    formation.set_standoff_distance(6.0)
    assert gate.update((3.0, 0.0, 0.0)) is InspectionPhase.APPROACH
    gate.reset()
    assert gate.phase is InspectionPhase.APPROACH
