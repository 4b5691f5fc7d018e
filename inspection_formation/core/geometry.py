"""Inspection circle geometry (pure functions, no engine state).

The inspection circle is horizontal, centred on the inspection point and of
radius ``distance``. The relative angle is the azimuth (from world +X towards
+Y) of the vehicle's slot on that circle, so vehicles given different angles
share one circle and are separated by the angle between their slots.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

Vector3 = Union[Sequence[float], np.ndarray]

# Horizontal components below this are treated as "on the vertical axis".
AZIMUTH_EPS = 1e-9
# Reference azimuth (world +X) used when the azimuth of a point is undefined.
REFERENCE_AZIMUTH_RAD = 0.0


def as_vector(point: Vector3) -> np.ndarray:
    vec = np.asarray(point, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3D point, got shape {vec.shape}")
    return vec


def distance_to(point: Vector3, center: Vector3) -> float:
    return float(np.linalg.norm(as_vector(point) - as_vector(center)))


def azimuth_about(point: Vector3, center: Vector3) -> float:
    """Azimuth of ``point`` around the vertical axis through ``center``.

    Falls back to the reference azimuth when the point sits on that axis.
    """

    delta = as_vector(point) - as_vector(center)
    if math.hypot(delta[0], delta[1]) <= AZIMUTH_EPS:
        return REFERENCE_AZIMUTH_RAD
    return math.atan2(delta[1], delta[0])


def point_on_circle(
    point: Vector3,
    center: Vector3,
    distance: float,
    relative_angle: float,
) -> np.ndarray:
    """Fit ``point`` onto the vehicle's slot of the inspection circle.

    The slot sits at azimuth ``relative_angle`` and at the height of
    ``center``, exactly ``distance`` away from it. Any input point, including
    ``center`` itself, maps to that slot, so the projection is idempotent.
    """

    as_vector(point)
    return slot_position(center, distance, relative_angle)


def slot_position(center: Vector3, distance: float, azimuth: float) -> np.ndarray:
    """Point of the inspection circle at ``azimuth``."""

    c = as_vector(center)
    return np.array(
        [
            c[0] + distance * math.cos(azimuth),
            c[1] + distance * math.sin(azimuth),
            c[2],
        ]
    )


def wrap_angle(angle: float) -> float:
    """Wrap ``angle`` into [-pi, pi)."""

    return (angle + math.pi) % (2.0 * math.pi) - math.pi


def in_inspection_zone(position: Vector3, center: Vector3, distance: float, tolerance: float) -> bool:
    """True if ``position`` lies within ``distance +/- tolerance`` of ``center``."""

    return abs(distance_to(position, center) - distance) <= tolerance


def yaw_towards(position: Vector3, target: Vector3) -> float:
    """Heading (rad, from +X towards +Y) that points ``position`` at ``target``."""

    delta = as_vector(target) - as_vector(position)
    if math.hypot(delta[0], delta[1]) <= AZIMUTH_EPS:
        return REFERENCE_AZIMUTH_RAD
    return math.atan2(delta[1], delta[0])


__all__ = [
    "Vector3",
    "as_vector",
    "distance_to",
    "azimuth_about",
    "point_on_circle",
    "slot_position",
    "wrap_angle",
    "in_inspection_zone",
    "yaw_towards",
]
