"""Scalar bounds used to keep inspection parameters in a safe range."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class AxisBounds:
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.minimum) and math.isfinite(self.maximum)):
            raise ValueError("bounds must be finite")
        if self.minimum > self.maximum:
            raise ValueError(f"bounds minimum {self.minimum} exceeds maximum {self.maximum}")

    @classmethod
    def from_pair(cls, values: Sequence[float]) -> "AxisBounds":
        if len(values) != 2:
            raise ValueError("bounds must be given as [minimum, maximum]")
        return cls(float(values[0]), float(values[1]))

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        if value < self.minimum:
            return self.minimum
        if value > self.maximum:
            return self.maximum
        return value


__all__ = ["AxisBounds"]
