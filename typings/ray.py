from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typings.tuples import Point, Vector

if TYPE_CHECKING:
    from linalg.matrix import Matrix


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Returns the point reached after travelling t units of direction from origin."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        return Ray(origin=matrix * self.origin, direction=matrix * self.direction)
