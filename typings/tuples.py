from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator, Tuple

from utils.numeric import feq


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """An affine location. Points cannot be added to each other and have no magnitude."""

    x: float
    y: float
    z: float

    W: ClassVar[float] = 1.0

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar: object) -> Point:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: object) -> Point:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Point:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Point(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def negate(self) -> Point:
        return -self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented if not isinstance(other, Vector) else False
        return feq(self.x, other.x) and feq(self.y, other.y) and feq(self.z, other.z)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def homogeneous(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.z, self.W


@dataclass(frozen=True, slots=True, eq=False)
class Vector:
    """A free direction or displacement."""

    x: float
    y: float
    z: float

    W: ClassVar[float] = 0.0

    def __add__(self, other: object) -> Point | Vector:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: object) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def negate(self) -> Vector:
        return -self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented if not isinstance(other, Point) else False
        return feq(self.x, other.x) and feq(self.y, other.y) and feq(self.z, other.z)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def homogeneous(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.z, self.W

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        magnitude = self.magnitude()
        if feq(magnitude, 0.0):
            raise ValueError("Cannot normalize zero vector")
        return self / magnitude

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        # perpendicular to both operands, right-handed
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
