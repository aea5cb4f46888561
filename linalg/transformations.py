from __future__ import annotations

import math
from enum import Enum
from functools import reduce
from typing import Union

from linalg.matrix import Matrix
from typings.tuples import Point, Vector


class ShearAxis(str, Enum):
    """Which component is moved, and in proportion to which other component."""

    X_BY_Y = "xy"
    X_BY_Z = "xz"
    Y_BY_X = "yx"
    Y_BY_Z = "yz"
    Z_BY_X = "zx"
    Z_BY_Y = "zy"


_AXIS_INDEX = {"x": 0, "y": 1, "z": 2}


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix.with_values([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scale(x: float, y: float, z: float) -> Matrix:
    return Matrix.with_values([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix.with_values([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, cos_r, -sin_r, 0.0],
        [0.0, sin_r, cos_r, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix.with_values([
        [cos_r, 0.0, sin_r, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-sin_r, 0.0, cos_r, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix.with_values([
        [cos_r, -sin_r, 0.0, 0.0],
        [sin_r, cos_r, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shear(axis_pair: ShearAxis | str) -> Matrix:
    """Identity with a single coupling of 1.0, e.g. X_BY_Y moves x in proportion to y."""
    axis_pair = ShearAxis(axis_pair)
    moved, by = axis_pair.value
    m = Matrix.new_identity(4, 4)
    m[_AXIS_INDEX[moved], _AXIS_INDEX[by]] = 1.0
    return m


def chain(*transforms: Matrix) -> Matrix:
    """Composes transforms applied first to last, i.e. returns T_n * ... * T_1."""
    if not transforms:
        return Matrix.new_identity(4, 4)
    return reduce(lambda composed, transform: transform * composed, transforms[1:], transforms[0])


def apply(transform: Matrix, primitive: Union[Point, Vector]) -> Union[Point, Vector]:
    return transform * primitive
