from __future__ import annotations

import itertools
import math

from typings.intersection import Intersection, Intersections
from typings.ray import Ray
from typings.tuples import Point
from utils.numeric import feq

_SPHERE_IDS = itertools.count(1)


class Sphere:
    """Unit sphere centred at the origin."""

    def __init__(self, sphere_id: int | None = None) -> None:
        self.sphere_id: int = next(_SPHERE_IDS) if sphere_id is None else int(sphere_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.sphere_id == other.sphere_id

    def __hash__(self) -> int:
        return hash(self.sphere_id)

    def __repr__(self) -> str:
        return f"Sphere(sphere_id={self.sphere_id})"

    def intersect(self, ray: Ray) -> Intersections:
        sphere_to_ray = ray.origin - Point(0.0, 0.0, 0.0)
        quadratic_a = ray.direction.dot(ray.direction)
        if feq(quadratic_a, 0.0):
            # zero direction never reaches the surface
            return Intersections()
        quadratic_b = 2.0 * ray.direction.dot(sphere_to_ray)
        quadratic_c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant < 0.0:
            return Intersections()

        sqrt_discriminant = math.sqrt(discriminant)
        inverse_2a = 1.0 / (2.0 * quadratic_a)

        t_near = (-quadratic_b - sqrt_discriminant) * inverse_2a
        t_far = (-quadratic_b + sqrt_discriminant) * inverse_2a
        return Intersections((Intersection(t_near, self), Intersection(t_far, self)))
