from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Tuple

from utils.numeric import feq

if TYPE_CHECKING:
    from surfaces.sphere import Sphere


@dataclass(frozen=True, slots=True, eq=False)
class Intersection:
    t: float
    object: Sphere

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return feq(self.t, other.t) and self.object == other.object

    __hash__ = None  # type: ignore[assignment]


class Intersections:
    """Ordered, read-only collection of intersections along one ray."""

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._intersections: Tuple[Intersection, ...] = tuple(intersections)

    def __len__(self) -> int:
        return len(self._intersections)

    def __getitem__(self, index: int) -> Intersection:
        return self._intersections[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._intersections)

    def __bool__(self) -> bool:
        return bool(self._intersections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersections):
            return NotImplemented
        return self._intersections == other._intersections

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Intersections({list(self._intersections)!r})"

    def hit(self) -> Intersection | None:
        """Nearest intersection strictly in front of the ray origin, or None."""
        best_hit: Intersection | None = None
        for intersection in self._intersections:
            if intersection.t <= 0.0:
                continue
            if best_hit is None or intersection.t < best_hit.t:
                best_hit = intersection
        return best_hit
