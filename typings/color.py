from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import List, Tuple

import numpy as np

from utils.numeric import color_to_uint8, feq


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    red: float
    green: float
    blue: float

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: object) -> Color:
        # Scalar factor, or the Hadamard product of two colors.
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Color:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return feq(self.red, other.red) and feq(self.green, other.green) and feq(self.blue, other.blue)

    __hash__ = None  # type: ignore[assignment]

    def rgb(self) -> Tuple[float, float, float]:
        return self.red, self.green, self.blue

    @staticmethod
    def to_256(value: float) -> int:
        """Clamps a channel to [0, 1] and scales it to an integer in [0, 255]."""
        return int(color_to_uint8(np.asarray(value, dtype=float)))

    def ppm_parts(self) -> List[str]:
        return [str(self.to_256(channel)) for channel in self.rgb()]

    def ppm(self) -> str:
        return " ".join(self.ppm_parts())
