from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np
from PIL import Image

from typings.color import Color
from utils.grid_iteration import canvas_positions
from utils.numeric import color_to_uint8

PPM_MAX_LINE_LENGTH: int = 70
PPM_MAX_COLOR_VALUE: int = 256


class Canvas:
    """A width x height grid of colors addressed by (x, y), starting out white."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Canvas requires positive dimensions, got {width}x{height}")
        self.width: int = int(width)
        self.height: int = int(height)
        self._pixels: np.ndarray = np.ones((self.height, self.width, 3), dtype=float)

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, position: Tuple[int, int], color: Color) -> None:
        x, y = position
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        self._pixels[y, x, :] = color.rgb()

    def pixel_at(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        red, green, blue = self._pixels[y, x, :]
        return Color(float(red), float(green), float(blue))

    def pixels(self) -> Iterator[Tuple[Tuple[int, int], Color]]:
        for y, x in canvas_positions((self.height, self.width)):
            yield (x, y), self.pixel_at(x, y)

    def to_ppm(self) -> str:
        lines: List[str] = ["P3", f"{self.width} {self.height}", str(PPM_MAX_COLOR_VALUE)]
        quantized = color_to_uint8(self._pixels)
        for row in quantized:
            lines.extend(_wrap_ppm_row([str(int(channel)) for channel in row.reshape(-1)]))
        return "\n".join(lines) + "\n"

    def save_ppm(self, output_path: str) -> None:
        with open(output_path, "w") as f:
            f.write(self.to_ppm())

    def save_image(self, output_path: str) -> None:
        image = Image.fromarray(color_to_uint8(self._pixels))
        image.save(output_path)

    def save(self, output_path: str) -> None:
        if output_path.lower().endswith(".ppm"):
            self.save_ppm(output_path)
        else:
            self.save_image(output_path)


def _wrap_ppm_row(tokens: List[str]) -> List[str]:
    """Joins one canvas row into lines of at most PPM_MAX_LINE_LENGTH characters."""
    lines: List[str] = []
    current = ""
    for token in tokens:
        if not current:
            current = token
        elif len(current) + 1 + len(token) <= PPM_MAX_LINE_LENGTH:
            current = f"{current} {token}"
        else:
            lines.append(current)
            current = token
    if current:
        lines.append(current)
    return lines
