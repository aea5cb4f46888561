from __future__ import annotations

import numpy as np

EPSILON: float = 1e-5 # tolerance for every float comparison in the kernel


def feq(a: float, b: float) -> bool:
    """True when a and b differ by less than EPSILON. NaN never compares equal."""
    return bool(abs(a - b) < EPSILON)


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def color_to_uint8(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB color array (clamped to [0, 1]) to 8-bit integer [0, 255]."""
    clamped_color = clamp_color01(color_rgb)
    return (clamped_color * 255.0 + 0.5).astype(np.uint8) # 0.5 before conversion rounds half up
