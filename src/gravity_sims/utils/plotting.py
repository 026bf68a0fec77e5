from matplotlib import colors
import numpy as np


def color_to_uint8(color_str: str | None) -> tuple[int, int, int]:
    if color_str is None:
        return None
    rgb_float = colors.to_rgb(color_str)       # (0.0–1.0 floats)
    rgb_uint8 = tuple(int(round(255 * c)) for c in rgb_float)
    return rgb_uint8


def color_to_float(color) -> tuple[float, float, float] | None:
    """Normalize a uint8 RGB tuple or any matplotlib color spec to 0–1 floats."""
    if color is None:
        return None
    if isinstance(color, str):
        return colors.to_rgb(color)
    rgb = np.asarray(color, dtype=float)[:3]
    if rgb.max() > 1.0:
        rgb = rgb / 255
    return tuple(float(c) for c in rgb)


def rgba_float_to_u8(rgba):
    return tuple(int(round(255 * c)) for c in rgba)
