import numpy as np
from numpy import ndarray as NDArray

from ..utils.num_utils import normalize_hue

# Channel offsets for the single-formula HSL -> RGB transform
_R, _G, _B = 0, 8, 4


def _channel(k: float, h: float, l: float, a: float) -> float:
    n = (k + h / 30) % 12
    return l - a * max(-1.0, min(n - 3, 9 - n, 1.0))


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB_alternative

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    a = s * min(l, 1 - l)
    return _channel(_R, h, l, a), _channel(_G, h, l, a), _channel(_B, h, l, a)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    a = s * np.minimum(l, 1 - l)

    def channel(k: int) -> NDArray:
        n = (k + h / 30) % 12
        return l - a * np.clip(np.minimum(n - 3, 9 - n), -1, 1)

    return np.stack([channel(_R), channel(_G), channel(_B)], axis=-1)
