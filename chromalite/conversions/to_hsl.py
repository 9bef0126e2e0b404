import numpy as np
from numpy import ndarray as NDArray

from ..utils.num_utils import normalize_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)

    hue = 0.0
    if delta != 0:
        if max_c == r:
            hue = (g - b) / delta
        elif max_c == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4

    lightness = (2 * max_c - delta) / 2

    if delta == 0:
        saturation = 0.0
    elif lightness <= 0.5:
        saturation = delta / (2 * lightness)
    else:
        saturation = delta / (2 - 2 * lightness)

    return normalize_hue(60 * hue), min(saturation, 1.0), lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    delta = max_c - np.minimum.reduce([r, g, b])

    lightness = (2 * max_c - delta) / 2

    saturation = np.zeros(out_shape)
    mask = delta > 0
    low = mask & (lightness <= 0.5)
    high = mask & (lightness > 0.5)
    saturation[low] = delta[low] / (2 * lightness[low])
    saturation[high] = delta[high] / (2 - 2 * lightness[high])

    # first matching channel wins, same precedence as the scalar version
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = np.mod(60 * hue, 360)
    hue[hue >= 360] = 0.0

    return np.stack([hue, np.minimum(saturation, 1.0), lightness], axis=-1)
