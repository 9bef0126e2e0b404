"""
Perceptual luma of RGBA byte tuples.

``luma`` uses the ITU-R BT.709 weights, ``luma(..., yuv=True)`` the
BT.601 weights of Y'UV. Both return values in [0, 1].
"""

from typing import Optional, Sequence, Tuple

from ..utils.color_utils import solid_byte
from ..utils.default import DEFAULT_BACKGROUND, value_or_default

BT709_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)
BT601_WEIGHTS: Tuple[float, float, float] = (0.299, 0.587, 0.114)


def _weights(yuv: bool) -> Tuple[float, float, float]:
    return BT601_WEIGHTS if yuv else BT709_WEIGHTS


def luma(rgba: Sequence[float], yuv: bool = False) -> float:
    """Weighted sum of the RGB bytes, normalized to [0, 1]. Alpha is ignored."""
    wr, wg, wb = _weights(yuv)
    r, g, b = rgba[:3]
    return (wr * r + wg * g + wb * b) / 255


def luma_alpha(
    rgba: Sequence[float],
    background: Optional[Sequence[float]] = None,
    yuv: bool = False,
) -> float:
    """
    Luma of a translucent color composited over an opaque background.

    Args:
        rgba: (r, g, b, a) bytes
        background: (r, g, b) bytes of the backdrop, white by default
        yuv: Use BT.601 weights instead of BT.709

    Returns:
        Luma of the blended color in [0, 1]
    """
    bg_r, bg_g, bg_b = value_or_default(background, DEFAULT_BACKGROUND)[:3]
    r, g, b, a = rgba[:4]
    alpha = a / 255
    return luma(
        (solid_byte(r, bg_r, alpha), solid_byte(g, bg_g, alpha), solid_byte(b, bg_b, alpha)),
        yuv=yuv,
    )
