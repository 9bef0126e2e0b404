from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = Union[int, float]

Byte = int
Unit = float
Percentage = float
Angle = float

RGBABytes = Tuple[Byte, Byte, Byte, Byte]
HSLAValues = Tuple[Angle, Percentage, Percentage, Unit]

ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
HUE_SPACES = {"hsl", "hsla"}


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is hue-based (HSL).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
