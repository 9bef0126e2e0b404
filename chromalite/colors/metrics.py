"""Relationships between colors."""

from .color import Color, ColorLike


def _as_color(value: ColorLike) -> Color:
    return value if isinstance(value, Color) else Color.parse(value)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """
    Contrast ratio of two colors from their (background-composited) luma.

    Returns:
        ``(max + 0.05) / (min + 0.05)``, between 1 (identical luma) and 21
        (black on white)
    """
    luma_a = _as_color(a).luma
    luma_b = _as_color(b).luma
    return (max(luma_a, luma_b) + 0.05) / (min(luma_a, luma_b) + 0.05)
