"""Chromalite: a lazily synchronized RGB / HSL color value."""

from .colors.color_base import ComponentSpace
from .colors.rgb import RGBa
from .colors.hsl import HSLa
from .colors.color import Color, ColorLike, Freshness
from .colors.filters import Filter, FilterKind, apply_filters, filters_from_options
from .colors.metrics import contrast_ratio
from .conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    luma,
    luma_alpha,
)
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # color
    "Color",
    "ColorLike",
    "Freshness",
    "contrast_ratio",
    # component spaces
    "ComponentSpace",
    "RGBa",
    "HSLa",
    # filters
    "Filter",
    "FilterKind",
    "apply_filters",
    "filters_from_options",
    # conversions
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_hsl_to_unit_rgb",
    "luma",
    "luma_alpha",
    "FormatType",
    "__version__",
]
