"""
Chromalite Color Space Conversions
==================================

Pure conversion functions between RGB and HSL, with scalar and vectorized
(numpy) implementations, plus luma and the CSS text marshaling used at the
``Color`` boundary.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Scalar RGB to HSL conversion
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized RGB to HSL conversion

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Scalar HSL to RGB conversion
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized HSL to RGB conversion

Derived metrics
---------------
    luma(rgba, yuv=False)
        BT.709 (or BT.601 with ``yuv``) luma of RGBA bytes in [0, 1]
    luma_alpha(rgba, background=None, yuv=False)
        Luma after compositing a translucent color over a background

Text
----
    hex_to_rgba, rgb_string_to_rgba, hsl_string_to_hsla, css_color_to_rgba
        Parse CSS color syntax into raw component tuples
    rgba_to_hex, rgba_to_hexa, rgba_to_rgb_string, rgba_to_rgba_string,
    hsla_to_hsl_string, hsla_to_hsla_string
        Format raw component tuples

Scales
------
Hue is in degrees [0, 360). Saturation, lightness and RGB channels are unit
floats [0, 1] in the conversion functions; the component spaces scale them
to bytes and percentages.

Examples
--------
>>> from chromalite.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>>
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
>>>
>>> import numpy as np
>>> from chromalite.conversions import np_unit_rgb_to_hsl
>>> rgb_array = np.array([[1.0, 0.5, 0.0], [0.0, 1.0, 0.5]])
>>> hsl_array = np_unit_rgb_to_hsl(rgb_array[..., 0], rgb_array[..., 1], rgb_array[..., 2])
"""

# RGB → HSL conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# HSL → RGB conversions
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb

from .luma import luma, luma_alpha, BT709_WEIGHTS, BT601_WEIGHTS

from .css_strings import (
    is_hex,
    is_rgb,
    is_hsl,
    is_css_color,
    hex_to_rgba,
    rgb_string_to_rgba,
    hsl_string_to_hsla,
    css_color_to_rgba,
    rgba_to_hex,
    rgba_to_hexa,
    rgba_to_rgb_string,
    rgba_to_rgba_string,
    hsla_to_hsl_string,
    hsla_to_hsla_string,
)

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # Luma
    'luma',
    'luma_alpha',
    'BT709_WEIGHTS',
    'BT601_WEIGHTS',

    # Text
    'is_hex',
    'is_rgb',
    'is_hsl',
    'is_css_color',
    'hex_to_rgba',
    'rgb_string_to_rgba',
    'hsl_string_to_hsla',
    'css_color_to_rgba',
    'rgba_to_hex',
    'rgba_to_hexa',
    'rgba_to_rgb_string',
    'rgba_to_rgba_string',
    'hsla_to_hsl_string',
    'hsla_to_hsla_string',

    # Types
    'FormatType',
]
