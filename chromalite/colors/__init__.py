"""
Chromalite Color Classes
========================

A ``Color`` holds one color as RGBA and/or HSLA. Each representation lives in
its own component space; the facade keeps track of which one is current and
converts lazily when the other is read.

Usage
-----
>>> from chromalite.colors import Color
>>>
>>> color = Color.parse("rgba(255,170,68,0.5)")
>>> color.opacity(0.7).rotate_hue(180)
>>> round(color.hue)  # 213
>>> color.freshness   # Freshness.HSL_FRESH
>>> color.hex         # reconverts, state becomes BOTH_FRESH

Component spaces
----------------
RGBa:
    Bytes (r, g, b, a) in [0, 255]. contrast, brightness, opacity, solid,
    invert, mix.
HSLa:
    Hue [0, 360), saturation / lightness [0, 100], unit alpha. opacity,
    rotate_hue, saturate, invert, set_hue, set_saturation, set_lightness.

Notes
-----
- Components are clamped on the way in, never rejected; NaN and non-numbers
  raise.
- Mutators return the same Color; ``clone()`` before mutating a shared one.
- ``Color.filter`` and ``apply_filters`` run ``Filter`` steps in order.
"""

from .color_base import ComponentSpace
from .rgb import RGBa
from .hsl import HSLa
from .color import Color, ColorLike, Freshness
from .filters import Filter, FilterKind, apply_filters, filters_from_options
from .metrics import contrast_ratio

__all__ = [
    'ComponentSpace',
    'RGBa',
    'HSLa',
    'Color',
    'ColorLike',
    'Freshness',
    'Filter',
    'FilterKind',
    'apply_filters',
    'filters_from_options',
    'contrast_ratio',
]
