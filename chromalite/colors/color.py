from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Sequence, Tuple, Union, Self

from numpy import ndarray

from ..conversions.css_strings import (
    is_hex, is_rgb, is_hsl, is_css_color,
    hex_to_rgba, rgb_string_to_rgba, hsl_string_to_hsla, css_color_to_rgba,
    rgba_to_hex, rgba_to_hexa, rgba_to_rgb_string, rgba_to_rgba_string,
    hsla_to_hsl_string, hsla_to_hsla_string,
)
from ..conversions.luma import luma, luma_alpha
from ..types.color_types import ColorSpace, HSLAValues, RGBABytes, Scalar, is_hue_space
from ..types.format_type import FormatType, max_non_hue
from ..utils.default import DARK_THRESHOLD, OPAQUE_BYTE, OPAQUE_UNIT
from ..utils.num_utils import round_half_up
from .color_base import ComponentSpace
from .hsl import HSLa
from .rgb import RGBa

if TYPE_CHECKING:
    from .filters import Filter

ColorLike = Union["Color", str, Sequence[Scalar], ndarray]


class Freshness(Enum):
    """Which representation of a Color currently holds authoritative values."""
    RGB_FRESH = "rgb"
    HSL_FRESH = "hsl"
    BOTH_FRESH = "both"


class Color:
    """
    A single color readable and writable as RGBA or HSLA.

    Only one representation is authoritative after a write; the other is
    rebuilt from it the first time it is read. RGB-native mutators
    (``contrast``, ``brightness``, ``invert``, ``solid``, ``mix``) leave the
    color ``RGB_FRESH``, HSL-native mutators (``rotate_hue``, ``saturate``,
    ``invert_hsl`` and the ``set_*`` setters) leave it ``HSL_FRESH``.
    ``opacity`` writes whichever representation is authoritative.

    Mutators work in place and return ``self`` so calls chain; use
    ``clone()`` when the original must survive.

    >>> c = Color.parse("#fa4")
    >>> c.hex, c.hsl
    ('#ffaa44', 'hsl(33 100% 63%)')
    >>> c.clone().rotate_hue(180).hex
    '#4499ff'
    """
    __slots__ = ("_rgba", "_hsla", "_freshness", "_background", "_luma", "_luma_yuv")

    def __init__(self, rgba: Sequence[Scalar] = (255, 255, 255, 255)) -> None:
        values = tuple(rgba)
        if len(values) == 3:
            values += (OPAQUE_BYTE,)
        self._seed(RGBa(values), None, Freshness.RGB_FRESH)

    def _seed(self, rgba: Optional[RGBa], hsla: Optional[HSLa], freshness: Freshness) -> None:
        self._rgba = rgba
        self._hsla = hsla
        self._freshness = freshness
        self._background: Optional[Color] = None
        self._luma: Optional[float] = None
        self._luma_yuv: Optional[float] = None

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_rgba(cls, rgba: Sequence[Scalar]) -> Self:
        """Seed from (r, g, b[, a]) bytes; alpha defaults to 255."""
        return cls(rgba)

    @classmethod
    def from_hsla(cls, hsla: Sequence[Scalar]) -> Self:
        """Seed from (h, s%, l%[, a]) with a unit alpha defaulting to 1."""
        values = tuple(hsla)
        if len(values) == 3:
            values += (OPAQUE_UNIT,)
        color = cls.__new__(cls)
        color._seed(None, HSLa(values), Freshness.HSL_FRESH)
        return color

    @classmethod
    def from_hex(cls, color: str) -> Self:
        return cls.from_rgba(hex_to_rgba(color))

    @classmethod
    def from_rgb(cls, color: str) -> Self:
        return cls.from_rgba(rgb_string_to_rgba(color))

    @classmethod
    def from_hsl(cls, color: str) -> Self:
        return cls.from_hsla(hsl_string_to_hsla(color))

    @classmethod
    def from_css_color(cls, color: str) -> Self:
        return cls.from_rgba(css_color_to_rgba(color))

    @classmethod
    def parse(cls, value: ColorLike) -> Self:
        """
        Build a Color from any supported representation.

        Args:
            value: A Color (cloned), a hex / ``rgb()`` / ``hsl()`` / named
                CSS color string, or a sequence of RGB(A) bytes.

        Raises:
            ValueError: for unsupported or malformed strings.
            TypeError: for values of any other type.
        """
        if isinstance(value, Color):
            return value.clone()

        if isinstance(value, str):
            text = value.strip()
            if is_hex(text):
                return cls.from_hex(text)
            if is_rgb(text):
                return cls.from_rgb(text)
            if is_hsl(text):
                return cls.from_hsl(text)
            if is_css_color(text):
                return cls.from_css_color(text)
            raise ValueError(f"color not supported {value!r}")

        if isinstance(value, (tuple, list, ndarray)):
            return cls.from_rgba(value)

        raise TypeError(f"cannot build a Color from {type(value).__name__}")

    # ------------------ SYNCHRONIZATION ------------------
    def _rgb_space(self) -> RGBa:
        if self._freshness is Freshness.HSL_FRESH:
            self._rgba = RGBa.from_hsla(self._hsla)
            self._freshness = Freshness.BOTH_FRESH
        return self._rgba

    def _hsl_space(self) -> HSLa:
        if self._freshness is Freshness.RGB_FRESH:
            self._hsla = HSLa.from_rgba(self._rgba)
            self._freshness = Freshness.BOTH_FRESH
        return self._hsla

    def _preferred_space(self) -> ComponentSpace:
        """The authoritative space, without converting anything."""
        if self._freshness is Freshness.HSL_FRESH:
            return self._hsla
        return self._rgba

    def _changed(self, freshness: Freshness) -> Self:
        self._freshness = freshness
        self._clear_luma_cache()
        return self

    def _clear_luma_cache(self) -> None:
        self._luma = None
        self._luma_yuv = None

    @property
    def freshness(self) -> Freshness:
        return self._freshness

    # ------------------ RGB READS ------------------
    @property
    def rgba_bytes(self) -> RGBABytes:
        return self._rgb_space().values

    @property
    def red(self) -> int:
        return self._rgb_space().r

    @property
    def green(self) -> int:
        return self._rgb_space().g

    @property
    def blue(self) -> int:
        return self._rgb_space().b

    @property
    def hex(self) -> str:
        return rgba_to_hex(self.rgba_bytes)

    @property
    def hexa(self) -> str:
        return rgba_to_hexa(self.rgba_bytes)

    @property
    def rgb(self) -> str:
        return rgba_to_rgb_string(self.rgba_bytes)

    @property
    def rgba(self) -> str:
        return rgba_to_rgba_string(self.rgba_bytes)

    # ------------------ HSL READS ------------------
    @property
    def hsla_values(self) -> HSLAValues:
        return self._hsl_space().values

    @property
    def hue(self) -> float:
        return self._hsl_space().h

    @property
    def saturation(self) -> float:
        return self._hsl_space().s

    @property
    def lightness(self) -> float:
        return self._hsl_space().l

    @property
    def hsl(self) -> str:
        return hsla_to_hsl_string(self.hsla_values)

    @property
    def hsla(self) -> str:
        return hsla_to_hsla_string(self.hsla_values)

    # ------------------ ALPHA ------------------
    @property
    def alpha(self) -> float:
        """Unit alpha from the authoritative space."""
        return self._preferred_space().alpha

    @property
    def has_alpha(self) -> bool:
        return self._preferred_space().has_alpha

    def components(self, space: ColorSpace = "rgba", format_type: FormatType = FormatType.INT) -> Tuple[Scalar, ...]:
        """
        Raw components of one representation in the requested format.

        Non-hue channels, alpha included, are scaled to 255 (INT, rounded),
        1.0 (FLOAT) or 100.0 (PERCENTAGE). Hue stays in degrees and is only
        rounded for INT. Spaces without a trailing ``a`` drop the alpha.
        """
        space = space.lower()  # type: ignore
        if space not in ("rgb", "rgba", "hsl", "hsla"):
            raise ValueError(f"Unknown space: {space}")
        format_type = FormatType(format_type)
        maxval = max_non_hue[format_type]

        if is_hue_space(space):
            h, s, l, a = self.hsla_values
            unit = (s / 100, l / 100, a)
        else:
            r, g, b, a = self.rgba_bytes
            h = None
            unit = (r / 255, g / 255, b / 255, a / 255)

        scaled = [v * maxval for v in unit]
        if h is not None:
            scaled.insert(0, h)
        if format_type == FormatType.INT:
            scaled = [round_half_up(v) for v in scaled]
            if h is not None:
                scaled[0] %= 360
        if not space.endswith("a"):
            scaled = scaled[:3]
        return tuple(scaled)

    # ------------------ DERIVED METRICS ------------------
    def _compute_luma(self, yuv: bool) -> float:
        rgba = self.rgba_bytes
        if rgba[3] == OPAQUE_BYTE:
            return luma(rgba, yuv=yuv)
        background = self._background.rgba_bytes if self._background is not None else None
        return luma_alpha(rgba, background, yuv=yuv)

    def _memoizable(self) -> bool:
        # the backdrop may be mutated behind our back
        return self._background is None or not self.has_alpha

    @property
    def luma(self) -> float:
        """BT.709 luma in [0, 1], composited over the background when translucent."""
        if self._luma is not None:
            return self._luma
        value = self._compute_luma(yuv=False)
        if self._memoizable():
            self._luma = value
        return value

    @property
    def luma_yuv(self) -> float:
        """BT.601 (Y'UV) luma in [0, 1], composited over the background when translucent."""
        if self._luma_yuv is not None:
            return self._luma_yuv
        value = self._compute_luma(yuv=True)
        if self._memoizable():
            self._luma_yuv = value
        return value

    @property
    def is_dark(self) -> bool:
        return self.luma_yuv < DARK_THRESHOLD

    @property
    def is_light(self) -> bool:
        return self.luma_yuv >= DARK_THRESHOLD

    # ------------------ BACKGROUND ------------------
    @property
    def background_color(self) -> Optional[Color]:
        return self._background

    def background(self, color: Optional[ColorLike]) -> Self:
        """
        Attach the backdrop used by ``solid`` and translucent luma.

        A Color is referenced, not copied, and never mutated by this color.
        Anything else is parsed. ``None`` detaches it (white is used).
        """
        if color is None or isinstance(color, Color):
            self._background = color
        else:
            self._background = Color.parse(color)
        self._clear_luma_cache()
        return self

    def _background_bytes(self) -> Optional[RGBABytes]:
        if self._background is None:
            return None
        return self._background.rgba_bytes

    # ------------------ RGB-NATIVE MUTATORS ------------------
    def contrast(self, value: float) -> Self:
        self._rgb_space().contrast(value)
        return self._changed(Freshness.RGB_FRESH)

    def brightness(self, value: float) -> Self:
        self._rgb_space().brightness(value)
        return self._changed(Freshness.RGB_FRESH)

    def invert(self) -> Self:
        self._rgb_space().invert()
        return self._changed(Freshness.RGB_FRESH)

    def solid(self) -> Self:
        """Composite over the background (white by default); no-op when opaque."""
        if self.has_alpha:
            self._rgb_space().solid(self._background_bytes())
            self._changed(Freshness.RGB_FRESH)
        return self

    def mix(self, other: ColorLike, strength: float = 0.5) -> Self:
        other_color = other if isinstance(other, Color) else Color.parse(other)
        self._rgb_space().mix(other_color._rgb_space(), strength)
        return self._changed(Freshness.RGB_FRESH)

    # ------------------ REPRESENTATION-AGNOSTIC ------------------
    def opacity(self, value: float) -> Self:
        if self._freshness is Freshness.HSL_FRESH:
            self._hsla.opacity(value)
            return self._changed(Freshness.HSL_FRESH)
        self._rgba.opacity(value)
        return self._changed(Freshness.RGB_FRESH)

    # ------------------ HSL-NATIVE MUTATORS ------------------
    def rotate_hue(self, deg: float) -> Self:
        self._hsl_space().rotate_hue(deg)
        return self._changed(Freshness.HSL_FRESH)

    def saturate(self, value: float) -> Self:
        self._hsl_space().saturate(value)
        return self._changed(Freshness.HSL_FRESH)

    def invert_hsl(self) -> Self:
        self._hsl_space().invert()
        return self._changed(Freshness.HSL_FRESH)

    def set_hue(self, deg: float) -> Self:
        self._hsl_space().set_hue(deg)
        return self._changed(Freshness.HSL_FRESH)

    def set_saturation(self, percentage: float) -> Self:
        self._hsl_space().set_saturation(percentage)
        return self._changed(Freshness.HSL_FRESH)

    def set_lightness(self, percentage: float) -> Self:
        self._hsl_space().set_lightness(percentage)
        return self._changed(Freshness.HSL_FRESH)

    # ------------------ FILTERS ------------------
    def filter(self, *filters: Filter, **options: Union[float, bool]) -> Self:
        """
        Apply ``Filter`` objects, then keyword options, in order.

        >>> Color.parse("#ffaa44").filter(invert=True, brightness=0.5).hex
        '#002b5e'
        """
        from .filters import apply_filters, filters_from_options

        apply_filters(self, [*filters, *filters_from_options(options, stacklevel=3)])
        return self

    # ------------------ COPIES ------------------
    def clone(self) -> Self:
        """
        Independent copy: component sets, freshness, caches and background.

        The background chain is copied too. A chain that loops back
        (``c.background(c)``) is reproduced as the same loop among the copies.
        """
        return self._clone({})

    def _clone(self, memo: Dict[int, Color]) -> Self:
        if id(self) in memo:
            return memo[id(self)]
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        clone._rgba = self._rgba.clone() if self._rgba is not None else None
        clone._hsla = self._hsla.clone() if self._hsla is not None else None
        clone._freshness = self._freshness
        clone._background = self._background._clone(memo) if self._background is not None else None
        clone._luma = self._luma
        clone._luma_yuv = self._luma_yuv
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba_bytes == other.rgba_bytes

    def __str__(self) -> str:
        if self._freshness is Freshness.HSL_FRESH:
            return hsla_to_hsla_string(self._hsla.values)
        return rgba_to_rgba_string(self._rgba.values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.parse({str(self)!r})"
