from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions.to_hsl import unit_rgb_to_hsl
from ..types.color_types import Angle, ColorSpace, Percentage, Unit
from ..utils.default import OPAQUE_UNIT
from ..utils.num_utils import ensure_number, normalize_hue, to_percentage, to_unit
from .color_base import ComponentSpace

if TYPE_CHECKING:
    from .rgb import RGBa

_H, _S, _L, _A = range(4)

# Decimal places kept for h, s and l so that 100 - v and h + 180 are exact involutions
HSL_DECIMALS = 9


class HSLa(ComponentSpace):
    """
    Hue in degrees [0, 360), saturation and lightness in percent [0, 100],
    alpha as a unit float. Hue, saturation and lightness are kept to
    ``HSL_DECIMALS`` places rather than whole numbers, so a round trip through
    RGB stays within a byte and ``invert`` applied twice is exact.
    """
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "hsla"
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "l", "a")
    alpha_max:  ClassVar[float] = OPAQUE_UNIT

    @classmethod
    def _sanitize(cls, index: int, value: float) -> float:
        if index == _H:
            h = round(normalize_hue(ensure_number(value, "hue", finite=True)), HSL_DECIMALS)
            return 0.0 if h >= 360 else h
        if index == _A:
            return to_unit(value)
        return round(to_percentage(value), HSL_DECIMALS)

    @property
    def h(self) -> Angle:
        return self._values[_H]

    @property
    def s(self) -> Percentage:
        return self._values[_S]

    @property
    def l(self) -> Percentage:
        return self._values[_L]

    @property
    def a(self) -> Unit:
        return self._values[_A]

    @classmethod
    def from_rgba(cls, rgba: RGBa) -> HSLa:
        r, g, b, a = rgba.values
        h, s, l = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
        return cls((h, s * 100, l * 100, a / 255))

    def opacity(self, value: float) -> None:
        self._set(_A, ensure_number(value, "opacity"))

    def rotate_hue(self, deg: float) -> None:
        """Negative rotations wrap forward, -90 from 10 gives 280."""
        self._set(_H, self.h + ensure_number(deg, "rotation", finite=True))

    def saturate(self, value: float) -> None:
        """Scale saturation: 1 keeps it, 0 removes it, >1 approaches 100."""
        self._set(_S, self.s * ensure_number(value, "saturation factor", finite=True))

    def invert(self) -> None:
        self._set(_H, self.h + 180)
        self._set(_S, 100 - self.s)
        self._set(_L, 100 - self.l)

    def set_hue(self, deg: float) -> None:
        self._set(_H, ensure_number(deg, "hue", finite=True))

    def set_saturation(self, percentage: float) -> None:
        self._set(_S, ensure_number(percentage, "saturation"))

    def set_lightness(self, percentage: float) -> None:
        self._set(_L, ensure_number(percentage, "lightness"))
