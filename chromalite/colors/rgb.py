from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence, Tuple

from ..conversions.to_rgb import hsl_to_unit_rgb
from ..types.color_types import Byte, ColorSpace
from ..utils.color_utils import brightness_byte, contrast_byte, mix_byte, solid_byte
from ..utils.default import DEFAULT_BACKGROUND, OPAQUE_BYTE, value_or_default
from ..utils.num_utils import ensure_number, to_byte, to_unit
from .color_base import ComponentSpace

if TYPE_CHECKING:
    from .hsl import HSLa


class RGBa(ComponentSpace):
    """
    RGBA bytes. Red, green, blue and alpha are all integers in [0, 255];
    ``alpha`` exposes the last one as a unit float.

    The mutators here are the RGB-native operations: contrast, brightness,
    compositing over a background, inversion and mixing.
    """
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "rgba"
    channels:   ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    alpha_max:  ClassVar[int] = OPAQUE_BYTE

    @classmethod
    def _sanitize(cls, index: int, value: float) -> Byte:
        return to_byte(value)

    @property
    def r(self) -> Byte:
        return self._values[0]

    @property
    def g(self) -> Byte:
        return self._values[1]

    @property
    def b(self) -> Byte:
        return self._values[2]

    @property
    def a(self) -> Byte:
        return self._values[3]

    @classmethod
    def from_hsla(cls, hsla: HSLa) -> RGBa:
        h, s, l, a = hsla.values
        r, g, b = hsl_to_unit_rgb(h, s / 100, l / 100)
        return cls((r * 255, g * 255, b * 255, a * 255))

    def _map_rgb(self, fn) -> None:
        for index in range(3):
            self._values[index] = fn(index, self._values[index])

    def contrast(self, value: float) -> None:
        """1 is the identity, 0 collapses every channel to mid-gray (128)."""
        value = ensure_number(value, "contrast", finite=True)
        self._map_rgb(lambda _, byte: contrast_byte(byte, value))

    def brightness(self, value: float) -> None:
        """1 is the identity, 0 is black, values above 1 brighten up to 255."""
        value = ensure_number(value, "brightness", finite=True)
        self._map_rgb(lambda _, byte: brightness_byte(byte, value))

    def opacity(self, value: float) -> None:
        value = ensure_number(value, "opacity")
        self._values[3] = to_byte(value * 255)

    def solid(self, background: Optional[Sequence[float]] = None) -> None:
        """
        Composite over an opaque background and drop the transparency.

        Args:
            background: (r, g, b) bytes of the backdrop, white by default
        """
        background = value_or_default(background, DEFAULT_BACKGROUND)
        alpha = self.alpha
        self._map_rgb(lambda index, byte: solid_byte(byte, background[index], alpha))
        self._values[3] = OPAQUE_BYTE

    def invert(self) -> None:
        self._map_rgb(lambda _, byte: 255 - byte)

    def mix(self, other: RGBa, strength: float = 0.5) -> None:
        """Blend all four channels towards ``other``; 0 keeps self, 1 copies other."""
        strength = to_unit(ensure_number(strength, "strength"))
        self._values = [mix_byte(mine, theirs, strength) for mine, theirs in zip(self._values, other.values)]
