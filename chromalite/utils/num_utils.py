import math
from numbers import Real
from typing import Any

from boundednumbers import clamp

from ..types.format_type import HUE_360


def ensure_number(value: Any, name: str = "value", finite: bool = False) -> float:
    """
    Validate a single color component or filter argument.

    Infinities are accepted unless ``finite`` is set, since clamping
    saturates them. Cyclic values (hue) need ``finite=True``.

    Raises:
        TypeError: if the value is not a real number.
        ValueError: if the value is NaN, or infinite when ``finite`` is set.
    """
    if not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {value!r} ({type(value).__name__})")
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN")
    if finite and math.isinf(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (0.5 -> 1, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def to_byte(value: float) -> int:
    """Clamp to [0, 255] and round to an integer byte."""
    return round_half_up(float(clamp(value, 0, 255)))


def to_unit(value: float) -> float:
    return float(clamp(value, 0.0, 1.0))


def to_percentage(value: float) -> float:
    return float(clamp(value, 0.0, 100.0))


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = float(h) % HUE_360
    # -1e-17 % 360 == 360.0
    return 0.0 if h >= HUE_360 else h
