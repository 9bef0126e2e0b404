"""
Named color filters.

A ``Filter`` pairs a ``FilterKind`` with its argument. The set of kinds is
closed: every kind has exactly one entry in the dispatch table below, and
option names coming from callers are resolved through a fixed table, never
by looking up attributes on the color.

>>> from chromalite import Color, Filter, FilterKind
>>> color = Color.parse("#336699")
>>> color.filter(Filter(FilterKind.ROTATE_HUE, 90), invert=True).hex
'#66cc66'
"""

from __future__ import annotations
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..utils.num_utils import ensure_number

if TYPE_CHECKING:
    from .color import Color


class FilterKind(Enum):
    CONTRAST = "contrast"
    ROTATE_HUE = "rotate_hue"
    SATURATE = "saturate"
    BRIGHTNESS = "brightness"
    OPACITY = "opacity"
    INVERT = "invert"
    INVERT_HSL = "invert_hsl"
    SOLID = "solid"

    @property
    def takes_value(self) -> bool:
        return self not in FLAG_KINDS


FLAG_KINDS = frozenset({FilterKind.INVERT, FilterKind.INVERT_HSL, FilterKind.SOLID})

_DISPATCH: Dict[FilterKind, Callable[["Color", Optional[float]], "Color"]] = {
    FilterKind.CONTRAST: lambda color, value: color.contrast(value),
    FilterKind.ROTATE_HUE: lambda color, value: color.rotate_hue(value),
    FilterKind.SATURATE: lambda color, value: color.saturate(value),
    FilterKind.BRIGHTNESS: lambda color, value: color.brightness(value),
    FilterKind.OPACITY: lambda color, value: color.opacity(value),
    FilterKind.INVERT: lambda color, _: color.invert(),
    FilterKind.INVERT_HSL: lambda color, _: color.invert_hsl(),
    FilterKind.SOLID: lambda color, _: color.solid(),
}

# Old camelCase / misspelled option names still seen in stored filter settings
_DEPRECATED_OPTIONS: Dict[str, FilterKind] = {
    "saturation": FilterKind.SATURATE,
    "rotateHue": FilterKind.ROTATE_HUE,
    "invertHSL": FilterKind.INVERT_HSL,
}


@dataclass(frozen=True)
class Filter:
    """One filter step. Value kinds need a finite number, flag kinds none."""

    kind: FilterKind
    value: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.kind, FilterKind):
            object.__setattr__(self, "kind", FilterKind(self.kind))

        if self.kind.takes_value:
            if self.value is None:
                raise ValueError(f"{self.kind.value} filter needs a value")
            ensure_number(self.value, f"{self.kind.value} filter value", finite=True)
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} filter takes no value, got {self.value!r}")

    def apply(self, color: Color) -> Color:
        return _DISPATCH[self.kind](color, self.value)


def _resolve_option(name: str, stacklevel: int) -> FilterKind:
    if name in _DEPRECATED_OPTIONS:
        kind = _DEPRECATED_OPTIONS[name]
        warnings.warn(
            f"filter option {name!r} is deprecated, use {kind.value!r} instead",
            DeprecationWarning,
            stacklevel=stacklevel,
        )
        return kind
    try:
        return FilterKind(name)
    except ValueError:
        raise ValueError(f"unknown filter {name!r}") from None


def filters_from_options(options: Mapping[str, Any], stacklevel: int = 2) -> List[Filter]:
    """
    Translate ``{"contrast": 1.2, "invert": True}`` style options into filters.

    Flag filters take a bool; ``False`` drops the step. ``stacklevel`` is
    passed on to deprecation warnings, as for ``warnings.warn`` called here.

    Raises:
        ValueError: for unknown names or a non-bool flag.
    """
    filters = []
    for name, value in options.items():
        kind = _resolve_option(name, stacklevel + 1)
        if kind.takes_value:
            filters.append(Filter(kind, value))
        elif not isinstance(value, bool):
            raise ValueError(f"{name} filter expects True or False, got {value!r}")
        elif value:
            filters.append(Filter(kind))
    return filters


def apply_filters(color: Color, filters: Iterable[Filter]) -> Color:
    """Apply filters to ``color`` in place, in iteration order."""
    for step in filters:
        step.apply(color)
    return color
