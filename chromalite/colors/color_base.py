from __future__ import annotations
from typing import Any, ClassVar, Iterable, Iterator, List, Tuple, Self

from ..types.color_types import ColorSpace, Scalar
from ..utils import get_dimension
from ..utils.num_utils import ensure_number


class ComponentSpace:
    """
    Mutable storage for one four-channel color representation.

    Every component passes through ``_sanitize`` on the way in, so stored
    values are always inside the channel's range. Out-of-range numbers are
    clamped (or wrapped, for hue); non-numbers and NaN are rejected.
    Alpha is always the last channel.
    """
    __slots__ = ('_values',)

    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, ...]]
    alpha_max:  ClassVar[Scalar]

    def __init__(self, value: Iterable[Any]) -> None:
        if isinstance(value, ComponentSpace):
            if value.mode != self.mode:
                raise TypeError(f"{self.mode} cannot be built from {value.mode}; convert it first")
            value = value.values

        values = tuple(value)
        value_dim = get_dimension(values)
        if value_dim != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} components, got {value_dim}")

        self._values: List[Scalar] = [
            self._sanitize(index, ensure_number(v, f"{self.mode} component {self.channels[index]!r}"))
            for index, v in enumerate(values)
        ]

    @classmethod
    def _sanitize(cls, index: int, value: Scalar) -> Scalar:
        """Bring one already-validated number into the range of channel ``index``."""
        raise NotImplementedError

    def _set(self, index: int, value: Scalar) -> None:
        self._values[index] = self._sanitize(index, value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> Tuple[Scalar, ...]:
        return tuple(self._values)

    @property
    def alpha(self) -> float:
        """Alpha as a unit float, whatever the channel's native scale."""
        return self._values[-1] / self.alpha_max

    @property
    def has_alpha(self) -> bool:
        """True unless the color is fully opaque."""
        return self._values[-1] != self.alpha_max

    # ------------------ MUTATORS ------------------
    def opacity(self, value: float) -> None:
        raise NotImplementedError

    def clone(self) -> Self:
        clone = self.__class__.__new__(self.__class__)
        clone._values = list(self._values)
        return clone

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentSpace):
            return NotImplemented
        return self.mode == other.mode and self._values == other._values

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values!r})"
