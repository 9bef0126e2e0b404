from typing import Optional, TypeVar, Tuple

T = TypeVar('T')

# Background used for alpha compositing when none is attached
DEFAULT_BACKGROUND: Tuple[int, int, int] = (255, 255, 255)

# luma_yuv below this is dark
DARK_THRESHOLD: float = 0.5

OPAQUE_BYTE: int = 255
OPAQUE_UNIT: float = 1.0


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
