"""Per-byte RGB filters shared by the RGBA component space and luma compositing."""

from .num_utils import to_byte


def contrast_byte(byte: float, value: float) -> int:
    """Scale a channel's distance from mid-gray (128) by ``value``."""
    return to_byte(value * (byte - 128) + 128)


def brightness_byte(byte: float, value: float) -> int:
    return to_byte(byte * value)


def solid_byte(byte: float, background: float, alpha: float) -> int:
    """
    Composite one channel over an opaque background.

    Args:
        byte: Foreground channel in [0, 255]
        background: Background channel in [0, 255]
        alpha: Foreground opacity in [0, 1]
    """
    return to_byte(byte * alpha + background * (1 - alpha))


def mix_byte(byte: float, other: float, strength: float) -> int:
    return to_byte(byte * (1 - strength) + other * strength)
