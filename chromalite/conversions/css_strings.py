"""
Text marshaling between CSS color syntax and raw component tuples.

Parsing produces RGBA bytes ``(r, g, b, a)`` or HSLA values
``(h, s%, l%, a)``; formatting goes the other way. No color state lives
here, the ``Color`` facade calls these at its boundary.
"""

import re
from typing import List, Sequence, Tuple

from ..samples.colors import CSS_COLORS
from ..types.color_types import HSLAValues, RGBABytes
from ..utils.num_utils import ensure_number, normalize_hue, round_half_up, to_byte, to_percentage, to_unit

_HEX = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNCTIONAL = re.compile(r"^(?P<name>[a-z]+)\s*\((?P<body>[^()]*)\)$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[\s,]+")


def is_hex(color: str) -> bool:
    return color.startswith("#")


def is_rgb(color: str) -> bool:
    return color[:3].lower() == "rgb"


def is_hsl(color: str) -> bool:
    return color[:3].lower() == "hsl"


def is_css_color(color: str) -> bool:
    return color.strip().lower() in CSS_COLORS


## hex

def hex_to_rgba(color: str) -> RGBABytes:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    A missing alpha digit pair means fully opaque (255).
    """
    text = color.strip()
    if not _HEX.match(text):
        raise ValueError(f"invalid hex color {color!r}")

    digits = text[1:]
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "ff"

    r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    return r, g, b, a


def _to_hex(byte: int) -> str:
    return f"{to_byte(byte):02x}"


def rgba_to_hex(rgba: Sequence[int]) -> str:
    r, g, b = rgba[:3]
    return "#" + _to_hex(r) + _to_hex(g) + _to_hex(b)


def rgba_to_hexa(rgba: Sequence[int]) -> str:
    r, g, b, a = rgba[:4]
    return "#" + _to_hex(r) + _to_hex(g) + _to_hex(b) + _to_hex(a)


## functional notation

def _split_functional(color: str, kind: str) -> Tuple[List[str], str | None]:
    """Split ``name(c1, c2, c3[, a])`` or ``name(c1 c2 c3[ / a])`` into tokens."""
    match = _FUNCTIONAL.match(color.strip())
    if match is None or match.group("name").lower() not in (kind, kind + "a"):
        raise ValueError(f"invalid {kind} color {color!r}")

    body, _, alpha = match.group("body").partition("/")
    parts = [p for p in _SEPARATORS.split(body.strip()) if p]
    alpha = alpha.strip() or None

    if alpha is None and len(parts) == 4:
        alpha = parts.pop()
    if len(parts) != 3:
        raise ValueError(f"invalid {kind} color {color!r}")
    return parts, alpha


def _parse_number(token: str, color: str, suffixes: Tuple[str, ...] = ()) -> float:
    for suffix in suffixes:
        if token.lower().endswith(suffix):
            token = token[: -len(suffix)]
            break
    try:
        value = float(token)
    except ValueError:
        raise ValueError(f"invalid color component {token!r} in {color!r}") from None
    return ensure_number(value, f"component {token!r} of {color!r}")


def _parse_alpha(token: str | None, color: str) -> float:
    """Alpha as a unit float; ``50%`` and bare values above 1 are percentages."""
    if token is None:
        return 1.0
    value = _parse_number(token, color, ("%",))
    if token.endswith("%") or value > 1:
        value /= 100
    return to_unit(value)


def rgb_string_to_rgba(color: str) -> RGBABytes:
    parts, alpha = _split_functional(color, "rgb")
    r, g, b = (to_byte(_parse_number(p, color)) for p in parts)
    return r, g, b, to_byte(_parse_alpha(alpha, color) * 255)


def hsl_string_to_hsla(color: str) -> HSLAValues:
    parts, alpha = _split_functional(color, "hsl")
    h = _parse_number(parts[0], color, ("deg",))
    s, l = (to_percentage(_parse_number(p, color, ("%",))) for p in parts[1:])
    return normalize_hue(ensure_number(h, "hue", finite=True)), s, l, _parse_alpha(alpha, color)


def rgba_to_rgb_string(rgba: Sequence[int]) -> str:
    r, g, b = rgba[:3]
    return f"rgb({r},{g},{b})"


def rgba_to_rgba_string(rgba: Sequence[int]) -> str:
    r, g, b, a = rgba[:4]
    return f"rgba({r},{g},{b},{a / 255:.2f})"


def _rounded_hsl(hsla: Sequence[float]) -> Tuple[int, int, int]:
    h, s, l = hsla[:3]
    return round_half_up(h) % 360, round_half_up(s), round_half_up(l)


def hsla_to_hsl_string(hsla: Sequence[float]) -> str:
    h, s, l = _rounded_hsl(hsla)
    return f"hsl({h} {s}% {l}%)"


def hsla_to_hsla_string(hsla: Sequence[float]) -> str:
    h, s, l = _rounded_hsl(hsla)
    return f"hsla({h} {s}% {l}% / {hsla[3]:.2f})"


## named colors

def css_color_to_rgba(color: str) -> RGBABytes:
    name = color.strip().lower()
    if name not in CSS_COLORS:
        raise ValueError(f"unknown css color {color!r}")
    return hex_to_rgba(CSS_COLORS[name])
