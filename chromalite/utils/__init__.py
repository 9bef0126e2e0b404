from .dimension import get_dimension
from .default import value_or_default
from .num_utils import (
    ensure_number,
    round_half_up,
    to_byte,
    to_unit,
    to_percentage,
    normalize_hue,
)

__all__ = [
    "get_dimension",
    "value_or_default",
    "ensure_number",
    "round_half_up",
    "to_byte",
    "to_unit",
    "to_percentage",
    "normalize_hue",
]
