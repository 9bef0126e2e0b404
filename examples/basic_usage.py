"""Basic Chromalite usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromalite import Color, Filter, FilterKind, FormatType, contrast_ratio


def demonstrate_colors() -> None:
    # Parse any CSS form and read it back in either representation.
    accent = Color.parse("#fa4")
    print("hex / hsl:", accent.hex, accent.hsl)
    print("unit RGB:", accent.components("rgb", FormatType.FLOAT))

    # HSL edits leave RGB stale until it is read again.
    accent.rotate_hue(180)
    print("after rotation:", accent.freshness, accent.hex, accent.freshness)


def demonstrate_alpha() -> None:
    glass = Color.parse("rgba(255,170,68,0.5)").background("#202020")
    print("luma over dark backdrop:", round(glass.luma, 3), "dark" if glass.is_dark else "light")
    print("flattened:", glass.clone().solid().hex)
    print("contrast against white:", round(contrast_ratio(glass, "white"), 2))


def demonstrate_filters() -> None:
    swatch = Color.parse("#336699")
    swatch.filter(Filter(FilterKind.ROTATE_HUE, 90), invert=True, brightness=1.2)
    print("filtered:", swatch.hex)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_alpha()
    demonstrate_filters()
