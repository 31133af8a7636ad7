"""Color normalization: hex, named colors, rgb()/rgba(), CSS var() fallbacks → #RRGGBB."""

from __future__ import annotations

import re

NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "cyan": "#00FFFF",
    "magenta": "#FF00FF",
    "gray": "#808080",
    "grey": "#808080",
    "orange": "#FFA500",
    "purple": "#800080",
    "pink": "#FFC0CB",
    "brown": "#A52A2A",
    "navy": "#000080",
    "lime": "#00FF00",
    "aqua": "#00FFFF",
    "silver": "#C0C0C0",
    "maroon": "#800000",
    "olive": "#808000",
    "teal": "#008080",
    "fuchsia": "#FF00FF",
}

_RGB_RE = re.compile(r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")
# Greedy up to the last ")" so a nested var() fallback stays intact for the next pass.
_VAR_RE = re.compile(r"^\s*var\(\s*--[\w-]+\s*,(.*)\)\s*$", re.DOTALL)
_ANDROID_COLOR_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def color_to_hex(color: str | None) -> str | None:
    """Resolve a color expression to uppercase hex; unknown forms pass through."""
    if not color or color == "none":
        return color

    if color.startswith("#"):
        return normalize_hex(color)

    named = NAMED_COLORS.get(color.lower())
    if named:
        return named

    rgb_match = _RGB_RE.match(color)
    if rgb_match:
        r, g, b = (int(c) for c in rgb_match.groups())
        return rgb_to_hex(r, g, b)

    var_match = _VAR_RE.match(color)
    if var_match:
        return color_to_hex(var_match.group(1).strip())

    return color


def rgb_to_hex(r: int, g: int, b: int) -> str:
    def channel(n: int) -> str:
        return f"{max(0, min(255, n)):02X}"

    return f"#{channel(r)}{channel(g)}{channel(b)}"


def normalize_hex(value: str) -> str:
    """Expand ``#RGB`` to ``#RRGGBB`` and uppercase; other lengths are only uppercased."""
    if len(value) == 4:
        return ("#" + value[1] * 2 + value[2] * 2 + value[3] * 2).upper()
    return value.upper()


def is_valid_android_color(color: str | None) -> bool:
    if not color or color == "none":
        return True
    return bool(_ANDROID_COLOR_RE.match(color))
