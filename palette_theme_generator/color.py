import math
import re
from collections import namedtuple

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])
ColorInfo = namedtuple("ColorInfo", ["hex", "rgb", "hsl", "name"])
ColorInfo.__new__.__defaults__ = (None,)

# Accepts #rrggbb and #rrggbbaa, "#" optional
HEX_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}([0-9A-Fa-f]{2})?$")


def round_half_up(value):
    """Round .5 away from zero for positives, like Math.round."""
    return int(math.floor(value + 0.5))


def clamp(value, low, high):
    return max(low, min(high, value))


def hex_to_rgb(hex_color):
    """Parse a 3- or 6-digit hex string.

    No validation is done here: callers holding untrusted input should
    check it with is_valid_hex() first.
    """
    clean = hex_color.lstrip("#")
    if len(clean) == 3:
        clean = "".join(c + c for c in clean)
    num = int(clean, 16)
    return RGB((num >> 16) & 255, (num >> 8) & 255, num & 255)


def rgb_to_hex(rgb):
    r, g, b = (clamp(round_half_up(c), 0, 255) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(rgb):
    r, g, b = rgb[0] / 255, rgb[1] / 255, rgb[2] / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2
    h = 0.0
    s = 0.0

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif max_c == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HSL(
        round_half_up(h * 360) % 360,
        round_half_up(s * 100),
        round_half_up(l * 100),
    )


def _hue_to_channel(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl):
    h, s, l = hsl[0] / 360, hsl[1] / 100, hsl[2] / 100

    if s == 0:
        v = round_half_up(l * 255)
        return RGB(v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return RGB(
        round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        round_half_up(_hue_to_channel(p, q, h) * 255),
        round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def hex_to_hsl(hex_color):
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl):
    return rgb_to_hex(hsl_to_rgb(hsl))


def is_valid_hex(value):
    """Check a string is #rrggbb or #rrggbbaa (leading # optional)."""
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def normalize_hex(value):
    """Drop any alpha pair, lowercase and ensure a leading #."""
    clean = value.lstrip("#")
    if len(clean) == 8:
        clean = clean[:6]
    return f"#{clean.lower()}"


def adjust_brightness(hex_color, amount):
    """Shift HSL lightness by amount, clamped to 0-100."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(HSL(h, s, clamp(l + amount, 0, 100)))


def adjust_saturation(hex_color, factor):
    """Scale HSL saturation by factor, clamped to 0-100."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(HSL(h, clamp(s * factor, 0, 100), l))
