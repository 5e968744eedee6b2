from .color import HSL, hex_to_hsl, hex_to_rgb, hsl_to_hex

WHITE = "#ffffff"
BLACK = "#000000"

# WCAG AA for normal text
DEFAULT_TARGET_RATIO = 4.5

# Lightness walk used by ensure_contrast_ratio
SEARCH_MIN_LIGHTNESS = 10
SEARCH_MAX_LIGHTNESS = 90
SEARCH_STEP = 5


def _linearize(channel):
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""
    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color1, color2):
    """Calculate contrast ratio between two hex colors"""
    lum1 = relative_luminance(color1)
    lum2 = relative_luminance(color2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def pick_readable_color(bg_hex, target_ratio=DEFAULT_TARGET_RATIO):
    """Return white or black, whichever reads on bg_hex.

    White wins when both pass. When neither reaches target_ratio the
    result is a best-effort guess from the background luminance.
    """
    if contrast_ratio(bg_hex, WHITE) >= target_ratio:
        return WHITE
    if contrast_ratio(bg_hex, BLACK) >= target_ratio:
        return BLACK
    return BLACK if relative_luminance(bg_hex) > 0.5 else WHITE


def ensure_contrast_ratio(
    fg_hex, bg_hex, target_ratio=DEFAULT_TARGET_RATIO, prefer_brighter=True
):
    """
    Adjust fg_hex lightness until it reaches target_ratio against bg_hex.

    Walks lightness in steps of 5 from 10 (light background) or 90 (dark
    background), upward when prefer_brighter else downward, keeping hue and
    saturation. Returns the first passing color, otherwise the best one
    seen. The walk is coarse and bounded to 10-90, so an achievable ratio
    can still be missed; callers must not assume the result passes.
    """
    current_ratio = contrast_ratio(fg_hex, bg_hex)
    if current_ratio >= target_ratio:
        return fg_hex

    h, s, _ = hex_to_hsl(fg_hex)
    best_color = fg_hex
    best_ratio = current_ratio

    step = SEARCH_STEP if prefer_brighter else -SEARCH_STEP
    if relative_luminance(bg_hex) > 0.5:
        lightness = SEARCH_MIN_LIGHTNESS
    else:
        lightness = SEARCH_MAX_LIGHTNESS

    while SEARCH_MIN_LIGHTNESS <= lightness <= SEARCH_MAX_LIGHTNESS:
        candidate = hsl_to_hex(HSL(h, s, lightness))
        ratio = contrast_ratio(candidate, bg_hex)
        if ratio >= target_ratio:
            return candidate
        if ratio > best_ratio:
            best_ratio = ratio
            best_color = candidate
        lightness += step

    return best_color
