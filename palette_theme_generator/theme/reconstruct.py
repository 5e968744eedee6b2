"""Rebuild a Palette from an editor theme's workbench colors."""

import logging
import random

from ..color import hex_to_hsl, hex_to_rgb, is_valid_hex, normalize_hex
from ..palette.builder import build_color_info, current_millis, generate_id
from ..palette.model import Palette, palette_from_dict
from .mapper import DARK_THRESHOLD

logger = logging.getLogger(__name__)

IMPORTED_NAME = "Imported Theme"
FALLBACK_HEX = "#4a90d9"
DEFAULT_BACKGROUND = "#1e1e1e"
GRAYSCALE_SPREAD = 15
MAX_KEY_COLORS = 6
MIN_KEY_COLORS = 4
IMPORTED_ID_LENGTH = 9
HUE_TOLERANCE = 30

# Roles most likely to carry the palette's own colors, best first
PRIORITY_KEYS = (
    "statusBar.background",
    "activityBar.activeBorder",
    "focusBorder",
    "button.background",
    "editor.selectionBackground",
    "list.activeSelectionBackground",
    "editorCursor.foreground",
    "sideBarTitle.foreground",
    "activityBarBadge.background",
    "terminal.ansiBlue",
    "terminal.ansiCyan",
    "terminal.ansiGreen",
    "terminal.ansiMagenta",
    "terminal.ansiYellow",
)


def is_grayscale(hex_color):
    r, g, b = hex_to_rgb(hex_color)
    return max(r, g, b) - min(r, g, b) < GRAYSCALE_SPREAD


def detect_type_from_colors(colors):
    editor_bg = colors.get("editor.background")
    editor_bg = normalize_hex(editor_bg) if is_valid_hex(editor_bg) else DEFAULT_BACKGROUND
    theme_type = "dark" if hex_to_hsl(editor_bg).l < DARK_THRESHOLD else "light"
    logger.debug("Detected %s theme from editor background %s", theme_type, editor_bg)
    return theme_type


def _collect(values, extracted, seen):
    for value in values:
        if len(extracted) >= MAX_KEY_COLORS:
            return
        if not is_valid_hex(value):
            continue
        hex_color = normalize_hex(value)
        if hex_color in seen or is_grayscale(hex_color):
            continue
        extracted.append(hex_color)
        seen.add(hex_color)


def extract_key_colors(colors):
    """Pick up to six distinct chromatic colors from a theme's workbench colors.

    Priority roles are tried first; if they yield fewer than four colors every
    value is scanned in order. Falls back to a single default blue.
    """
    extracted = []
    seen = set()
    _collect((colors.get(key) for key in PRIORITY_KEYS), extracted, seen)

    if len(extracted) < MIN_KEY_COLORS:
        _collect(colors.values(), extracted, seen)

    if not extracted:
        logger.debug("No chromatic colors found, using %s", FALLBACK_HEX)
        extracted.append(FALLBACK_HEX)

    return extracted


def _near(diff, target):
    return abs(diff - target) < HUE_TOLERANCE


def detect_harmony_type(hex_colors):
    """Guess which harmony produced a set of colors from hue distances to the first."""
    if len(hex_colors) < 2:
        return "monochromatic"

    hues = [hex_to_hsl(c).h for c in hex_colors]
    diffs = []
    for hue in hues[1:]:
        diff = abs(hue - hues[0])
        if diff > 180:
            diff = 360 - diff
        diffs.append(diff)

    if all(d < HUE_TOLERANCE for d in diffs):
        return "monochromatic"
    if any(_near(d, 180) for d in diffs) and len(hex_colors) <= 3:
        return "complementary"
    if any(_near(d, 120) or _near(d, 240) for d in diffs):
        return "triadic"
    if any(_near(d, 90) or _near(d, 180) for d in diffs) and len(hex_colors) >= 4:
        return "tetradic"
    if all(d < 60 for d in diffs):
        return "analogous"
    return "split-complementary"


def convert_theme_to_palette(theme_data, rng=None, now=None):
    """Convert a parsed theme JSON dict back to a Palette.

    Themes carrying an embedded "_palette" are restored from it directly.
    Others are reconstructed from their workbench colors.
    """
    rng = rng or random.Random()
    now = now if now is not None else current_millis()
    new_id = generate_id("imported", rng, now, length=IMPORTED_ID_LENGTH)

    embedded = theme_data.get("_palette")
    if embedded:
        palette = palette_from_dict(embedded)
        logger.debug("Restoring embedded palette %s", palette.id)
        return palette._replace(
            id=new_id, name=theme_data.get("name") or palette.name
        )

    colors = theme_data.get("colors")
    if not isinstance(colors, dict):
        colors = {}
    theme_type = detect_type_from_colors(colors)

    hex_colors = extract_key_colors(colors)
    harmony = detect_harmony_type(hex_colors)
    logger.debug(
        "Reconstructed %d colors as %s from a %s theme",
        len(hex_colors),
        harmony,
        theme_type,
    )

    color_infos = tuple(
        build_color_info(hex_color, f"Color {i + 1}")
        for i, hex_color in enumerate(hex_colors)
    )
    return Palette(
        id=new_id,
        name=theme_data.get("name") or IMPORTED_NAME,
        base_color=color_infos[0],
        harmony=harmony,
        colors=color_infos,
        created_at=now,
    )
