import random
import string
import time

from ..color import (
    HSL,
    ColorInfo,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from ..harmony import HARMONY_LABELS, apply_adjustments, generate
from .model import Palette

ID_ALPHABET = string.digits + string.ascii_lowercase
CUSTOM_HARMONY = "complementary"
EMPTY_BASE_HEX = "#000000"


def generate_id(prefix, rng=None, now=None, length=6):
    """Build ids like palette-1700000000000-k3x9q2 (ms timestamp + base36 suffix)."""
    rng = rng or random.Random()
    stamp = now if now is not None else current_millis()
    suffix = "".join(ID_ALPHABET[int(rng.random() * 36)] for _ in range(length))
    return f"{prefix}-{stamp}-{suffix}"


def current_millis():
    return int(time.time() * 1000)


def build_color_info(hex_color, name=None):
    """Create a ColorInfo with canonical lowercase #rrggbb and derived rgb/hsl"""
    rgb = hex_to_rgb(hex_color)
    return ColorInfo(hex=rgb_to_hex(rgb), rgb=rgb, hsl=rgb_to_hsl(rgb), name=name)


def color_from_hsl(hsl, name=None):
    """Render an HSL value into a ColorInfo, keeping the HSL it was asked for."""
    h, s, l = hsl
    hsl = HSL(round_half_up(h) % 360, round_half_up(s), round_half_up(l))
    hex_color = hsl_to_hex(hsl)
    return ColorInfo(hex=hex_color, rgb=hex_to_rgb(hex_color), hsl=hsl, name=name)


def build_palette(
    base_hex,
    harmony,
    name=None,
    saturation=None,
    luminosity=None,
    variation=None,
    rng=None,
    now=None,
):
    """Generate a harmony palette from a base color.

    Args:
        base_hex: Base color as a hex string
        harmony: One of HARMONY_TYPES
        name: Palette name (default "<harmony> palette")
        saturation, luminosity, variation: see harmony.apply_adjustments
        rng: Random source for jitter and the id suffix
        now: Creation timestamp in ms (default: current time)

    Returns:
        Palette
    """
    rng = rng or random.Random()
    now = now if now is not None else current_millis()

    hsl_colors = generate(hex_to_hsl(base_hex), harmony)
    hsl_colors = apply_adjustments(
        hsl_colors,
        saturation=saturation,
        luminosity=luminosity,
        variation=variation,
        rng=rng,
    )

    labels = HARMONY_LABELS[harmony]
    colors = tuple(
        color_from_hsl(hsl, labels[i] if i < len(labels) else f"Color {i + 1}")
        for i, hsl in enumerate(hsl_colors)
    )

    return Palette(
        id=generate_id("palette", rng, now),
        name=name if name is not None else f"{harmony} palette",
        base_color=build_color_info(base_hex, "Base"),
        harmony=harmony,
        colors=colors,
        created_at=now,
    )


def build_custom_palette(name, hex_colors, rng=None, now=None):
    """Palette from an explicit color list.

    An empty list is allowed: the palette then has no colors and a black
    base color.
    """
    now = now if now is not None else current_millis()
    colors = tuple(
        build_color_info(hex_color, f"Custom {i + 1}")
        for i, hex_color in enumerate(hex_colors)
    )
    base_color = colors[0] if colors else build_color_info(EMPTY_BASE_HEX, "Base")

    return Palette(
        id=generate_id("custom", rng, now),
        name=name,
        base_color=base_color,
        harmony=CUSTOM_HARMONY,
        colors=colors,
        created_at=now,
    )


# === EDITING ===
# Palettes are immutable; each edit returns a new one, or None when the
# index does not exist.


def add_color(palette, hex_color):
    color = build_color_info(hex_color, f"Custom {len(palette.colors) + 1}")
    return palette._replace(colors=tuple(palette.colors) + (color,))


def remove_color(palette, index):
    if index < 0 or index >= len(palette.colors):
        return None
    colors = list(palette.colors)
    del colors[index]
    return palette._replace(colors=tuple(colors))


def replace_color(palette, index, hex_color, name=None):
    if index < 0 or index >= len(palette.colors):
        return None
    colors = list(palette.colors)
    colors[index] = build_color_info(
        hex_color, name if name is not None else f"Color {index + 1}"
    )
    return palette._replace(colors=tuple(colors))
