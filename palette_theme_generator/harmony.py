import random

from .color import HSL, clamp, round_half_up

HARMONY_TYPES = (
    "complementary",
    "analogous",
    "triadic",
    "split-complementary",
    "tetradic",
    "monochromatic",
)

HARMONY_LABELS = {
    "complementary": ["Primary Color", "Opposite Hue"],
    "analogous": ["Adjacent -30°", "Primary Color", "Adjacent +30°"],
    "triadic": ["Primary Color", "Triangle 120°", "Triangle 240°"],
    "split-complementary": ["Primary Color", "Split Left 150°", "Split Right 210°"],
    "tetradic": ["Primary Color", "Square 90°", "Opposite 180°", "Square 270°"],
    "monochromatic": [
        "Much Darker",
        "Darker Shade",
        "Primary Color",
        "Lighter Tint",
        "Much Lighter",
    ],
}

# Hue offsets in degrees for the rotation-based harmonies
HUE_OFFSETS = {
    "complementary": (0, 180),
    "analogous": (-30, 0, 30),
    "triadic": (0, 120, 240),
    "split-complementary": (0, 150, 210),
    "tetradic": (0, 90, 180, 270),
}

# Monochromatic lightness offsets and their clamp bounds
MONO_LIGHTNESS_OFFSETS = (-30, -15, 0, 15, 30)
MONO_MIN_LIGHTNESS = 10
MONO_MAX_LIGHTNESS = 95

# Bounds applied by the luminosity and variation adjustments
ADJUSTED_MIN_LIGHTNESS = 10
ADJUSTED_MAX_LIGHTNESS = 90


def rotate_hue(h, degrees):
    """Rotate a hue, always landing in [0, 360)."""
    rotated = (h + degrees) % 360
    # float modulo of a tiny negative can round up to exactly 360
    return 0 if rotated >= 360 else rotated


def _monochromatic(base):
    variants = []
    for offset in MONO_LIGHTNESS_OFFSETS:
        if offset < 0:
            l = max(base.l + offset, MONO_MIN_LIGHTNESS)
        elif offset > 0:
            l = min(base.l + offset, MONO_MAX_LIGHTNESS)
        else:
            l = base.l
        variants.append(base._replace(l=l))
    return variants


def generate(base_hsl, harmony_type):
    """Return the HSL variants of base_hsl for a harmony type, in role order."""
    base = HSL(*base_hsl)
    if harmony_type == "monochromatic":
        return _monochromatic(base)
    if harmony_type not in HUE_OFFSETS:
        raise ValueError(f"Unknown harmony type: {harmony_type!r}")
    return [
        base._replace(h=rotate_hue(base.h, offset)) if offset else base
        for offset in HUE_OFFSETS[harmony_type]
    ]


def _jitter(rng, spread):
    return rng.random() * spread * 2 - spread


def apply_adjustments(
    hsl_colors, saturation=None, luminosity=None, variation=None, rng=None
):
    """
    Apply the optional palette adjustments, in order.

    Args:
        hsl_colors: HSL values from generate()
        saturation: Saturation multiplier (1.0 is neutral)
        luminosity: Lightness factor (0.5 is neutral), result clamped to 10-90
        variation: Random spread 0.0-1.0; hue +/- variation*100 degrees,
            saturation +/- variation*100, lightness +/- variation*25
        rng: Source of randomness with a random() method

    Returns:
        list of adjusted HSL values
    """
    if variation is not None and variation > 0 and rng is None:
        rng = random.Random()

    adjusted_colors = []
    for hsl in hsl_colors:
        h, s, l = hsl

        if saturation is not None:
            s = clamp(round_half_up(s * saturation), 0, 100)

        if luminosity is not None:
            l = round_half_up(l * luminosity / 0.5)
            l = clamp(l, ADJUSTED_MIN_LIGHTNESS, ADJUSTED_MAX_LIGHTNESS)

        if variation is not None and variation > 0:
            variance = variation * 100
            h = rotate_hue(h, _jitter(rng, variance))
            s = clamp(s + _jitter(rng, variance), 0, 100)
            l = clamp(
                l + _jitter(rng, variance / 4),
                ADJUSTED_MIN_LIGHTNESS,
                ADJUSTED_MAX_LIGHTNESS,
            )

        adjusted_colors.append(HSL(h, s, l))

    return adjusted_colors


def random_hex(rng=None):
    """Random #rrggbb color."""
    rng = rng or random.Random()
    return f"#{int(rng.random() * 0xFFFFFF):06x}"
