from .mapper import (
    ThemeDefinition,
    derive_backgrounds,
    detect_theme_type,
    map_palette_to_theme,
    update_theme_color,
)
from .reconstruct import (
    convert_theme_to_palette,
    detect_harmony_type,
    detect_type_from_colors,
    extract_key_colors,
    is_grayscale,
)

__all__ = [
    "ThemeDefinition",
    "convert_theme_to_palette",
    "derive_backgrounds",
    "detect_harmony_type",
    "detect_theme_type",
    "detect_type_from_colors",
    "extract_key_colors",
    "is_grayscale",
    "map_palette_to_theme",
    "update_theme_color",
]
