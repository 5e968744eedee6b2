from .builder import (
    add_color,
    build_color_info,
    build_custom_palette,
    build_palette,
    remove_color,
    replace_color,
)
from .model import Palette, palette_from_dict, palette_to_dict
from .store import PaletteStore

__all__ = [
    "Palette",
    "PaletteStore",
    "add_color",
    "build_color_info",
    "build_custom_palette",
    "build_palette",
    "palette_from_dict",
    "palette_to_dict",
    "remove_color",
    "replace_color",
]
