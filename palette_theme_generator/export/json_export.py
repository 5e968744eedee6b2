import json
import os
import re

from ..palette.model import palette_to_dict

THEME_FILE_SUFFIX = "-color-theme.json"


def theme_to_dict(theme):
    """Build the theme file shape, embedding the source palette when known."""
    data = {
        "name": theme.name,
        "type": theme.type,
        "colors": theme.colors,
        "tokenColors": theme.token_colors,
    }
    # Embedded palette allows a lossless re-import
    if theme.source_palette is not None:
        data["_palette"] = palette_to_dict(theme.source_palette)
    return data


def default_theme_filename(name):
    slug = re.sub(r"[^a-zA-Z0-9\-_ ]", "", name)
    slug = re.sub(r"\s+", "-", slug).lower()
    return f"{slug}{THEME_FILE_SUFFIX}"


def export_theme(theme, path=None):
    """Write a theme as pretty-printed JSON.

    Args:
        theme: ThemeDefinition to write
        path: Output file, or a directory to place the default filename in
            (default: current directory)

    Returns:
        The path written
    """
    if path is None or os.path.isdir(path):
        path = os.path.join(path or ".", default_theme_filename(theme.name))

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w") as f:
        json.dump(theme_to_dict(theme), f, indent=2)
    return path


def build_color_customizations(theme):
    """User-settings block that previews a theme on top of the active one."""
    return {
        "workbench.colorCustomizations": dict(theme.colors),
        "editor.tokenColorCustomizations": {"textMateRules": theme.token_colors},
    }
