import json
import logging

from ..theme.reconstruct import convert_theme_to_palette

logger = logging.getLogger(__name__)


class ThemeImportError(ValueError):
    """Raised when a file does not look like an editor color theme."""


def load_theme_file(json_path):
    """Read and validate a theme JSON file.

    Returns:
        dict: the parsed theme

    Raises:
        ThemeImportError: if the file is not a JSON object with "colors" or
            "tokenColors"
        OSError: if the file cannot be read
    """
    with open(json_path) as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise ThemeImportError(f"Invalid JSON in {json_path}: {e}") from e

    if not isinstance(data, dict) or (
        data.get("colors") is None and data.get("tokenColors") is None
    ):
        raise ThemeImportError("Invalid theme file: missing colors or tokenColors")
    return data


def import_theme_file(json_path, rng=None, now=None):
    """Load a theme file and convert it to a Palette.

    Returns:
        Palette, or None if the file could not be imported (the reason is logged)
    """
    try:
        theme_data = load_theme_file(json_path)
        return convert_theme_to_palette(theme_data, rng=rng, now=now)
    except (OSError, KeyError, TypeError, ValueError) as e:
        logger.error("Failed to import theme %s: %s", json_path, e)
        return None
