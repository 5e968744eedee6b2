from .importer import ThemeImportError, import_theme_file, load_theme_file
from .json_export import (
    build_color_customizations,
    default_theme_filename,
    export_theme,
    theme_to_dict,
)
from .report import generate_readability_report, print_palette

__all__ = [
    "ThemeImportError",
    "build_color_customizations",
    "default_theme_filename",
    "export_theme",
    "generate_readability_report",
    "import_theme_file",
    "load_theme_file",
    "print_palette",
    "theme_to_dict",
]
